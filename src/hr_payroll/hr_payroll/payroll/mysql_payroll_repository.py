from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..core.enums import PayrollStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, load_json, to_decimal
from .lifecycle import allowed_sources
from .model import PayrollDetails, PayrollRecord
from .repository import PayrollRepository

_COLUMNS = "payroll_id, employee_id, period_key, amount, status, details, created_at, updated_at"


def _to_record(r: Dict[str, Any]) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=int(r["payroll_id"]),
        employee_id=int(r["employee_id"]),
        period_key=r["period_key"],
        amount=to_decimal(r["amount"]),
        status=PayrollStatus(r["status"]),
        details=PayrollDetails.from_json_dict(load_json(r.get("details"))),
        created_at=r["created_at"],
        updated_at=r.get("updated_at"),
    )


class MySQLPayrollRepository(PayrollRepository):
    """Payroll records backed by the payroll_records table.

    Uniqueness of (employee_id, period_key) is the table's unique key, so two
    concurrent upserts for the same period end as one insert and one update.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        employee_id: int,
        period_key: str,
        amount: Decimal,
        details: PayrollDetails,
        status: Optional[PayrollStatus] = None,
    ) -> PayrollRecord:
        paid = PayrollStatus.PAID.value
        sources = [s.value for s in allowed_sources(status)] if status is not None else []
        movable = f"status IN ({', '.join(['%s'] * len(sources))})" if sources else "FALSE"

        with db_cursor(self._conn_factory) as (_, cur):
            # Unqualified columns read the stored row; `new` is the proposed one.
            # The override only lands on a legal forward move, so Paid rows keep their status.
            cur.execute(
                f"""
                INSERT INTO payroll_records(employee_id, period_key, amount, status, details)
                VALUES(%s,%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE
                    amount=IF(status=%s, amount, new.amount),
                    details=IF(status=%s, details, new.details),
                    status=CASE WHEN {movable} THEN %s ELSE status END
                """,
                (
                    int(employee_id),
                    period_key,
                    amount,
                    (status or PayrollStatus.PENDING).value,
                    json.dumps(details.to_json_dict()),
                    paid,
                    paid,
                    *sources,
                    status.value if status is not None else None,
                ),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM payroll_records WHERE employee_id=%s AND period_key=%s",
                (int(employee_id), period_key),
            )
            return _to_record(fetchone(cur))

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_records WHERE payroll_id=%s", (int(payroll_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_period(self, employee_id: int, period_key: str) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payroll_records WHERE employee_id=%s AND period_key=%s",
                (int(employee_id), period_key),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def update_status(self, payroll_id: int, *, status: PayrollStatus, expected: PayrollStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payroll_records
                SET status=%s
                WHERE payroll_id=%s AND status=%s
                """,
                (status.value, int(payroll_id), expected.value),
            )
            return cur.rowcount > 0

    def list_records(self, *, employee_id: Optional[int] = None) -> Sequence[PayrollRecord]:
        clauses = ["1=1"]
        params: list[object] = []

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM payroll_records
                WHERE {where}
                ORDER BY created_at DESC, payroll_id DESC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
