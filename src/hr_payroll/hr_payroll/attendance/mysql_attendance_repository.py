from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_decimal
from .model import AttendanceEntry
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_month(self, employee_id: int, year_month: str) -> Sequence[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date,
                       check_in_time, check_out_time, working_hours, status
                FROM attendance_records
                WHERE employee_id=%s AND DATE_FORMAT(work_date, '%%Y-%%m')=%s
                ORDER BY work_date ASC
                """,
                (int(employee_id), year_month),
            )
            rows = fetchall(cur)
            return [
                AttendanceEntry(
                    attendance_id=int(r["attendance_id"]),
                    employee_id=int(r["employee_id"]),
                    work_date=r["work_date"],
                    check_in=r.get("check_in_time"),
                    check_out=r.get("check_out_time"),
                    working_hours=to_decimal(r.get("working_hours")),
                    status=r["status"],
                )
                for r in rows
            ]
