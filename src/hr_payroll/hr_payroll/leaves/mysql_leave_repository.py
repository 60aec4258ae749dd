from __future__ import annotations

from typing import Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LeaveRequest
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved_paid(self, employee_id: int, year_month: str) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT leave_id, employee_id, leave_type, status, start_date, end_date, reason
                FROM leave_requests
                WHERE employee_id=%s AND status=%s AND leave_type=%s
                  AND DATE_FORMAT(start_date, '%%Y-%%m')=%s
                ORDER BY start_date ASC
                """,
                (int(employee_id), LeaveStatus.APPROVED.value, LeaveType.PAID.value, year_month),
            )
            rows = fetchall(cur)
            return [
                LeaveRequest(
                    leave_id=int(r["leave_id"]),
                    employee_id=int(r["employee_id"]),
                    leave_type=LeaveType(r["leave_type"]),
                    status=LeaveStatus(r["status"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    reason=r.get("reason"),
                )
                for r in rows
            ]
