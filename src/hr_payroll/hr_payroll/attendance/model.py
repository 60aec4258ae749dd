from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import hours_between
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one attendance day of an employee.

    Written by the check-in/check-out flow; read-only for payroll.
    """

    attendance_id: int
    employee_id: int
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    working_hours: Optional[Decimal]
    status: str

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT.value

    def effective_hours(self) -> Decimal:
        """Stored hours, else hours between check-in and check-out, else 0.

        The derived value may be negative when check-out precedes check-in.
        """
        if self.working_hours is not None:
            return self.working_hours
        if self.check_in is not None and self.check_out is not None:
            return hours_between(self.check_in, self.check_out)
        return Decimal(0)


@dataclass(frozen=True)
class AttendanceSummary:
    """Attendance contribution to one payroll period."""

    present_days: int
    total_working_hours: Decimal
