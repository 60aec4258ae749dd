from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import inclusive_days
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    """Domain entity: a leave request; its lifecycle belongs to the approval workflow."""

    leave_id: int
    employee_id: int
    leave_type: LeaveType
    status: LeaveStatus
    start_date: date
    end_date: date
    reason: Optional[str] = None

    @property
    def is_payable(self) -> bool:
        return self.status == LeaveStatus.APPROVED and self.leave_type == LeaveType.PAID

    def day_count(self) -> int:
        return inclusive_days(self.start_date, self.end_date)


@dataclass(frozen=True)
class LeaveSummary:
    paid_leave_days: int
