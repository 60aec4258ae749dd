from __future__ import annotations

from .model import LeaveSummary
from .repository import LeaveRepository


class LeaveAggregator:
    """Count payable leave days for an employee-month.

    A leave is attributed entirely to the month its start date falls in; leaves
    starting in an earlier month are not counted here even if they run into it.
    """

    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def summarize(self, employee_id: int, year_month: str) -> LeaveSummary:
        days = 0
        for leave in self._leaves.list_approved_paid(employee_id, year_month):
            if not leave.is_payable or leave.start_date.strftime("%Y-%m") != year_month:
                continue
            days += leave.day_count()
        return LeaveSummary(paid_leave_days=days)
