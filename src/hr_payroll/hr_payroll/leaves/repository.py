from __future__ import annotations

from typing import Protocol, Sequence

from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_approved_paid(self, employee_id: int, year_month: str) -> Sequence[LeaveRequest]:
        """Approved paid leaves of the employee whose start date is in ``year_month``."""

        raise NotImplementedError
