from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from ...attendance.model import AttendanceSummary
from ...leaves.model import LeaveSummary
from ..model import PayrollDetails


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        base_salary: Optional[Decimal],
        attendance: AttendanceSummary,
        leave: LeaveSummary,
    ) -> PayrollDetails:
        raise NotImplementedError
