from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ...attendance.model import AttendanceSummary
from ...core.constants import DAYS_PER_MONTH, MONEY_PRECISION
from ...leaves.model import LeaveSummary
from ..model import PayrollDetails
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: (salary / 30) * (present days + paid leave days), rounded half-up to a whole amount."""

    def __init__(self, *, days_per_month: int = DAYS_PER_MONTH):
        self._days_per_month = Decimal(days_per_month)

    def calculate(
        self,
        base_salary: Optional[Decimal],
        attendance: AttendanceSummary,
        leave: LeaveSummary,
    ) -> PayrollDetails:
        salary = Decimal(str(base_salary)) if base_salary is not None else Decimal(0)
        payable_days = attendance.present_days + leave.paid_leave_days

        # Divide last so whole-month amounts stay exact.
        amount = (salary * payable_days / self._days_per_month).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        per_day = (salary / self._days_per_month).quantize(
            Decimal(1).scaleb(-MONEY_PRECISION), rounding=ROUND_HALF_UP
        )

        return PayrollDetails(
            base_salary=salary,
            present_days=attendance.present_days,
            total_working_hours=attendance.total_working_hours,
            paid_leave_days=leave.paid_leave_days,
            total_payable_days=payable_days,
            per_day_salary=per_day,
            calculated_amount=amount,
        )
