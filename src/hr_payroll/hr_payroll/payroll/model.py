from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from ..core.enums import PayrollStatus
from ..employees.model import Employee
from .period import Period


def _dec(value: Any) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal(0)


@dataclass(frozen=True)
class PayrollDetails:
    """Calculation snapshot kept with a payroll record for display and audit."""

    base_salary: Decimal
    present_days: int
    total_working_hours: Decimal
    paid_leave_days: int
    total_payable_days: int
    per_day_salary: Decimal
    calculated_amount: Decimal

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "basic": float(self.base_salary),
            "presentDays": self.present_days,
            "paidLeaveDays": self.paid_leave_days,
            "totalPayableDays": self.total_payable_days,
            "totalWorkingHours": float(self.total_working_hours),
            "perDaySalary": float(self.per_day_salary),
            "calculatedAmount": int(self.calculated_amount),
        }

    @classmethod
    def from_json_dict(cls, data: Dict[str, Any]) -> "PayrollDetails":
        return cls(
            base_salary=_dec(data.get("basic")),
            present_days=int(data.get("presentDays") or 0),
            total_working_hours=_dec(data.get("totalWorkingHours")),
            paid_leave_days=int(data.get("paidLeaveDays") or 0),
            total_payable_days=int(data.get("totalPayableDays") or 0),
            per_day_salary=_dec(data.get("perDaySalary")),
            calculated_amount=_dec(data.get("calculatedAmount")),
        )


@dataclass(frozen=True)
class PayrollRecord:
    payroll_id: int
    employee_id: int
    period_key: str
    amount: Decimal
    status: PayrollStatus
    details: PayrollDetails
    created_at: datetime
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class PayrollPreview:
    """Result of a side-effect-free payroll computation."""

    employee: Employee
    period: Period
    details: PayrollDetails

    @property
    def amount(self) -> Decimal:
        return self.details.calculated_amount


@dataclass(frozen=True)
class PayrollTotals:
    record_count: int
    total_amount: Decimal
    paid_amount: Decimal
    pending_amount: Decimal
