from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee as seen by payroll (identity + salary).

    Owned by user management; the payroll engine only reads it.
    """

    employee_id: int
    full_name: str
    email: str
    department: Optional[str]
    base_salary: Optional[Decimal]

    def salary_or_zero(self) -> Decimal:
        return self.base_salary if self.base_salary is not None else Decimal(0)
