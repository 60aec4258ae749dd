from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollStatus
from .model import PayrollDetails, PayrollRecord


class PayrollRepository(Protocol):
    """Storage for payroll records, unique per (employee_id, period_key)."""

    def upsert(
        self,
        *,
        employee_id: int,
        period_key: str,
        amount: Decimal,
        details: PayrollDetails,
        status: Optional[PayrollStatus] = None,
    ) -> PayrollRecord:
        """Atomically create the record (status defaults to Pending) or overwrite amount/details.

        An existing status is replaced only when ``status`` is given and is a legal forward
        move from it. Paid rows are never modified.
        """

        raise NotImplementedError

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def get_for_period(self, employee_id: int, period_key: str) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def update_status(self, payroll_id: int, *, status: PayrollStatus, expected: PayrollStatus) -> bool:
        """Compare-and-swap: set ``status`` only while the row still has ``expected``."""

        raise NotImplementedError

    def list_records(self, *, employee_id: Optional[int] = None) -> Sequence[PayrollRecord]:
        """Newest first."""

        raise NotImplementedError
