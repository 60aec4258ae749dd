from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_positive_id
from ..core.enums import PayrollStatus
from ..core.exceptions import EmployeeNotFound, InvalidTransition, RecordNotFound
from ..employees.repository import EmployeeRepository
from ..leaves.aggregator import LeaveAggregator
from ..leaves.repository import LeaveRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .lifecycle import ensure_transition, parse_status
from .model import PayrollPreview, PayrollRecord, PayrollTotals
from .period import resolve_period
from .repository import PayrollRepository

logger = logging.getLogger(__name__)

StatusInput = Union[PayrollStatus, str]


class PayrollService:
    """Preview, commit and track monthly payroll.

    ``preview`` is read-only. ``commit`` recomputes and upserts the single
    record of an (employee, period). Status only moves forward and Paid
    records are frozen.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        payrolls: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._payrolls = payrolls
        self._attendance = AttendanceAggregator(attendance)
        self._leaves = LeaveAggregator(leaves)
        self._calculator = calculator or StandardPayrollCalculator()

    def preview(self, employee_id: Union[int, str], month: str, year: Union[int, str]) -> PayrollPreview:
        employee_id = require_positive_id(employee_id, "Employee ID")
        period = resolve_period(month, year)

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFound(f"Employee {employee_id} not found")

        attendance = self._attendance.summarize(employee.employee_id, period.year_month)
        leave = self._leaves.summarize(employee.employee_id, period.year_month)
        details = self._calculator.calculate(employee.salary_or_zero(), attendance, leave)

        logger.debug(
            "Payroll preview employee=%s period=%s present=%s leave=%s amount=%s",
            employee.employee_id,
            period.key,
            details.present_days,
            details.paid_leave_days,
            details.calculated_amount,
        )
        return PayrollPreview(employee=employee, period=period, details=details)

    def commit(
        self,
        employee_id: Union[int, str],
        month: str,
        year: Union[int, str],
        status: Optional[StatusInput] = None,
    ) -> PayrollRecord:
        target = parse_status(status) if status is not None else None
        preview = self.preview(employee_id, month, year)
        period_key = preview.period.key
        emp_id = preview.employee.employee_id

        existing = self._payrolls.get_for_period(emp_id, period_key)
        if existing:
            if existing.status == PayrollStatus.PAID:
                raise InvalidTransition(f"Payroll for {period_key} is already Paid and cannot be recalculated")
            if target is not None and target != existing.status:
                ensure_transition(existing.status, target)

        record = self._payrolls.upsert(
            employee_id=emp_id,
            period_key=period_key,
            amount=preview.amount,
            details=preview.details,
            status=target,
        )
        if record.status == PayrollStatus.PAID and target != PayrollStatus.PAID and record.details != preview.details:
            raise InvalidTransition(f"Payroll for {period_key} was marked Paid before it could be recalculated")
        if target is not None and record.status != target:
            raise InvalidTransition(
                f"Payroll for {period_key} moved to {record.status.value} before it could be set to {target.value}"
            )

        logger.info(
            "%s payroll %s for employee %s (%s): amount=%s status=%s",
            "Updated" if existing else "Created",
            record.payroll_id,
            emp_id,
            period_key,
            record.amount,
            record.status.value,
        )
        return record

    def update_status(self, payroll_id: Union[int, str], new_status: StatusInput) -> PayrollRecord:
        payroll_id = require_positive_id(payroll_id, "Payroll ID")
        target = parse_status(new_status)

        record = self._payrolls.get_by_id(payroll_id)
        if not record:
            raise RecordNotFound(f"Payroll {payroll_id} not found")
        ensure_transition(record.status, target)

        if not self._payrolls.update_status(payroll_id, status=target, expected=record.status):
            current = self._payrolls.get_by_id(payroll_id)
            if not current:
                raise RecordNotFound(f"Payroll {payroll_id} not found")
            raise InvalidTransition(
                f"Payroll {payroll_id} changed to {current.status.value} while updating; retry the action"
            )

        logger.info("Payroll %s status %s -> %s", payroll_id, record.status.value, target.value)
        updated = self._payrolls.get_by_id(payroll_id)
        if not updated:
            raise RecordNotFound(f"Payroll {payroll_id} not found")
        return updated

    def mark_paid(self, payroll_id: Union[int, str]) -> PayrollRecord:
        return self.update_status(payroll_id, PayrollStatus.PAID)

    def list_records(self, employee_id: Union[int, str, None] = None) -> Sequence[PayrollRecord]:
        if employee_id is not None:
            employee_id = require_positive_id(employee_id, "Employee ID")
        return self._payrolls.list_records(employee_id=employee_id)

    @staticmethod
    def summarize(records: Iterable[PayrollRecord]) -> PayrollTotals:
        count = 0
        total = Decimal(0)
        paid = Decimal(0)
        for r in records:
            count += 1
            total += r.amount
            if r.status == PayrollStatus.PAID:
                paid += r.amount
        return PayrollTotals(record_count=count, total_amount=total, paid_amount=paid, pending_amount=total - paid)
