from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import HOURS_PRECISION
from .model import AttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceAggregator:
    """Reduce an employee-month of attendance to present days and worked hours.

    Only entries labelled "Present" count; half days and absences earn nothing.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def summarize(self, employee_id: int, year_month: str) -> AttendanceSummary:
        entries = self._attendance.list_for_month(employee_id, year_month)

        present_days = 0
        total_hours = Decimal(0)
        for entry in entries:
            if entry.work_date.strftime("%Y-%m") != year_month or not entry.is_present:
                continue

            present_days += 1
            hours = entry.effective_hours()
            if hours < 0:
                logger.warning(
                    "Ignoring negative working hours (%s) for attendance %s of employee %s",
                    hours,
                    entry.attendance_id,
                    employee_id,
                )
                continue
            total_hours += hours

        quant = Decimal(1).scaleb(-HOURS_PRECISION)
        return AttendanceSummary(
            present_days=present_days,
            total_working_hours=total_hours.quantize(quant, rounding=ROUND_HALF_UP),
        )
