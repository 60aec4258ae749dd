from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_for_month(self, employee_id: int, year_month: str) -> Sequence[AttendanceEntry]:
        """All entries of the employee whose work date starts with ``year_month`` ("YYYY-MM")."""

        raise NotImplementedError
