from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Union

from ..core.constants import MONTH_NAMES
from ..core.exceptions import InvalidPeriod


@dataclass(frozen=True)
class Period:
    """A calendar month, keyed as "<MonthName> <Year>" (e.g. "October 2025")."""

    year: int
    month: int

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def key(self) -> str:
        return f"{self.month_name} {self.year}"

    @property
    def year_month(self) -> str:
        """Prefix matching date-stamped records, e.g. "2025-10"."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @classmethod
    def from_key(cls, key: str) -> "Period":
        parts = (key or "").split()
        if len(parts) != 2:
            raise InvalidPeriod(f"Invalid period key: {key!r}")
        return resolve_period(parts[0], parts[1])


def _parse_year(year: Union[int, str, None]) -> int:
    if year is None or isinstance(year, bool):
        raise InvalidPeriod("Year is required")
    if isinstance(year, int):
        value = year
    else:
        text = str(year).strip()
        if not text:
            raise InvalidPeriod("Year is required")
        if not text.isdecimal():
            raise InvalidPeriod(f"Invalid year: {year!r}")
        value = int(text)
    if not 1000 <= value <= 9999:
        raise InvalidPeriod(f"Year must have 4 digits: {year!r}")
    return value


def resolve_period(month: str, year: Union[int, str, None]) -> Period:
    """Normalize a month name (any casing) and a 4-digit year into a Period."""

    if month is None or not str(month).strip():
        raise InvalidPeriod("Month is required")
    name = str(month).strip().title()
    if name not in MONTH_NAMES:
        raise InvalidPeriod("Invalid month name. Use full English names (e.g., January).")
    return Period(year=_parse_year(year), month=MONTH_NAMES.index(name) + 1)
