from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal


def hours_between(start: datetime, end: datetime) -> Decimal:
    """Signed number of hours from start to end (negative if end is earlier)."""
    return Decimal(str((end - start).total_seconds())) / Decimal(3600)


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days covered by [start, end], whatever the order."""
    return abs((end - start).days) + 1
