"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Flat month used for the per-day rate, regardless of the calendar month length.
DAYS_PER_MONTH = 30

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

HOURS_PRECISION = 2
MONEY_PRECISION = 2
