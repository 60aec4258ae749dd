from datetime import date

import pytest

from hr_payroll.core.exceptions import InvalidPeriod, ValidationError
from hr_payroll.payroll.period import Period, resolve_period


@pytest.mark.parametrize("month", ["october", "OCTOBER", "October", "oCtObEr", "  october "])
def test_month_casing_yields_same_key(month):
    period = resolve_period(month, 2025)

    assert period.key == "October 2025"
    assert period.year_month == "2025-10"


def test_period_bounds_follow_calendar():
    feb = resolve_period("february", 2024)

    assert feb.first_day == date(2024, 2, 1)
    assert feb.last_day == date(2024, 2, 29)


def test_single_digit_month_is_zero_padded():
    assert resolve_period("March", "2026").year_month == "2026-03"


@pytest.mark.parametrize("month", ["Oct", "Octobre", "13", "", None])
def test_unknown_or_missing_month_is_rejected(month):
    with pytest.raises(InvalidPeriod):
        resolve_period(month, 2025)


@pytest.mark.parametrize("year", [None, "", "25", "twenty", 99, 20250, True, "²²²²", "2O25"])
def test_year_must_have_four_digits(year):
    with pytest.raises(InvalidPeriod):
        resolve_period("October", year)


def test_invalid_period_is_a_validation_error():
    with pytest.raises(ValidationError):
        resolve_period("Smarch", 2025)


def test_from_key_round_trips_stored_key():
    assert Period.from_key("October 2025") == Period(year=2025, month=10)

    with pytest.raises(InvalidPeriod):
        Period.from_key("October")
