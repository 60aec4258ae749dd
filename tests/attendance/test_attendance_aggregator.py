from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from hr_payroll.attendance.aggregator import AttendanceAggregator
from hr_payroll.attendance.model import AttendanceEntry


class FakeAttendanceRepo:
    def __init__(self, entries):
        self._entries = entries
        self.calls = []

    def list_for_month(self, employee_id, year_month):
        self.calls.append((employee_id, year_month))
        return [e for e in self._entries if e.employee_id == employee_id]


def _entry(day, *, check_in=None, check_out=None, hours=None, status="Present", employee_id=1, month=10):
    return AttendanceEntry(
        attendance_id=day,
        employee_id=employee_id,
        work_date=date(2025, month, day),
        check_in=check_in,
        check_out=check_out,
        working_hours=hours,
        status=status,
    )


def test_hours_are_derived_from_check_in_and_check_out():
    repo = FakeAttendanceRepo(
        [_entry(1, check_in=datetime(2025, 10, 1, 9, 0), check_out=datetime(2025, 10, 1, 18, 0))]
    )

    summary = AttendanceAggregator(repo).summarize(1, "2025-10")

    assert summary.present_days == 1
    assert summary.total_working_hours == Decimal("9.00")
    assert repo.calls == [(1, "2025-10")]


def test_stored_hours_take_precedence_over_timestamps():
    repo = FakeAttendanceRepo(
        [
            _entry(
                2,
                check_in=datetime(2025, 10, 2, 9, 0),
                check_out=datetime(2025, 10, 2, 18, 0),
                hours=Decimal("7.5"),
            )
        ]
    )

    assert AttendanceAggregator(repo).summarize(1, "2025-10").total_working_hours == Decimal("7.50")


def test_only_present_days_count():
    repo = FakeAttendanceRepo(
        [
            _entry(1, hours=Decimal("8")),
            _entry(2, hours=Decimal("4"), status="Half Day"),
            _entry(3, status="Absent"),
            _entry(4, hours=Decimal("8.333")),
        ]
    )

    summary = AttendanceAggregator(repo).summarize(1, "2025-10")

    assert summary.present_days == 2
    assert summary.total_working_hours == Decimal("16.33")


def test_entry_without_hours_or_checkout_counts_as_day_with_zero_hours():
    repo = FakeAttendanceRepo([_entry(5, check_in=datetime(2025, 10, 5, 9, 0))])

    summary = AttendanceAggregator(repo).summarize(1, "2025-10")

    assert summary.present_days == 1
    assert summary.total_working_hours == Decimal("0.00")


def test_negative_duration_is_left_out_of_hours(caplog):
    repo = FakeAttendanceRepo(
        [
            _entry(6, check_in=datetime(2025, 10, 6, 18, 0), check_out=datetime(2025, 10, 6, 9, 0)),
            _entry(7, hours=Decimal("8")),
        ]
    )

    summary = AttendanceAggregator(repo).summarize(1, "2025-10")

    assert summary.present_days == 2
    assert summary.total_working_hours == Decimal("8.00")
    assert "negative working hours" in caplog.text


def test_entries_outside_the_month_are_ignored():
    repo = FakeAttendanceRepo([_entry(30, hours=Decimal("8"), month=9), _entry(1, hours=Decimal("8"))])

    assert AttendanceAggregator(repo).summarize(1, "2025-10").present_days == 1


def test_no_attendance_yields_zero():
    summary = AttendanceAggregator(FakeAttendanceRepo([])).summarize(1, "2025-10")

    assert summary.present_days == 0
    assert summary.total_working_hours == 0
