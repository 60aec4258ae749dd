from decimal import Decimal

from hr_payroll.attendance.model import AttendanceSummary
from hr_payroll.leaves.model import LeaveSummary
from hr_payroll.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _calc(salary, present, leave, hours="0"):
    return StandardPayrollCalculator().calculate(
        salary,
        AttendanceSummary(present_days=present, total_working_hours=Decimal(hours)),
        LeaveSummary(paid_leave_days=leave),
    )


def test_amount_uses_flat_thirty_day_month():
    details = _calc(Decimal("60000"), 20, 2, hours="180.50")

    assert details.calculated_amount == 44000
    assert details.per_day_salary == Decimal("2000.00")
    assert details.total_payable_days == 22
    assert details.present_days == 20
    assert details.paid_leave_days == 2
    assert details.total_working_hours == Decimal("180.50")


def test_zero_payable_days_yields_zero_regardless_of_salary():
    assert _calc(Decimal("90000"), 0, 0).calculated_amount == 0


def test_missing_salary_is_treated_as_zero():
    details = _calc(None, 22, 1)

    assert details.base_salary == 0
    assert details.calculated_amount == 0


def test_per_day_rate_is_reported_to_two_decimals():
    details = _calc(Decimal("50000"), 30, 0)

    assert details.per_day_salary == Decimal("1666.67")
    assert details.calculated_amount == 50000


def test_amount_rounds_half_up():
    # 45 / 30 = 1.5 per day
    assert _calc(Decimal("45"), 1, 0).calculated_amount == 2
    assert _calc(Decimal("55000"), 7, 0).calculated_amount == 12833


def test_details_serialize_with_stored_field_names():
    data = _calc(Decimal("60000"), 20, 2, hours="9.25").to_json_dict()

    assert data == {
        "basic": 60000.0,
        "presentDays": 20,
        "paidLeaveDays": 2,
        "totalPayableDays": 22,
        "totalWorkingHours": 9.25,
        "perDaySalary": 2000.0,
        "calculatedAmount": 44000,
    }
