import pytest

from hr_payroll.core.enums import PayrollStatus
from hr_payroll.core.exceptions import InvalidStatus, InvalidTransition
from hr_payroll.payroll.lifecycle import allowed_sources, can_transition, ensure_transition, parse_status

P, R, D = PayrollStatus.PENDING, PayrollStatus.PROCESSING, PayrollStatus.PAID


@pytest.mark.parametrize("current,target", [(P, R), (R, D), (P, D)])
def test_forward_moves_are_allowed(current, target):
    assert can_transition(current, target)
    ensure_transition(current, target)


@pytest.mark.parametrize("current,target", [(R, P), (P, P), (R, R)])
def test_backward_and_same_state_moves_are_rejected(current, target):
    with pytest.raises(InvalidTransition):
        ensure_transition(current, target)


@pytest.mark.parametrize("target", [P, R, D])
def test_paid_is_terminal(target):
    with pytest.raises(InvalidTransition):
        ensure_transition(D, target)


def test_parse_status_accepts_stored_values():
    assert parse_status("Processing") is R
    assert parse_status(D) is D


@pytest.mark.parametrize("value", ["paid", "Approved", "", None])
def test_parse_status_rejects_unknown_values(value):
    with pytest.raises(InvalidStatus):
        parse_status(value)


@pytest.mark.parametrize("target,sources", [(P, ()), (R, (P,)), (D, (P, R))])
def test_allowed_sources_lists_only_forward_origins(target, sources):
    assert set(allowed_sources(target)) == set(sources)
