from __future__ import annotations

from typing import Union

from ..core.enums import PayrollStatus
from ..core.exceptions import InvalidStatus, InvalidTransition

# Forward-only moves; Paid is terminal.
ALLOWED_TRANSITIONS: dict[PayrollStatus, frozenset[PayrollStatus]] = {
    PayrollStatus.PENDING: frozenset({PayrollStatus.PROCESSING, PayrollStatus.PAID}),
    PayrollStatus.PROCESSING: frozenset({PayrollStatus.PAID}),
    PayrollStatus.PAID: frozenset(),
}


def parse_status(value: Union[PayrollStatus, str, None]) -> PayrollStatus:
    if isinstance(value, PayrollStatus):
        return value
    try:
        return PayrollStatus(str(value).strip())
    except ValueError:
        raise InvalidStatus(f"Invalid status: {value!r}. Use Pending, Processing or Paid.") from None


def can_transition(current: PayrollStatus, target: PayrollStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def ensure_transition(current: PayrollStatus, target: PayrollStatus) -> None:
    if current == PayrollStatus.PAID:
        raise InvalidTransition("Payroll is already Paid; no further changes are allowed")
    if not can_transition(current, target):
        raise InvalidTransition(f"Cannot change payroll status from {current.value} to {target.value}")


def allowed_sources(target: PayrollStatus) -> tuple[PayrollStatus, ...]:
    """Statuses from which ``target`` can be reached in one move."""
    return tuple(s for s, targets in ALLOWED_TRANSITIONS.items() if target in targets)
