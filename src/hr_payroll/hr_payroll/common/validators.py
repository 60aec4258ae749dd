from __future__ import annotations

from typing import Union

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_id(value: Union[int, str, None], field_name: str) -> int:
    """Accept an int or a numeric string (as sent by forms) and return an int > 0."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is invalid")
    if isinstance(value, int):
        parsed = value
    else:
        text = require_non_empty(value, field_name)
        if not text.isdecimal():
            raise ValidationError(f"{field_name} is invalid")
        parsed = int(text)
    if parsed <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return parsed
