"""Value helpers shared by the built-in rules."""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from ruleforge.validation.types import is_no_value

Number = int | float | Decimal


def is_primitive(value: Any) -> bool:
    """Strings, numbers and booleans; not containers or arbitrary objects."""
    return isinstance(value, (str, int, float, Decimal))


def to_text(value: Any) -> str:
    """Stringify a primitive value the way it reads in JSON."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> Number | None:
    """Numeric value of a number or numeric string, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def require_number(value: Any, *, name: str) -> Number:
    """Coerce a rule argument to a number, raising ValueError otherwise."""
    number = to_number(value)
    if number is None:
        raise ValueError(f"{name} must be a number, got {value!r}")
    return number


def require_length(value: Any, *, name: str) -> int:
    """Coerce a rule argument to a non-negative integer length."""
    number = to_number(value)
    if number is None or number < 0 or int(number) != number:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return int(number)


def is_integral(number: Number) -> bool:
    if isinstance(number, int):
        return True
    if isinstance(number, Decimal):
        try:
            return number == number.to_integral_value()
        except InvalidOperation:
            return False
    return float(number).is_integer()
