"""Numeric Rules

Numbers and numeric strings are accepted; on success the numeric value is
written to the output (``"20"`` becomes ``20``). Booleans are not numbers.
"""
from __future__ import annotations

from .base import is_integral, is_no_value, is_primitive, require_number, to_number
from .codes import (
    FORMAT_ERROR,
    NOT_DECIMAL,
    NOT_INTEGER,
    NOT_NUMBER,
    NOT_POSITIVE_DECIMAL,
    NOT_POSITIVE_INTEGER,
    TOO_HIGH,
    TOO_LOW,
)


def _number_rule(not_number_code, check=None, *, integral=False):
    def validate(value, siblings, output):
        if is_no_value(value):
            return None
        if not is_primitive(value):
            return FORMAT_ERROR
        number = to_number(value)
        if number is None:
            return not_number_code
        if integral:
            if not is_integral(number):
                return not_number_code
            number = int(number)
        if check and (error := check(number)):
            return error
        output.write(number)
        return None

    return validate


def integer(registry):
    return _number_rule(NOT_INTEGER, integral=True)


def positive_integer(registry):
    return _number_rule(
        NOT_POSITIVE_INTEGER,
        lambda n: NOT_POSITIVE_INTEGER if n <= 0 else None,
        integral=True,
    )


def decimal(registry):
    return _number_rule(NOT_DECIMAL)


def positive_decimal(registry):
    return _number_rule(NOT_POSITIVE_DECIMAL, lambda n: NOT_POSITIVE_DECIMAL if n <= 0 else None)


def max_number(registry, maximum):
    limit = require_number(maximum, name="max_number")
    return _number_rule(NOT_NUMBER, lambda n: TOO_HIGH if n > limit else None)


def min_number(registry, minimum):
    limit = require_number(minimum, name="min_number")
    return _number_rule(NOT_NUMBER, lambda n: TOO_LOW if n < limit else None)


def number_between(registry, minimum, maximum):
    low = require_number(minimum, name="min_number")
    high = require_number(maximum, name="max_number")
    if low > high:
        raise ValueError(f"min_number {low} is greater than max_number {high}")

    def check(n):
        if n < low:
            return TOO_LOW
        if n > high:
            return TOO_HIGH
        return None

    return _number_rule(NOT_NUMBER, check)
