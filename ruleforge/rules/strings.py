"""String Rules

Primitive non-string values (numbers, booleans) are accepted and written to
the output as strings. Containers fail with FORMAT_ERROR. Missing values are
skipped.
"""
from __future__ import annotations

import re

from .base import is_no_value, is_primitive, require_length, to_text
from .codes import FORMAT_ERROR, NOT_ALLOWED_VALUE, TOO_LONG, TOO_SHORT, WRONG_FORMAT


def _string_rule(check):
    """FieldValidator that stringifies the value and applies ``check(text)``."""

    def validate(value, siblings, output):
        if is_no_value(value):
            return None
        if not is_primitive(value):
            return FORMAT_ERROR
        text = to_text(value)
        if error := check(text):
            return error
        output.write(text)
        return None

    return validate


def string(registry):
    return _string_rule(lambda text: None)


def eq(registry, allowed):
    if not is_primitive(allowed):
        raise ValueError(f"eq expects a primitive value, got {type(allowed).__name__}")
    expected = to_text(allowed)

    def validate(value, siblings, output):
        if is_no_value(value):
            return None
        if not is_primitive(value):
            return FORMAT_ERROR
        if to_text(value) != expected:
            return NOT_ALLOWED_VALUE
        output.write(allowed)
        return None

    return validate


def one_of(registry, *allowed):
    """Accepts ``{"one_of": ["a", "b"]}`` as well as ``{"one_of": [["a", "b"]]}``."""
    if len(allowed) == 1 and isinstance(allowed[0], (list, tuple)):
        allowed = tuple(allowed[0])
    if not allowed:
        raise ValueError("one_of needs at least one allowed value")
    if not all(is_primitive(option) for option in allowed):
        raise ValueError("one_of values must be primitive")
    options = {to_text(option): option for option in reversed(allowed)}

    def validate(value, siblings, output):
        if is_no_value(value):
            return None
        if not is_primitive(value):
            return FORMAT_ERROR
        key = to_text(value)
        if key not in options:
            return NOT_ALLOWED_VALUE
        output.write(options[key])
        return None

    return validate


def max_length(registry, length):
    limit = require_length(length, name="max_length")
    return _string_rule(lambda text: TOO_LONG if len(text) > limit else None)


def min_length(registry, length):
    limit = require_length(length, name="min_length")
    return _string_rule(lambda text: TOO_SHORT if len(text) < limit else None)


def length_between(registry, min_len, max_len):
    low = require_length(min_len, name="min_length")
    high = require_length(max_len, name="max_length")
    if low > high:
        raise ValueError(f"min_length {low} is greater than max_length {high}")

    def check(text):
        if len(text) < low:
            return TOO_SHORT
        if len(text) > high:
            return TOO_LONG
        return None

    return _string_rule(check)


def length_equal(registry, length):
    expected = require_length(length, name="length")

    def check(text):
        if len(text) < expected:
            return TOO_SHORT
        if len(text) > expected:
            return TOO_LONG
        return None

    return _string_rule(check)


_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL}


def like(registry, pattern, flags=""):
    """Regex search; flags is a string of ``i``, ``m``, ``s``."""
    if not isinstance(pattern, str):
        raise ValueError(f"like expects a pattern string, got {type(pattern).__name__}")
    if not isinstance(flags, str) or any(f not in _FLAGS for f in flags):
        raise ValueError(f"unsupported regex flags {flags!r}")
    compiled_flags = 0
    for flag in flags:
        compiled_flags |= _FLAGS[flag]
    try:
        compiled = re.compile(pattern, compiled_flags)
    except re.error as exc:
        raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc

    return _string_rule(lambda text: None if compiled.search(text) else WRONG_FORMAT)
