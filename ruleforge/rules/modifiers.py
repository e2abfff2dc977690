"""Modifiers

Transform-only rules: they write a new value and never return an error.
Non-string values pass through untouched.
"""
from __future__ import annotations

import copy
from typing import Any, Callable

from .base import is_no_value

_trim = lambda v: v.strip()
_lower = lambda v: v.lower()
_upper = lambda v: v.upper()


def _string_modifier(transform: Callable[[str], str]):
    def validate(value, siblings, output):
        if isinstance(value, str):
            output.write(transform(value))
        return None

    return validate


def _require_chars(chars: Any, *, name: str) -> frozenset[str]:
    if not isinstance(chars, str) or not chars:
        raise ValueError(f"{name} expects a non-empty string of characters, got {chars!r}")
    return frozenset(chars)


def trim(registry):
    return _string_modifier(_trim)


def to_lc(registry):
    return _string_modifier(_lower)


def to_uc(registry):
    return _string_modifier(_upper)


def remove(registry, chars):
    drop = _require_chars(chars, name="remove")
    return _string_modifier(lambda v: "".join(c for c in v if c not in drop))


def leave_only(registry, chars):
    keep = _require_chars(chars, name="leave_only")
    return _string_modifier(lambda v: "".join(c for c in v if c in keep))


def default(registry, value):
    """Writes a fresh copy of ``value`` when the field is missing, None or empty."""

    def validate(current, siblings, output):
        if is_no_value(current):
            output.write(copy.deepcopy(value))
        return None

    return validate
