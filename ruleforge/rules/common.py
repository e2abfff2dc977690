"""Presence rules. These are the only rules that act on missing values."""
from __future__ import annotations

from typing import Mapping

from .base import is_no_value
from .codes import CANNOT_BE_EMPTY, FORMAT_ERROR, REQUIRED


def required(registry):
    def validate(value, siblings, output):
        if is_no_value(value):
            return REQUIRED
        return None

    return validate


def not_empty(registry):
    """Absent is fine, present-but-empty is not."""

    def validate(value, siblings, output):
        if value == "":
            return CANNOT_BE_EMPTY
        return None

    return validate


def not_empty_list(registry):
    def validate(value, siblings, output):
        if is_no_value(value):
            return CANNOT_BE_EMPTY
        if not isinstance(value, (list, tuple)):
            return FORMAT_ERROR
        if not value:
            return CANNOT_BE_EMPTY
        return None

    return validate


def any_object(registry):
    def validate(value, siblings, output):
        if is_no_value(value):
            return None
        if not isinstance(value, Mapping):
            return FORMAT_ERROR
        return None

    return validate
