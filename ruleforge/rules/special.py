"""Format rules (email, url, iso_date) and cross-field equality."""
from __future__ import annotations

import re
from datetime import date
from urllib.parse import urlparse

from .base import is_no_value, is_primitive, to_text
from .codes import FIELDS_NOT_EQUAL, FORMAT_ERROR, WRONG_DATE, WRONG_EMAIL, WRONG_URL

# RFC 5322 simplified pattern
_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_URL_SCHEMES = frozenset({"http", "https"})
_URL_MAX_LENGTH = 2083


def _is_email(text: str) -> bool:
    if not _EMAIL.fullmatch(text) or ".." in text:
        return False
    local, _, domain = text.partition("@")
    return not (local.startswith(".") or local.endswith(".") or domain.startswith(".") or domain.startswith("-"))


def _is_url(text: str) -> bool:
    if len(text) > _URL_MAX_LENGTH or any(c.isspace() for c in text):
        return False
    try:
        parsed = urlparse(text)
        host = parsed.hostname
        _ = parsed.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    if parsed.scheme.lower() not in _URL_SCHEMES or not host:
        return False
    return host == "localhost" or "." in host.strip(".")


def _is_iso_date(text: str) -> bool:
    if not _ISO_DATE.fullmatch(text):
        return False
    try:
        date.fromisoformat(text)
    except ValueError:
        return False
    return True


def _format_rule(predicate, code):
    def validate(value, siblings, output):
        if is_no_value(value):
            return None
        if not is_primitive(value):
            return FORMAT_ERROR
        if not predicate(to_text(value)):
            return code
        return None

    return validate


def email(registry):
    return _format_rule(_is_email, WRONG_EMAIL)


def url(registry):
    return _format_rule(_is_url, WRONG_URL)


def iso_date(registry):
    return _format_rule(_is_iso_date, WRONG_DATE)


def equal_to_field(registry, field):
    """Compares against the other field's raw input value."""
    if not isinstance(field, str) or not field:
        raise ValueError(f"equal_to_field expects a field name, got {field!r}")

    def validate(value, siblings, output):
        if is_no_value(value):
            return None
        if not is_primitive(value):
            return FORMAT_ERROR
        if value != siblings.get(field):
            return FIELDS_NOT_EQUAL
        return None

    return validate
