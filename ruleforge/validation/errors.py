"""Error Map Helpers

The error map is the engine's wire format: field -> ErrorCode string, or a
nested map / list mirroring the input (``None`` marks list elements that
passed). These helpers read it without changing it.
"""
from __future__ import annotations

from typing import Any, Iterator, Sequence

from .types import ErrorValue


def format_path(loc: Sequence[str | int]) -> str:
    """Format a location tuple as a JSON path (``items[0].name``)."""
    if not loc: return "$"
    parts = []
    for segment in loc:
        if isinstance(segment, int): parts.append(f"[{segment}]")
        elif parts: parts.append(f".{segment}")
        else: parts.append(str(segment))
    return "".join(parts)


def iter_errors(errors: ErrorValue | None, loc: tuple[str | int, ...] = ()) -> Iterator[tuple[tuple[str | int, ...], str]]:
    """Yield (location, code) for every leaf code in an error value."""
    if errors is None:
        return
    if isinstance(errors, dict):
        for key, value in errors.items():
            yield from iter_errors(value, (*loc, key))
    elif isinstance(errors, list):
        for index, value in enumerate(errors):
            yield from iter_errors(value, (*loc, index))
    else:
        yield loc, str(errors)


def flatten_errors(errors: ErrorValue | None) -> dict[str, str]:
    """Flatten an error value into {json_path: code}.

    >>> flatten_errors({"address": {"zip": "REQUIRED"}, "tags": [None, "TOO_LONG"]})
    {'address.zip': 'REQUIRED', 'tags[1]': 'TOO_LONG'}
    """
    return {format_path(loc): code for loc, code in iter_errors(errors)}


def error_codes(errors: ErrorValue | None) -> set[str]:
    """Distinct codes present anywhere in an error value."""
    return {code for _, code in iter_errors(errors)}


def count_errors(errors: Any) -> int:
    return sum(1 for _ in iter_errors(errors))
