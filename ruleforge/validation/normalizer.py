"""Schema Normalizer

Turns the accepted shorthand forms of a field's rule spec into one ordered
tuple of RuleInvocations:

    "required"                          -> (required,)
    {"max_length": 10}                  -> (max_length(10),)
    {"length_between": [1, 10]}         -> (length_between(1, 10),)
    ["required", {"min_number": 18}]    -> (required, min_number(18))

A list value inside a single-key mapping is the argument list; wrap it once
more to pass a list as a single argument (``{"one_of": [["a", "b"]]}``).
Anything else is a schema defect and raises MalformedSpecError.
"""
from __future__ import annotations

from typing import Any, Mapping

from ruleforge.core.errors import malformed_spec, raise_error

from .types import RuleInvocation

_SEQUENCE_TYPES = (list, tuple)


def normalize(spec: Any) -> tuple[RuleInvocation, ...]:
    """Normalize a field's rule spec. Raises MalformedSpecError."""
    if isinstance(spec, _SEQUENCE_TYPES):
        if not spec:
            raise_error(malformed_spec(spec, "rule list is empty"))
        return tuple(_normalize_one(item, in_sequence=True) for item in spec)
    return (_normalize_one(spec, in_sequence=False),)


def _normalize_one(spec: Any, *, in_sequence: bool) -> RuleInvocation:
    if isinstance(spec, str):
        if not spec:
            raise_error(malformed_spec(spec, "rule name is empty"))
        return RuleInvocation(spec)

    if isinstance(spec, Mapping):
        if len(spec) != 1:
            raise_error(malformed_spec(spec, f"expected exactly one rule name, got {len(spec)} keys"))
        ((name, value),) = spec.items()
        if not isinstance(name, str) or not name:
            raise_error(malformed_spec(spec, "rule name must be a non-empty string"))
        args = tuple(value) if isinstance(value, _SEQUENCE_TYPES) else (value,)
        return RuleInvocation(name, args)

    if in_sequence and isinstance(spec, _SEQUENCE_TYPES):
        raise_error(malformed_spec(spec, "nested rule lists are not allowed"))
    raise_error(malformed_spec(spec, f"unsupported type {type(spec).__name__}"))
