"""Execution Engine

Applies a CompiledValidator to an input mapping, field by field.

- Only fields named in the compiled schema are read or written.
- A field's validators run in schema order and stop at the first error.
- A value written by a validator is what the next validator of the same
  field sees, and what ends up in the output.
- Every validator receives the same read-only snapshot of the input at this
  level as ``siblings``; no field ever observes another field's output.
  With auto-trim on, string values in the snapshot are trimmed too.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from .types import CompiledValidator, ErrorValue, FieldChain, FieldOutput, trim_value


@dataclass(frozen=True, slots=True)
class ChainOutcome:
    """Result of running one FieldChain against one value."""
    value: Any
    error: ErrorValue | None = None
    written: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def run_chain(chain: FieldChain, value: Any, siblings: Mapping[str, Any]) -> ChainOutcome:
    """Run a field's validators in order, short-circuiting on the first error."""
    written = False
    for validator in chain.validators:
        slot = FieldOutput()
        error = validator(value, siblings, slot)
        if error:
            return ChainOutcome(value=value, error=error, written=written)
        if slot.written:
            value, written = slot.value, True
    return ChainOutcome(value=value, written=written)


def execute(compiled: CompiledValidator, data: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, ErrorValue]]:
    """Validate a mapping against a compiled schema.

    Returns:
        (output, errors). When errors is non-empty the output is partial and
        must not be used.
    """
    if compiled.auto_trim:
        snapshot = MappingProxyType({key: trim_value(value) for key, value in data.items()})
    else:
        snapshot = MappingProxyType(dict(data))
    output: dict[str, Any] = {}
    errors: dict[str, ErrorValue] = {}

    for name, chain in compiled.fields.items():
        outcome = run_chain(chain, snapshot.get(name), snapshot)
        if not outcome.ok:
            errors[name] = outcome.error
        elif outcome.written or name in snapshot:
            output[name] = outcome.value

    return output, errors
