"""Engine Types

The engine has exactly two callable contracts:

- RuleBuilder: ``builder(registry, *args) -> FieldValidator``. Called once per
  rule invocation at compile time. The registry lets structural rules and
  aliases compile sub-validators with the same vocabulary.
- FieldValidator: ``validator(value, siblings, output) -> error | None``.
  Called once per field per validation. Returns None on success or an error
  value (an ErrorCode string, or a nested mapping/list of error values). It may
  write a transformed value to ``output``.

Everything else here is an immutable container produced by the compiler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Protocol, Union

if TYPE_CHECKING:
    from .registry import RuleRegistry

# Opaque error token, or a nested structure mirroring the input shape
ErrorValue = Union[str, dict[str, Any], list[Any]]


def is_no_value(value: Any) -> bool:
    """True for values treated as "not provided" (absent, None, empty string)."""
    return value is None or (isinstance(value, str) and value == "")


def trim_value(value: Any) -> Any:
    """Strip surrounding whitespace from strings; other values pass through."""
    return value.strip() if isinstance(value, str) else value


@dataclass(frozen=True, slots=True)
class RuleInvocation:
    """Canonical unit of a rule spec: a rule name and its ordered arguments."""
    name: str
    args: tuple[Any, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}({', '.join(repr(a) for a in self.args)})"


@dataclass(slots=True)
class FieldOutput:
    """Mutable output slot handed to a single FieldValidator call."""
    value: Any = None
    written: bool = False

    def write(self, value: Any) -> None:
        self.value = value
        self.written = True


class FieldValidator(Protocol):
    def __call__(
        self, value: Any, siblings: Mapping[str, Any], output: FieldOutput
    ) -> ErrorValue | None: ...


class RuleBuilder(Protocol):
    def __call__(self, registry: RuleRegistry, *args: Any) -> FieldValidator: ...


@dataclass(frozen=True, slots=True)
class FieldChain:
    """Ordered validators compiled from one field's rule spec."""
    rules: tuple[RuleInvocation, ...]
    validators: tuple[FieldValidator, ...]

    def __len__(self) -> int:
        return len(self.validators)


@dataclass(frozen=True, slots=True)
class CompiledValidator:
    """Field name -> FieldChain. Immutable once built and safe to share.

    ``auto_trim`` records that every chain starts with the auto-trim pass, so
    siblings are trimmed the same way before any field sees them.
    """
    fields: Mapping[str, FieldChain] = field(default_factory=lambda: MappingProxyType({}))
    auto_trim: bool = False

    def __post_init__(self):
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def describe(self) -> dict[str, list[str]]:
        """Compiled rule names per field, for debugging and logging."""
        return {name: [str(rule) for rule in chain.rules] for name, chain in self.fields.items()}
