"""Monadic Error Handling Types

Result/Either types for deterministic error propagation, plus the error code
taxonomy used for schema defects. Validation failures are not AppErrors:
they are plain data (the error map) carried in Err.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Iterator, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class ErrorCode(Enum):
    """Error codes for schema defects.

    E1xxx: Schema errors (compile time)
    E2xxx: Registry and alias errors
    """
    # Schema (E1xxx)
    E1000_SCHEMA_GENERIC = 1000
    E1001_UNKNOWN_RULE = 1001
    E1002_MALFORMED_RULE_SPEC = 1002
    E1003_MALFORMED_SCHEMA = 1003
    E1004_INVALID_ARGUMENTS = 1004
    E1005_SCHEMA_TOO_DEEP = 1005

    # Registry/Alias (E2xxx)
    E2000_REGISTRY_GENERIC = 2000
    E2001_INVALID_RULE = 2001
    E2010_INVALID_ALIAS = 2010


@dataclass(frozen=True, slots=True)
class AppError:
    """Developer-facing description of a schema or registry defect.

    ``origin`` names the field being compiled, or the registry involved.
    ``cause`` keeps the builder exception that triggered the defect, if any.
    """
    code: ErrorCode
    message: str
    origin: str = ""
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        if self.origin:
            return f"[{self.code.name}] {self.message} (origin={self.origin!r})"
        return f"[{self.code.name}] {self.message}"



@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result monad."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Extract the value. Safe because Ok always contains a value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """No-op for Ok variant."""
        return self  # type: ignore

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain operations that may fail."""
        return f(self.value)

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Pattern match on Result. Forces exhaustive handling."""
        return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result monad."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        """Extract the error."""
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """No-op for Err variant."""
        return self  # type: ignore

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error."""
        return Err(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """No-op for Err variant."""
        return self  # type: ignore

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Pattern match on Result. Forces exhaustive handling."""
        return err(self.error)

    def __iter__(self) -> Iterator:
        return iter([])


# Type alias for Result monad
Result = Union[Ok[T], Err[E]]
