"""Schema Exceptions

Schema defects are developer errors: they are raised, never returned as
validation data. Each exception wraps the AppError that describes it, so
callers that prefer the Result style can recover it via `.error`.
"""
from __future__ import annotations

from typing import NoReturn

from .types import AppError, ErrorCode, Err


class SchemaError(Exception):
    """Base exception for schema, registry and alias defects."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class UnknownRuleError(SchemaError):
    """A rule name has no registered builder."""

    @property
    def rule(self) -> str | None:
        return self.error.metadata.get("rule")


class MalformedSpecError(SchemaError):
    """A field's rule spec has an unsupported shape."""


class MalformedSchemaError(SchemaError):
    """The schema itself is not a mapping of field names to rule specs."""


class InvalidArgumentsError(SchemaError):
    """A rule builder rejected its arguments."""


class SchemaDepthError(SchemaError):
    """Nested schemas exceed the configured maximum depth."""


class InvalidRuleError(SchemaError):
    """A rule registration was given a bad name or builder."""


class AliasDefinitionError(SchemaError):
    """An aliased rule definition is malformed."""


_EXCEPTIONS: dict[ErrorCode, type[SchemaError]] = {
    ErrorCode.E1001_UNKNOWN_RULE: UnknownRuleError,
    ErrorCode.E1002_MALFORMED_RULE_SPEC: MalformedSpecError,
    ErrorCode.E1003_MALFORMED_SCHEMA: MalformedSchemaError,
    ErrorCode.E1004_INVALID_ARGUMENTS: InvalidArgumentsError,
    ErrorCode.E1005_SCHEMA_TOO_DEEP: SchemaDepthError,
    ErrorCode.E2001_INVALID_RULE: InvalidRuleError,
    ErrorCode.E2010_INVALID_ALIAS: AliasDefinitionError,
}


def to_exception(error: AppError) -> SchemaError:
    """Map an AppError to the matching SchemaError subclass."""
    return _EXCEPTIONS.get(error.code, SchemaError)(error)


def raise_error(result: Err[AppError]) -> NoReturn:
    """Raise the SchemaError described by an Err result."""
    exc = to_exception(result.error)
    if result.error.cause is not None:
        raise exc from result.error.cause
    raise exc
