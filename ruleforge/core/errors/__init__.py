"""Monadic Error Handling System

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Developer-facing error with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- SchemaError hierarchy: raised for schema defects

Usage:
    from ruleforge.core.errors import Ok, Err, unknown_rule, raise_error

    match validator.validate(payload):
        case Ok(output):
            save(output)
        case Err(errors):
            respond(400, errors)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
)

from .builders import (
    # Schema (E1xxx)
    schema_error,
    unknown_rule,
    malformed_spec,
    malformed_schema,
    invalid_arguments,
    schema_too_deep,
    # Registry (E2xxx)
    registry_error,
    invalid_rule,
    invalid_alias,
)

from .exceptions import (
    SchemaError,
    UnknownRuleError,
    MalformedSpecError,
    MalformedSchemaError,
    InvalidArgumentsError,
    SchemaDepthError,
    InvalidRuleError,
    AliasDefinitionError,
    to_exception,
    raise_error,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    # Schema (E1xxx)
    "schema_error",
    "unknown_rule",
    "malformed_spec",
    "malformed_schema",
    "invalid_arguments",
    "schema_too_deep",
    # Registry (E2xxx)
    "registry_error",
    "invalid_rule",
    "invalid_alias",
    # Exceptions
    "SchemaError",
    "UnknownRuleError",
    "MalformedSpecError",
    "MalformedSchemaError",
    "InvalidArgumentsError",
    "SchemaDepthError",
    "InvalidRuleError",
    "AliasDefinitionError",
    "to_exception",
    "raise_error",
]
