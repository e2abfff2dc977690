"""Schema Error Builders

Ergonomic constructors for typed schema and registry errors.
Each builder creates an AppError with the appropriate code and context.
"""
from typing import Any, Iterable

from .types import AppError, ErrorCode, Err


# =============================================================================
# Schema Errors (E1xxx)
# =============================================================================

def schema_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E1000_SCHEMA_GENERIC,
    rule: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create schema error."""
    meta = {"rule": rule, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        origin=origin,
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def unknown_rule(
    name: str, available: Iterable[str] = (), origin: str = ""
) -> Err[AppError]:
    known = sorted(available)
    msg = f"Rule '{name}' is not registered"
    if known:
        msg += f". Available: {', '.join(known)}"
    return schema_error(
        msg,
        code=ErrorCode.E1001_UNKNOWN_RULE,
        rule=name,
        origin=origin,
    )


def malformed_spec(spec: Any, reason: str, origin: str = "") -> Err[AppError]:
    return schema_error(
        f"Malformed rule spec {spec!r}: {reason}",
        code=ErrorCode.E1002_MALFORMED_RULE_SPEC,
        origin=origin,
        spec_type=type(spec).__name__,
    )


def malformed_schema(schema: Any, reason: str, origin: str = "") -> Err[AppError]:
    return schema_error(
        f"Malformed schema: {reason}",
        code=ErrorCode.E1003_MALFORMED_SCHEMA,
        origin=origin,
        schema_type=type(schema).__name__,
    )


def invalid_arguments(
    rule: str,
    args: tuple,
    reason: str,
    origin: str = "",
    cause: Exception | None = None,
) -> Err[AppError]:
    return schema_error(
        f"Rule '{rule}' cannot be built from arguments {list(args)!r}: {reason}",
        code=ErrorCode.E1004_INVALID_ARGUMENTS,
        rule=rule,
        origin=origin,
        cause=cause,
        arg_count=len(args),
    )


def schema_too_deep(max_depth: int, origin: str = "") -> Err[AppError]:
    return schema_error(
        f"Schema nesting exceeds maximum depth of {max_depth}",
        code=ErrorCode.E1005_SCHEMA_TOO_DEEP,
        origin=origin,
        max_depth=max_depth,
    )


# =============================================================================
# Registry Errors (E2xxx)
# =============================================================================

def registry_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_REGISTRY_GENERIC,
    rule: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create registry error."""
    meta = {"rule": rule, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        origin=origin,
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_rule(name: Any, reason: str, origin: str = "") -> Err[AppError]:
    return registry_error(
        f"Cannot register rule {name!r}: {reason}",
        code=ErrorCode.E2001_INVALID_RULE,
        rule=name if isinstance(name, str) else None,
        origin=origin,
    )


def invalid_alias(reason: str, name: str | None = None, origin: str = "") -> Err[AppError]:
    msg = f"Invalid aliased rule '{name}'" if name else "Invalid aliased rule"
    return registry_error(
        f"{msg}: {reason}",
        code=ErrorCode.E2010_INVALID_ALIAS,
        rule=name,
        origin=origin,
    )
