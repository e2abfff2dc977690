"""Validator Compiler

Walks a schema, normalizes every field's rule spec and asks the registry to
build one FieldValidator per rule invocation. Structural rules and aliases
compile their embedded sub-schemas by calling back into this module from
inside their builders, so nesting needs no special casing here.

Compilation never looks at input data. It fails only on schema defects:
unknown rules, malformed specs, bad builder arguments, excessive depth.
"""
from __future__ import annotations

import inspect
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from ruleforge.core.config import get_settings
from ruleforge.core.errors import (
    SchemaError,
    invalid_arguments,
    invalid_rule,
    malformed_schema,
    raise_error,
    schema_too_deep,
)
from ruleforge.core.logging import compiler_logger

from .normalizer import normalize
from .registry import RuleRegistry
from .types import CompiledValidator, FieldChain, FieldOutput, FieldValidator, RuleInvocation, trim_value

log = compiler_logger()

TRIM_RULE = "trim"


def _auto_trim(value: Any, siblings: Mapping[str, Any], output: FieldOutput) -> None:
    # Fixed pass: registry overrides of "trim" do not apply here
    if isinstance(value, str):
        output.write(trim_value(value))
    return None


@dataclass(frozen=True, slots=True)
class _CompileScope:
    depth: int
    auto_trim: bool


# Active compile scope; nested compiles started by builders inherit from it
_scope: ContextVar[_CompileScope | None] = ContextVar("ruleforge_compile_scope", default=None)


@contextmanager
def _enter_scope(auto_trim: bool | None) -> Iterator[_CompileScope]:
    parent = _scope.get()
    depth = parent.depth + 1 if parent else 1
    max_depth = get_settings().MAX_SCHEMA_DEPTH
    if depth > max_depth:
        raise_error(schema_too_deep(max_depth))
    if auto_trim is None:
        auto_trim = parent.auto_trim if parent else False
    scope = _CompileScope(depth=depth, auto_trim=auto_trim)
    token = _scope.set(scope)
    try:
        yield scope
    finally:
        _scope.reset(token)


def compile_schema(
    schema: Mapping[str, Any],
    registry: RuleRegistry,
    *,
    auto_trim: bool | None = None,
) -> CompiledValidator:
    """Compile a field -> rule spec mapping.

    Args:
        schema: Mapping of field name to rule spec
        registry: Registry used to resolve every rule name
        auto_trim: Prepend the built-in trim pass to every field and trim
            sibling values. None inherits the setting of the enclosing
            compile (False at top level).

    Raises:
        SchemaError: On any schema defect
    """
    if not isinstance(schema, Mapping):
        raise_error(malformed_schema(schema, f"expected a mapping, got {type(schema).__name__}"))

    with _enter_scope(auto_trim) as scope:
        fields: dict[str, FieldChain] = {}
        for name, spec in schema.items():
            if not isinstance(name, str):
                raise_error(malformed_schema(schema, f"field names must be strings, got {name!r}"))
            fields[name] = _compile_chain(spec, registry, scope, field=name)

        compiled = CompiledValidator(fields, auto_trim=scope.auto_trim)
        if scope.depth == 1:
            log.debug(
                "schema_compiled",
                registry=registry.name,
                fields=len(compiled),
                auto_trim=scope.auto_trim,
            )
        return compiled


def compile_field(
    spec: Any,
    registry: RuleRegistry,
    *,
    auto_trim: bool | None = None,
) -> FieldChain:
    """Compile a single rule spec into a FieldChain.

    Used by rules that validate a value against a nested rule list (aliases,
    ``list_of``, ``or``). Raises SchemaError on any schema defect.
    """
    with _enter_scope(auto_trim) as scope:
        return _compile_chain(spec, registry, scope, field="")


def _compile_chain(
    spec: Any, registry: RuleRegistry, scope: _CompileScope, *, field: str
) -> FieldChain:
    rules = normalize(spec)
    validators = tuple(_build(rule, registry, field=field) for rule in rules)
    if scope.auto_trim:
        rules = (RuleInvocation(TRIM_RULE), *rules)
        validators = (_auto_trim, *validators)
    return FieldChain(rules=rules, validators=validators)


def _build(invocation: RuleInvocation, registry: RuleRegistry, *, field: str) -> FieldValidator:
    builder = registry.lookup(invocation.name)
    _check_arity(builder, invocation, registry, field)

    try:
        validator = builder(registry, *invocation.args)
    except SchemaError:
        raise
    except (TypeError, ValueError) as exc:
        raise_error(invalid_arguments(invocation.name, invocation.args, str(exc), origin=field, cause=exc))

    if not callable(validator):
        raise_error(invalid_rule(invocation.name, "builder did not return a callable validator", origin=field))
    return validator


def _check_arity(builder: Any, invocation: RuleInvocation, registry: RuleRegistry, field: str) -> None:
    try:
        signature = inspect.signature(builder)
    except (TypeError, ValueError):
        return  # no introspectable signature; the call itself will tell
    try:
        signature.bind(registry, *invocation.args)
    except TypeError as exc:
        raise_error(invalid_arguments(invocation.name, invocation.args, str(exc), origin=field))
