"""Validator

Public surface of the engine. A Validator owns a schema, a private copy of
the default registry taken at construction time, and (once prepared) the
compiled validator tree.

Usage:
    validator = Validator({
        "email": ["required", "email"],
        "age": {"min_number": 18},
    })

    match validator.validate(payload):
        case Ok(output):
            save(output)
        case Err(errors):
            respond(400, errors)

Compilation is lazy: ``prepare()`` compiles eagerly, otherwise the first
``validate()`` does. Either way a schema defect raises SchemaError before any
result is produced. The compiled tree is immutable; ``validate`` can be called
from several threads, but ``get_errors`` only reflects the latest call.
"""
from __future__ import annotations

from typing import Any, Mapping

from ruleforge.core.config import get_settings
from ruleforge.core.errors import Err, Ok, Result
from ruleforge.core.logging import validator_logger

from .aliases import AliasDefinition, register_alias
from .compiler import compile_schema
from .errors import flatten_errors
from .executor import execute
from .registry import RuleRegistry, get_default_registry
from .types import CompiledValidator, ErrorValue, RuleBuilder

log = validator_logger()

FORMAT_ERROR = "FORMAT_ERROR"

_default_auto_trim: bool | None = None


class Validator:
    """Schema-bound validator with an instance-scoped rule registry."""

    __slots__ = ("schema", "auto_trim", "_registry", "_compiled", "_errors")

    def __init__(self, schema: Mapping[str, Any], auto_trim: bool | None = None):
        self.schema = schema
        self.auto_trim = get_default_auto_trim() if auto_trim is None else auto_trim
        self._registry = get_default_registry().copy()
        self._compiled: CompiledValidator | None = None
        self._errors: ErrorValue | None = None

    def prepare(self) -> Validator:
        """Compile the schema now. Raises SchemaError on schema defects."""
        if self._compiled is None:
            self._compiled = compile_schema(self.schema, self._registry, auto_trim=self.auto_trim)
        return self

    @property
    def compiled(self) -> CompiledValidator:
        return self.prepare()._compiled  # type: ignore[return-value]

    @property
    def is_prepared(self) -> bool:
        return self._compiled is not None

    def validate(self, data: Any) -> Result[dict[str, Any], ErrorValue]:
        """Validate input.

        Returns:
            Ok(output) with only the schema's fields, or Err(errors) with the
            error map. Input that is not a mapping fails with FORMAT_ERROR.
        """
        compiled = self.compiled

        if not isinstance(data, Mapping):
            self._errors = FORMAT_ERROR
            log.debug("validation_failed", reason="not_a_mapping", input_type=type(data).__name__)
            return Err(FORMAT_ERROR)

        output, errors = execute(compiled, data)
        if errors:
            self._errors = errors
            log.debug("validation_failed", error_count=len(errors), errors=flatten_errors(errors))
            return Err(errors)

        self._errors = None
        return Ok(output)

    def is_valid(self, data: Any) -> bool:
        return self.validate(data).is_ok()

    def get_errors(self) -> ErrorValue | None:
        """Errors of the most recent validate() call, or None if it passed."""
        return self._errors

    def register_rules(self, rules: Mapping[str, RuleBuilder] | None = None, /, **builders: RuleBuilder) -> Validator:
        """Register rules for this instance only."""
        self._warn_if_prepared("register_rules")
        self._registry.register_many({**(rules or {}), **builders})
        return self

    def register_aliased_rule(self, alias: AliasDefinition | Mapping[str, Any]) -> Validator:
        """Register an aliased rule for this instance only."""
        self._warn_if_prepared("register_aliased_rule")
        register_alias(self._registry, alias)
        return self

    def get_rules(self) -> dict[str, RuleBuilder]:
        """Snapshot of this instance's registry."""
        return self._registry.snapshot()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def _warn_if_prepared(self, operation: str) -> None:
        if self._compiled is not None:
            log.warning("registry_changed_after_compile", operation=operation)

    def __repr__(self) -> str:
        return f"Validator(fields={list(self.schema) if isinstance(self.schema, Mapping) else '?'}, auto_trim={self.auto_trim})"


# =============================================================================
# Process-wide defaults
# =============================================================================

def register_default_rules(rules: Mapping[str, RuleBuilder] | None = None, /, **builders: RuleBuilder) -> None:
    """Register rules in the default registry (seen by validators created afterwards)."""
    get_default_registry().register_many({**(rules or {}), **builders})


def register_aliased_default_rule(alias: AliasDefinition | Mapping[str, Any]) -> AliasDefinition:
    """Register an aliased rule in the default registry."""
    return register_alias(get_default_registry(), alias)


def get_default_rules() -> dict[str, RuleBuilder]:
    """Snapshot of the default registry."""
    return get_default_registry().snapshot()


def set_default_auto_trim(enabled: bool | None) -> None:
    """Set the auto-trim default for validators created afterwards.

    None restores the RULEFORGE_DEFAULT_AUTO_TRIM setting.
    """
    global _default_auto_trim
    _default_auto_trim = enabled


def get_default_auto_trim() -> bool:
    if _default_auto_trim is not None:
        return _default_auto_trim
    return get_settings().DEFAULT_AUTO_TRIM
