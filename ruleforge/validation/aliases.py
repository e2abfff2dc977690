"""Aliased Rules

An alias binds a name to a fixed rule spec and, optionally, a fixed error
code. Registering one installs an ordinary builder, so the rest of the engine
cannot tell an alias from a hand-written rule:

    register_alias(registry, {
        "name": "adult_age",
        "rules": ["positive_integer", {"min_number": 18}],
        "error": "WRONG_AGE",
    })
    schema = {"age": ["required", "adult_age"]}
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ruleforge.core.errors import MalformedSpecError, invalid_alias, raise_error
from ruleforge.core.logging import registry_logger

from .compiler import compile_field
from .executor import run_chain
from .normalizer import normalize
from .registry import RuleRegistry
from .types import FieldValidator, RuleBuilder

log = registry_logger()


class AliasDefinition(BaseModel):
    """Validated aliased rule definition."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    rules: Any
    error: str | None = Field(default=None, min_length=1)

    @field_validator("rules")
    @classmethod
    def _rules_not_empty(cls, v: Any) -> Any:
        if v is None or (isinstance(v, (str, list, tuple, dict)) and not v):
            raise ValueError("rules must not be empty")
        return v


def parse_alias(alias: AliasDefinition | Mapping[str, Any]) -> AliasDefinition:
    """Validate an alias definition. Raises AliasDefinitionError."""
    if isinstance(alias, AliasDefinition):
        definition = alias
    else:
        try:
            definition = AliasDefinition.model_validate(alias)
        except ValidationError as exc:
            name = alias.get("name") if isinstance(alias, Mapping) else None
            reasons = "; ".join(f"{'.'.join(str(p) for p in e['loc']) or 'alias'}: {e['msg']}" for e in exc.errors())
            raise_error(invalid_alias(reasons, name if isinstance(name, str) else None))

    try:
        normalize(definition.rules)
    except MalformedSpecError as exc:
        raise_error(invalid_alias(exc.error.message, definition.name))
    return definition


def alias_builder(definition: AliasDefinition) -> RuleBuilder:
    """Builder that compiles the alias's rules against the caller's registry."""

    def build(registry: RuleRegistry) -> FieldValidator:
        chain = compile_field(definition.rules, registry)

        def validate(value, siblings, output):
            outcome = run_chain(chain, value, siblings)
            if not outcome.ok:
                return definition.error or outcome.error
            if outcome.written:
                output.write(outcome.value)
            return None

        return validate

    build.__name__ = definition.name
    return build


def register_alias(registry: RuleRegistry, alias: AliasDefinition | Mapping[str, Any]) -> AliasDefinition:
    """Validate an alias definition and register it as a rule."""
    definition = parse_alias(alias)
    registry.register(definition.name, alias_builder(definition))
    log.debug("alias_registered", registry=registry.name, rule=definition.name, error=definition.error)
    return definition
