"""Rule Registry

Mapping from rule name to RuleBuilder. There is one process-wide default
registry, seeded with the built-in catalog on first access, and every
Validator works on its own copy taken at construction time. Changes to the
default therefore only affect validators created afterwards.

Registries are configuration: register everything, then compile, then
validate. Registering while other threads compile or validate against the
same registry is undefined behaviour.
"""
from __future__ import annotations

import threading
from typing import Iterator, Mapping

from ruleforge.core.errors import invalid_rule, raise_error, unknown_rule
from ruleforge.core.logging import registry_logger

from .types import RuleBuilder

log = registry_logger()


class RuleRegistry:
    """Mutable mapping of rule name -> RuleBuilder."""

    __slots__ = ("_builders", "name")

    def __init__(self, builders: Mapping[str, RuleBuilder] | None = None, *, name: str = "instance"):
        self._builders: dict[str, RuleBuilder] = {}
        self.name = name
        if builders:
            self.register_many(builders)

    def register(self, name: str, builder: RuleBuilder) -> None:
        """Register a builder, replacing any existing builder for the name."""
        if not isinstance(name, str) or not name:
            raise_error(invalid_rule(name, "rule name must be a non-empty string", origin=self.name))
        if not callable(builder):
            raise_error(invalid_rule(name, "builder must be callable", origin=self.name))
        replaced = name in self._builders
        self._builders[name] = builder
        log.debug("rule_registered", registry=self.name, rule=name, replaced=replaced)

    def register_many(self, builders: Mapping[str, RuleBuilder]) -> None:
        for name, builder in builders.items():
            self.register(name, builder)

    def lookup(self, name: str) -> RuleBuilder:
        """Get the builder for a rule name. Raises UnknownRuleError."""
        try:
            return self._builders[name]
        except (KeyError, TypeError):
            raise_error(unknown_rule(str(name), self._builders.keys(), origin=self.name))

    def get(self, name: str) -> RuleBuilder | None:
        return self._builders.get(name)

    def snapshot(self) -> dict[str, RuleBuilder]:
        """Copy of the current name -> builder mapping."""
        return dict(self._builders)

    def copy(self, *, name: str = "instance") -> RuleRegistry:
        clone = RuleRegistry(name=name)
        clone._builders = dict(self._builders)
        return clone

    def names(self) -> list[str]:
        return sorted(self._builders)

    def __contains__(self, name: object) -> bool:
        return name in self._builders

    def __len__(self) -> int:
        return len(self._builders)

    def __iter__(self) -> Iterator[str]:
        return iter(self._builders)

    def __repr__(self) -> str:
        return f"RuleRegistry(name={self.name!r}, rules={len(self._builders)})"


# Process-wide default registry
_default_registry: RuleRegistry | None = None
_default_registry_lock = threading.Lock()


def _build_default_registry() -> RuleRegistry:
    from ruleforge.rules import BUILTIN_RULES

    registry = RuleRegistry(name="default")
    registry.register_many(BUILTIN_RULES)
    log.debug("default_registry_initialized", rules=len(registry))
    return registry


def get_default_registry() -> RuleRegistry:
    """Get the process-wide default registry, seeding it on first access."""
    global _default_registry

    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = _build_default_registry()

    return _default_registry


def reset_default_registry() -> None:
    """Drop all default registrations; the built-ins are re-seeded on next access.

    Useful for testing.
    """
    global _default_registry
    with _default_registry_lock:
        _default_registry = None
