"""Shared fixtures for ruleforge tests."""

from __future__ import annotations

from typing import Any

import pytest

from ruleforge.core.config import get_settings
from ruleforge.validation import (
    FieldOutput,
    RuleRegistry,
    get_default_registry,
    reset_default_registry,
    set_default_auto_trim,
)


@pytest.fixture(autouse=True)
def reset_defaults():
    """Reset process-wide registry and auto-trim default around each test."""
    reset_default_registry()
    set_default_auto_trim(None)
    yield
    reset_default_registry()
    set_default_auto_trim(None)
    get_settings.cache_clear()


@pytest.fixture
def registry() -> RuleRegistry:
    """Fresh instance registry seeded with the built-in rules."""
    return get_default_registry().copy(name="test")


@pytest.fixture
def run_rule(registry):
    """Build a single rule and apply it to one value.

    Returns (error, output_slot).
    """

    def _run(name: str, *args: Any, value: Any = None, siblings: dict | None = None):
        validator = registry.lookup(name)(registry, *args)
        slot = FieldOutput()
        error = validator(value, siblings or {}, slot)
        return error, slot

    return _run


@pytest.fixture
def user_schema() -> dict[str, Any]:
    return {
        "name": ["required", {"max_length": 20}],
        "email": ["required", "email"],
        "age": {"min_number": 18},
    }
