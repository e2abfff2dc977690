"""Structural Rules

Rules whose arguments are themselves schemas or rule specs. Each builder
compiles its sub-schema with the registry it was given, at compile time, and
the validator applies the compiled tree to the nested value at run time.

Nested failures are returned as nested error values rather than a single
code: a mapping for objects, and a list for sequences where passing elements
hold ``None``.

    {"address": {"nested_object": {"zip": "required"}}}
    {"tags": {"list_of": ["required", {"max_length": 10}]}}
    {"items": {"list_of_objects": [{"sku": "required", "qty": "positive_integer"}]}}
    {"contact": {"or": [["required", "email"], ["required", "url"]]}}
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from ruleforge.validation.compiler import compile_field, compile_schema
from ruleforge.validation.executor import execute, run_chain
from ruleforge.validation.types import CompiledValidator, ErrorValue, FieldChain

from .base import is_no_value, is_primitive, to_text
from .codes import FORMAT_ERROR

# (value, error) for one nested value
ItemOutcome = tuple[Any, ErrorValue | None]


def _validate_object(compiled: CompiledValidator | None, value: Any) -> ItemOutcome:
    if compiled is None or not isinstance(value, Mapping):
        return value, FORMAT_ERROR
    result, errors = execute(compiled, value)
    return result, errors or None


def _validate_items(items: Any, check: Callable[[Any], ItemOutcome], output) -> ErrorValue | None:
    if not isinstance(items, (list, tuple)):
        return FORMAT_ERROR
    results, errors = [], []
    for item in items:
        result, error = check(item)
        results.append(result)
        errors.append(error)
    if any(error is not None for error in errors):
        return errors
    output.write(results)
    return None


def _compile_variants(registry, schemas: Any) -> Mapping[str, CompiledValidator]:
    if not isinstance(schemas, Mapping) or not schemas:
        raise ValueError("expected a non-empty mapping of selector value to schema")
    return MappingProxyType({
        to_text(key): compile_schema(schema, registry) for key, schema in schemas.items()
    })


def _rule_spec(specs: Sequence[Any]) -> Any:
    """``list_of`` takes its rules either spread out or as one spec argument."""
    if not specs:
        raise ValueError("expected at least one rule")
    return specs[0] if len(specs) == 1 else list(specs)


@dataclass(frozen=True, slots=True)
class NestedObject:
    compiled: CompiledValidator

    def __call__(self, value, siblings, output):
        if is_no_value(value):
            return None
        result, error = _validate_object(self.compiled, value)
        if error is not None:
            return error
        output.write(result)
        return None


@dataclass(frozen=True, slots=True)
class VariableObject:
    """Picks the schema from the value of ``selector_field`` in the object."""
    selector_field: str
    variants: Mapping[str, CompiledValidator]

    def select(self, value: Any) -> CompiledValidator | None:
        if not isinstance(value, Mapping):
            return None
        selector = value.get(self.selector_field)
        if not is_primitive(selector):
            return None
        return self.variants.get(to_text(selector))

    def check(self, value: Any) -> ItemOutcome:
        return _validate_object(self.select(value), value)

    def __call__(self, value, siblings, output):
        if is_no_value(value):
            return None
        result, error = self.check(value)
        if error is not None:
            return error
        output.write(result)
        return None


@dataclass(frozen=True, slots=True)
class ListOf:
    chain: FieldChain

    def __call__(self, value, siblings, output):
        if is_no_value(value):
            return None

        def check(item):
            outcome = run_chain(self.chain, item, siblings)
            return outcome.value, outcome.error

        return _validate_items(value, check, output)


@dataclass(frozen=True, slots=True)
class ListOfObjects:
    compiled: CompiledValidator

    def __call__(self, value, siblings, output):
        if is_no_value(value):
            return None
        return _validate_items(value, lambda item: _validate_object(self.compiled, item), output)


@dataclass(frozen=True, slots=True)
class ListOfDifferentObjects:
    selector: VariableObject

    def __call__(self, value, siblings, output):
        if is_no_value(value):
            return None
        return _validate_items(value, self.selector.check, output)


@dataclass(frozen=True, slots=True)
class FirstPassing:
    """Tries each rule set in order; reports the last failure if none pass."""
    chains: tuple[FieldChain, ...]

    def __call__(self, value, siblings, output):
        last_error = None
        for chain in self.chains:
            outcome = run_chain(chain, value, siblings)
            if outcome.ok:
                if outcome.written:
                    output.write(outcome.value)
                return None
            last_error = outcome.error
        return last_error


def nested_object(registry, schema):
    return NestedObject(compile_schema(schema, registry))


def variable_object(registry, selector_field, schemas):
    if not isinstance(selector_field, str) or not selector_field:
        raise ValueError(f"selector field must be a non-empty string, got {selector_field!r}")
    return VariableObject(selector_field, _compile_variants(registry, schemas))


def list_of(registry, *specs):
    return ListOf(compile_field(_rule_spec(specs), registry))


def list_of_objects(registry, schema):
    return ListOfObjects(compile_schema(schema, registry))


def list_of_different_objects(registry, selector_field, schemas):
    return ListOfDifferentObjects(variable_object(registry, selector_field, schemas))


def or_(registry, *specs):
    if not specs:
        raise ValueError("expected at least one rule set")
    return FirstPassing(tuple(compile_field(spec, registry) for spec in specs))
