"""Tests for schema compilation."""

from __future__ import annotations

import pytest

from ruleforge.core.config import get_settings
from ruleforge.core.errors import (
    ErrorCode,
    InvalidArgumentsError,
    InvalidRuleError,
    MalformedSchemaError,
    MalformedSpecError,
    SchemaDepthError,
    SchemaError,
    UnknownRuleError,
)
from ruleforge.validation import (
    CompiledValidator,
    FieldChain,
    RuleInvocation,
    compile_field,
    compile_schema,
    execute,
    register_alias,
)


# =============================================================================
# Basic compilation
# =============================================================================


class TestCompileSchema:
    def test_one_chain_per_field(self, registry, user_schema):
        compiled = compile_schema(user_schema, registry)

        assert isinstance(compiled, CompiledValidator)
        assert list(compiled) == ["name", "email", "age"]
        assert len(compiled.fields["name"]) == 2
        assert len(compiled.fields["age"]) == 1

    def test_describe(self, registry):
        compiled = compile_schema({"name": ["required", {"max_length": 5}]}, registry)
        assert compiled.describe() == {"name": ["required", "max_length(5)"]}

    def test_fields_are_read_only(self, registry):
        compiled = compile_schema({"x": "required"}, registry)
        with pytest.raises(TypeError):
            compiled.fields["y"] = compiled.fields["x"]

    def test_empty_schema(self, registry):
        compiled = compile_schema({}, registry)
        assert len(compiled) == 0

    def test_does_not_touch_input(self, registry):
        calls = []

        def spy(reg):
            calls.append("build")
            return lambda value, siblings, output: calls.append("run")

        registry.register("spy", spy)
        compile_schema({"x": "spy"}, registry)
        assert calls == ["build"]

    def test_builder_receives_registry_and_args(self, registry):
        seen = {}

        def capture(reg, *args):
            seen["registry"] = reg
            seen["args"] = args
            return lambda value, siblings, output: None

        registry.register("capture", capture)
        compile_schema({"x": {"capture": [1, "two"]}}, registry)
        assert seen == {"registry": registry, "args": (1, "two")}


# =============================================================================
# Schema defects
# =============================================================================


class TestCompileErrors:
    """Every schema defect is raised as a SchemaError subclass."""

    def test_unknown_rule(self, registry):
        with pytest.raises(UnknownRuleError) as exc_info:
            compile_schema({"x": ["required", "no_such_rule"]}, registry)
        assert exc_info.value.rule == "no_such_rule"

    def test_unknown_rule_in_nested_schema(self, registry):
        with pytest.raises(UnknownRuleError):
            compile_schema({"address": {"nested_object": {"zip": "bogus"}}}, registry)

    @pytest.mark.parametrize("schema", [None, ["required"], "required"])
    def test_schema_not_a_mapping(self, registry, schema):
        with pytest.raises(MalformedSchemaError):
            compile_schema(schema, registry)

    def test_non_string_field_name(self, registry):
        with pytest.raises(MalformedSchemaError):
            compile_schema({1: "required"}, registry)

    def test_malformed_spec(self, registry):
        with pytest.raises(MalformedSpecError):
            compile_schema({"x": {"a": 1, "b": 2}}, registry)

    def test_too_many_arguments(self, registry):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            compile_schema({"x": {"max_length": [1, 2]}}, registry)
        assert exc_info.value.code is ErrorCode.E1004_INVALID_ARGUMENTS

    def test_missing_argument(self, registry):
        with pytest.raises(InvalidArgumentsError):
            compile_schema({"x": "max_length"}, registry)

    def test_argument_rejected_by_builder(self, registry):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            compile_schema({"x": {"length_between": [5, 1]}}, registry)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_builder_must_return_callable(self, registry):
        registry.register("broken", lambda reg: "not a validator")
        with pytest.raises(InvalidRuleError):
            compile_schema({"x": "broken"}, registry)

    def test_all_are_schema_errors(self, registry):
        with pytest.raises(SchemaError):
            compile_schema({"x": {"like": "("}}, registry)


# =============================================================================
# Depth guard
# =============================================================================


class TestDepthGuard:
    def test_configured_depth_is_enforced(self, registry, monkeypatch):
        monkeypatch.setenv("RULEFORGE_MAX_SCHEMA_DEPTH", "2")
        get_settings.cache_clear()

        compile_schema({"a": {"nested_object": {"b": "required"}}}, registry)
        with pytest.raises(SchemaDepthError):
            compile_schema(
                {"a": {"nested_object": {"b": {"nested_object": {"c": "required"}}}}},
                registry,
            )

    def test_self_referencing_alias(self, registry):
        register_alias(registry, {"name": "loop", "rules": ["required", "loop"]})
        with pytest.raises(SchemaDepthError) as exc_info:
            compile_schema({"x": "loop"}, registry)
        assert exc_info.value.code is ErrorCode.E1005_SCHEMA_TOO_DEEP

    def test_depth_resets_after_failure(self, registry):
        register_alias(registry, {"name": "loop", "rules": "loop"})
        with pytest.raises(SchemaDepthError):
            compile_schema({"x": "loop"}, registry)
        assert len(compile_schema({"x": "required"}, registry)) == 1


# =============================================================================
# Auto-trim
# =============================================================================


class TestAutoTrim:
    def test_trim_is_prepended(self, registry):
        compiled = compile_schema({"x": ["required"]}, registry, auto_trim=True)
        assert compiled.fields["x"].rules == (RuleInvocation("trim"), RuleInvocation("required"))

    def test_explicit_trim_kept_after_auto_trim(self, registry):
        compiled = compile_schema({"x": ["trim", "required"]}, registry, auto_trim=True)
        assert [r.name for r in compiled.fields["x"].rules] == ["trim", "trim", "required"]
        assert compiled.auto_trim is True

    def test_ignores_registry_override_of_trim(self, registry):
        """Auto-trim is the built-in pass even when "trim" is re-registered."""

        def shout(registry):
            def validate(value, siblings, output):
                output.write("X")
            return validate

        registry.register("trim", shout)
        compiled = compile_schema({"name": "required"}, registry, auto_trim=True)
        output, errors = execute(compiled, {"name": "  bob  "})
        assert errors == {}
        assert output == {"name": "bob"}

    def test_off_by_default(self, registry):
        compiled = compile_schema({"x": "required"}, registry)
        assert [r.name for r in compiled.fields["x"].rules] == ["required"]

    def test_propagates_into_nested_schemas(self, registry):
        compiled = compile_schema(
            {"address": {"nested_object": {"zip": "required"}}}, registry, auto_trim=True
        )
        nested = compiled.fields["address"].validators[1]
        assert [r.name for r in nested.compiled.fields["zip"].rules] == ["trim", "required"]


class TestCompileField:
    def test_returns_chain(self, registry):
        chain = compile_field(["required", "email"], registry)
        assert isinstance(chain, FieldChain)
        assert [r.name for r in chain.rules] == ["required", "email"]

    def test_explicit_auto_trim(self, registry):
        chain = compile_field("required", registry, auto_trim=True)
        assert [r.name for r in chain.rules] == ["trim", "required"]
