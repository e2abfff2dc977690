"""Tests for rule spec normalization."""

from __future__ import annotations

import pytest

from ruleforge.core.errors import ErrorCode, MalformedSpecError, SchemaError
from ruleforge.validation import RuleInvocation, normalize


class TestNormalizeShapes:
    """Each accepted shorthand maps to one canonical invocation tuple."""

    def test_bare_name(self):
        assert normalize("required") == (RuleInvocation("required"),)

    def test_mapping_with_scalar_argument(self):
        assert normalize({"max_length": 10}) == (RuleInvocation("max_length", (10,)),)

    def test_mapping_with_argument_list(self):
        assert normalize({"length_between": [1, 10]}) == (RuleInvocation("length_between", (1, 10)),)

    def test_mapping_with_tuple_arguments(self):
        assert normalize({"number_between": (0, 5)}) == (RuleInvocation("number_between", (0, 5)),)

    def test_wrapped_list_is_single_argument(self):
        assert normalize({"one_of": [["a", "b"]]}) == (RuleInvocation("one_of", (["a", "b"],)),)

    def test_mapping_argument_is_kept_whole(self):
        sub_schema = {"zip": "required"}
        (invocation,) = normalize({"nested_object": sub_schema})
        assert invocation.name == "nested_object"
        assert invocation.args == (sub_schema,)

    def test_sequence_preserves_order(self):
        rules = normalize(["required", {"min_length": 2}, "to_lc"])
        assert [r.name for r in rules] == ["required", "min_length", "to_lc"]
        assert rules[1].args == (2,)

    def test_empty_argument_list(self):
        assert normalize({"trim": []}) == (RuleInvocation("trim"),)

    def test_none_argument(self):
        assert normalize({"default": None}) == (RuleInvocation("default", (None,)),)

    def test_deterministic(self):
        spec = ["required", {"one_of": ["a", "b"]}]
        assert normalize(spec) == normalize(spec)


class TestNormalizeErrors:
    """Malformed specs raise at compile time."""

    @pytest.mark.parametrize(
        "spec",
        [
            "",
            [],
            {},
            {"a": 1, "b": 2},
            {1: "x"},
            {"": 1},
            42,
            None,
            ["required", ["nested"]],
            ["required", 3.5],
        ],
    )
    def test_malformed(self, spec):
        with pytest.raises(MalformedSpecError) as exc_info:
            normalize(spec)
        assert exc_info.value.code is ErrorCode.E1002_MALFORMED_RULE_SPEC

    def test_is_schema_error(self):
        with pytest.raises(SchemaError):
            normalize(object())


class TestRuleInvocation:
    def test_str_without_args(self):
        assert str(RuleInvocation("required")) == "required"

    def test_str_with_args(self):
        assert str(RuleInvocation("length_between", (1, 5))) == "length_between(1, 5)"
