"""Tests for the Result type, the error taxonomy and error map helpers."""

from __future__ import annotations

import pytest

from ruleforge.core.errors import (
    AppError,
    Err,
    ErrorCode,
    InvalidArgumentsError,
    Ok,
    SchemaError,
    UnknownRuleError,
    invalid_arguments,
    raise_error,
    schema_error,
    to_exception,
    unknown_rule,
)
from ruleforge.validation import compile_schema, count_errors, error_codes, flatten_errors, format_path


# =============================================================================
# Result
# =============================================================================


class TestResult:
    def test_ok(self):
        result = Ok({"a": 1})
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == {"a": 1}
        assert result.unwrap_or({}) == {"a": 1}
        assert result.map(len) == Ok(1)
        assert result.map_err(str) is result
        assert list(result) == [{"a": 1}]

    def test_err(self):
        result = Err({"a": "REQUIRED"})
        assert result.is_err() and not result.is_ok()
        assert result.unwrap_err() == {"a": "REQUIRED"}
        assert result.unwrap_or(None) is None
        assert result.map(len) is result
        assert result.map_err(len) == Err(1)
        assert list(result) == []

    def test_unwrap_wrong_variant(self):
        with pytest.raises(ValueError):
            Err("FORMAT_ERROR").unwrap()
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()

    def test_flat_map_and_match(self):
        halve = lambda n: Ok(n // 2) if n % 2 == 0 else Err("ODD")
        assert Ok(4).flat_map(halve) == Ok(2)
        assert Ok(3).flat_map(halve) == Err("ODD")
        assert Err("X").flat_map(halve) == Err("X")
        assert Ok(1).match(ok=lambda v: v + 1, err=lambda e: 0) == 2
        assert Err("X").match(ok=lambda v: v, err=lambda e: e.lower()) == "x"


# =============================================================================
# AppError and builders
# =============================================================================


class TestAppError:
    def test_str(self):
        error = AppError(code=ErrorCode.E1000_SCHEMA_GENERIC, message="bad schema", metadata={"rule": "x"})
        assert str(error) == "[E1000_SCHEMA_GENERIC] bad schema"

    def test_str_includes_origin(self):
        error = unknown_rule("nope", origin="email").unwrap_err()
        assert str(error) == "[E1001_UNKNOWN_RULE] Rule 'nope' is not registered (origin='email')"

    def test_exception_message_carries_origin(self, registry):
        with pytest.raises(InvalidArgumentsError, match=r"origin='name'"):
            compile_schema({"name": {"max_length": [1, 2]}}, registry)
        with pytest.raises(UnknownRuleError, match=r"origin='test'"):
            compile_schema({"name": "nope"}, registry)


class TestBuilders:
    def test_schema_error_drops_empty_metadata(self):
        error = schema_error("m", rule="x").unwrap_err()
        assert error.metadata == {"rule": "x"}

    def test_unknown_rule_lists_available(self):
        error = unknown_rule("nope", ["b", "a"], origin="test").unwrap_err()
        assert error.code is ErrorCode.E1001_UNKNOWN_RULE
        assert error.message == "Rule 'nope' is not registered. Available: a, b"
        assert error.metadata["rule"] == "nope"
        assert error.origin == "test"

    def test_invalid_arguments_keeps_cause(self):
        cause = ValueError("bad")
        error = invalid_arguments("max_length", (1, 2), "too many", cause=cause).unwrap_err()
        assert error.cause is cause
        assert error.metadata == {"rule": "max_length", "arg_count": 2}


class TestRaiseError:
    def test_maps_code_to_exception(self):
        with pytest.raises(UnknownRuleError) as exc_info:
            raise_error(unknown_rule("nope"))
        assert exc_info.value.rule == "nope"
        assert isinstance(exc_info.value, SchemaError)

    def test_chains_cause(self):
        cause = ValueError("bad")
        with pytest.raises(InvalidArgumentsError) as exc_info:
            raise_error(invalid_arguments("x", (), "bad", cause=cause))
        assert exc_info.value.__cause__ is cause

    def test_unmapped_code_is_base_class(self):
        exc = to_exception(AppError(code=ErrorCode.E1000_SCHEMA_GENERIC, message="m"))
        assert type(exc) is SchemaError
        assert exc.code is ErrorCode.E1000_SCHEMA_GENERIC


# =============================================================================
# Error map helpers
# =============================================================================


class TestErrorMaps:
    ERRORS = {
        "email": "WRONG_EMAIL",
        "address": {"zip": "REQUIRED"},
        "items": [None, {"qty": "TOO_LOW"}, "FORMAT_ERROR"],
    }

    def test_flatten(self):
        assert flatten_errors(self.ERRORS) == {
            "email": "WRONG_EMAIL",
            "address.zip": "REQUIRED",
            "items[1].qty": "TOO_LOW",
            "items[2]": "FORMAT_ERROR",
        }

    def test_flatten_scalar_and_none(self):
        assert flatten_errors("FORMAT_ERROR") == {"$": "FORMAT_ERROR"}
        assert flatten_errors(None) == {}

    def test_codes_and_count(self):
        assert error_codes(self.ERRORS) == {"WRONG_EMAIL", "REQUIRED", "TOO_LOW", "FORMAT_ERROR"}
        assert count_errors(self.ERRORS) == 4

    @pytest.mark.parametrize(
        "loc, expected",
        [((), "$"), (("a",), "a"), (("a", 0, "b"), "a[0].b"), ((0,), "[0]")],
    )
    def test_format_path(self, loc, expected):
        assert format_path(loc) == expected
