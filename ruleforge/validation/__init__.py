"""Declarative Validation Engine

A schema maps field names to rule specs. The compiler turns each spec into
an ordered chain of FieldValidators using a rule registry; the executor runs
the chains against input and returns either the sanitized output or an error
map of opaque codes.

Key Features:
- Rule registry with a process-wide default and per-validator copies
- Aliased rules composed from other rules, with optional fixed error codes
- Schema normalization of the shorthand spec forms
- Recursive compilation of nested objects and lists
- Per-field short-circuit, cross-field rules on a pre-mutation snapshot
- Optional auto-trim installed as an ordinary rule

Usage:
    from ruleforge.validation import Validator, Ok, Err

    validator = Validator({
        "email": ["required", "email"],
        "address": {"nested_object": {"zip": "required"}},
    })

    result = validator.validate(payload)
    if result.is_err():
        return result.unwrap_err()   # {"address": {"zip": "REQUIRED"}}
    user = result.unwrap()
"""
from ruleforge.core.errors import Err, Ok, Result

from .types import (
    CompiledValidator,
    ErrorValue,
    FieldChain,
    FieldOutput,
    FieldValidator,
    RuleBuilder,
    RuleInvocation,
    is_no_value,
)
from .registry import RuleRegistry, get_default_registry, reset_default_registry
from .normalizer import normalize
from .compiler import compile_field, compile_schema
from .executor import ChainOutcome, execute, run_chain
from .aliases import AliasDefinition, alias_builder, parse_alias, register_alias
from .errors import count_errors, error_codes, flatten_errors, format_path, iter_errors
from .validator import (
    Validator,
    get_default_auto_trim,
    get_default_rules,
    register_aliased_default_rule,
    register_default_rules,
    set_default_auto_trim,
)

__all__ = [
    # Result
    "Result",
    "Ok",
    "Err",
    # Types
    "CompiledValidator",
    "ErrorValue",
    "FieldChain",
    "FieldOutput",
    "FieldValidator",
    "RuleBuilder",
    "RuleInvocation",
    "is_no_value",
    # Registry
    "RuleRegistry",
    "get_default_registry",
    "reset_default_registry",
    # Normalizer / compiler / executor
    "normalize",
    "compile_field",
    "compile_schema",
    "ChainOutcome",
    "execute",
    "run_chain",
    # Aliases
    "AliasDefinition",
    "alias_builder",
    "parse_alias",
    "register_alias",
    # Error maps
    "count_errors",
    "error_codes",
    "flatten_errors",
    "format_path",
    "iter_errors",
    # Public surface
    "Validator",
    "get_default_auto_trim",
    "get_default_rules",
    "register_aliased_default_rule",
    "register_default_rules",
    "set_default_auto_trim",
]
