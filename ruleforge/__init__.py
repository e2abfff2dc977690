"""ruleforge: declarative, language-neutral data validation rules."""
from ruleforge.core.errors import (
    AliasDefinitionError,
    Err,
    InvalidArgumentsError,
    MalformedSchemaError,
    MalformedSpecError,
    Ok,
    Result,
    SchemaDepthError,
    SchemaError,
    UnknownRuleError,
)
from ruleforge.validation import (
    AliasDefinition,
    RuleRegistry,
    Validator,
    flatten_errors,
    get_default_rules,
    register_aliased_default_rule,
    register_default_rules,
    set_default_auto_trim,
)

__version__ = "0.1.0"

__all__ = [
    "Validator",
    "AliasDefinition",
    "RuleRegistry",
    "Result",
    "Ok",
    "Err",
    "SchemaError",
    "UnknownRuleError",
    "MalformedSpecError",
    "MalformedSchemaError",
    "InvalidArgumentsError",
    "SchemaDepthError",
    "AliasDefinitionError",
    "flatten_errors",
    "get_default_rules",
    "register_aliased_default_rule",
    "register_default_rules",
    "set_default_auto_trim",
]
