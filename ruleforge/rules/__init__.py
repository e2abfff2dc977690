"""Built-in Rule Catalog

Every entry is an ordinary RuleBuilder, registered in the default registry
the first time it is accessed. Nothing here is special to the engine: a
custom rule registered under the same name replaces the built-in.
"""
from .common import any_object, not_empty, not_empty_list, required
from .modifiers import default, leave_only, remove, to_lc, to_uc, trim
from .numeric import (
    decimal,
    integer,
    max_number,
    min_number,
    number_between,
    positive_decimal,
    positive_integer,
)
from .special import email, equal_to_field, iso_date, url
from .strings import (
    eq,
    length_between,
    length_equal,
    like,
    max_length,
    min_length,
    one_of,
    string,
)
from .structural import (
    list_of,
    list_of_different_objects,
    list_of_objects,
    nested_object,
    or_,
    variable_object,
)

BUILTIN_RULES = {
    # Common
    "required": required,
    "not_empty": not_empty,
    "not_empty_list": not_empty_list,
    "any_object": any_object,
    # Strings
    "string": string,
    "eq": eq,
    "one_of": one_of,
    "max_length": max_length,
    "min_length": min_length,
    "length_between": length_between,
    "length_equal": length_equal,
    "like": like,
    # Numbers
    "integer": integer,
    "positive_integer": positive_integer,
    "decimal": decimal,
    "positive_decimal": positive_decimal,
    "max_number": max_number,
    "min_number": min_number,
    "number_between": number_between,
    # Special
    "email": email,
    "url": url,
    "iso_date": iso_date,
    "equal_to_field": equal_to_field,
    # Structural
    "nested_object": nested_object,
    "variable_object": variable_object,
    "list_of": list_of,
    "list_of_objects": list_of_objects,
    "list_of_different_objects": list_of_different_objects,
    "or": or_,
    # Modifiers
    "trim": trim,
    "to_lc": to_lc,
    "to_uc": to_uc,
    "remove": remove,
    "leave_only": leave_only,
    "default": default,
}

__all__ = ["BUILTIN_RULES"]
