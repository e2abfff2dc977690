"""Error codes returned by the built-in rules.

Codes are opaque tokens for callers to map to messages; they are never
human-readable text.
"""

REQUIRED = "REQUIRED"
CANNOT_BE_EMPTY = "CANNOT_BE_EMPTY"
FORMAT_ERROR = "FORMAT_ERROR"

# Strings
NOT_ALLOWED_VALUE = "NOT_ALLOWED_VALUE"
TOO_LONG = "TOO_LONG"
TOO_SHORT = "TOO_SHORT"
WRONG_FORMAT = "WRONG_FORMAT"

# Numbers
NOT_INTEGER = "NOT_INTEGER"
NOT_POSITIVE_INTEGER = "NOT_POSITIVE_INTEGER"
NOT_DECIMAL = "NOT_DECIMAL"
NOT_POSITIVE_DECIMAL = "NOT_POSITIVE_DECIMAL"
NOT_NUMBER = "NOT_NUMBER"
TOO_HIGH = "TOO_HIGH"
TOO_LOW = "TOO_LOW"

# Special formats
WRONG_EMAIL = "WRONG_EMAIL"
WRONG_URL = "WRONG_URL"
WRONG_DATE = "WRONG_DATE"
FIELDS_NOT_EQUAL = "FIELDS_NOT_EQUAL"
