"""Machine-readable error codes reported by the built-in constraints."""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Closed vocabulary of built-in error codes.

    Members are plain strings, so ``error.code == "NULL_VALUE"`` and
    ``error.code == ErrorCode.NULL_VALUE`` are equivalent.
    """

    NULL_VALUE = "NULL_VALUE"
    NOT_TRUE = "NOT_TRUE"
    NOT_FALSE = "NOT_FALSE"
    NUMBER_TOO_SMALL = "NUMBER_TOO_SMALL"
    NUMBER_TOO_LARGE = "NUMBER_TOO_LARGE"
    NOT_POSITIVE = "NOT_POSITIVE"
    NOT_NEGATIVE = "NOT_NEGATIVE"
    NOT_MULTIPLE = "NOT_MULTIPLE"
    STRING_TOO_SHORT = "STRING_TOO_SHORT"
    STRING_TOO_LONG = "STRING_TOO_LONG"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_UUID = "INVALID_UUID"
    REGEX_MISMATCH = "REGEX_MISMATCH"
