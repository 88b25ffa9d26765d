"""Exceptions for the schema package.

These signal misuse of the API, never bad input data. Bad input is always
reported through a ``ValidationResult`` failure; the exceptions below are
raised only when a caller breaks a contract of the library itself.

Example:
    ```python
    from dataknobs_schema import ValidationResult
    from dataknobs_schema.exceptions import FailedResultAccessError

    result = ValidationResult.failure("Value must be positive", "NOT_POSITIVE")
    try:
        result.get_value()
    except FailedResultAccessError as e:
        print(e.context["errors"])
    ```
"""

from __future__ import annotations

from typing import Any

from dataknobs_common.exceptions import ConfigurationError, DataknobsError


class SchemaError(DataknobsError):
    """Base exception for the schema package."""

    pass


class EmptyFailureError(SchemaError, ValueError):
    """Raised when a failed result is constructed without any errors.

    A failure must always describe at least one violation.
    """

    def __init__(self, message: str = "Failure must have at least one error"):
        super().__init__(message)


class FailedResultAccessError(SchemaError, RuntimeError):
    """Raised when the value of a failed result is requested.

    Callers must check ``is_success()`` before calling ``get_value()``.
    The offending errors are available in ``context["errors"]``.
    """

    def __init__(self, errors: tuple[Any, ...]):
        rendered = ", ".join(str(error) for error in errors)
        super().__init__(
            f"Cannot get value from a failed validation. Errors: [{rendered}]",
            context={"errors": list(errors)},
        )
        self.errors = errors


class SchemaConfigurationError(ConfigurationError):
    """Raised when a schema cannot be built from configuration."""

    pass


__all__ = [
    "SchemaError",
    "EmptyFailureError",
    "FailedResultAccessError",
    "SchemaConfigurationError",
]
