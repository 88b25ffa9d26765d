"""Validation result types.

Every schema returns a ``ValidationResult``: either a ``Success`` holding the
validated (and possibly transformed) value, or a ``Failure`` holding one or
more ``ValidationError`` records. Results compose with ``map`` and
``flat_map`` so dependent validations can be chained without manual
branching; a failure short-circuits the rest of the chain.

Example:
    ```python
    from dataknobs_schema import ValidationResult

    parsed = ValidationResult.success("42").map(int)
    checked = parsed.flat_map(lambda n: ValidationResult.success(n * 2))
    checked.get_value()
    # 84
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast, overload

from .exceptions import EmptyFailureError, FailedResultAccessError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class ValidationError:
    """A single violation found during validation.

    Attributes:
        path: Location of the invalid value, e.g. ``"user.address.city"``
            or ``"tags[0]"``. Empty at the root.
        message: Human-readable description of the violation
        code: Machine-readable error code, e.g. ``"STRING_TOO_SHORT"``
    """

    path: str
    message: str
    code: str

    @classmethod
    def of(cls, message: str, code: str) -> ValidationError:
        """Create a root-level error (empty path)."""
        return cls("", message, code)

    def with_path_prefix(self, prefix: str) -> ValidationError:
        """Return this error relocated under ``prefix``.

        Array index paths are joined without a separator, so ``"[0].name"``
        under ``"users"`` becomes ``"users[0].name"``, while ``"city"``
        under ``"address"`` becomes ``"address.city"``.

        Args:
            prefix: Path of the enclosing context

        Returns:
            A new error with the combined path, or this error when
            ``prefix`` is empty
        """
        if not self.path:
            return ValidationError(prefix, self.message, self.code)
        if not prefix:
            return self
        separator = "" if self.path.startswith("[") else "."
        return ValidationError(f"{prefix}{separator}{self.path}", self.message, self.code)

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message} ({self.code})"
        return f"{self.message} ({self.code})"


class ValidationResult(ABC, Generic[T]):
    """Outcome of a validation: a ``Success`` or a ``Failure``.

    Use the ``success`` and ``failure`` constructors rather than
    instantiating the subclasses directly.
    """

    @staticmethod
    def success(value: T) -> ValidationResult[T]:
        """Create a successful result wrapping ``value``."""
        return Success(value)

    @overload
    @staticmethod
    def failure(error: ValidationError, /) -> ValidationResult[Any]: ...

    @overload
    @staticmethod
    def failure(errors: Iterable[ValidationError], /) -> ValidationResult[Any]: ...

    @overload
    @staticmethod
    def failure(message: str, code: str, /) -> ValidationResult[Any]: ...

    @staticmethod
    def failure(
        errors: ValidationError | Iterable[ValidationError] | str,
        code: str | None = None,
        /,
    ) -> ValidationResult[Any]:
        """Create a failed result.

        Accepts a single error, a sequence of errors, or a message and code
        pair describing one root-level error.

        Raises:
            EmptyFailureError: If an empty error sequence is given
            TypeError: If a message is given without a code
        """
        if isinstance(errors, str):
            if code is None:
                raise TypeError("failure(message, code) requires an error code")
            return Failure((ValidationError.of(errors, code),))
        if isinstance(errors, ValidationError):
            return Failure((errors,))
        return Failure(tuple(errors))

    @abstractmethod
    def is_success(self) -> bool:
        """Return True if validation succeeded."""

    def is_failure(self) -> bool:
        """Return True if validation failed."""
        return not self.is_success()

    @abstractmethod
    def get_value(self) -> T:
        """Return the validated value.

        Raises:
            FailedResultAccessError: If this result is a failure
        """

    @abstractmethod
    def get_errors(self) -> tuple[ValidationError, ...]:
        """Return the errors, empty for a success."""

    @abstractmethod
    def map(self, mapper: Callable[[T], R]) -> ValidationResult[R]:
        """Transform a success value; a failure is returned unchanged."""

    @abstractmethod
    def flat_map(self, mapper: Callable[[T], ValidationResult[R]]) -> ValidationResult[R]:
        """Chain a dependent validation; only called on success."""

    def get_or_default(self, default: T) -> T:
        """Return the value on success, otherwise ``default``."""
        return self.get_value() if self.is_success() else default

    def with_path_prefix(self, prefix: str) -> ValidationResult[T]:
        """Relocate every error under ``prefix``; a success is unchanged."""
        if self.is_success():
            return self
        return Failure(tuple(error.with_path_prefix(prefix) for error in self.get_errors()))

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_success()


@dataclass(frozen=True)
class Success(ValidationResult[T]):
    """Successful result holding the validated value."""

    value: T

    def is_success(self) -> bool:
        return True

    def get_value(self) -> T:
        return self.value

    def get_errors(self) -> tuple[ValidationError, ...]:
        return ()

    def map(self, mapper: Callable[[T], R]) -> ValidationResult[R]:
        return Success(mapper(self.value))

    def flat_map(self, mapper: Callable[[T], ValidationResult[R]]) -> ValidationResult[R]:
        return mapper(self.value)


@dataclass(frozen=True)
class Failure(ValidationResult[T]):
    """Failed result holding at least one error, in the order found."""

    errors: tuple[ValidationError, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise EmptyFailureError()

    def is_success(self) -> bool:
        return False

    def get_value(self) -> T:
        raise FailedResultAccessError(self.errors)

    def get_errors(self) -> tuple[ValidationError, ...]:
        return self.errors

    def map(self, mapper: Callable[[T], R]) -> ValidationResult[R]:
        return cast(ValidationResult[R], self)

    def flat_map(self, mapper: Callable[[T], ValidationResult[R]]) -> ValidationResult[R]:
        return cast(ValidationResult[R], self)
