"""Schema base classes with fluent builder API.

A schema is built by chaining builder calls, each of which appends one
constraint (or, for strings, one transform) and returns the schema itself.
Once built, the schema is a reusable validator:

    1. ``None`` fails immediately with ``NULL_VALUE``
    2. transforms run in the order they were added
    3. every constraint is checked against the transformed value
    4. the result is a ``Success`` with the transformed value, or a
       ``Failure`` listing every violation in declaration order
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, Self, TypeVar

from .codes import ErrorCode
from .constraints import Constraint, ConstraintList, TransformPipeline
from .result import ValidationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

NULL_VALUE_MESSAGE = "Value cannot be null"


class Schema(ABC, Generic[T]):
    """Anything that can validate a value of type ``T``."""

    @abstractmethod
    def validate(self, value: T | None) -> ValidationResult[T]:
        """Validate a value.

        Args:
            value: Value to validate

        Returns:
            ValidationResult with the validated value or the errors found
        """


class BaseSchema(Schema[T]):
    """Shared constraint/transform pipeline for the concrete schemas.

    Subclasses expose typed builder methods that call ``_constrain`` or
    ``_transform``; both return ``self`` so chained calls keep the
    subclass type.
    """

    def __init__(self) -> None:
        self._constraints: ConstraintList[T] = ConstraintList()
        self._transforms: TransformPipeline[T] = TransformPipeline()

    @property
    def constraints(self) -> ConstraintList[T]:
        """Constraints in the order they will be evaluated."""
        return self._constraints

    def _constrain(self, predicate: Callable[[T], bool], message: str, code: str) -> Self:
        self._constraints.add(Constraint(predicate, message, code))
        return self

    def _transform(self, transform: Callable[[T], T]) -> Self:
        self._transforms.add(transform)
        return self

    def refine(self, predicate: Callable[[T], bool], message: str, code: str) -> Self:
        """Add a caller-defined constraint (fluent API).

        Args:
            predicate: Returns True when the value is acceptable
            message: Error message reported on violation
            code: Error code reported on violation

        Returns:
            Self for chaining
        """
        return self._constrain(predicate, message, code)

    def validate(self, value: T | None) -> ValidationResult[T]:
        """Validate a value against this schema.

        Args:
            value: Value to validate

        Returns:
            ValidationResult with the transformed value or every violation
        """
        if value is None:
            return ValidationResult.failure(NULL_VALUE_MESSAGE, ErrorCode.NULL_VALUE)

        transformed = self._transforms.apply(value)

        errors = self._constraints.evaluate(transformed)
        if errors:
            logger.debug(
                "%s rejected value with %d error(s): %s",
                type(self).__name__,
                len(errors),
                ", ".join(error.code for error in errors),
            )
            return ValidationResult.failure(errors)
        return ValidationResult.success(transformed)
