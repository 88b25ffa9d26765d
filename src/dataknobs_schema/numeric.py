"""Numeric schemas.

One ``NumberSchema`` engine serves every numeric type. The per-type
semantics (sign tests and multiple-of checks) live in a small
``NumericKind`` strategy record, so ``IntSchema``, ``LongSchema`` and
``DoubleSchema`` only choose which kind they use.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .codes import ErrorCode
from .schema import BaseSchema

N = TypeVar("N", int, float)

# Tolerance for floating point multiple-of checks. Fixed for compatibility;
# values or divisors far from unit scale may be misclassified.
DOUBLE_EPSILON = 1e-10


@dataclass(frozen=True)
class NumericKind(Generic[N]):
    """Type-specific numeric predicates used by ``NumberSchema``.

    Attributes:
        name: Name of the numeric type, e.g. ``"int"``
        is_positive: True when the value is strictly greater than zero
        is_negative: True when the value is strictly less than zero
        is_multiple_of: True when the value is a multiple of the divisor
        bits: Width of the integral type, None for floating point
    """

    name: str
    is_positive: Callable[[N], bool]
    is_negative: Callable[[N], bool]
    is_multiple_of: Callable[[N, N], bool]
    bits: int | None = None


def _integral_multiple_of(value: int, divisor: int) -> bool:
    # A zero divisor is "not a multiple", never a ZeroDivisionError
    return divisor != 0 and value % divisor == 0


def _double_multiple_of(value: float, divisor: float) -> bool:
    if divisor == 0.0:
        return False
    # fmod keeps the sign of the dividend
    remainder = math.fmod(value, divisor)
    return abs(remainder) < DOUBLE_EPSILON or abs(remainder - divisor) < DOUBLE_EPSILON


INT: NumericKind[int] = NumericKind(
    name="int",
    is_positive=lambda value: value > 0,
    is_negative=lambda value: value < 0,
    is_multiple_of=_integral_multiple_of,
    bits=32,
)

LONG: NumericKind[int] = NumericKind(
    name="long",
    is_positive=lambda value: value > 0,
    is_negative=lambda value: value < 0,
    is_multiple_of=_integral_multiple_of,
    bits=64,
)

DOUBLE: NumericKind[float] = NumericKind(
    name="double",
    is_positive=lambda value: value > 0.0,
    is_negative=lambda value: value < 0.0,
    is_multiple_of=_double_multiple_of,
)


class NumberSchema(BaseSchema[N]):
    """Schema for numeric values with min, max, sign and multiple-of constraints.

    Example:
        ```python
        schema = NumberSchema(INT).min(0).max(120)
        schema.validate(42).is_success()
        # True
        ```
    """

    kind: NumericKind = INT

    def __init__(self, kind: NumericKind[N] | None = None) -> None:
        """Initialize an empty numeric schema.

        Args:
            kind: Numeric semantics to use; defaults to the class ``kind``
        """
        super().__init__()
        if kind is not None:
            self.kind = kind

    def min(self, min_value: N) -> Self:
        """Minimum value constraint (inclusive).

        Args:
            min_value: Smallest accepted value

        Returns:
            Self for chaining
        """
        return self._constrain(
            lambda value: not value < min_value,
            f"Value must be at least {min_value}",
            ErrorCode.NUMBER_TOO_SMALL,
        )

    def max(self, max_value: N) -> Self:
        """Maximum value constraint (inclusive).

        Args:
            max_value: Largest accepted value

        Returns:
            Self for chaining
        """
        return self._constrain(
            lambda value: not value > max_value,
            f"Value must be at most {max_value}",
            ErrorCode.NUMBER_TOO_LARGE,
        )

    def positive(self) -> Self:
        """Positive number constraint (value > 0)."""
        return self._constrain(self.kind.is_positive, "Value must be positive", ErrorCode.NOT_POSITIVE)

    def negative(self) -> Self:
        """Negative number constraint (value < 0)."""
        return self._constrain(self.kind.is_negative, "Value must be negative", ErrorCode.NOT_NEGATIVE)

    def multiple_of(self, divisor: N) -> Self:
        """Multiple-of constraint.

        A zero divisor is accepted but no value is ever a multiple of it.

        Args:
            divisor: Value must be an exact multiple of this

        Returns:
            Self for chaining
        """
        is_multiple_of = self.kind.is_multiple_of
        return self._constrain(
            lambda value: is_multiple_of(value, divisor),
            f"Value must be a multiple of {divisor}",
            ErrorCode.NOT_MULTIPLE,
        )


class IntSchema(NumberSchema[int]):
    """Schema for 32-bit integer values."""

    kind = INT


class LongSchema(NumberSchema[int]):
    """Schema for 64-bit integer values."""

    kind = LONG


class DoubleSchema(NumberSchema[float]):
    """Schema for double-precision floating point values."""

    kind = DOUBLE
