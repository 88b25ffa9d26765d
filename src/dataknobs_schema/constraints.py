"""Constraint and transform lists shared by every schema.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from .result import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Constraint(Generic[T]):
    """A named predicate; a value failing it yields one error.

    Attributes:
        predicate: Returns True when the value satisfies the constraint
        message: Human-readable message reported on violation
        code: Machine-readable error code reported on violation
    """

    predicate: Callable[[T], bool]
    message: str
    code: str

    def test(self, value: T) -> bool:
        """Return True if ``value`` satisfies this constraint."""
        return bool(self.predicate(value))

    def to_error(self) -> ValidationError:
        """Build the root-level error reported when this constraint fails."""
        return ValidationError.of(self.message, self.code)


class ConstraintList(Generic[T]):
    """Ordered, append-only list of constraints.

    Evaluation never stops early: every failing constraint contributes one
    error, in declaration order, so callers see all violations at once.
    """

    def __init__(self) -> None:
        self._constraints: list[Constraint[T]] = []

    def add(self, constraint: Constraint[T]) -> None:
        """Append a constraint.

        Args:
            constraint: Constraint to evaluate after those already added
        """
        self._constraints.append(constraint)

    def evaluate(self, value: T) -> list[ValidationError]:
        """Check ``value`` against every constraint.

        Args:
            value: Value to check

        Returns:
            One error per failing constraint, in declaration order; empty
            when all constraints hold
        """
        errors = []
        for constraint in self._constraints:
            if not constraint.test(value):
                errors.append(constraint.to_error())
                # Continue checking to collect all errors
        return errors

    def __len__(self) -> int:
        return len(self._constraints)

    def __iter__(self) -> Iterator[Constraint[T]]:
        return iter(self._constraints)


class TransformPipeline(Generic[T]):
    """Ordered, append-only list of pure value rewrites."""

    def __init__(self) -> None:
        self._transforms: list[Callable[[T], T]] = []

    def add(self, transform: Callable[[T], T]) -> None:
        """Append a transform to run after those already added."""
        self._transforms.append(transform)

    def apply(self, value: T) -> T:
        """Run every transform over ``value`` in declaration order."""
        for transform in self._transforms:
            value = transform(value)
        return value

    def __len__(self) -> int:
        return len(self._transforms)
