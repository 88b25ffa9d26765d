"""String schema with normalizing transforms and format constraints.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import Self

from .codes import ErrorCode
from .schema import BaseSchema

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class StringSchema(BaseSchema[str]):
    """Schema for validating and transforming strings.

    Transforms (``trim``, ``to_lower_case``, ``to_upper_case``) always run
    before any constraint, in the order they were added, however they are
    interleaved with constraint calls. ``trim().min(3)`` and
    ``min(3).trim()`` both check the trimmed length.

    Example:
        ```python
        schema = StringSchema().trim().to_lower_case().email()
        schema.validate("  Alice@Example.COM ").get_value()
        # 'alice@example.com'
        ```
    """

    # ==================== Constraints ====================

    def min(self, min_length: int) -> Self:
        """Minimum length constraint (inclusive).

        Args:
            min_length: Fewest characters accepted

        Returns:
            Self for chaining
        """
        return self._constrain(
            lambda value: len(value) >= min_length,
            f"String must be at least {min_length} characters",
            ErrorCode.STRING_TOO_SHORT,
        )

    def max(self, max_length: int) -> Self:
        """Maximum length constraint (inclusive).

        Args:
            max_length: Most characters accepted

        Returns:
            Self for chaining
        """
        return self._constrain(
            lambda value: len(value) <= max_length,
            f"String must be at most {max_length} characters",
            ErrorCode.STRING_TOO_LONG,
        )

    def email(self) -> Self:
        """Email format constraint."""
        return self._constrain(
            lambda value: EMAIL_PATTERN.fullmatch(value) is not None,
            "Invalid email format",
            ErrorCode.INVALID_EMAIL,
        )

    def uuid(self) -> Self:
        """UUID format constraint (8-4-4-4-12 hex digits, either case)."""
        return self._constrain(
            lambda value: UUID_PATTERN.fullmatch(value) is not None,
            "Invalid UUID format",
            ErrorCode.INVALID_UUID,
        )

    def regex(self, pattern: str | RegexPattern[str]) -> Self:
        """Custom pattern constraint; the whole string must match.

        Args:
            pattern: Regex pattern (string or compiled pattern). A string is
                compiled immediately, so an invalid pattern raises
                ``re.error`` here rather than during validation.

        Returns:
            Self for chaining
        """
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self._constrain(
            lambda value: regex.fullmatch(value) is not None,
            f"String does not match pattern: {regex.pattern}",
            ErrorCode.REGEX_MISMATCH,
        )

    # ==================== Transforms ====================

    def trim(self) -> Self:
        """Strip leading and trailing whitespace."""
        return self._transform(str.strip)

    def to_lower_case(self) -> Self:
        """Convert the string to lowercase."""
        return self._transform(str.lower)

    def to_upper_case(self) -> Self:
        """Convert the string to uppercase."""
        return self._transform(str.upper)
