"""Boolean schema."""

from __future__ import annotations

from typing import Self

from .codes import ErrorCode
from .schema import BaseSchema


class BooleanSchema(BaseSchema[bool]):
    """Schema for boolean values, supporting ``is_true`` and ``is_false``."""

    def is_true(self) -> Self:
        """Require the value to be True."""
        return self._constrain(bool, "Value must be true", ErrorCode.NOT_TRUE)

    def is_false(self) -> Self:
        """Require the value to be False."""
        return self._constrain(lambda value: not value, "Value must be false", ErrorCode.NOT_FALSE)
