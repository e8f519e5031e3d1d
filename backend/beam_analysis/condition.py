"""Support conditions understood by the analyzers."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidConditionError


class Condition(Enum):
    """Beam support condition, keyed by its wire tag."""

    SIMPLY_SUPPORTED = "simply-supported"  # one span, pinned both ends
    TWO_SPAN_UNEQUAL = "two-span-unequal"  # continuous over three supports

    @classmethod
    def parse(cls, value: Condition | str) -> Condition:
        """Resolve a member or its tag; unknown tags raise InvalidConditionError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidConditionError(value) from None
