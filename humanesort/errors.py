"""Exceptions raised by humanesort.

Comparison itself never fails for string input. These errors only
surface at the boundary: values that cannot be viewed as text, and
lookups of classifiers that were never registered.
"""

from __future__ import annotations

from typing import Any


class HumaneSortError(Exception):
    """Base exception for humanesort errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "type": type(self).__name__,
            "details": self.details,
        }


class UnsupportedValueError(HumaneSortError, TypeError):
    """Raised when a value cannot be viewed as a string.

    Attributes:
        value_type: Name of the rejected value's type.
    """

    def __init__(self, value: object) -> None:
        self.value_type = type(value).__name__
        super().__init__(
            f"Cannot order value of type {self.value_type!r}",
            details="Expected str, bytes or an os.PathLike object.",
        )


class UnknownClassifierError(HumaneSortError, KeyError):
    """Raised when a classifier name is not registered.

    Attributes:
        name: The requested classifier name.
    """

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        super().__init__(
            f"Unknown classifier: {name!r}",
            details=f"Available classifiers: {', '.join(available)}",
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
