"""
Humane ordering of strings.

Two strings are compared token by token, in lockstep:

* A numeric run sorts before a non-numeric run.
* Two non-numeric runs compare by code point.
* Two numeric runs compare by value. Leading zeros are ignored, so
  "007" and "7" are equal and comparison moves on to the next pair.
* The side that runs out of tokens first is smaller. An empty string
  sorts before everything else.

The order is total: reflexive, antisymmetric and transitive for any
pair of strings.
"""

from __future__ import annotations

import os
import unicodedata
from enum import IntEnum
from typing import Any, Union

from humanesort.classifiers import Classifier, ClassifierRegistry, TokenKind, ascii_digit
from humanesort.errors import UnsupportedValueError
from humanesort.tokens import Token, TokenIterator

StringLike = Union[str, bytes, os.PathLike]


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        """Swap LESS and GREATER."""
        return Ordering(-self.value)

    @classmethod
    def from_int(cls, value: int) -> Ordering:
        """Map a cmp-style integer (negative, zero, positive) to an Ordering."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


def as_text(value: Any) -> str:
    """View a string-like value as str.

    Raises:
        UnsupportedValueError: If *value* is not str, bytes or os.PathLike.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, os.PathLike)):
        return os.fsdecode(value)
    raise UnsupportedValueError(value)


def _ascii_digit_for(ch: str) -> str:
    # Characters without a decimal value (from custom classifiers) stay as-is
    value = unicodedata.decimal(ch, None)
    return ch if value is None else str(value)


def _to_ascii_digits(digits: str) -> str:
    if digits.isascii():
        return digits
    return "".join(_ascii_digit_for(ch) for ch in digits)


def compare_digits(a: str, b: str) -> Ordering:
    """Compare two runs of decimal digits by numeric value.

    Never converts to int, so runs of any length compare correctly.
    Leading zeros are ignored. Characters without a decimal value, which
    only custom classifiers put into numeric runs, compare by code point.

    Args:
        a: A non-empty run of decimal digits.
        b: A non-empty run of decimal digits.

    Returns:
        Ordering of the two values.
    """
    a = _to_ascii_digits(a).lstrip("0")
    b = _to_ascii_digits(b).lstrip("0")
    if len(a) != len(b):
        return Ordering.LESS if len(a) < len(b) else Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    return Ordering.LESS if a < b else Ordering.GREATER


def _compare_tokens(ours: Token, theirs: Token) -> Ordering:
    if ours.kind != theirs.kind:
        return Ordering.LESS if ours.kind == TokenKind.NUMERIC else Ordering.GREATER
    if ours.kind == TokenKind.NUMERIC:
        return compare_digits(ours.text, theirs.text)
    ours_text, theirs_text = ours.text, theirs.text
    if ours_text == theirs_text:
        return Ordering.EQUAL
    return Ordering.LESS if ours_text < theirs_text else Ordering.GREATER


def resolve_classifier(classifier: Classifier | str | None) -> Classifier | None:
    """Look up *classifier* in the registry when given by name."""
    if isinstance(classifier, str):
        return ClassifierRegistry.get(classifier)
    return classifier


def humane_cmp(
    a: StringLike,
    b: StringLike,
    classifier: Classifier | str | None = None,
) -> Ordering:
    """Compare two strings in humane order.

    Args:
        a: Left value (str, bytes or os.PathLike).
        b: Right value (str, bytes or os.PathLike).
        classifier: Classifier or registered classifier name.
            Defaults to ascii_digit.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER.

    Raises:
        UnsupportedValueError: If either value is not string-like.
        UnknownClassifierError: If *classifier* names nothing registered.
    """
    classify = resolve_classifier(classifier)
    ours = TokenIterator(as_text(a), classify)
    theirs = TokenIterator(as_text(b), classify)
    while True:
        our_token = next(ours, None)
        their_token = next(theirs, None)
        if our_token is None and their_token is None:
            return Ordering.EQUAL
        if our_token is None:
            return Ordering.LESS
        if their_token is None:
            return Ordering.GREATER
        result = _compare_tokens(our_token, their_token)
        if result is not Ordering.EQUAL:
            return result


class HumaneKey:
    """
    Sort key wrapping a string-like value.

    Rich comparisons go through humane_cmp, so instances work with
    sorted(), min(), max(), bisect and heapq. Keys built with different
    classifiers do not order against each other; comparing them, or
    comparing a key with a value that is not string-like, raises
    TypeError the way mismatched built-in types do.

    Args:
        value: The value to wrap.
        classifier: Classifier or registered classifier name.
    """

    def __init__(self, value: StringLike, classifier: Classifier | str | None = None) -> None:
        self.value = value
        self._text = as_text(value)
        self._classifier = resolve_classifier(classifier) or ascii_digit

    def _cmp(self, other: object) -> Ordering | None:
        """Compare with *other*, or return None when the two are not comparable."""
        if isinstance(other, HumaneKey):
            if other._classifier is not self._classifier:
                return None
            return humane_cmp(self._text, other._text, self._classifier)
        if isinstance(other, (str, bytes, os.PathLike)):
            return humane_cmp(self._text, other, self._classifier)
        return None

    def __lt__(self, other: object) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result is Ordering.LESS

    def __le__(self, other: object) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result is not Ordering.LESS

    def __eq__(self, other: object) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result is Ordering.EQUAL

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HumaneKey({self.value!r})"


def humane_key(value: StringLike, classifier: Classifier | str | None = None) -> HumaneKey:
    """Build a HumaneKey, for use as ``sorted(items, key=humane_key)``."""
    return HumaneKey(value, classifier)
