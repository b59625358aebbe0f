"""
Token kind classification.

A classifier maps one user-perceived character (grapheme cluster) to a
TokenKind. The tokenizer takes the classifier as a parameter, so the
rule deciding what counts as part of a number is pluggable. Classifiers
register themselves with the ClassifierRegistry under a name so they
can be selected from configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import ClassVar, Protocol

from humanesort.errors import UnknownClassifierError

logger = logging.getLogger(__name__)

DEFAULT_CLASSIFIER = "ascii_digit"


class TokenKind(str, Enum):
    """Kind of a token span."""

    NUMERIC = "numeric"
    NON_NUMERIC = "non_numeric"


class Classifier(Protocol):
    """Protocol for grapheme classifiers."""

    def __call__(self, grapheme: str) -> TokenKind:
        """Classify a single grapheme cluster."""
        ...


class ClassifierRegistry:
    """
    Registry of named classifiers.

    Use this to look up a classifier by the name stored in SortOptions.
    """

    _classifiers: ClassVar[dict[str, Classifier]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[Classifier], Classifier]:
        """
        Register a classifier under *name*. Used as a decorator.

        @ClassifierRegistry.register("my_rule")
        def my_rule(grapheme: str) -> TokenKind:
            ...
        """

        def decorator(func: Classifier) -> Classifier:
            cls._classifiers[name] = func
            logger.debug("Registered classifier %r", name)
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> Classifier:
        """Get a classifier by name.

        Raises:
            UnknownClassifierError: If nothing is registered under *name*.
        """
        try:
            return cls._classifiers[name]
        except KeyError:
            raise UnknownClassifierError(name, cls.names()) from None

    @classmethod
    def names(cls) -> list[str]:
        """Get all registered classifier names, sorted."""
        return sorted(cls._classifiers)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._classifiers

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a classifier. Unknown names are ignored."""
        cls._classifiers.pop(name, None)


@ClassifierRegistry.register("ascii_digit")
def ascii_digit(grapheme: str) -> TokenKind:
    """NUMERIC when every code point of *grapheme* is 0-9.

    A digit carrying a combining mark is one grapheme containing a
    non-digit, so it is NON_NUMERIC.
    """
    if grapheme and all("0" <= ch <= "9" for ch in grapheme):
        return TokenKind.NUMERIC
    return TokenKind.NON_NUMERIC


@ClassifierRegistry.register("unicode_decimal")
def unicode_decimal(grapheme: str) -> TokenKind:
    """NUMERIC when every code point of *grapheme* is a Unicode decimal digit.

    Accepts Arabic-Indic, Devanagari, fullwidth and other decimal
    digits in addition to ASCII.
    """
    if grapheme.isdecimal():
        return TokenKind.NUMERIC
    return TokenKind.NON_NUMERIC
