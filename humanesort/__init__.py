"""
humanesort - sort strings the way humans expect.

Runs of digits inside strings compare by numeric value, so
"something-2" sorts before "something-11":

    >>> from humanesort import humane_sorted
    >>> humane_sorted(["something-11", "something-1", "something-2"])
    ['something-1', 'something-2', 'something-11']
"""

from humanesort.classifiers import (
    DEFAULT_CLASSIFIER,
    Classifier,
    ClassifierRegistry,
    TokenKind,
    ascii_digit,
    unicode_decimal,
)
from humanesort.config import SortOptions
from humanesort.errors import HumaneSortError, UnknownClassifierError, UnsupportedValueError
from humanesort.ordering import HumaneKey, Ordering, compare_digits, humane_cmp, humane_key
from humanesort.sorting import humane_sort, humane_sorted
from humanesort.tokens import Token, TokenIterator, tokenize

__all__ = [
    "DEFAULT_CLASSIFIER",
    "Classifier",
    "ClassifierRegistry",
    "HumaneKey",
    "HumaneSortError",
    "Ordering",
    "SortOptions",
    "Token",
    "TokenIterator",
    "TokenKind",
    "UnknownClassifierError",
    "UnsupportedValueError",
    "ascii_digit",
    "compare_digits",
    "humane_cmp",
    "humane_key",
    "humane_sort",
    "humane_sorted",
    "tokenize",
    "unicode_decimal",
]
