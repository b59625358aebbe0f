"""Shared fixtures for humanesort tests."""

from __future__ import annotations

import pytest

from humanesort.classifiers import ClassifierRegistry, TokenKind

# Strings covering empty input, leading zeros, long digit runs,
# combining marks and mixed scripts.
CORPUS: list[str] = [
    "",
    "0",
    "00",
    "007",
    "7",
    "7a",
    "a",
    "a7",
    "a07",
    "a10",
    "a2",
    "a2b",
    "a2b1",
    "item-2",
    "item-11",
    "item-",
    "11LOL",
    "\u00e9",
    "\u00e92",
    "e\u0301",
    "\u0663",
    "1\u0301",
    "LOL11",
    "日本12",
    "日本3",
    "9" * 50,
    "1" + "0" * 5000,
    "x" + "9" * 5000 + "y",
]


@pytest.fixture
def corpus() -> list[str]:
    """A fixed set of awkward strings for pairwise property checks."""
    return list(CORPUS)


@pytest.fixture
def vowel_classifier():
    """Temporarily registered classifier treating vowels as NUMERIC."""

    @ClassifierRegistry.register("test_vowels")
    def vowels(grapheme: str) -> TokenKind:
        if grapheme and all(ch in "aeiou" for ch in grapheme):
            return TokenKind.NUMERIC
        return TokenKind.NON_NUMERIC

    yield vowels
    ClassifierRegistry.unregister("test_vowels")
