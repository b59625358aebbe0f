"""Tests for SortOptions configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from humanesort.classifiers import DEFAULT_CLASSIFIER, ascii_digit, unicode_decimal
from humanesort.config import SortOptions


class TestSortOptions:
    """Tests for SortOptions validation."""

    def test_defaults(self) -> None:
        opts = SortOptions()
        assert opts.classifier == DEFAULT_CLASSIFIER == "ascii_digit"
        assert opts.reverse is False
        assert opts.resolve_classifier() is ascii_digit

    def test_named_classifier(self) -> None:
        opts = SortOptions(classifier="unicode_decimal", reverse=True)
        assert opts.resolve_classifier() is unicode_decimal
        assert opts.reverse is True

    def test_unknown_classifier_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown classifier"):
            SortOptions(classifier="roman_numerals")

    def test_empty_classifier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SortOptions(classifier="")

    def test_frozen(self) -> None:
        opts = SortOptions()
        with pytest.raises(ValidationError):
            opts.reverse = True  # type: ignore[misc]

    def test_from_dict(self) -> None:
        opts = SortOptions.model_validate({"classifier": "unicode_decimal"})
        assert opts.classifier == "unicode_decimal"
        assert opts.model_dump() == {"classifier": "unicode_decimal", "reverse": False}

    def test_registered_custom_classifier(self, vowel_classifier) -> None:
        opts = SortOptions(classifier="test_vowels")
        assert opts.resolve_classifier() is vowel_classifier
