"""
Tokenizer splitting text into numeric and non-numeric runs.

Text is walked one user-perceived character (extended grapheme cluster)
at a time, so a base letter with combining marks or an emoji sequence is
never split across tokens. Consecutive graphemes of the same kind merge
into one maximal token.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import regex

from humanesort.classifiers import Classifier, TokenKind, ascii_digit

_GRAPHEME_RE = regex.compile(r"\X")


@dataclass(frozen=True)
class Token:
    """A classified span of a source string.

    The token keeps a reference to the source and the span offsets;
    the text is sliced only when asked for.

    Attributes:
        source: The full string the token was cut from.
        start: Code point offset where the span begins.
        end: Code point offset one past the span's last character.
        kind: Classification of every grapheme in the span.
    """

    source: str
    start: int
    end: int
    kind: TokenKind

    @property
    def text(self) -> str:
        """The characters covered by this token."""
        return self.source[self.start : self.end]

    @property
    def is_numeric(self) -> bool:
        return self.kind == TokenKind.NUMERIC

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Token({self.text!r}, {self.kind.value}, {self.start}:{self.end})"


class TokenIterator(Iterator[Token]):
    """
    Lazy, single-pass iterator over the tokens of a string.

    Keeps one grapheme of lookahead. The kind of the lookahead grapheme
    is cached so each grapheme is classified exactly once.

    Args:
        text: String to tokenize. Must not change while iterating.
        classifier: Grapheme classifier. Defaults to ascii_digit.

    Example::

        for token in TokenIterator("file-12.txt"):
            print(token.text, token.kind)
    """

    def __init__(self, text: str, classifier: Classifier | None = None) -> None:
        self._text = text
        self._classify = classifier or ascii_digit
        self._graphemes = _GRAPHEME_RE.finditer(text)
        self._peeked: tuple[int, TokenKind] | None = self._advance()

    def _advance(self) -> tuple[int, TokenKind] | None:
        """Pull the next grapheme as (start offset, kind), or None at the end."""
        match = next(self._graphemes, None)
        if match is None:
            return None
        return match.start(), self._classify(match.group())

    def __iter__(self) -> TokenIterator:
        return self

    def __next__(self) -> Token:
        if self._peeked is None:
            raise StopIteration

        start, kind = self._peeked
        while True:
            self._peeked = self._advance()
            if self._peeked is None:
                return Token(self._text, start, len(self._text), kind)
            next_start, next_kind = self._peeked
            if next_kind != kind:
                return Token(self._text, start, next_start, kind)


def tokenize(text: str, classifier: Classifier | None = None) -> TokenIterator:
    """Tokenize *text* into maximal numeric and non-numeric runs.

    Args:
        text: String to split.
        classifier: Grapheme classifier. Defaults to ascii_digit.

    Returns:
        A lazy TokenIterator. An empty string yields no tokens.
    """
    return TokenIterator(text, classifier)
