"""
Lexical normalization: case folding, punctuation stripping and word rejection.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Iterable, Optional

from bookwords.core.constants import MIN_WORD_LENGTH, STOP_WORDS

_PUNCTUATION_PATTERN = re.compile(r"[^\w\s]|_")
_WHITESPACE_PATTERN = re.compile(r"\s+")


class WordNormalizer:
    """Turn raw tokens into normalized words, or reject them.

    A token is rejected when, after lowercasing and stripping punctuation, it
    is empty, shorter than `min_length`, a stop word, or (when known-word
    exclusion is enabled) a known word.
    """

    def __init__(
        self,
        known_words: Optional[Iterable[str]] = None,
        exclude_known_words: bool = True,
        stop_words: AbstractSet[str] = STOP_WORDS,
        min_length: int = MIN_WORD_LENGTH,
    ) -> None:
        self.stop_words = frozenset(stop_words)
        self.known_words = frozenset(known_words or ())
        self.exclude_known_words = exclude_known_words
        self.min_length = min_length

    @staticmethod
    def clean(token: str) -> str:
        """Lowercase `token`, drop punctuation and collapse whitespace."""
        cleaned = _PUNCTUATION_PATTERN.sub("", token.lower())
        return _WHITESPACE_PATTERN.sub(" ", cleaned).strip()

    def is_known(self, word: str) -> bool:
        return self.exclude_known_words and word in self.known_words

    def normalize(self, token: str) -> Optional[str]:
        """
        Normalize a token.

        Args:
            token: Raw token from the tokenizer

        Returns:
            The normalized word, or None if the token is rejected
        """
        normalized = self.clean(token)
        if not normalized or len(normalized) < self.min_length:
            return None
        if normalized in self.stop_words:
            return None
        if self.is_known(normalized):
            return None
        return normalized
