"""
Tokenization: split raw text into word-like tokens.
"""

from __future__ import annotations

from typing import List

from nltk.tokenize import RegexpTokenizer


class WordTokenizer:
    """Split text on runs of non-word characters.

    Apostrophes split contractions ("don't" -> "don", "t"); the normalizer's
    stop word list carries the resulting fragments.
    """

    def __init__(self, pattern: str = r"\w+") -> None:
        self._tokenizer = RegexpTokenizer(pattern)

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        return self._tokenizer.tokenize(text)
