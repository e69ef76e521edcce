"""
Lexical database and stemmer backends used for lemma resolution.

WordNet (through NLTK) supplies dictionary base forms; the Porter stemmer is
the rule-based fallback for words WordNet does not know.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, List, Optional, Sequence

import nltk
from nltk.stem import PorterStemmer

from bookwords.core.constants import ERROR_WORDNET_UNAVAILABLE

logger = logging.getLogger(__name__)

# NLTK data required by WordNetDatabase.
_WORDNET_RESOURCE = ("corpora/wordnet", "wordnet")


class LexicalDatabase:
    """Interface for dictionary backends.

    `lookup` returns candidate base forms for a lowercase word, most relevant
    first, or an empty list when the word is unknown.
    """

    async def lookup(self, word: str) -> List[str]:
        raise NotImplementedError


class WordNetDatabase(LexicalDatabase):
    """WordNet-backed base form lookup.

    Candidates are the `morphy` base forms for noun, verb, adjective and
    adverb, in WordNet's own part-of-speech order. Lookups run on a worker
    thread so a batch of them can overlap.
    """

    def __init__(self, download: bool = True) -> None:
        self._download = download
        self._wordnet: Optional[Any] = None
        self._unavailable = False
        self._load_lock = threading.Lock()

    def _ensure_resource(self) -> None:
        path, name = _WORDNET_RESOURCE
        try:
            nltk.data.find(path)
        except LookupError:
            if self._download:
                logger.info("Downloading NLTK resource %s", name)
                nltk.download(name, quiet=True)

    def _reader(self) -> Any:
        if self._wordnet is not None:
            return self._wordnet
        with self._load_lock:
            if self._unavailable:
                raise LookupError(ERROR_WORDNET_UNAVAILABLE)
            if self._wordnet is None:
                self._ensure_resource()
                from nltk.corpus import wordnet

                try:
                    # Force the lazy corpus loader while holding the lock.
                    wordnet.get_version()
                except LookupError as exc:
                    self._unavailable = True
                    logger.warning("%s Falling back to the Porter stemmer.", ERROR_WORDNET_UNAVAILABLE)
                    raise LookupError(ERROR_WORDNET_UNAVAILABLE) from exc
                self._wordnet = wordnet
        return self._wordnet

    def lookup_sync(self, word: str) -> List[str]:
        """Blocking variant of `lookup`."""
        wordnet = self._reader()
        candidates: List[str] = []
        for pos in (wordnet.NOUN, wordnet.VERB, wordnet.ADJ, wordnet.ADV):
            base = wordnet.morphy(word, pos)
            if base and base not in candidates:
                candidates.append(base)
        return candidates

    async def lookup(self, word: str) -> List[str]:
        return await asyncio.to_thread(self.lookup_sync, word)


class StaticLexicalDatabase(LexicalDatabase):
    """Dictionary backed by an in-memory mapping of word to base forms."""

    def __init__(self, entries: Optional[dict] = None) -> None:
        self.entries = {word: list(forms) for word, forms in (entries or {}).items()}

    async def lookup(self, word: str) -> List[str]:
        return list(self.entries.get(word, []))


class PorterStemmerFallback:
    """Porter suffix stripping in the original algorithm's mode."""

    def __init__(self) -> None:
        self._stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)

    def stem(self, word: str) -> str:
        if not word:
            return word
        return self._stemmer.stem(word) or word


def first_candidate(candidates: Sequence[str]) -> Optional[str]:
    """Return the first non-empty candidate, if any."""
    for candidate in candidates or ():
        if candidate:
            return candidate
    return None
