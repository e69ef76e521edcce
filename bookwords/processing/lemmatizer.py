"""
Lemma resolution with dictionary lookup, stemmer fallback and caching.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

from bookwords.processing.cache import LemmaCache
from bookwords.processing.lexicon import (
    LexicalDatabase,
    PorterStemmerFallback,
    WordNetDatabase,
    first_candidate,
)

logger = logging.getLogger(__name__)


class LemmaResolver:
    """Resolve normalized words to lemmas.

    Strategy:
    1. Return the cached lemma if the word was seen before
    2. Ask the lexical database and take its first candidate
    3. Fall back to the stemmer when the database has no candidate or fails
    4. Cache the result, whichever path produced it

    Concurrent resolutions of the same unseen word share one lookup task, so
    the database sees each word at most once.
    """

    def __init__(
        self,
        database: Optional[LexicalDatabase] = None,
        stemmer: Optional[PorterStemmerFallback] = None,
        cache: Optional[LemmaCache] = None,
        download: bool = True,
    ) -> None:
        self.database = database if database is not None else WordNetDatabase(download=download)
        self.stemmer = stemmer if stemmer is not None else PorterStemmerFallback()
        self.cache = cache if cache is not None else LemmaCache()
        self._inflight: Dict[str, asyncio.Future] = {}

    async def resolve(self, word: str) -> str:
        """
        Resolve a normalized word to its lemma.

        Args:
            word: Normalized word

        Returns:
            The lemma; the word itself when nothing better is found
        """
        # Waiters on a pending lookup are not counted as cache misses.
        task = self._inflight.get(word)
        if task is not None:
            return await asyncio.shield(task)

        cached = self.cache.get(word)
        if cached is not None:
            return cached

        task = asyncio.ensure_future(self._resolve_uncached(word))
        self._inflight[word] = task
        task.add_done_callback(lambda _: self._inflight.pop(word, None))
        return await asyncio.shield(task)

    async def _resolve_uncached(self, word: str) -> str:
        try:
            candidates = await self.database.lookup(word)
        except Exception as exc:
            logger.debug("Dictionary lookup failed for %r: %s", word, exc)
            candidates = []

        lemma = first_candidate(candidates)
        if lemma is None:
            lemma = self.stemmer.stem(word) or word

        self.cache.set(word, lemma)
        return lemma
