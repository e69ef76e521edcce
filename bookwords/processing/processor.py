"""
Word processing pipeline: batched concurrent lemmatization and frequency ranking.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

from bookwords.core.constants import DEFAULT_MIN_FREQUENCY
from bookwords.core.models import ProcessorConfig, RankedEntry
from bookwords.known_words import KnownWordStore
from bookwords.processing.cache import LemmaCache
from bookwords.processing.frequency import FrequencyTable, rank_entries
from bookwords.processing.lemmatizer import LemmaResolver
from bookwords.processing.lexicon import LexicalDatabase, PorterStemmerFallback
from bookwords.processing.normalize import WordNormalizer
from bookwords.processing.tokenize import WordTokenizer

logger = logging.getLogger(__name__)


class WordProcessor:
    """Count lemma frequencies across one or more texts.

    Each call to `process_text` adds to the same frequency table and lemma
    cache. Known words are checked twice: on the normalized surface form and
    again on the resolved lemma, since lemmatization can turn an unknown form
    into a known base word.
    """

    def __init__(
        self,
        config: Optional[ProcessorConfig] = None,
        known_words: Optional[Iterable[str]] = None,
        database: Optional[LexicalDatabase] = None,
        stemmer: Optional[PorterStemmerFallback] = None,
        tokenizer: Optional[WordTokenizer] = None,
        lemma_cache: Optional[LemmaCache] = None,
    ) -> None:
        self.config = config or ProcessorConfig()
        self.exclude_known_words = self.config.exclude_known_words

        if not self.exclude_known_words:
            self.known_words = frozenset()
        elif known_words is not None:
            self.known_words = frozenset(word.lower() for word in known_words)
        elif self.config.known_words_path is not None:
            self.known_words = frozenset(KnownWordStore(self.config.known_words_path).load())
        else:
            self.known_words = frozenset()

        self.tokenizer = tokenizer or WordTokenizer()
        self.normalizer = WordNormalizer(
            known_words=self.known_words,
            exclude_known_words=self.exclude_known_words,
            min_length=self.config.min_word_length,
        )
        self.resolver = LemmaResolver(
            database=database,
            stemmer=stemmer,
            cache=lemma_cache,
            download=self.config.download_wordnet,
        )
        self.frequencies = FrequencyTable()

    @property
    def lemma_cache(self) -> LemmaCache:
        return self.resolver.cache

    async def _process_token(self, token: str) -> None:
        normalized = self.normalizer.normalize(token)
        if normalized is None:
            return
        lemma = await self.resolver.resolve(normalized)
        if self.normalizer.is_known(lemma):
            return
        self.frequencies.increment(lemma)

    async def process_text(self, text: str) -> None:
        """
        Tokenize, normalize, lemmatize and count the words of `text`.

        Tokens are handled in fixed-size batches. Tokens within a batch are
        resolved concurrently; each batch completes before the next starts.
        A token that fails is logged and skipped.

        Args:
            text: Raw natural-language text
        """
        tokens = self.tokenizer.tokenize(text)
        batch_size = self.config.batch_size

        for start in range(0, len(tokens), batch_size):
            batch = tokens[start : start + batch_size]
            results = await asyncio.gather(
                *(self._process_token(token) for token in batch),
                return_exceptions=True,
            )
            for token, result in zip(batch, results):
                if isinstance(result, Exception):
                    logger.warning("Skipping token %r: %s", token, result)

        logger.debug(
            "Processed %d tokens; %d unique lemmas so far",
            len(tokens),
            len(self.frequencies),
        )
        logger.debug("Lemma cache: %s", self.lemma_cache.get_stats())

    def sorted_words(self, min_frequency: int = DEFAULT_MIN_FREQUENCY) -> List[RankedEntry]:
        """
        Get lemmas ranked by frequency.

        Args:
            min_frequency: Minimum count to include (values below 1 act as 1)

        Returns:
            Entries sorted by count descending, ties broken alphabetically
        """
        return rank_entries(self.frequencies.snapshot().items(), min_frequency)

    def total_word_count(self) -> int:
        return self.frequencies.total()
