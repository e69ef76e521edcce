"""
Processing Package.

Tokenization, normalization, lemma resolution and frequency aggregation.
"""

from bookwords.processing.cache import LemmaCache
from bookwords.processing.frequency import FrequencyTable, rank_entries
from bookwords.processing.lemmatizer import LemmaResolver
from bookwords.processing.lexicon import (
    LexicalDatabase,
    PorterStemmerFallback,
    StaticLexicalDatabase,
    WordNetDatabase,
)
from bookwords.processing.normalize import WordNormalizer
from bookwords.processing.processor import WordProcessor
from bookwords.processing.tokenize import WordTokenizer

__all__ = [
    "FrequencyTable",
    "LemmaCache",
    "LemmaResolver",
    "LexicalDatabase",
    "PorterStemmerFallback",
    "StaticLexicalDatabase",
    "WordNetDatabase",
    "WordNormalizer",
    "WordProcessor",
    "WordTokenizer",
    "rank_entries",
]
