"""
Bookwords: vocabulary and frequency extraction for long-form English text.

This package normalizes and lemmatizes the words of a book, counts lemma
frequencies in concurrent batches, and produces ranked word lists for review.
"""

from bookwords.core.models import ProcessorConfig, RankedEntry
from bookwords.processing.processor import WordProcessor

__version__ = "0.1.0"

__all__ = ["ProcessorConfig", "RankedEntry", "WordProcessor"]
