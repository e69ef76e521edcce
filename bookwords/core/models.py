"""
Core domain models for the vocabulary pipeline.

Defines the processor configuration, ranked word entries, and the report
container written for downstream consumers.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from bookwords.core.constants import DEFAULT_BATCH_SIZE, MIN_WORD_LENGTH


class ProcessorConfig(BaseModel):
    """Configuration for a `WordProcessor`."""

    exclude_known_words: bool = True
    batch_size: int = Field(DEFAULT_BATCH_SIZE, gt=0)
    min_word_length: int = Field(MIN_WORD_LENGTH, gt=0)
    known_words_path: Optional[Path] = None
    download_wordnet: bool = True


class RankedEntry(BaseModel):
    """A lemma with its occurrence count."""

    word: str
    count: int = Field(..., ge=1)


class VocabularyReport(BaseModel):
    """Ranked vocabulary with summary statistics."""

    total_unique_words: int
    total_word_count: int
    generated_at: datetime = Field(default_factory=datetime.now)
    words: List[RankedEntry] = Field(default_factory=list)
