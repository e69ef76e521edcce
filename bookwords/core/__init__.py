"""
Core Package.

This package provides constants, models and utilities shared across bookwords.
"""

from bookwords.core.constants import DEFAULT_BATCH_SIZE, MIN_WORD_LENGTH, STOP_WORDS
from bookwords.core.models import ProcessorConfig, RankedEntry, VocabularyReport
from bookwords.core.utils import ensure_dir_exists, get_file_contents, write_file_contents

__all__ = [
    # Constants
    "DEFAULT_BATCH_SIZE",
    "MIN_WORD_LENGTH",
    "STOP_WORDS",
    # Models
    "ProcessorConfig",
    "RankedEntry",
    "VocabularyReport",
    # Utilities
    "ensure_dir_exists",
    "get_file_contents",
    "write_file_contents",
]
