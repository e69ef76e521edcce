"""
Report writer: save ranked vocabulary as JSON plus a plain-text listing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from bookwords.core.models import RankedEntry, VocabularyReport
from bookwords.core.utils import write_file_contents

logger = logging.getLogger(__name__)


def build_report(entries: Iterable[RankedEntry]) -> VocabularyReport:
    words = list(entries)
    return VocabularyReport(
        total_unique_words=len(words),
        total_word_count=sum(entry.count for entry in words),
        words=words,
    )


def format_text_listing(entries: List[RankedEntry]) -> str:
    """One numbered line per entry: ``"1. word - 12"``."""
    return "\n".join(f"{rank}. {entry.word} - {entry.count}" for rank, entry in enumerate(entries, start=1))


def save_results(entries: Iterable[RankedEntry], output_path: Union[str, Path]) -> Tuple[Path, Path]:
    """
    Write the report as JSON and a text listing beside it.

    Args:
        entries: Ranked entries to save
        output_path: Path of the JSON report

    Returns:
        Tuple of (json_path, text_path)
    """
    report = build_report(entries)
    json_path = Path(output_path)
    text_path = json_path.with_suffix(".txt")
    if text_path == json_path:
        text_path = json_path.with_name(json_path.name + ".txt")

    write_file_contents(json_path, report.model_dump_json(indent=2))
    write_file_contents(text_path, format_text_listing(report.words))
    logger.info("Saved %d words to %s", report.total_unique_words, json_path)
    return json_path, text_path
