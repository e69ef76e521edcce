"""
Lemma frequency aggregation and ranked retrieval.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Tuple

from bookwords.core.models import RankedEntry


class FrequencyTable:
    """Lock-guarded lemma counter."""

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}
        self._lock = threading.Lock()

    def increment(self, lemma: str, amount: int = 1) -> int:
        """Add `amount` to the count of `lemma` and return the new count."""
        with self._lock:
            count = self._counts.get(lemma, 0) + amount
            self._counts[lemma] = count
            return count

    def get(self, lemma: str) -> int:
        with self._lock:
            return self._counts.get(lemma, 0)

    def snapshot(self) -> Dict[str, int]:
        """Return a copy of the current counts."""
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def __contains__(self, lemma: object) -> bool:
        with self._lock:
            return lemma in self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)


def rank_entries(counts: Iterable[Tuple[str, int]], min_frequency: int = 1) -> List[RankedEntry]:
    """
    Filter and sort lemma counts.

    Args:
        counts: (lemma, count) pairs
        min_frequency: Minimum count to keep; values below 1 admit everything

    Returns:
        Entries sorted by count descending, then lemma ascending
    """
    threshold = max(1, min_frequency)
    kept = [(word, count) for word, count in counts if count >= threshold]
    kept.sort(key=lambda item: (-item[1], item[0]))
    return [RankedEntry(word=word, count=count) for word, count in kept]
