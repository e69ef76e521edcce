"""
In-memory lemma cache for a single processing session.

Maps normalized words to their resolved lemmas so repeated words in a document
skip the dictionary lookup. Entries are never evicted.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterator, Optional


class LemmaCache:
    """Thread-safe, append-only mapping of normalized word to lemma.

    Owned by one processor. Use `copy()` to seed another processor with the
    same entries.
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None) -> None:
        self._entries: Dict[str, str] = dict(entries or {})
        self._lock = threading.Lock()

        # Track cache statistics
        self._hits = 0
        self._misses = 0

    def get(self, word: str) -> Optional[str]:
        """Return the cached lemma for `word`, or None on a miss."""
        with self._lock:
            lemma = self._entries.get(word)
            if lemma is None:
                self._misses += 1
            else:
                self._hits += 1
            return lemma

    def set(self, word: str, lemma: str) -> None:
        """Store the lemma for `word`. Rewriting an entry keeps the first value."""
        with self._lock:
            self._entries.setdefault(word, lemma)

    def copy(self) -> "LemmaCache":
        """Return an independent cache holding the same entries."""
        with self._lock:
            return LemmaCache(self._entries)

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._entries))

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with total_entries, session_hits, session_misses, session_hit_rate
        """
        with self._lock:
            total_requests = self._hits + self._misses
            hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0.0
            return {
                "total_entries": len(self._entries),
                "session_hits": self._hits,
                "session_misses": self._misses,
                "session_hit_rate": round(hit_rate, 2),
            }

    def reset_stats(self) -> None:
        """Reset session hit/miss counters."""
        with self._lock:
            self._hits = 0
            self._misses = 0
