"""
Persistent store of words the reader already knows.

The store is a JSON file of the form::

    {"updated_at": "...", "count": 2, "words": ["apple", "zebra"]}
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Set, Union

from bookwords.core.constants import DEFAULT_KNOWN_WORDS_FILE
from bookwords.core.utils import get_file_contents, write_file_contents

logger = logging.getLogger(__name__)


class KnownWordStore:
    """JSON file backed set of known words. Words are stored lowercase and sorted."""

    def __init__(self, path: Union[str, Path] = DEFAULT_KNOWN_WORDS_FILE) -> None:
        self.path = Path(path)

    def load(self) -> Set[str]:
        """
        Load the known words.

        Returns:
            Set of known words; empty if the file is missing or unreadable
        """
        if not self.path.exists():
            return set()
        try:
            data = json.loads(get_file_contents(self.path))
            words = data.get("words", [])
            if not isinstance(words, list):
                raise ValueError(f"expected a list of words, got {type(words).__name__}")
            return set(words)
        except (OSError, ValueError, AttributeError, TypeError) as exc:
            logger.warning("Could not load known words from %s: %s", self.path, exc)
            return set()

    def save(self, words: Iterable[str]) -> None:
        """Overwrite the store with `words`."""
        words_sorted = sorted(set(words))
        data = {
            "updated_at": datetime.now().isoformat(),
            "count": len(words_sorted),
            "words": words_sorted,
        }
        write_file_contents(self.path, json.dumps(data, indent=2, ensure_ascii=False))

    def add(self, words: Iterable[str]) -> Set[str]:
        """Add words (lowercased) and return the updated set."""
        known = self.load()
        known.update(word.lower() for word in words)
        self.save(known)
        return known

    def remove(self, word: str) -> Set[str]:
        """Remove a word (case-insensitive) and return the updated set."""
        known = self.load()
        known.discard(word.lower())
        self.save(known)
        return known

    def is_known(self, word: str) -> bool:
        return word.lower() in self.load()

    def count(self) -> int:
        return len(self.load())

    def clear(self) -> None:
        self.save([])
