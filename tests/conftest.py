"""
Pytest configuration for test discovery, import path setup and shared fakes.

Ensures the project root is on sys.path so that `import bookwords` works
regardless of how pytest is invoked (e.g., `pytest` or `pytest tests/`).
"""

import asyncio
import os
import sys
from typing import Dict, List, Optional

import pytest


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)

from bookwords.processing.lexicon import LexicalDatabase  # noqa: E402


class RecordingDatabase(LexicalDatabase):
    """In-memory dictionary that records lookups and concurrency."""

    def __init__(
        self,
        entries: Optional[Dict[str, List[str]]] = None,
        failing: Optional[set] = None,
        delay: float = 0.0,
    ) -> None:
        self.entries = entries or {}
        self.failing = failing or set()
        self.delay = delay
        self.calls: List[str] = []
        self.active = 0
        self.max_active = 0

    async def lookup(self, word: str) -> List[str]:
        self.calls.append(word)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delay)
            if word in self.failing:
                raise RuntimeError(f"lookup failed for {word}")
            return list(self.entries.get(word, []))
        finally:
            self.active -= 1


@pytest.fixture
def database() -> RecordingDatabase:
    """Dictionary with a few irregular forms; everything else falls back to the stemmer."""
    return RecordingDatabase(
        entries={
            "ran": ["run"],
            "books": ["book"],
            "geese": ["goose"],
        }
    )


@pytest.fixture
def make_database():
    """Factory for RecordingDatabase instances with custom entries, failures or delay."""
    return RecordingDatabase
