"""
Capped, newest-first translation history.
"""

import threading
from datetime import datetime

from ..models import Direction, HistoryEntry, Vocabulary

DEFAULT_HISTORY_LIMIT = 10


class TranslationHistory:
    """Most recent whole-phrase translations, newest first.

    Prepend and truncate happen under one lock, so readers never observe
    more than ``limit`` entries even when timer threads record concurrently.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self._limit = limit
        self._entries: list[HistoryEntry] = []
        self._lock = threading.Lock()

    @property
    def limit(self) -> int:
        return self._limit

    def record(
        self,
        source: str,
        target: str,
        source_vocab: Vocabulary | str,
        target_vocab: Vocabulary | str,
    ) -> HistoryEntry:
        """Prepend an entry stamped with the current time and drop the oldest beyond the limit."""
        entry = HistoryEntry(
            source=source,
            target=target,
            direction=Direction.between(Vocabulary(source_vocab), Vocabulary(target_vocab)),
            timestamp=datetime.now(),
        )
        with self._lock:
            self._entries = [entry, *self._entries][: self._limit]
        return entry

    def entries(self) -> list[HistoryEntry]:
        """Snapshot of the history, newest first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
