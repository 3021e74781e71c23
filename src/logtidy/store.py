"""Ephemeral in-memory store for original/cleaned log pairs.

Records live only as long as the process. Ids are assigned from an
incrementing counter guarded by a lock so concurrent requests never share
an id.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, asdict
from typing import Dict, Optional


@dataclass
class LogRecord:
    """One processed submission.

    Attributes:
        id: Incrementing identifier, starting at 1.
        original_content: The raw text the user submitted.
        cleaned_content: The text returned by the cleanup service.
        created_at: Epoch timestamp when the record was stored.
    """
    id: int
    original_content: str
    cleaned_content: str
    created_at: int

    def to_dict(self) -> dict:
        """Serialize to a plain dict for JSON encoding."""
        return asdict(self)


class MemStorage:
    """Dict-backed record store keyed by incrementing integer id."""

    def __init__(self) -> None:
        self._logs: Dict[int, LogRecord] = {}
        self._current_id = 1
        self._lock = threading.Lock()

    def create_log(self, original_content: str, cleaned_content: str) -> LogRecord:
        """Store a new original/cleaned pair and return its record."""
        with self._lock:
            rec = LogRecord(
                id=self._current_id,
                original_content=original_content,
                cleaned_content=cleaned_content,
                created_at=int(time.time()),
            )
            self._logs[rec.id] = rec
            self._current_id += 1
        return rec

    def get_log(self, log_id: int) -> Optional[LogRecord]:
        """Return the record stored under *log_id*, or ``None``."""
        return self._logs.get(log_id)

    def __len__(self) -> int:
        return len(self._logs)
