"""Bounded file content cache with first-in-first-out eviction."""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

logger = logging.getLogger(__name__)


class FileContentCache:
    """Maps file path -> text content.

    Once more than ``capacity`` entries are stored, the oldest inserted entry
    is dropped. Reads do not refresh an entry's position.
    """

    def __init__(self, capacity: int = 500):
        if capacity < 1:
            raise ValueError(f"cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: dict[str, str] = {}
        self._order: deque[str] = deque()

    def __contains__(self, path: object) -> bool:
        return str(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def read(self, path: str | Path) -> str:
        """Return the file's text, reading it from disk on first access.

        Raises OSError / UnicodeDecodeError when the file cannot be read.
        """
        key = str(path)
        if key in self._entries:
            return self._entries[key]
        content = Path(key).read_text(encoding="utf-8")
        self.put(key, content)
        return content

    def put(self, path: str | Path, content: str) -> None:
        key = str(path)
        if key not in self._entries:
            self._order.append(key)
        self._entries[key] = content
        while len(self._order) > self.capacity:
            oldest = self._order.popleft()
            self._entries.pop(oldest, None)

    def prefetch(self, path: str | Path) -> None:
        """Warm the cache for ``path``, ignoring read failures."""
        if str(path) in self._entries:
            return
        try:
            self.read(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("prefetch skipped for %s: %s", path, e)

    def clear(self) -> None:
        self._entries.clear()
        self._order.clear()
