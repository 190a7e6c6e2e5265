"""In-memory quote cache backend."""

from typing import Optional

from stockboard.domain.models import CachedQuote


class InMemoryQuoteCacheBackend:
    """Keeps the snapshot in process memory; nothing survives a restart."""

    def __init__(self, entries: Optional[dict[str, CachedQuote]] = None):
        self._entries: dict[str, CachedQuote] = dict(entries or {})
        self.write_count = 0

    def read_snapshot(self) -> dict[str, CachedQuote]:
        return dict(self._entries)

    def write_snapshot(self, entries: dict[str, CachedQuote]) -> None:
        self._entries = dict(entries)
        self.write_count += 1
