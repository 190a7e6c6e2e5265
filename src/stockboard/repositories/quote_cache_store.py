"""Quote cache store: symbol -> cached quote, backed by a persistence backend."""

import logging
import threading
from typing import Optional

from stockboard.core.exceptions import PersistenceError
from stockboard.domain.models import CachedQuote
from stockboard.repositories.protocols import QuoteCacheBackend

logger = logging.getLogger(__name__)


def normalize_symbol(symbol: str) -> str:
    """Strip whitespace and uppercase."""
    return (symbol or "").strip().upper()


class QuoteCacheStore:
    """
    Thread-safe in-memory quote cache with whole-snapshot write-through.

    Entries are never evicted; callers decide freshness from fetched_at_ms.
    Persistence failures are logged and never raised: after a failed write
    the store keeps serving from memory for the rest of the run.
    """

    def __init__(self, backend: QuoteCacheBackend, persistent: bool = True):
        self._backend = backend
        self._entries: dict[str, CachedQuote] = {}
        self._lock = threading.Lock()
        self._persistent = persistent

    @property
    def is_persistent(self) -> bool:
        """False once a snapshot write has failed."""
        return self._persistent

    def load(self) -> None:
        """Populate the store from the backend; unreadable state yields an empty store."""
        try:
            entries = self._backend.read_snapshot()
        except PersistenceError as exc:
            logger.error("Could not load quote cache, starting empty: %s", exc.message)
            entries = {}

        with self._lock:
            self._entries = {normalize_symbol(symbol): quote for symbol, quote in entries.items()}
        logger.info("Loaded %d cached quotes", len(entries))

    def get(self, symbol: str) -> Optional[CachedQuote]:
        """Return the cached quote for symbol, or None."""
        with self._lock:
            return self._entries.get(normalize_symbol(symbol))

    def put(self, symbol: str, quote: CachedQuote) -> None:
        """
        Store quote under symbol and persist the whole snapshot.

        A quote older than the entry already stored is dropped so that
        fetched_at_ms never goes backwards for a symbol.
        """
        key = normalize_symbol(symbol)
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None and existing.fetched_at_ms > quote.fetched_at_ms:
                logger.debug(
                    "Ignoring older quote for %s (%d < %d)",
                    key, quote.fetched_at_ms, existing.fetched_at_ms,
                )
                return
            self._entries[key] = quote
            if self._persistent:
                self._persist()

    def snapshot(self) -> dict[str, CachedQuote]:
        """Copy of all cached entries."""
        with self._lock:
            return dict(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _persist(self) -> None:
        try:
            self._backend.write_snapshot(dict(self._entries))
        except PersistenceError as exc:
            self._persistent = False
            logger.error(
                "Could not persist quote cache, continuing in memory only: %s",
                exc.message,
            )
