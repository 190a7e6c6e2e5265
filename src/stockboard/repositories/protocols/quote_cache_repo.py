"""Persistence backend protocol for the quote cache."""

from typing import Protocol

from stockboard.domain.models import CachedQuote


class QuoteCacheBackend(Protocol):
    """
    Durable storage for the whole quote cache snapshot.

    Implementations raise PersistenceError on any read or write failure.
    """

    def read_snapshot(self) -> dict[str, CachedQuote]:
        """Load every persisted entry. Missing storage yields an empty dict."""
        ...

    def write_snapshot(self, entries: dict[str, CachedQuote]) -> None:
        """Replace the persisted snapshot with the given entries."""
        ...
