"""Repository protocol definitions (interfaces)."""

from stockboard.repositories.protocols.quote_cache_repo import QuoteCacheBackend

__all__ = [
    "QuoteCacheBackend",
]
