"""Repository layer - quote cache store and its persistence backends."""

from stockboard.repositories.protocols import QuoteCacheBackend
from stockboard.repositories.quote_cache_store import QuoteCacheStore, normalize_symbol
from stockboard.repositories.memory_backend import InMemoryQuoteCacheBackend
from stockboard.repositories.json_file import JsonFileQuoteCacheBackend

__all__ = [
    "QuoteCacheBackend",
    "QuoteCacheStore",
    "normalize_symbol",
    "InMemoryQuoteCacheBackend",
    "JsonFileQuoteCacheBackend",
]
