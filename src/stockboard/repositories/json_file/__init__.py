"""JSON file repository implementations."""

from stockboard.repositories.json_file.quote_cache_repo import JsonFileQuoteCacheBackend

__all__ = [
    "JsonFileQuoteCacheBackend",
]
