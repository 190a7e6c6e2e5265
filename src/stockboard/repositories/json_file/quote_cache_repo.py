"""JSON file implementation of QuoteCacheBackend."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from stockboard.core.exceptions import PersistenceError
from stockboard.domain.models import CachedQuote, UNKNOWN_SECTOR

logger = logging.getLogger(__name__)


class JsonFileQuoteCacheBackend:
    """
    Stores the quote cache as one JSON document.

    Layout: {"AAPL": {"timestamp": <epoch ms>, "data": {"symbol": ..., "price": ...,
    "previousClose": ..., "changePercent": ..., "sector": ..., "updatedAt": ...}}}
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_snapshot(self) -> dict[str, CachedQuote]:
        try:
            if not self._path.exists():
                return {}
            with open(self._path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self._path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise PersistenceError(f"Unexpected cache layout in {self._path}")

        entries: dict[str, CachedQuote] = {}
        for symbol, entry in raw.items():
            try:
                entries[symbol.upper()] = self._entry_to_domain(symbol, entry)
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning("Skipping malformed cache entry for %s", symbol)
        return entries

    def write_snapshot(self, entries: dict[str, CachedQuote]) -> None:
        payload = {symbol: self._domain_to_entry(quote) for symbol, quote in entries.items()}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=self._path.name, suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2)
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Cannot write {self._path}: {exc}") from exc

    @staticmethod
    def _entry_to_domain(symbol: str, entry: Any) -> CachedQuote:
        data = entry["data"]
        return CachedQuote(
            symbol=str(data.get("symbol") or symbol).upper(),
            price=float(data["price"]),
            previous_close=float(data["previousClose"]),
            change_percent=float(data["changePercent"]),
            fetched_at_ms=int(entry["timestamp"]),
            sector=data.get("sector") or UNKNOWN_SECTOR,
        )

    @staticmethod
    def _domain_to_entry(quote: CachedQuote) -> dict[str, Any]:
        return {
            "timestamp": quote.fetched_at_ms,
            "data": {
                "symbol": quote.symbol,
                "price": quote.price,
                "changePercent": quote.change_percent,
                "previousClose": quote.previous_close,
                "sector": quote.sector,
                "updatedAt": quote.fetched_at_ms,
            },
        }
