"""Domain layer - pure business models with no external dependencies."""

from stockboard.domain.models import (
    Currency,
    QuoteMode,
    Holding,
    Quote,
    CachedQuote,
    UNKNOWN_SECTOR,
)

__all__ = [
    "Currency",
    "QuoteMode",
    "Holding",
    "Quote",
    "CachedQuote",
    "UNKNOWN_SECTOR",
]
