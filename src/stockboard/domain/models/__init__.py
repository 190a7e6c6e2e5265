"""Domain models package."""

from stockboard.domain.models.enums import Currency, QuoteMode, DEMO_CREDENTIALS
from stockboard.domain.models.holding import Holding
from stockboard.domain.models.quote import Quote, CachedQuote, UNKNOWN_SECTOR

__all__ = [
    "Currency",
    "QuoteMode",
    "DEMO_CREDENTIALS",
    "Holding",
    "Quote",
    "CachedQuote",
    "UNKNOWN_SECTOR",
]
