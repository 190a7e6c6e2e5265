"""Quote models for upstream data and the quote cache."""

from dataclasses import dataclass

UNKNOWN_SECTOR = "Unknown"


@dataclass(frozen=True)
class Quote:
    """Normalized single-symbol quote as returned by a quote provider."""

    symbol: str
    price: float
    previous_close: float
    change_percent: float
    sector: str = UNKNOWN_SECTOR


@dataclass(frozen=True)
class CachedQuote:
    """
    Quote stored in the quote cache together with its fetch time.

    fetched_at_ms never decreases across writes for the same symbol.
    """

    symbol: str
    price: float
    previous_close: float
    change_percent: float
    fetched_at_ms: int
    sector: str = UNKNOWN_SECTOR

    @classmethod
    def from_quote(cls, quote: Quote, fetched_at_ms: int) -> "CachedQuote":
        return cls(
            symbol=quote.symbol.upper(),
            price=quote.price,
            previous_close=quote.previous_close,
            change_percent=quote.change_percent,
            fetched_at_ms=fetched_at_ms,
            sector=quote.sector,
        )

    def age_ms(self, now_ms: int) -> int:
        return now_ms - self.fetched_at_ms
