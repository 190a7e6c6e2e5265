"""Synthetic quote provider for demo mode (no API key configured)."""

import random
from typing import Optional

from stockboard.domain.models import Quote, UNKNOWN_SECTOR

# Base values: price, previous close, change percent, sector
_SYNTHETIC_QUOTES: dict[str, tuple[float, float, float, str]] = {
    "AAPL": (230.50, 227.65, 1.25, "Technology"),
    "MSFT": (410.20, 412.26, -0.5, "Technology"),
    "GOOGL": (175.00, 173.61, 0.8, "Technology"),
    "AMZN": (185.30, 181.49, 2.1, "Consumer Cyclical"),
    "TSLA": (240.00, 248.70, -3.5, "Consumer Cyclical"),
    "NVDA": (120.50, 115.87, 4.0, "Technology"),
    "JPM": (205.10, 204.69, 0.2, "Financial"),
    "V": (290.00, 290.29, -0.1, "Financial"),
    "JNJ": (155.00, 154.23, 0.5, "Healthcare"),
    "SPY": (560.00, 555.00, 0.9, "Index"),
}

# Known symbols move by at most this much per quote
NOISE_BAND = 1.0


def known_base_price(symbol: str) -> Optional[float]:
    """Base price of a well-known synthetic symbol, None for others."""
    base = _SYNTHETIC_QUOTES.get(symbol.upper())
    return base[0] if base else None


class SyntheticQuoteProvider:
    """
    Fabricates quotes so the dashboard works without a live credential.

    Well-known symbols get their base values plus bounded noise; anything
    else gets random values around 100.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize with optional random seed for reproducibility."""
        self._rng = random.Random(seed)

    def fetch_quote(self, symbol: str) -> Quote:
        upper_symbol = symbol.upper()
        base = _SYNTHETIC_QUOTES.get(upper_symbol)
        if base is not None:
            price, previous_close, change_percent, sector = base
            noise = (self._rng.random() - 0.5) * 2 * NOISE_BAND
            return Quote(
                symbol=upper_symbol,
                price=price + noise,
                previous_close=previous_close,
                change_percent=change_percent + noise / 10,
                sector=sector,
            )

        return Quote(
            symbol=upper_symbol,
            price=100 + self._rng.random() * 50,
            previous_close=100.0,
            change_percent=(self._rng.random() - 0.5) * 5,
            sector=UNKNOWN_SECTOR,
        )
