"""Enumerations for domain models."""

from enum import Enum
from typing import Optional

# Credentials that mean "no real key configured"
DEMO_CREDENTIALS = frozenset({"DEMO", "YOUR_API_KEY_HERE"})


class Currency(str, Enum):
    """Supported holding and base currencies."""

    USD = "USD"
    JPY = "JPY"


class QuoteMode(str, Enum):
    """Where quotes come from."""

    LIVE = "live"  # Upstream provider behind the quote cache
    SYNTHETIC = "synthetic"  # Fabricated demo quotes, no cache, no network

    @classmethod
    def from_credential(cls, api_key: Optional[str]) -> "QuoteMode":
        """Absent, blank or demo credentials select synthetic mode."""
        if not api_key or not api_key.strip():
            return cls.SYNTHETIC
        if api_key.strip().upper() in DEMO_CREDENTIALS:
            return cls.SYNTHETIC
        return cls.LIVE
