"""Quote provider protocol."""

from typing import Protocol

from stockboard.domain.models import Quote


class QuoteProvider(Protocol):
    """
    Protocol for single-symbol quote providers.

    Implementations fetch one symbol per call and never retry. Failures are
    raised as SymbolNotFoundError, RateLimitedError or UpstreamError.
    """

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch the latest quote (price, previous close, change percent) for symbol."""
        ...
