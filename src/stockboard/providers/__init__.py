"""Quote providers module."""

from stockboard.providers.market_data_provider import QuoteProvider
from stockboard.providers.alpha_vantage_provider import AlphaVantageClient
from stockboard.providers.synthetic_provider import SyntheticQuoteProvider

__all__ = [
    "QuoteProvider",
    "AlphaVantageClient",
    "SyntheticQuoteProvider",
]
