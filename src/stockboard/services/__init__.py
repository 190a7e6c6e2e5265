"""Service layer - quote resolution and portfolio aggregation."""

from stockboard.services.quote_resolver import QuoteResolver
from stockboard.services.portfolio_service import PortfolioRefreshService
from stockboard.services import portfolio_aggregator

__all__ = [
    "QuoteResolver",
    "PortfolioRefreshService",
    "portfolio_aggregator",
]
