"""Dependency injection for FastAPI."""

from fastapi import Depends

from stockboard.app_context import AppContext, get_app_context
from stockboard.services import PortfolioRefreshService, QuoteResolver


def get_context() -> AppContext:
    """Provide the application context."""
    return get_app_context()


def get_quote_resolver(context: AppContext = Depends(get_context)) -> QuoteResolver:
    """Provide QuoteResolver instance."""
    return context.resolver


def get_portfolio_service(
    context: AppContext = Depends(get_context),
) -> PortfolioRefreshService:
    """Provide PortfolioRefreshService instance."""
    return context.portfolio
