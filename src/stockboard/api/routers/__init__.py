"""API routers package."""

from stockboard.api.routers.quotes import router as quotes_router
from stockboard.api.routers.portfolio import router as portfolio_router

__all__ = [
    "quotes_router",
    "portfolio_router",
]
