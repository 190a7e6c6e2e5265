"""View models for service outputs."""

from stockboard.domain.views.portfolio import (
    ResolvedQuote,
    PortfolioLine,
    PortfolioSummary,
    SectorAllocation,
    PortfolioView,
)

__all__ = [
    "ResolvedQuote",
    "PortfolioLine",
    "PortfolioSummary",
    "SectorAllocation",
    "PortfolioView",
]
