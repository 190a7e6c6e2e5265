"""Pydantic schemas for API request/response."""

from stockboard.api.schemas.quote import QuoteResponse
from stockboard.api.schemas.portfolio import (
    HoldingRequest,
    PortfolioRequest,
    PortfolioLineResponse,
    PortfolioSummaryResponse,
    SectorAllocationResponse,
    PortfolioResponse,
)

__all__ = [
    "QuoteResponse",
    "HoldingRequest",
    "PortfolioRequest",
    "PortfolioLineResponse",
    "PortfolioSummaryResponse",
    "SectorAllocationResponse",
    "PortfolioResponse",
]
