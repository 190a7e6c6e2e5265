"""Pydantic schemas for portfolio summary API."""

import uuid
from typing import Optional

from pydantic import BaseModel, Field

from stockboard.domain.models import Currency, QuoteMode


class HoldingRequest(BaseModel):
    """A holding as recorded by the dashboard."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    symbol: str = Field(..., min_length=1, max_length=20)
    quantity: float = Field(..., gt=0)
    currency: Currency = Currency.USD
    user_sector: Optional[str] = None


class PortfolioRequest(BaseModel):
    """Holdings to refresh plus optional display overrides."""

    holdings: list[HoldingRequest] = Field(default_factory=list)
    base_currency: Optional[Currency] = None
    usd_jpy_rate: Optional[float] = Field(None, gt=0)
    mode: Optional[QuoteMode] = None


class PortfolioLineResponse(BaseModel):
    """One valued holding."""

    holding_id: str
    symbol: str
    quantity: float
    currency: Currency
    user_sector: Optional[str] = None
    sector: str
    current_price: float
    previous_close: float
    native_value: float
    base_value: float
    day_change_native: float
    day_change_base: float
    day_change_percent: float
    is_stale: bool = False
    is_mock: bool = False
    error: Optional[str] = None


class PortfolioSummaryResponse(BaseModel):
    """Portfolio totals in the base currency."""

    total_value_base: float
    total_day_change_base: float
    portfolio_day_change_percent: float


class SectorAllocationResponse(BaseModel):
    """Summed value for one sector, ready for a pie chart."""

    name: str
    value: float


class PortfolioResponse(BaseModel):
    """Response for POST /api/portfolio/summary."""

    base_currency: Currency
    is_mock: bool
    lines: list[PortfolioLineResponse]
    summary: PortfolioSummaryResponse
    sectors: list[SectorAllocationResponse]
