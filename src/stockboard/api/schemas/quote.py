"""Pydantic schemas for quote endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class QuoteResponse(BaseModel):
    """Response schema for a resolved market quote."""

    symbol: str
    price: float
    previous_close: float
    change_percent: float
    sector: str
    is_stale: bool = False
    is_mock: bool = False
    as_of: Optional[datetime] = None
