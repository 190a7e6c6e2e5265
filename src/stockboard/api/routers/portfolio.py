"""Portfolio summary API: refresh quotes for holdings and aggregate them."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from stockboard.api.deps import get_portfolio_service
from stockboard.api.schemas import (
    PortfolioRequest,
    PortfolioResponse,
    PortfolioLineResponse,
    PortfolioSummaryResponse,
    SectorAllocationResponse,
)
from stockboard.domain.models import Holding
from stockboard.services import PortfolioRefreshService

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.post("/summary", response_model=PortfolioResponse)
def get_portfolio_summary(
    request: PortfolioRequest,
    portfolio: PortfolioRefreshService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """
    Value the given holdings in the base currency.

    - Holdings whose quote cannot be resolved come back zeroed with an error message.
    - base_currency / usd_jpy_rate default to the server configuration.
    - Response: lines, summary (totals and day change %), sectors (chart-ready).
    """
    holdings = [
        Holding(
            id=h.id,
            symbol=h.symbol.strip().upper(),
            quantity=h.quantity,
            currency=h.currency,
            user_sector=h.user_sector,
        )
        for h in request.holdings
    ]
    view = portfolio.refresh(
        holdings,
        base_currency=request.base_currency,
        usd_jpy_rate=request.usd_jpy_rate,
        mode=request.mode,
    )
    return PortfolioResponse(
        base_currency=view.base_currency,
        is_mock=view.is_mock,
        lines=[PortfolioLineResponse(**asdict(line)) for line in view.lines],
        summary=PortfolioSummaryResponse(**asdict(view.summary)),
        sectors=[SectorAllocationResponse(name=s.name, value=s.value) for s in view.sectors],
    )
