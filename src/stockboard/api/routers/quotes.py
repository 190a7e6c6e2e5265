"""Quote endpoint: cached proxy in front of the upstream provider."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from stockboard.api.deps import get_quote_resolver
from stockboard.api.schemas import QuoteResponse
from stockboard.core.timezone import from_epoch_ms, now_eastern
from stockboard.domain.models import QuoteMode
from stockboard.services import QuoteResolver

router = APIRouter(prefix="/api", tags=["quotes"])


@router.get("/quote", response_model=QuoteResponse)
def get_quote(
    symbol: Optional[str] = Query(None, description="Ticker symbol (e.g. AAPL)"),
    mode: Optional[QuoteMode] = Query(None, description="live or synthetic; defaults to the configured mode"),
    resolver: QuoteResolver = Depends(get_quote_resolver),
) -> QuoteResponse:
    """
    Return the quote for one symbol.

    Served from cache when younger than the TTL. When the upstream call fails
    with a rate limit or network error and an older cache entry exists, that
    entry is returned with is_stale=true.
    """
    quote = resolver.get_quote(symbol or "", mode=mode)
    return QuoteResponse(
        symbol=quote.symbol,
        price=quote.price,
        previous_close=quote.previous_close,
        change_percent=quote.change_percent,
        sector=quote.sector,
        is_stale=quote.is_stale,
        is_mock=quote.is_mock,
        as_of=from_epoch_ms(quote.fetched_at_ms) or now_eastern(),
    )
