"""Portfolio aggregation: valuation, day change, currency conversion and sector breakdown.

Everything here is pure; no I/O, no shared state.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from stockboard.core.exceptions import ConfigurationError
from stockboard.domain.models import Currency, Holding, UNKNOWN_SECTOR
from stockboard.domain.views import (
    PortfolioLine,
    PortfolioSummary,
    PortfolioView,
    ResolvedQuote,
    SectorAllocation,
)


def _to_currency(value: Union[Currency, str]) -> Currency:
    try:
        return value if isinstance(value, Currency) else Currency(str(value).upper())
    except ValueError:
        raise ConfigurationError(f"Unsupported currency: {value}") from None


def _check_rate(usd_jpy_rate: Optional[float]) -> float:
    if usd_jpy_rate is None:
        raise ConfigurationError("USD/JPY rate is required")
    rate = float(usd_jpy_rate)
    if not math.isfinite(rate) or rate <= 0:
        raise ConfigurationError(f"USD/JPY rate must be a positive number, got {usd_jpy_rate}")
    return rate


def conversion_rate(
    from_currency: Union[Currency, str],
    to_currency: Union[Currency, str],
    usd_jpy_rate: float,
) -> float:
    """Multiplier turning an amount in from_currency into to_currency."""
    source = _to_currency(from_currency)
    target = _to_currency(to_currency)
    rate = _check_rate(usd_jpy_rate)

    if source == target:
        return 1.0
    if source == Currency.USD and target == Currency.JPY:
        return rate
    if source == Currency.JPY and target == Currency.USD:
        return 1 / rate
    raise ConfigurationError(f"Unsupported currency pair: {source.value}->{target.value}")


def convert(
    value: float,
    from_currency: Union[Currency, str],
    to_currency: Union[Currency, str],
    usd_jpy_rate: float,
) -> float:
    """Convert value between USD and JPY."""
    return value * conversion_rate(from_currency, to_currency, usd_jpy_rate)


def resolve_sector(quote: Optional[ResolvedQuote], user_sector: Optional[str]) -> str:
    """Upstream sector wins unless it is Unknown and the user supplied one."""
    if quote is None:
        return user_sector or UNKNOWN_SECTOR
    if quote.sector == UNKNOWN_SECTOR and user_sector:
        return user_sector
    return quote.sector


def build_line(
    holding: Holding,
    quote: Optional[ResolvedQuote],
    base_currency: Currency,
    usd_jpy_rate: float,
    error: Optional[str] = None,
) -> PortfolioLine:
    """
    Value one holding. A missing quote produces a zeroed line.

    day_change_percent is the upstream change percent as-is; it is not
    recomputed from price - previous_close and may disagree with it.
    """
    line = PortfolioLine(
        holding_id=holding.id,
        symbol=holding.symbol,
        quantity=holding.quantity,
        currency=holding.currency,
        user_sector=holding.user_sector,
        sector=resolve_sector(quote, holding.user_sector),
        error=error,
    )
    if quote is None:
        return line

    rate = conversion_rate(holding.currency, base_currency, usd_jpy_rate)
    line.current_price = quote.price
    line.previous_close = quote.previous_close
    line.native_value = quote.price * holding.quantity
    line.day_change_native = (quote.price - quote.previous_close) * holding.quantity
    line.day_change_percent = quote.change_percent
    line.base_value = line.native_value * rate
    line.day_change_base = line.day_change_native * rate
    line.is_stale = quote.is_stale
    line.is_mock = quote.is_mock
    return line


def summarize(lines: Sequence[PortfolioLine]) -> PortfolioSummary:
    """Totals plus day change percent against the previous total (0 when that is 0)."""
    total_value = sum(line.base_value for line in lines)
    total_change = sum(line.day_change_base for line in lines)
    previous_total = total_value - total_change
    change_percent = total_change / previous_total * 100 if previous_total != 0 else 0.0
    return PortfolioSummary(
        total_value_base=total_value,
        total_day_change_base=total_change,
        portfolio_day_change_percent=change_percent,
    )


def sector_allocation(lines: Sequence[PortfolioLine]) -> list[SectorAllocation]:
    """One entry per distinct sector with the summed base value, in first-seen order."""
    totals: dict[str, float] = {}
    for line in lines:
        sector = line.sector or UNKNOWN_SECTOR
        totals[sector] = totals.get(sector, 0.0) + line.base_value
    return [SectorAllocation(name=name, value=value) for name, value in totals.items()]


def aggregate(
    holdings: Sequence[Holding],
    quotes: Mapping[str, Optional[ResolvedQuote]],
    base_currency: Union[Currency, str],
    usd_jpy_rate: float,
    errors: Optional[Mapping[str, str]] = None,
) -> PortfolioView:
    """
    Aggregate holdings into lines, summary and sector allocation.

    Args:
        holdings: Holdings to value, in display order
        quotes: Resolved quote per holding id; missing or None means resolution failed
        base_currency: USD or JPY
        usd_jpy_rate: JPY per USD
        errors: Optional failure message per holding id, copied onto the zeroed lines

    Raises:
        ConfigurationError: unsupported base currency or invalid rate
    """
    base = _to_currency(base_currency)
    rate = _check_rate(usd_jpy_rate)
    errors = errors or {}

    lines = [
        build_line(holding, quotes.get(holding.id), base, rate, errors.get(holding.id))
        for holding in holdings
    ]
    return PortfolioView(
        base_currency=base,
        lines=lines,
        summary=summarize(lines),
        sectors=sector_allocation(lines),
    )
