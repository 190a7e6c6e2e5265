"""View models for quote and portfolio outputs."""

from dataclasses import dataclass, field
from typing import Optional

from stockboard.domain.models import CachedQuote, Currency, Quote, UNKNOWN_SECTOR


@dataclass(frozen=True)
class ResolvedQuote:
    """Quote handed back to callers of the resolver. Never persisted."""

    symbol: str
    price: float
    previous_close: float
    change_percent: float
    sector: str = UNKNOWN_SECTOR
    is_stale: bool = False
    is_mock: bool = False
    fetched_at_ms: Optional[int] = None

    @classmethod
    def from_cached(cls, cached: CachedQuote, is_stale: bool = False) -> "ResolvedQuote":
        return cls(
            symbol=cached.symbol,
            price=cached.price,
            previous_close=cached.previous_close,
            change_percent=cached.change_percent,
            sector=cached.sector,
            is_stale=is_stale,
            fetched_at_ms=cached.fetched_at_ms,
        )

    @classmethod
    def synthetic(cls, quote: Quote) -> "ResolvedQuote":
        return cls(
            symbol=quote.symbol,
            price=quote.price,
            previous_close=quote.previous_close,
            change_percent=quote.change_percent,
            sector=quote.sector,
            is_mock=True,
        )


@dataclass
class PortfolioLine:
    """Valuation of a single holding for one refresh."""

    holding_id: str
    symbol: str
    quantity: float
    currency: Currency
    user_sector: Optional[str]
    sector: str
    current_price: float = 0.0
    previous_close: float = 0.0
    native_value: float = 0.0
    base_value: float = 0.0
    day_change_native: float = 0.0
    day_change_base: float = 0.0
    day_change_percent: float = 0.0
    is_stale: bool = False
    is_mock: bool = False
    error: Optional[str] = None


@dataclass
class PortfolioSummary:
    """Portfolio totals in the base currency."""

    total_value_base: float = 0.0
    total_day_change_base: float = 0.0
    portfolio_day_change_percent: float = 0.0


@dataclass
class SectorAllocation:
    """Summed base-currency value for one sector."""

    name: str
    value: float


@dataclass
class PortfolioView:
    """Result of one aggregation pass."""

    base_currency: Currency
    lines: list[PortfolioLine] = field(default_factory=list)
    summary: PortfolioSummary = field(default_factory=PortfolioSummary)
    sectors: list[SectorAllocation] = field(default_factory=list)

    @property
    def is_mock(self) -> bool:
        """True when any line was valued from a synthetic quote."""
        return any(line.is_mock for line in self.lines)
