"""
Pytest configuration and fixtures for the quote backend tests.

This module provides:
- A controllable clock (fixed 'now' in epoch millis)
- A scripted upstream quote provider that records its calls
- Quote cache store and resolver fixtures over an in-memory backend
- In-memory SQLite engine for the SQLAlchemy cache backend
- FastAPI test client wired to a test application context
"""

from datetime import datetime
from typing import Callable, Optional, Union

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from stockboard.app_context import AppContext, set_app_context
from stockboard.config.settings import Settings, reset_settings
from stockboard.core.timezone import EASTERN_TZ
from stockboard.domain.models import CachedQuote, Holding, Quote, QuoteMode
from stockboard.providers import SyntheticQuoteProvider
from stockboard.repositories import InMemoryQuoteCacheBackend, QuoteCacheStore
from stockboard.repositories.sqlalchemy.database import Base
# Import ORM models to register them with Base before creating tables
from stockboard.repositories.sqlalchemy import orm_models  # noqa: F401
from stockboard.services import PortfolioRefreshService, QuoteResolver


HOUR_MS = 60 * 60 * 1000


# =============================================================================
# TIME HELPERS
# =============================================================================


def eastern_ms(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Epoch millis for a US/Eastern wall-clock time."""
    dt = EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))
    return int(dt.timestamp() * 1000)


class FakeClock:
    """Clock whose time only moves when a test moves it."""

    def __init__(self, now_ms: int):
        self._now_ms = now_ms

    def now_ms(self) -> int:
        return self._now_ms

    def advance(self, ms: int) -> None:
        self._now_ms += ms


@pytest.fixture
def fixed_now_ms() -> int:
    """Fixed 'now' for deterministic tests."""
    return eastern_ms(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now_ms) -> FakeClock:
    """Provide a controllable clock starting at fixed_now_ms."""
    return FakeClock(fixed_now_ms)


# =============================================================================
# QUOTE FIXTURES
# =============================================================================


def make_quote(
    symbol: str = "AAPL",
    price: float = 230.50,
    previous_close: float = 227.65,
    change_percent: float = 1.25,
) -> Quote:
    """Build an upstream-style quote."""
    return Quote(
        symbol=symbol,
        price=price,
        previous_close=previous_close,
        change_percent=change_percent,
    )


def make_cached(
    symbol: str = "AAPL",
    fetched_at_ms: int = 0,
    price: float = 225.00,
    previous_close: float = 224.00,
    change_percent: float = 0.45,
) -> CachedQuote:
    """Build a cache entry."""
    return CachedQuote(
        symbol=symbol,
        price=price,
        previous_close=previous_close,
        change_percent=change_percent,
        fetched_at_ms=fetched_at_ms,
    )


class ScriptedUpstream:
    """
    Upstream provider returning scripted results per symbol.

    A script value may be a Quote or an exception instance to raise.
    Unscripted symbols get the default AAPL-like quote with their own symbol.
    """

    def __init__(self, script: Optional[dict[str, Union[Quote, Exception]]] = None):
        self.script: dict[str, Union[Quote, Exception]] = dict(script or {})
        self.calls: list[str] = []

    def fetch_quote(self, symbol: str) -> Quote:
        self.calls.append(symbol)
        result = self.script.get(symbol)
        if isinstance(result, Exception):
            raise result
        if result is None:
            return make_quote(symbol=symbol)
        return result


@pytest.fixture
def upstream() -> ScriptedUpstream:
    """Provide a scripted upstream provider."""
    return ScriptedUpstream()


# =============================================================================
# STORE / RESOLVER FIXTURES
# =============================================================================


@pytest.fixture
def memory_backend() -> InMemoryQuoteCacheBackend:
    """Provide an empty in-memory persistence backend."""
    return InMemoryQuoteCacheBackend()


@pytest.fixture
def store(memory_backend) -> QuoteCacheStore:
    """Provide a loaded quote cache store over the in-memory backend."""
    cache = QuoteCacheStore(memory_backend)
    cache.load()
    return cache


@pytest.fixture
def resolver(store, upstream, clock) -> QuoteResolver:
    """Provide a live-mode resolver with a 1 hour TTL."""
    return QuoteResolver(
        store=store,
        upstream=upstream,
        synthetic=SyntheticQuoteProvider(seed=42),
        mode=QuoteMode.LIVE,
        cache_ttl_seconds=3600,
        clock=clock,
    )


@pytest.fixture
def portfolio_service(resolver) -> PortfolioRefreshService:
    """Provide a refresh service over the live resolver."""
    return PortfolioRefreshService(
        resolver=resolver,
        base_currency="JPY",
        usd_jpy_rate=150.0,
        max_workers=4,
    )


@pytest.fixture
def holding_factory() -> Callable[..., Holding]:
    """Factory for holdings with sequential ids."""
    counter = {"n": 0}

    def _create_holding(
        symbol: str = "AAPL",
        quantity: float = 10,
        currency: str = "USD",
        user_sector: Optional[str] = None,
        id: Optional[str] = None,
    ) -> Holding:
        counter["n"] += 1
        return Holding(
            id=id or f"h{counter['n']}",
            symbol=symbol,
            quantity=quantity,
            currency=currency,
            user_sector=user_sector,
        )

    return _create_holding


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session_factory(test_engine) -> sessionmaker:
    """Create test session factory."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Live-mode settings pointing at a temp data dir."""
    return Settings(
        data_dir=tmp_path,
        alpha_vantage_api_key="test-key",
        base_currency="JPY",
        usd_jpy_rate=150.0,
        quote_cache_ttl_seconds=3600,
    )


@pytest.fixture
def app_context(test_settings, memory_backend, upstream, clock) -> AppContext:
    """Application context using the scripted upstream and in-memory cache."""
    return AppContext(
        settings=test_settings,
        backend=memory_backend,
        upstream=upstream,
        clock=clock,
    )


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client bound to the test application context."""
    from stockboard.main import app

    set_app_context(app_context)
    with TestClient(app) as c:
        yield c
    set_app_context(None)
