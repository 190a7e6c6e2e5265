"""Application context for in-process service management.

Builds the quote cache store, upstream client, resolver and refresh service
from settings. Used by the HTTP layer and by any in-process caller.
"""

import logging
from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from stockboard.config.settings import Settings, get_settings
from stockboard.core.clock import Clock, SystemClock
from stockboard.core.exceptions import ConfigurationError, PersistenceError
from stockboard.domain.models import QuoteMode
from stockboard.providers import AlphaVantageClient, QuoteProvider, SyntheticQuoteProvider
from stockboard.repositories import (
    InMemoryQuoteCacheBackend,
    JsonFileQuoteCacheBackend,
    QuoteCacheBackend,
    QuoteCacheStore,
)
from stockboard.repositories.sqlalchemy import (
    SqlAlchemyQuoteCacheBackend,
    create_db_engine,
    create_session_factory,
    init_db,
)
from stockboard.services import PortfolioRefreshService, QuoteResolver

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing in-process access to all services.

    Services are created lazily; the quote cache is loaded from its backend
    the first time the store is requested.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        backend: Optional[QuoteCacheBackend] = None,
        upstream: Optional[QuoteProvider] = None,
        clock: Optional[Clock] = None,
    ):
        self._settings = settings
        self._backend = backend
        self._upstream = upstream
        self._client: Optional[AlphaVantageClient] = None
        self._engine: Optional[Engine] = None
        self._clock = clock or SystemClock()

        # Service instances (lazy initialized)
        self._store: Optional[QuoteCacheStore] = None
        self._resolver: Optional[QuoteResolver] = None
        self._portfolio: Optional[PortfolioRefreshService] = None

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def mode(self) -> QuoteMode:
        """Quote mode derived from the configured API key."""
        return QuoteMode.from_credential(self.settings.alpha_vantage_api_key)

    def _build_backend(self) -> QuoteCacheBackend:
        kind = self.settings.quote_cache_backend.lower()
        if kind == "json":
            return JsonFileQuoteCacheBackend(self.settings.get_cache_file())
        if kind == "sqlite":
            self._engine = create_db_engine(self.settings.get_database_url())
            init_db(self._engine)
            return SqlAlchemyQuoteCacheBackend(create_session_factory(self._engine))
        raise ConfigurationError(f"Unknown quote cache backend: {kind}")

    @property
    def store(self) -> QuoteCacheStore:
        """
        Get the QuoteCacheStore, loading it on first use.

        If the configured cache location cannot be set up, the store runs
        in memory only for this process.
        """
        if self._store is None:
            persistent = True
            if self._backend is None:
                try:
                    self._backend = self._build_backend()
                except (OSError, SQLAlchemyError) as exc:
                    error = PersistenceError(f"Cannot open quote cache: {exc}")
                    logger.error("%s; continuing in memory only", error.message)
                    self._dispose_engine()
                    self._backend = InMemoryQuoteCacheBackend()
                    persistent = False
            self._store = QuoteCacheStore(self._backend, persistent=persistent)
            self._store.load()
        return self._store

    @property
    def upstream(self) -> Optional[QuoteProvider]:
        """Get the upstream quote provider; None in synthetic mode."""
        if self._upstream is None and self.mode == QuoteMode.LIVE:
            settings = self.settings
            self._client = self._upstream = AlphaVantageClient(
                api_key=settings.alpha_vantage_api_key.strip(),
                base_url=settings.alpha_vantage_base_url,
                timeout=settings.upstream_timeout_seconds,
            )
        return self._upstream

    @property
    def resolver(self) -> QuoteResolver:
        """Get the QuoteResolver instance."""
        if self._resolver is None:
            if self.mode == QuoteMode.SYNTHETIC:
                logger.info("No API key configured, serving synthetic quotes")
            self._resolver = QuoteResolver(
                store=self.store,
                upstream=self.upstream,
                synthetic=SyntheticQuoteProvider(),
                mode=self.mode,
                cache_ttl_seconds=self.settings.quote_cache_ttl_seconds,
                clock=self._clock,
            )
        return self._resolver

    @property
    def portfolio(self) -> PortfolioRefreshService:
        """Get the PortfolioRefreshService instance."""
        if self._portfolio is None:
            settings = self.settings
            self._portfolio = PortfolioRefreshService(
                resolver=self.resolver,
                base_currency=settings.base_currency,
                usd_jpy_rate=settings.usd_jpy_rate,
                max_workers=settings.refresh_max_workers,
            )
        return self._portfolio

    def close(self) -> None:
        """Clean up resources."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._upstream = None
        self._dispose_engine()
        self._resolver = None
        self._portfolio = None

    def _dispose_engine(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


# Global application context
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context
