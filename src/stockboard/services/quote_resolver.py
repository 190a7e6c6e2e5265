"""Quote resolver: cache-first quote lookup with stale-on-error fallback."""

import logging
from typing import Optional

from stockboard.core.clock import Clock, SystemClock
from stockboard.core.exceptions import (
    ConfigurationError,
    RateLimitedError,
    UpstreamError,
    ValidationError,
)
from stockboard.domain.models import CachedQuote, QuoteMode
from stockboard.domain.views import ResolvedQuote
from stockboard.providers.market_data_provider import QuoteProvider
from stockboard.providers.synthetic_provider import SyntheticQuoteProvider
from stockboard.repositories.quote_cache_store import QuoteCacheStore, normalize_symbol

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 60 * 60


class QuoteResolver:
    """
    Decides per symbol whether to serve from cache, fetch fresh or degrade.

    Live mode:
    - fresh cache entry (younger than the TTL) is returned without an upstream call
    - otherwise one upstream attempt is made; success is written through to the cache
    - RateLimitedError / UpstreamError fall back to a stale entry when one exists
    - SymbolNotFoundError always propagates, stale data never masks it

    Synthetic mode returns fabricated quotes and never touches cache or upstream.
    """

    def __init__(
        self,
        store: QuoteCacheStore,
        upstream: Optional[QuoteProvider] = None,
        synthetic: Optional[SyntheticQuoteProvider] = None,
        mode: Optional[QuoteMode] = None,
        cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
        clock: Optional[Clock] = None,
    ):
        self._store = store
        self._upstream = upstream
        self._synthetic = synthetic or SyntheticQuoteProvider()
        self._mode = mode or (QuoteMode.LIVE if upstream is not None else QuoteMode.SYNTHETIC)
        self._cache_ttl_ms = cache_ttl_seconds * 1000
        self._clock = clock or SystemClock()

    @property
    def mode(self) -> QuoteMode:
        """Mode used when a request does not name one."""
        return self._mode

    def get_quote(self, symbol: str, mode: Optional[QuoteMode] = None) -> ResolvedQuote:
        """
        Resolve a quote for symbol.

        Raises:
            ValidationError: symbol is blank
            ConfigurationError: live mode requested without an upstream client
            SymbolNotFoundError, RateLimitedError, UpstreamError: upstream failure
                that could not be served from the cache
        """
        key = normalize_symbol(symbol)
        if not key:
            raise ValidationError("Symbol is required")

        mode = mode or self._mode
        if mode == QuoteMode.SYNTHETIC:
            return ResolvedQuote.synthetic(self._synthetic.fetch_quote(key))

        if self._upstream is None:
            raise ConfigurationError("Live quotes requested but no API key is configured")

        now = self._clock.now_ms()
        fallback = self._store.get(key)
        if fallback is not None:
            if fallback.age_ms(now) < self._cache_ttl_ms:
                logger.debug("Serving %s from cache", key)
                return ResolvedQuote.from_cached(fallback)
            logger.info("Cache expired for %s", key)

        try:
            quote = self._upstream.fetch_quote(key)
        except (RateLimitedError, UpstreamError) as exc:
            if fallback is None:
                raise
            logger.warning("%s; serving stale cache for %s", exc.message, key)
            return ResolvedQuote.from_cached(fallback, is_stale=True)

        cached = CachedQuote.from_quote(quote, fetched_at_ms=now)
        # Keyed by the requested symbol, not the one echoed back upstream
        self._store.put(key, cached)
        return ResolvedQuote.from_cached(cached)
