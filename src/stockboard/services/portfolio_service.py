"""Portfolio refresh: resolve every holding's quote concurrently, then aggregate."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from stockboard.core.exceptions import AppError, ConfigurationError
from stockboard.domain.models import Currency, Holding, QuoteMode
from stockboard.domain.views import PortfolioView, ResolvedQuote
from stockboard.repositories.quote_cache_store import normalize_symbol
from stockboard.services.portfolio_aggregator import aggregate, conversion_rate
from stockboard.services.quote_resolver import QuoteResolver

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


class PortfolioRefreshService:
    """
    Refreshes quotes for a set of holdings and builds the portfolio view.

    Each distinct symbol is resolved once, all symbols in parallel. A symbol
    that fails only zeroes the holdings that use it; it never cancels the
    others or fails the refresh.
    """

    def __init__(
        self,
        resolver: QuoteResolver,
        base_currency: Union[Currency, str] = Currency.JPY,
        usd_jpy_rate: float = 150.0,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self._resolver = resolver
        self._base_currency = base_currency
        self._usd_jpy_rate = usd_jpy_rate
        self._max_workers = max(1, max_workers)

    def refresh(
        self,
        holdings: Sequence[Holding],
        base_currency: Optional[Union[Currency, str]] = None,
        usd_jpy_rate: Optional[float] = None,
        mode: Optional[QuoteMode] = None,
    ) -> PortfolioView:
        """
        Resolve quotes for holdings and aggregate them.

        Base currency and rate default to the configured values.

        Raises:
            ConfigurationError: invalid currency/rate, or live quotes without an API key
        """
        base_currency = base_currency or self._base_currency
        usd_jpy_rate = usd_jpy_rate if usd_jpy_rate is not None else self._usd_jpy_rate
        # Fail on bad display settings before spending upstream quota
        conversion_rate(Currency.USD, base_currency, usd_jpy_rate)

        quotes, errors = self.resolve_all(holdings, mode=mode)
        return aggregate(
            holdings,
            quotes,
            base_currency=base_currency,
            usd_jpy_rate=usd_jpy_rate,
            errors=errors,
        )

    def resolve_all(
        self,
        holdings: Sequence[Holding],
        mode: Optional[QuoteMode] = None,
    ) -> tuple[dict[str, ResolvedQuote], dict[str, str]]:
        """
        Resolve every holding's quote.

        Returns (quotes by holding id, error message by holding id).
        """
        symbols = sorted({normalize_symbol(h.symbol) for h in holdings})
        if not symbols:
            return {}, {}

        by_symbol: dict[str, ResolvedQuote] = {}
        failures: dict[str, str] = {}
        workers = min(self._max_workers, len(symbols))
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures = {
                symbol: ex.submit(self._resolver.get_quote, symbol, mode)
                for symbol in symbols
            }
            for symbol, fut in futures.items():
                try:
                    by_symbol[symbol] = fut.result()
                except ConfigurationError:
                    raise
                except AppError as exc:
                    logger.warning("Failed to load %s: %s", symbol, exc.message)
                    failures[symbol] = exc.message
                except Exception as exc:
                    logger.exception("Unexpected error resolving %s", symbol)
                    failures[symbol] = f"Failed to load {symbol}: {exc}"

        quotes: dict[str, ResolvedQuote] = {}
        errors: dict[str, str] = {}
        for holding in holdings:
            symbol = normalize_symbol(holding.symbol)
            if symbol in by_symbol:
                quotes[holding.id] = by_symbol[symbol]
            else:
                errors[holding.id] = failures.get(symbol, f"No quote for {symbol}")
        return quotes, errors
