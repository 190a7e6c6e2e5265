"""Core utilities and shared functionality."""

from stockboard.core.clock import Clock, SystemClock
from stockboard.core.timezone import (
    now_eastern,
    from_epoch_ms,
    EASTERN_TZ,
)
from stockboard.core.exceptions import (
    AppError,
    ValidationError,
    ConfigurationError,
    PersistenceError,
    QuoteError,
    SymbolNotFoundError,
    RateLimitedError,
    UpstreamError,
)

__all__ = [
    "Clock",
    "SystemClock",
    "now_eastern",
    "from_epoch_ms",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "ConfigurationError",
    "PersistenceError",
    "QuoteError",
    "SymbolNotFoundError",
    "RateLimitedError",
    "UpstreamError",
]
