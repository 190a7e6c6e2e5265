"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ConfigurationError(AppError):
    """Raised for unsupported currency pairings or missing required configuration."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


class PersistenceError(AppError):
    """Raised when the quote cache cannot be read from or written to durable storage."""

    def __init__(self, message: str):
        super().__init__(message, code="PERSISTENCE_ERROR")


class QuoteError(AppError):
    """Base class for failures resolving a quote from the upstream provider."""

    def __init__(self, symbol: str, message: str, code: str):
        self.symbol = symbol
        super().__init__(message, code=code)


class SymbolNotFoundError(QuoteError):
    """Raised when the upstream provider has no quote for a symbol."""

    def __init__(self, symbol: str):
        super().__init__(symbol, f"Symbol not found: {symbol}", code="NOT_FOUND")


class RateLimitedError(QuoteError):
    """Raised when the upstream quota is exhausted."""

    def __init__(self, symbol: str, detail: str = "API limit reached"):
        super().__init__(symbol, f"Upstream rate limit hit for {symbol}: {detail}", code="RATE_LIMITED")


class UpstreamError(QuoteError):
    """Raised on network errors, timeouts and malformed upstream responses."""

    def __init__(self, symbol: str, detail: str):
        super().__init__(symbol, f"Failed to fetch {symbol}: {detail}", code="UPSTREAM_ERROR")
