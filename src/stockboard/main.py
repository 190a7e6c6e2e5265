"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stockboard.api.routers import portfolio_router, quotes_router
from stockboard.app_context import get_app_context
from stockboard.config.logging_config import setup_logging
from stockboard.config.settings import get_settings
from stockboard.core.exceptions import AppError

logger = logging.getLogger(__name__)

# HTTP status per AppError code; anything else is a 400
_STATUS_BY_CODE = {
    "VALIDATION_ERROR": 400,
    "CONFIGURATION_ERROR": 400,
    "NOT_FOUND": 404,
    "RATE_LIMITED": 429,
    "UPSTREAM_ERROR": 502,
    "PERSISTENCE_ERROR": 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: load the quote cache once
    setup_logging()
    context = get_app_context()
    store = context.store
    logger.info("Quote cache ready: %d entries, %s mode", len(store), context.mode.value)
    yield
    context.close()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Cached quote proxy and portfolio aggregation for the stock dashboard",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(quotes_router)
app.include_router(portfolio_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=_STATUS_BY_CODE.get(exc.code, 400),
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "mode": get_app_context().mode.value,
        "docs": "/docs",
    }
