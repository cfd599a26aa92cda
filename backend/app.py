"""FastAPI application entry point for the crypto ticker proxy."""

import logging
import sys
import time
from collections.abc import Callable

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings
from errors import ConfigurationError, register_error_handlers
from services.cache import TTLCache
from services.crypto_list import CryptoListService
from services.tickers import TickerFetcher

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    fetcher: TickerFetcher | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> FastAPI:
    app_settings = app_settings or settings
    problems = app_settings.validate()
    if problems:
        logger.error("Configuration problems: %s", "; ".join(problems))
        raise ConfigurationError(problems)

    app = FastAPI(title="Crypto Ticker Proxy", version="1.0.0")
    app.state.settings = app_settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if app_settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    app.state.crypto_service = CryptoListService(
        cache=TTLCache(ttl_seconds=app_settings.cache_ttl_seconds, clock=clock),
        fetcher=fetcher or TickerFetcher(timeout=app_settings.http_timeout_seconds),
        url=app_settings.ticker_url,
        limit=app_settings.crypto_list_limit,
    )

    from routes.crypto import router as crypto_router
    from routes.health import router as health_router

    app.include_router(health_router)
    app.include_router(crypto_router)

    return app


app = create_app()


def main() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
