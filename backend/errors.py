"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TickerProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class FetchError(TickerProxyError):
    """Upstream ticker fetch failed: network error, bad status or undecodable body."""

    def __init__(self, message: str, url: str, upstream_status: int | None = None):
        super().__init__(message, status_code=500)
        self.url = url
        self.upstream_status = upstream_status


class ConfigurationError(TickerProxyError):
    """Settings failed validation; raised before the app is built."""

    def __init__(self, problems: list[str]):
        super().__init__("Invalid configuration: " + "; ".join(problems))
        self.problems = problems


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(TickerProxyError)
    async def handle_proxy_error(_request: Request, exc: TickerProxyError):
        logger.error("Request failed: %s", exc)
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
