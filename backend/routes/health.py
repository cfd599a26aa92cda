"""Home, health and readiness check routes."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()

HOME_MESSAGE = "Crypto ticker proxy is running"


@router.get("/", response_class=PlainTextResponse)
async def home() -> str:
    return HOME_MESSAGE


@router.get("/ready")
async def ready(request: Request) -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": "crypto-ticker-proxy", "commit": request.app.state.settings.git_sha}


@router.get("/health")
async def health(request: Request) -> dict:
    """Readiness plus whether the crypto list is currently cached."""
    service = request.app.state.crypto_service
    return {
        "status": "ok",
        "service": "crypto-ticker-proxy",
        "commit": request.app.state.settings.git_sha,
        "cache": "warm" if service.is_warm else "cold",
    }
