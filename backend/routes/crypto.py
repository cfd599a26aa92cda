"""Crypto ticker route — cached pass-through to the exchange."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from services.crypto_list import CryptoListService
from services.result import Err

logger = logging.getLogger(__name__)

router = APIRouter()


def get_crypto_service(request: Request) -> CryptoListService:
    return request.app.state.crypto_service


@router.get("/crypto")
async def crypto(request: Request):
    """First N tickers, served from cache while the entry is fresh."""
    result = await get_crypto_service(request).get_list()
    if isinstance(result, Err):
        logger.error("Crypto list unavailable: %s", result.error)
        return JSONResponse({"error": str(result.error)}, status_code=result.error.status_code)
    return result.value
