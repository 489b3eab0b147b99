"""
Shared response helpers for the landscape routers
app/routers/responses.py
"""

from __future__ import annotations

import logging
import os

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from app.services.errors import NoLandscapeDataError

logger = logging.getLogger(__name__)

CACHE_MAX_AGE = int(os.getenv("PATENT_CACHE_MAX_AGE", "3600"))
CACHE_STALE_WHILE_REVALIDATE = int(os.getenv("PATENT_CACHE_SWR", "86400"))

CACHE_CONTROL = (
    f"public, s-maxage={CACHE_MAX_AGE}, stale-while-revalidate={CACHE_STALE_WHILE_REVALIDATE}"
)


def set_cache_headers(response: Response) -> None:
    """Exports change rarely; let shared caches hold responses for hours."""
    response.headers["Cache-Control"] = CACHE_CONTROL


async def no_data_exception_handler(request: Request, exc: NoLandscapeDataError) -> JSONResponse:
    """Every input for a domain is missing: 500 with the {success: false} envelope."""
    logger.error(f"❌ {exc.domain} request failed: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": exc.message},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else a domain raises: same envelope, message from the exception."""
    logger.error(f"❌ {request.url.path} failed: {exc!r}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": str(exc) or "Unknown error"},
    )
