"""Rate limiting for the endpoints that render or decode codes."""

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from core.config import settings
from core.exceptions import ErrorCode

logger = structlog.get_logger()

# Limit strings in slowapi notation, e.g. "30/minute"
PREVIEW_RATE_LIMIT = settings.preview_rate_limit
SCAN_RATE_LIMIT = settings.scan_rate_limit
SCAN_IMAGE_RATE_LIMIT = settings.scan_image_rate_limit

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    """Reject a request that went over its endpoint's limit."""
    limit = exc.detail if isinstance(exc, RateLimitExceeded) else str(exc)
    logger.warning("rate_limit_exceeded", path=request.url.path, limit=limit)
    return JSONResponse(
        status_code=429,
        content={
            "error_code": ErrorCode.RATE_LIMIT_EXCEEDED.value,
            "message": "Too many requests, try again shortly",
            "details": {"limit": limit},
        },
    )
