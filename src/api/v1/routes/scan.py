"""Scan API routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_scan_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.scan import ScanDetailResponse, ScanRequest, ScanResponse
from core.config import settings
from core.exceptions import ImageTooLargeError
from core.rate_limit import SCAN_IMAGE_RATE_LIMIT, SCAN_RATE_LIMIT, limiter
from domain.entities.scan import ScanOutcome
from domain.services.scan_service import ScanService

router = APIRouter(prefix="/scan", tags=["scan"])

_SCAN_ERRORS = {422: {"model": ErrorResponse, "description": "Invalid code"}}


async def _read_image(request: Request, limit: int) -> bytes:
    """Read the raw request body, giving up as soon as it exceeds ``limit`` bytes."""
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise ImageTooLargeError(int(declared), limit)

    image = bytearray()
    async for chunk in request.stream():
        image.extend(chunk)
        if len(image) > limit:
            raise ImageTooLargeError(len(image), limit)
    return bytes(image)


@router.post(
    "",
    response_model=ScanDetailResponse,
    summary="Resolve scanned text",
    responses=_SCAN_ERRORS,
)
@limiter.limit(SCAN_RATE_LIMIT)  # type: ignore[untyped-decorator]
async def scan_contents(
    request: Request,
    body: ScanRequest,
    service: ScanService = Depends(get_scan_service),
) -> ScanDetailResponse:
    """
    Decode the text a client-side scanner read from a profile code.

    A null ``contents`` means the user cancelled the scan; the response then
    has status ``cancelled`` and no profile.
    """
    resolution = service.resolve(ScanOutcome.from_contents(body.contents))
    return ScanDetailResponse(data=ScanResponse.from_resolution(resolution))


@router.post(
    "/image",
    response_model=ScanDetailResponse,
    summary="Scan a code image",
    responses={
        413: {"model": ErrorResponse, "description": "Image too large"},
        **_SCAN_ERRORS,
    },
)
@limiter.limit(SCAN_IMAGE_RATE_LIMIT)  # type: ignore[untyped-decorator]
async def scan_image(
    request: Request,
    service: ScanService = Depends(get_scan_service),
) -> ScanDetailResponse:
    """Read the profile code in an uploaded image (raw request body)."""
    image = await _read_image(request, settings.max_scan_image_bytes)
    resolution = await service.scan_image(image)
    return ScanDetailResponse(data=ScanResponse.from_resolution(resolution))
