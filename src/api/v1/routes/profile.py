"""Own-profile API routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    PayloadDetailResponse,
    PayloadResponse,
    ProfileDetailResponse,
    ProfileForm,
    ProfileFormDetailResponse,
    ProfileFormResponse,
    ProfileResponse,
)
from core.rate_limit import PREVIEW_RATE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])

PNG_MEDIA_TYPE = "image/png"

_NOT_CONFIGURED = {404: {"model": ErrorResponse, "description": "No profile configured"}}
_FORM_ERRORS = {400: {"model": ErrorResponse, "description": "Missing or invalid field"}}


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get own profile",
    responses=_NOT_CONFIGURED,
)
async def get_own_profile(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the profile of the device owner."""
    record = await service.get_own_profile()
    return ProfileDetailResponse(data=ProfileResponse.from_entity(record))


@router.put(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Create or replace own profile",
    responses=_FORM_ERRORS,
)
async def save_own_profile(
    body: ProfileForm,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Build a profile from form fields keyed by canonical field id and store it."""
    record = await service.save_own_profile(body.fields)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(record))


@router.delete(
    "/me",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset own profile",
    responses=_NOT_CONFIGURED,
)
async def reset_own_profile(
    service: ProfileService = Depends(get_profile_service),
) -> None:
    """Remove the own profile. It has to be created again before it can be shared."""
    await service.reset_own_profile()


@router.get(
    "/me/form",
    response_model=ProfileFormDetailResponse,
    summary="Get own profile as form fields",
    responses=_NOT_CONFIGURED,
)
async def get_own_form(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileFormDetailResponse:
    """Prefill the edit form. Handles that are not shared are left out."""
    fields = await service.get_own_form_fields()
    return ProfileFormDetailResponse(
        data=ProfileFormResponse(fields={field.value: value for field, value in fields.items()})
    )


@router.get(
    "/me/payload",
    response_model=PayloadDetailResponse,
    summary="Get own profile code payload",
    responses=_NOT_CONFIGURED,
)
async def get_own_payload(
    service: ProfileService = Depends(get_profile_service),
) -> PayloadDetailResponse:
    """Get the canonical text embedded in the own profile code."""
    payload = await service.get_own_payload()
    return PayloadDetailResponse(data=PayloadResponse(payload=payload))


@router.get(
    "/me/code.png",
    response_class=Response,
    summary="Get own profile code",
    responses={
        200: {"content": {PNG_MEDIA_TYPE: {}}, "description": "QR code image"},
        **_NOT_CONFIGURED,
    },
)
async def get_own_code(
    service: ProfileService = Depends(get_profile_service),
) -> Response:
    """Render the own profile as a scannable QR code."""
    image = await service.get_own_code_image()
    return Response(content=image, media_type=PNG_MEDIA_TYPE)


@router.post(
    "/preview.png",
    response_class=Response,
    summary="Preview a profile code",
    responses={
        200: {"content": {PNG_MEDIA_TYPE: {}}, "description": "QR code image"},
        **_FORM_ERRORS,
    },
)
@limiter.limit(PREVIEW_RATE_LIMIT)  # type: ignore[untyped-decorator]
async def preview_code(
    request: Request,
    body: ProfileForm,
    service: ProfileService = Depends(get_profile_service),
) -> Response:
    """Render form fields as a QR code without saving them."""
    image = await service.preview_code_image(body.fields)
    return Response(content=image, media_type=PNG_MEDIA_TYPE)
