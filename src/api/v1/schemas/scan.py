"""Pydantic schemas for Scan API."""

from pydantic import BaseModel, Field

from api.v1.schemas.profile import ProfileResponse
from core.config import settings
from domain.entities.scan import ScanResolution, ScanStatus


class ScanRequest(BaseModel):
    """Result of a scan performed on the client.

    ``contents`` is the text read from the code, or null when the user
    cancelled the scan.
    """

    contents: str | None = Field(None, max_length=settings.max_scan_payload_chars)


class ScanResponse(BaseModel):
    """Schema for a resolved scan."""

    status: ScanStatus
    profile: ProfileResponse | None = None

    @classmethod
    def from_resolution(cls, resolution: ScanResolution) -> "ScanResponse":
        if resolution.is_cancelled or resolution.profile is None:
            return cls(status=resolution.status)
        return cls(
            status=resolution.status,
            profile=ProfileResponse.from_entity(resolution.profile),
        )


class ScanDetailResponse(BaseModel):
    data: ScanResponse
