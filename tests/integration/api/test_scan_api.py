"""Integration tests for the scan API."""

import pytest
from httpx import AsyncClient

from core.config import settings
from domain.entities.profile import ProfileRecord
from domain.services.profile_codec import ProfileCodec
from infrastructure.codes.qr_adapter import QRCodeImageAdapter


class TestScanAPI:
    """Integration tests for resolving scanned codes."""

    @pytest.mark.asyncio
    async def test_scan_contents(self, client: AsyncClient, jane: ProfileRecord):
        """Test POST /api/v1/scan."""
        response = await client.post(
            "/api/v1/scan", json={"contents": ProfileCodec().encode(jane)}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "completed"
        assert data["profile"]["display_name"] == "Jane Doe"
        assert data["profile"]["social_networks"]["discord_tag"] == "jane#1234"

    @pytest.mark.asyncio
    async def test_cancelled_scan_is_not_an_error(self, client: AsyncClient):
        response = await client.post("/api/v1/scan", json={"contents": None})

        assert response.status_code == 200
        assert response.json()["data"] == {"status": "cancelled", "profile": None}

    @pytest.mark.asyncio
    async def test_malformed_contents(self, client: AsyncClient):
        response = await client.post("/api/v1/scan", json={"contents": "{garbage"})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "MALFORMED_PAYLOAD"
        assert body["message"] == "Invalid code: not a profile"

    @pytest.mark.asyncio
    async def test_invalid_field_contents(self, client: AsyncClient):
        contents = (
            '{"v":1,"name":{"firstName":"Jane","lastName":"Doe"},"email":"",'
            '"phoneNumber":"555","socialNetworks":{"discordTag":null,'
            '"instagramUsername":null},"notes":""}'
        )

        response = await client.post("/api/v1/scan", json={"contents": contents})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "INVALID_PAYLOAD_FIELD"
        assert body["details"]["field"] == "email"

    @pytest.mark.asyncio
    async def test_oversized_contents_rejected(self, client: AsyncClient):
        response = await client.post("/api/v1/scan", json={"contents": "x" * 10_000})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_scan_does_not_touch_own_profile(self, client: AsyncClient, jane: ProfileRecord):
        await client.post("/api/v1/scan", json={"contents": ProfileCodec().encode(jane)})

        assert (await client.get("/api/v1/profile/me")).status_code == 404

    @pytest.mark.asyncio
    async def test_scan_image(self, client: AsyncClient, jane: ProfileRecord):
        """Test POST /api/v1/scan/image with a generated code."""
        image = QRCodeImageAdapter().generate(ProfileCodec().encode(jane))

        response = await client.post(
            "/api/v1/scan/image",
            content=image,
            headers={"Content-Type": "image/png"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "completed"
        assert data["profile"]["name"]["first_name"] == "Jane"

    @pytest.mark.asyncio
    async def test_scan_image_without_code(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/scan/image",
            content=b"definitely not a png",
            headers={"Content-Type": "image/png"},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "NO_CODE_FOUND"

    @pytest.mark.asyncio
    async def test_round_trip_between_devices(
        self, client: AsyncClient, jane_fields: dict[str, str]
    ):
        """One device shares its code, another scans it."""
        await client.put("/api/v1/profile/me", json={"fields": jane_fields})
        shared = await client.get("/api/v1/profile/me")
        image = (await client.get("/api/v1/profile/me/code.png")).content

        response = await client.post(
            "/api/v1/scan/image",
            content=image,
            headers={"Content-Type": "image/png"},
        )

        scanned = response.json()["data"]["profile"]
        assert scanned == shared.json()["data"]

    @pytest.mark.asyncio
    async def test_oversized_image_rejected(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setattr(settings, "max_scan_image_bytes", 16)

        response = await client.post(
            "/api/v1/scan/image",
            content=b"x" * 64,
            headers={"Content-Type": "image/png"},
        )

        assert response.status_code == 413
        body = response.json()
        assert body["error_code"] == "IMAGE_TOO_LARGE"
        assert body["details"] == {"size": 64, "limit": 16}

    @pytest.mark.asyncio
    async def test_oversized_streamed_image_rejected(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ):
        """A chunked upload without Content-Length is cut off while reading."""
        monkeypatch.setattr(settings, "max_scan_image_bytes", 16)

        async def chunks():
            for _ in range(8):
                yield b"x" * 8

        response = await client.post(
            "/api/v1/scan/image",
            content=chunks(),
            headers={"Content-Type": "image/png"},
        )

        assert response.status_code == 413
        assert response.json()["error_code"] == "IMAGE_TOO_LARGE"
