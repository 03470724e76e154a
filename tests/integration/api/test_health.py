"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_expected_structure(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data
        assert "environment" in data

    @pytest.mark.asyncio
    async def test_detailed_health_reports_unconfigured_profile(
        self, client: AsyncClient
    ) -> None:
        response = await client.get("/health/detailed")

        data = response.json()
        assert data["status"] == "healthy"
        assert data["profile_store"] == "healthy"
        assert data["profile_configured"] is False

    @pytest.mark.asyncio
    async def test_detailed_health_reports_configured_profile(
        self, client: AsyncClient, jane_fields: dict[str, str]
    ) -> None:
        await client.put("/api/v1/profile/me", json={"fields": jane_fields})

        response = await client.get("/health/detailed")

        assert response.json()["profile_configured"] is True
