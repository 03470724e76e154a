"""Unit tests for the rate limit handler and limits."""

import json

import pytest
from starlette.requests import Request

from core.config import settings
from core.rate_limit import (
    PREVIEW_RATE_LIMIT,
    SCAN_IMAGE_RATE_LIMIT,
    SCAN_RATE_LIMIT,
    rate_limit_exceeded_handler,
)


def _request(path: str) -> Request:
    return Request({"type": "http", "method": "POST", "path": path, "headers": []})


class TestRateLimit:
    def test_limits_come_from_settings(self) -> None:
        assert PREVIEW_RATE_LIMIT == settings.preview_rate_limit
        assert SCAN_RATE_LIMIT == settings.scan_rate_limit
        assert SCAN_IMAGE_RATE_LIMIT == settings.scan_image_rate_limit

    @pytest.mark.asyncio
    async def test_handler_reports_the_limit(self) -> None:
        response = await rate_limit_exceeded_handler(
            _request("/api/v1/scan/image"), Exception("10 per 1 minute")
        )

        assert response.status_code == 429
        body = json.loads(response.body)
        assert body["error_code"] == "RATE_LIMIT_EXCEEDED"
        assert body["details"] == {"limit": "10 per 1 minute"}
