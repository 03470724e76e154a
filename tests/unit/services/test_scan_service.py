"""Unit tests for ScanService."""

from unittest.mock import MagicMock

import pytest

from core.exceptions import (
    InvalidPayloadFieldError,
    MalformedPayloadError,
    NoCodeFoundError,
)
from domain.entities.profile import ProfileRecord
from domain.entities.scan import ScanOutcome, ScanStatus
from domain.services.form_assembler import FormAssembler
from domain.services.profile_codec import ProfileCodec
from domain.services.scan_service import ScanService


@pytest.fixture
def service(codec: ProfileCodec, code_adapter: MagicMock) -> ScanService:
    return ScanService(codec=codec, code_adapter=code_adapter)


class TestScanOutcome:
    def test_none_contents_means_cancelled(self):
        assert ScanOutcome.from_contents(None).status == ScanStatus.CANCELLED

    def test_text_contents_means_completed(self):
        outcome = ScanOutcome.from_contents("abc")

        assert outcome.status == ScanStatus.COMPLETED
        assert outcome.contents == "abc"


class TestResolve:
    def test_completed_scan_yields_profile(
        self, service: ScanService, codec: ProfileCodec, jane: ProfileRecord
    ):
        resolution = service.resolve(ScanOutcome.completed(codec.encode(jane)))

        assert resolution.status == ScanStatus.COMPLETED
        assert resolution.profile == jane
        assert not resolution.is_cancelled

    def test_cancelled_scan_does_not_decode(self, code_adapter: MagicMock):
        codec = MagicMock(spec=ProfileCodec)
        service = ScanService(codec=codec, code_adapter=code_adapter)

        resolution = service.resolve(ScanOutcome.cancelled())

        assert resolution.is_cancelled
        assert resolution.profile is None
        codec.decode.assert_not_called()

    def test_no_result_is_reported(self, service: ScanService):
        with pytest.raises(NoCodeFoundError):
            service.resolve(ScanOutcome.no_result())

    def test_malformed_text_is_reported(self, service: ScanService):
        with pytest.raises(MalformedPayloadError):
            service.resolve(ScanOutcome.completed("https://example.com"))

    def test_invalid_field_is_reported(self, service: ScanService):
        text = (
            '{"v":1,"name":{"firstName":"Jane","lastName":"Doe"},"email":"",'
            '"phoneNumber":"555","socialNetworks":{"discordTag":null,'
            '"instagramUsername":null},"notes":""}'
        )

        with pytest.raises(InvalidPayloadFieldError):
            service.resolve(ScanOutcome.completed(text))

    def test_each_scan_is_independent(
        self,
        service: ScanService,
        codec: ProfileCodec,
        jane: ProfileRecord,
        full_profile: ProfileRecord,
    ):
        first = service.resolve(ScanOutcome.completed(codec.encode(jane)))
        second = service.resolve(ScanOutcome.completed(codec.encode(full_profile)))

        assert first.profile == jane
        assert second.profile == full_profile


class TestScanImage:
    @pytest.mark.asyncio
    async def test_resolves_adapter_outcome(
        self,
        service: ScanService,
        code_adapter: MagicMock,
        codec: ProfileCodec,
        jane: ProfileRecord,
    ):
        code_adapter.decode.return_value = ScanOutcome.completed(codec.encode(jane))

        resolution = await service.scan_image(b"image-bytes")

        assert resolution.profile == jane
        code_adapter.decode.assert_called_once_with(b"image-bytes")

    @pytest.mark.asyncio
    async def test_unreadable_image_is_no_result(
        self, service: ScanService, code_adapter: MagicMock
    ):
        code_adapter.decode.return_value = ScanOutcome.no_result()

        with pytest.raises(NoCodeFoundError):
            await service.scan_image(b"not an image")


def test_jane_scenario(
    assembler: FormAssembler,
    codec: ProfileCodec,
    service: ScanService,
    jane_fields: dict[str, str],
):
    assembled = assembler.assemble(jane_fields)
    text = codec.encode(assembled)

    resolution = service.resolve(ScanOutcome.from_contents(text))

    assert resolution.profile == assembled
