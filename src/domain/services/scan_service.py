"""Scan service layer."""

import asyncio

import structlog

from core.exceptions import NoCodeFoundError, PayloadDecodeError
from domain.adapters.code_image_adapter import ICodeImageAdapter
from domain.entities.scan import ScanOutcome, ScanResolution, ScanStatus
from domain.services.profile_codec import ProfileCodec

logger = structlog.get_logger()


class ScanService:
    """Turns finished scan interactions into profiles.

    The scanned profile is handed back to the caller; nothing is kept
    between calls.
    """

    def __init__(self, codec: ProfileCodec, code_adapter: ICodeImageAdapter) -> None:
        self._codec = codec
        self._code_adapter = code_adapter

    def resolve(self, outcome: ScanOutcome) -> ScanResolution:
        """Decode the text of a completed scan.

        A cancelled scan resolves to a cancelled resolution without decoding.

        Raises:
            NoCodeFoundError: the scan finished without reading a code.
            PayloadDecodeError: the scanned text is not a valid profile.
        """
        if outcome.status is ScanStatus.CANCELLED:
            logger.info("scan_cancelled")
            return ScanResolution(status=ScanStatus.CANCELLED)

        if outcome.status is ScanStatus.NO_RESULT or outcome.contents is None:
            logger.info("scan_no_result")
            raise NoCodeFoundError()

        try:
            profile = self._codec.decode(outcome.contents)
        except PayloadDecodeError as e:
            logger.info(
                "payload_rejected",
                error_code=e.error_code.value,
                payload_length=len(outcome.contents),
            )
            raise

        logger.info("scan_completed", payload_length=len(outcome.contents))
        return ScanResolution(status=ScanStatus.COMPLETED, profile=profile)

    async def scan_image(self, image: bytes) -> ScanResolution:
        """Read the code in an image and resolve it."""
        outcome = await asyncio.to_thread(self._code_adapter.decode, image)
        return self.resolve(outcome)
