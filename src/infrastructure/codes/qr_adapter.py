"""QR code implementation of the code image adapter."""

from io import BytesIO

import cv2
import numpy as np
import qrcode
import qrcode.constants
import structlog
from qrcode.exceptions import DataOverflowError

from core.exceptions import CodeGenerationError
from domain.entities.scan import ScanOutcome

logger = structlog.get_logger()

_ERROR_CORRECTION = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


class QRCodeImageAdapter:
    """Generates QR codes with ``qrcode`` and reads them with OpenCV."""

    def __init__(
        self,
        box_size: int = 10,
        border: int = 4,
        error_correction: str = "M",
    ) -> None:
        if error_correction not in _ERROR_CORRECTION:
            raise ValueError(f"Unknown error correction level: {error_correction}")
        self._box_size = box_size
        self._border = border
        self._error_correction = _ERROR_CORRECTION[error_correction]

    def generate(self, text: str) -> bytes:
        """Render text as a PNG QR code, picking the smallest version that fits."""
        qr = qrcode.QRCode(
            version=None,
            error_correction=self._error_correction,
            box_size=self._box_size,
            border=self._border,
        )
        qr.add_data(text)
        try:
            qr.make(fit=True)
        except DataOverflowError as e:
            logger.warning("code_generation_overflow", payload_length=len(text))
            raise CodeGenerationError("payload too large for a QR code", len(text)) from e

        img = qr.make_image(fill_color="black", back_color="white")
        buffer = BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()

    def decode(self, image: bytes) -> ScanOutcome:
        """Find and read a QR code in an encoded image."""
        if not image:
            return ScanOutcome.no_result()

        try:
            pixels = cv2.imdecode(np.frombuffer(image, dtype=np.uint8), cv2.IMREAD_GRAYSCALE)
            if pixels is None:
                logger.info("scan_image_unreadable", image_bytes=len(image))
                return ScanOutcome.no_result()
            text, _points, _straight = cv2.QRCodeDetector().detectAndDecode(pixels)
        except cv2.error as e:
            logger.warning("scan_decoder_failed", error=str(e))
            return ScanOutcome.no_result()

        if not text:
            return ScanOutcome.no_result()
        return ScanOutcome.completed(text)
