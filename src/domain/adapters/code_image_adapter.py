"""Code image adapter protocol."""

from typing import Protocol

from domain.entities.scan import ScanOutcome


class ICodeImageAdapter(Protocol):
    """Protocol for turning text into scannable images and back."""

    def generate(self, text: str) -> bytes:
        """
        Render text as a scannable code.

        Args:
            text: The payload to embed

        Returns:
            PNG image bytes

        Raises:
            CodeGenerationError: the payload does not fit in a code
        """
        ...

    def decode(self, image: bytes) -> ScanOutcome:
        """
        Read the payload of the code found in an image.

        Args:
            image: Encoded image bytes (PNG, JPEG, ...)

        Returns:
            A completed outcome with the text, or a no-result outcome
        """
        ...
