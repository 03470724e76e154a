"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    PROFILE_NOT_CONFIGURED = "PROFILE_NOT_CONFIGURED"

    # Form assembly errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FIELD = "INVALID_FIELD"

    # Scanned payload errors (422)
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
    INVALID_PAYLOAD_FIELD = "INVALID_PAYLOAD_FIELD"

    # Code image errors (422)
    CODE_GENERATION_FAILED = "CODE_GENERATION_FAILED"
    NO_CODE_FOUND = "NO_CODE_FOUND"
    IMAGE_TOO_LARGE = "IMAGE_TOO_LARGE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    PROFILE_STORE_CORRUPT = "PROFILE_STORE_CORRUPT"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ProfileNotConfiguredError(AppException):
    """No own profile has been created on this device yet."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_CONFIGURED,
            message="No profile configured. Create your profile first.",
            status_code=404,
        )


# --- Form assembly ---


class AssemblyError(AppException):
    """User-entered form fields could not be turned into a profile."""

    field: str


class MissingFieldError(AssemblyError):
    """A required form field is absent or blank."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            error_code=ErrorCode.MISSING_FIELD,
            message=f"Missing field: {field}",
            status_code=400,
            details={"field": field},
        )


class InvalidFieldError(AssemblyError):
    """A field value violates the profile invariants."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            error_code=ErrorCode.INVALID_FIELD,
            message=f"Invalid field {field}: {reason}",
            status_code=400,
            details={"field": field, "reason": reason},
        )


# --- Scanned payload decoding ---


class PayloadDecodeError(AppException):
    """Scanned text could not be decoded into a profile."""


class MalformedPayloadError(PayloadDecodeError):
    """Text is not a well-formed canonical profile encoding."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(
            error_code=ErrorCode.MALFORMED_PAYLOAD,
            message="Invalid code: not a profile",
            status_code=422,
            details={"reason": reason},
        )


class InvalidPayloadFieldError(PayloadDecodeError):
    """Encoding is well-formed but a field violates the profile invariants."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            error_code=ErrorCode.INVALID_PAYLOAD_FIELD,
            message=f"Invalid code: bad {field}",
            status_code=422,
            details={"field": field, "reason": reason},
        )


# --- Collaborators ---


class AdapterError(AppException):
    """The code-image collaborator failed."""


class CodeGenerationError(AdapterError):
    """Text could not be rendered as a scannable code."""

    def __init__(self, reason: str, payload_length: int | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.CODE_GENERATION_FAILED,
            message="Cannot generate code",
            status_code=422,
            details={"reason": reason, "payload_length": payload_length},
        )


class NoCodeFoundError(AdapterError):
    """The scanned image did not contain a readable code."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NO_CODE_FOUND,
            message="No code found in the scanned image",
            status_code=422,
        )


class StoreError(AppException):
    """The profile store could not read or write the own profile."""

    def __init__(
        self,
        message: str = "Profile store failure",
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=500,
        )


class ImageTooLargeError(AppException):
    """An uploaded scan image exceeds the accepted size."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            error_code=ErrorCode.IMAGE_TOO_LARGE,
            message="Scanned image is too large",
            status_code=413,
            details={"size": size, "limit": limit},
        )
