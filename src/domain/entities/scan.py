"""Scan interaction outcome entities."""

from dataclasses import dataclass
from enum import StrEnum

from domain.entities.profile import ProfileRecord


class ScanStatus(StrEnum):
    """How a scan interaction ended."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_RESULT = "no_result"


@dataclass(frozen=True, slots=True)
class ScanOutcome:
    """Result delivered by the code-image adapter once a scan finishes."""

    status: ScanStatus
    contents: str | None = None

    @classmethod
    def completed(cls, contents: str) -> "ScanOutcome":
        return cls(status=ScanStatus.COMPLETED, contents=contents)

    @classmethod
    def cancelled(cls) -> "ScanOutcome":
        return cls(status=ScanStatus.CANCELLED)

    @classmethod
    def no_result(cls) -> "ScanOutcome":
        return cls(status=ScanStatus.NO_RESULT)

    @classmethod
    def from_contents(cls, contents: str | None) -> "ScanOutcome":
        """Map a scanner result where ``None`` means the user backed out."""
        if contents is None:
            return cls.cancelled()
        return cls.completed(contents)


@dataclass(frozen=True, slots=True)
class ScanResolution:
    """What the caller gets back after a scan: a profile, or a cancellation."""

    status: ScanStatus
    profile: ProfileRecord | None = None

    @property
    def is_cancelled(self) -> bool:
        return self.status == ScanStatus.CANCELLED
