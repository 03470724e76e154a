"""Profile store protocol."""

from typing import Protocol

from domain.entities.profile import ProfileRecord


class IProfileStore(Protocol):
    """Repository interface for the device owner's own profile.

    The store holds at most one profile. Saving replaces it.
    """

    async def load_own_profile(self) -> ProfileRecord | None:
        """Get the own profile, or None when none has been created."""
        ...

    async def save_own_profile(self, record: ProfileRecord) -> ProfileRecord:
        """Store the own profile, replacing any previous one."""
        ...

    async def clear_own_profile(self) -> bool:
        """Remove the own profile and return whether one existed."""
        ...
