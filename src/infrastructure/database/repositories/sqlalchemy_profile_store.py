"""SQLAlchemy implementation of the own-profile store."""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ErrorCode, PayloadDecodeError, StoreError
from domain.entities.profile import ProfileRecord
from domain.services.profile_codec import ProfileCodec
from infrastructure.database.models import OWN_PROFILE_ID, OwnProfileModel

logger = structlog.get_logger()


class SQLAlchemyProfileStore:
    """SQLAlchemy implementation of IProfileStore.

    The profile is persisted in its canonical encoding, the same text that
    goes into the scannable code.
    """

    def __init__(self, session: AsyncSession, codec: ProfileCodec) -> None:
        self._session = session
        self._codec = codec

    async def load_own_profile(self) -> ProfileRecord | None:
        """Get the own profile, or None when none has been created."""
        model = await self._get_model()
        if model is None:
            return None
        try:
            return self._codec.decode(model.payload)
        except PayloadDecodeError as e:
            logger.error("own_profile_corrupt", error_code=e.error_code.value)
            raise StoreError(
                "Stored profile is unreadable", ErrorCode.PROFILE_STORE_CORRUPT
            ) from e

    async def save_own_profile(self, record: ProfileRecord) -> ProfileRecord:
        """Store the own profile, replacing any previous one."""
        payload = self._codec.encode(record)
        model = await self._get_model()
        if model is None:
            self._session.add(OwnProfileModel(id=OWN_PROFILE_ID, payload=payload))
        else:
            model.payload = payload
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not save profile: {type(e).__name__}") from e
        return record

    async def clear_own_profile(self) -> bool:
        """Remove the own profile and return whether one existed."""
        try:
            result = await self._session.execute(
                delete(OwnProfileModel).where(OwnProfileModel.id == OWN_PROFILE_ID)
            )
        except SQLAlchemyError as e:
            raise StoreError(f"Could not clear profile: {type(e).__name__}") from e
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def _get_model(self) -> OwnProfileModel | None:
        stmt = select(OwnProfileModel).where(OwnProfileModel.id == OWN_PROFILE_ID)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not read profile: {type(e).__name__}") from e
        return result.scalar_one_or_none()
