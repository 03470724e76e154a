"""Own-profile service layer."""

import asyncio
from typing import Callable

import structlog

from core.exceptions import ProfileNotConfiguredError
from domain.adapters.code_image_adapter import ICodeImageAdapter
from domain.entities.profile import ProfileField, ProfileRecord
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.form_assembler import FormAssembler, FormFields
from domain.services.profile_codec import ProfileCodec

logger = structlog.get_logger()


class ProfileService:
    """Service layer for the device owner's profile and its code."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        codec: ProfileCodec,
        assembler: FormAssembler,
        code_adapter: ICodeImageAdapter,
    ) -> None:
        self._uow_factory = uow_factory
        self._codec = codec
        self._assembler = assembler
        self._code_adapter = code_adapter

    async def get_own_profile(self) -> ProfileRecord:
        """Get the stored own profile. There is no placeholder fallback."""
        async with self._uow_factory() as uow:
            record = await uow.profiles.load_own_profile()
            if record is None:
                raise ProfileNotConfiguredError()
            return record

    async def save_own_profile(self, fields: FormFields) -> ProfileRecord:
        """Build a profile from form fields and make it the own profile."""
        record = self._assembler.assemble(fields)
        async with self._uow_factory() as uow:
            saved = await uow.profiles.save_own_profile(record)
            await uow.commit()
        logger.info("own_profile_saved")
        return saved

    async def reset_own_profile(self) -> None:
        """Forget the own profile so that it must be created again."""
        async with self._uow_factory() as uow:
            existed = await uow.profiles.clear_own_profile()
            if not existed:
                raise ProfileNotConfiguredError()
            await uow.commit()
        logger.info("own_profile_cleared")

    async def get_own_form_fields(self) -> dict[ProfileField, str]:
        """Form fields prefilled from the own profile, for editing it."""
        return self._assembler.fields_from_record(await self.get_own_profile())

    async def get_own_payload(self) -> str:
        """Canonical text of the own profile, as embedded in its code."""
        return self._codec.encode(await self.get_own_profile())

    async def get_own_code_image(self) -> bytes:
        """PNG code of the own profile."""
        payload = await self.get_own_payload()
        return await asyncio.to_thread(self._code_adapter.generate, payload)

    async def preview_code_image(self, fields: FormFields) -> bytes:
        """PNG code for form fields that have not been saved."""
        record = self._assembler.assemble(fields)
        payload = self._codec.encode(record)
        return await asyncio.to_thread(self._code_adapter.generate, payload)
