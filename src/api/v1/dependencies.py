"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.services.form_assembler import FormAssembler
from domain.services.profile_codec import ProfileCodec
from domain.services.profile_service import ProfileService
from domain.services.scan_service import ScanService
from infrastructure.codes.qr_adapter import QRCodeImageAdapter
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


@lru_cache
def get_codec() -> ProfileCodec:
    """Get the profile codec."""
    return ProfileCodec()


@lru_cache
def get_code_adapter() -> QRCodeImageAdapter:
    """Get the QR code image adapter configured from settings."""
    return QRCodeImageAdapter(
        box_size=settings.qr_box_size,
        border=settings.qr_border,
        error_correction=settings.qr_error_correction,
    )


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory, get_codec())

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(
        get_uow_factory(),
        codec=get_codec(),
        assembler=FormAssembler(),
        code_adapter=get_code_adapter(),
    )


@lru_cache
def get_scan_service() -> ScanService:
    """Get Scan service instance."""
    return ScanService(codec=get_codec(), code_adapter=get_code_adapter())
