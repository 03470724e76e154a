"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.services.form_assembler import FormAssembler
from domain.services.profile_codec import ProfileCodec


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked profile store for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def codec() -> ProfileCodec:
    return ProfileCodec()


@pytest.fixture
def assembler() -> FormAssembler:
    return FormAssembler()


@pytest.fixture
def code_adapter() -> MagicMock:
    """A code image adapter that renders fixed bytes."""
    adapter = MagicMock()
    adapter.generate.return_value = b"\x89PNG-fake"
    return adapter
