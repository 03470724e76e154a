"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator

# Disable rate limiting and keep the profile store in memory during tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from domain.entities.profile import (
    DiscordTag,
    Email,
    Name,
    PhoneNumber,
    ProfileRecord,
    SocialNetworks,
)
from infrastructure.database.models import Base

# Test database URL (SQLite in memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with the profile store tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def jane_fields() -> dict[str, str]:
    """Form input for a typical profile."""
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@doe.com",
        "phoneNumber": "555-1234",
        "discordTag": "jane#1234",
    }


@pytest.fixture
def jane() -> ProfileRecord:
    """The profile built from ``jane_fields``."""
    return ProfileRecord(
        name=Name("Jane", "Doe"),
        email=Email("jane@doe.com"),
        phone_number=PhoneNumber("555-1234"),
        social_networks=SocialNetworks(discord_tag=DiscordTag("jane#1234")),
    )


@pytest.fixture
def full_profile() -> ProfileRecord:
    """A profile with every field set, including non-ASCII text."""
    return ProfileRecord(
        name=Name("Émilie", "Tremblay"),
        email=Email("emilie@usherbrooke.ca"),
        phone_number=PhoneNumber("+1 (819) 555-0199"),
        social_networks=SocialNetworks(
            discord_tag=DiscordTag("emilie#0042"),
            instagram_username="emilie.t",
        ),
        notes='Met at "CS Games"\nAsk about the robot, {not json}',
    )


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the in-memory profile store.

    Overrides the service and session dependencies so that every request
    goes through ``session_factory``.
    """
    from api.v1.dependencies import (
        get_code_adapter,
        get_codec,
        get_profile_service,
    )
    from domain.services.form_assembler import FormAssembler
    from domain.services.profile_service import ProfileService
    from infrastructure.database.session import get_async_session
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory, get_codec())

    def override_get_profile_service() -> ProfileService:
        return ProfileService(
            test_uow_factory,
            codec=get_codec(),
            assembler=FormAssembler(),
            code_adapter=get_code_adapter(),
        )

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_profile_service] = override_get_profile_service
    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()

