import asyncio
import os
import tempfile
from contextlib import asynccontextmanager
from uuid import uuid4

# Point the app at a throwaway SQLite file before any settings are loaded
os.environ["DB_DSN"] = os.environ.get(
    "TEST_DB_DSN", f"sqlite+aiosqlite:///{tempfile.mkdtemp()}/wedding_platform.db"
)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.config.database import async_session_maker, engine  # noqa: E402
from src.main import app  # noqa: E402
from src.models.tables import metadata  # noqa: E402
from src.tenants.dtos import WeddingSiteDTO  # noqa: E402
from src.tenants.repository.orm_models import Tenant, Wedding  # noqa: E402


async def _create_schema():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)
    await engine.dispose()


@pytest.fixture(scope="session", autouse=True)
def database_schema():
    asyncio.run(_create_schema())
    yield


@pytest.fixture
async def client():
    """Create a test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def client_factory():
    """Test client with FastAPI dependency overrides applied for its lifetime."""

    @asynccontextmanager
    async def _client(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return _client


def build_site(**kwargs) -> WeddingSiteDTO:
    values = {
        "tenant_id": uuid4(),
        "wedding_id": uuid4(),
        "subdomain": "anna-and-ben",
        "partner1_name": "Anna",
        "partner2_name": "Ben",
    }
    values.update(kwargs)
    return WeddingSiteDTO(**values)


@pytest.fixture
def site() -> WeddingSiteDTO:
    """Wedding site that only exists in memory, for endpoint tests."""
    return build_site()


async def add_wedding(session, **wedding_fields) -> WeddingSiteDTO:
    """Insert a fresh tenant and wedding through ``session`` (flushed, not committed)."""
    subdomain = f"w-{uuid4().hex[:12]}"
    tenant = Tenant(subdomain=subdomain, name="Anna & Ben")
    session.add(tenant)
    await session.flush()
    fields = {
        "partner1_name": "Anna",
        "partner2_name": "Ben",
        "photo_sharing_enabled": True,
        "photo_moderation_required": True,
    }
    fields.update(wedding_fields)
    wedding = Wedding(tenant_id=tenant.uuid, **fields)
    session.add(wedding)
    await session.flush()
    return WeddingSiteDTO(
        tenant_id=tenant.uuid,
        wedding_id=wedding.uuid,
        subdomain=subdomain,
        partner1_name=wedding.partner1_name,
        partner2_name=wedding.partner2_name,
        rsvp_code_set=wedding.rsvp_code is not None,
        photo_sharing_enabled=wedding.photo_sharing_enabled,
        photo_moderation_required=wedding.photo_moderation_required,
    )


@pytest.fixture
async def db_session():
    """Session whose changes are rolled back after the test."""
    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def db_site(db_session) -> WeddingSiteDTO:
    """Wedding inside ``db_session``, gone after the rollback."""
    return await add_wedding(db_session)


@pytest.fixture
async def committed_site() -> WeddingSiteDTO:
    """Committed wedding, visible to read models. Each test gets its own tenant."""
    async with async_session_maker() as session:
        site = await add_wedding(session)
        await session.commit()
    return site


@pytest.fixture
def wedding_factory():
    """``await wedding_factory(session, **wedding_fields)`` adds another wedding."""
    return add_wedding


@pytest.fixture
def site_factory():
    """``site_factory(**fields)`` builds an in-memory wedding site."""
    return build_site
