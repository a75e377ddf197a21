import os
import uuid
from collections.abc import AsyncGenerator

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from hr_admin.api.deps import get_db, get_file_storage
from hr_admin.core.config import get_settings
from hr_admin.core.security import create_access_token
from hr_admin.main import create_app
from hr_admin.models import Admin, Base
from hr_admin.schemas.admin import AdminCreate, AdminRole
from hr_admin.services import admin_service
from hr_admin.storage.local import LocalFileStorage

# In-memory SQLite by default; point at Postgres with TEST_DATABASE_URL
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")

TEST_PASSWORD = "s3cret-pass"


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {}


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL, echo=False, **_engine_kwargs(TEST_DATABASE_URL)
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(loop_scope="session")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession]:
    """Provide a transactional session that rolls back after each test."""
    connection = await test_engine.connect()
    transaction = await connection.begin()
    session = AsyncSession(bind=connection, expire_on_commit=False)

    yield session

    await session.close()
    await transaction.rollback()
    await connection.close()


@pytest_asyncio.fixture(loop_scope="session")
async def superadmin(db_session) -> Admin:
    return await admin_service.create_admin(
        db_session,
        AdminCreate(**make_admin_payload(username="root", role=AdminRole.SUPERADMIN)),
    )


@pytest_asyncio.fixture(loop_scope="session")
async def regular_admin(db_session) -> Admin:
    return await admin_service.create_admin(
        db_session, AdminCreate(**make_admin_payload(username="recruiter"))
    )


def bearer(admin: Admin) -> dict[str, str]:
    """Authorization header carrying a fresh token for ``admin``."""
    token = create_access_token(get_settings(), admin.id, admin.role)
    return {"Authorization": f"Bearer {token}"}


def _build_app(db_session: AsyncSession, upload_dir: str) -> FastAPI:
    app = create_app()

    # Override DB dependency, yield the test session directly, no commit/rollback
    async def _override_get_db():
        yield db_session

    storage = LocalFileStorage(upload_dir)

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_file_storage] = lambda: storage
    return app


@pytest_asyncio.fixture(loop_scope="session")
async def client(db_session, superadmin, tmp_path) -> AsyncGenerator[AsyncClient]:
    """Client authenticated as a superadmin."""
    app = _build_app(db_session, str(tmp_path / "uploads"))
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True,
        headers=bearer(superadmin),
    ) as ac:
        yield ac


@pytest_asyncio.fixture(loop_scope="session")
async def anon_client(db_session, tmp_path) -> AsyncGenerator[AsyncClient]:
    app = _build_app(db_session, str(tmp_path / "uploads"))
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", follow_redirects=True
    ) as ac:
        yield ac


def make_applicant_payload(**overrides):
    """Helper to create a valid applicant payload with unique email."""
    data = {
        "name": "Jane Perera",
        "email": f"jane.{uuid.uuid4().hex[:8]}@example.com",
        "hometown": "Kandy",
        "age": 29,
        "phone": "+94770000000",
        "punctuality": 8,
        "preparedness": 7,
        "communication_skills": 9,
        "experience_required": 6,
        "qualification_required": 10,
    }
    data.update(overrides)
    return data


def make_admin_payload(**overrides):
    """Helper to create a valid admin payload with unique username and email."""
    suffix = uuid.uuid4().hex[:8]
    data = {
        "username": f"admin_{suffix}",
        "email": f"admin.{suffix}@example.com",
        "password": TEST_PASSWORD,
        "role": AdminRole.ADMIN,
    }
    data.update(overrides)
    return data
