from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from hr_admin.core.config import Settings, get_settings


def _connect_args(settings: Settings) -> dict[str, Any]:
    # asyncpg enforces a per-command timeout; other drivers rely on pool_timeout
    if settings.database_url.startswith("postgresql+asyncpg"):
        return {
            "timeout": settings.database_timeout_seconds,
            "command_timeout": settings.database_timeout_seconds,
        }
    return {}


def build_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_timeout=settings.database_timeout_seconds,
        connect_args=_connect_args(settings),
    )


engine = build_engine(get_settings())
async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
