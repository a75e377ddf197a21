import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.core.config import Settings
from hr_admin.core.exceptions import AuthError
from hr_admin.core.security import create_access_token, verify_password
from hr_admin.models.admin import Admin
from hr_admin.schemas.admin import AdminCreate, AdminRole
from hr_admin.schemas.auth import RegisterRequest
from hr_admin.services import admin_service

logger = logging.getLogger(__name__)


async def authenticate(db: AsyncSession, identifier: str, password: str) -> Admin:
    admin = await admin_service.get_admin_by_identifier(db, identifier)
    if admin is None or not await asyncio.to_thread(
        verify_password, password, admin.password_hash
    ):
        logger.warning("Failed login for identifier %r", identifier)
        raise AuthError("Invalid credentials")
    return admin


async def login(
    db: AsyncSession, settings: Settings, identifier: str, password: str
) -> tuple[Admin, str]:
    admin = await authenticate(db, identifier, password)
    token = create_access_token(settings, admin.id, admin.role)
    logger.info("Admin %s logged in", admin.id)
    return admin, token


async def register(db: AsyncSession, data: RegisterRequest) -> Admin:
    """Create a regular admin; registration never grants superadmin."""
    return await admin_service.create_admin(
        db,
        AdminCreate(
            username=data.username,
            email=data.email,
            password=data.password,
            role=AdminRole.ADMIN,
        ),
    )
