import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.core.config import get_settings
from hr_admin.core.database import get_db
from hr_admin.core.exceptions import AuthError, AuthorizationError
from hr_admin.core.security import verify_token
from hr_admin.models.admin import Admin
from hr_admin.schemas.admin import AdminRole
from hr_admin.services import admin_service
from hr_admin.storage.base import FileStorage
from hr_admin.storage.local import LocalFileStorage

__all__ = ["get_current_admin", "get_db", "get_file_storage", "require_superadmin"]

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_file_storage() -> FileStorage:
    settings = get_settings()
    return LocalFileStorage(settings.upload_dir)


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> Admin:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("Not authorized, no token")

    claims = verify_token(get_settings(), credentials.credentials)
    admin = await admin_service.get_admin(db, claims.actor_id)
    if admin is None:
        logger.warning("Token for unknown admin %s", claims.actor_id)
        raise AuthError("Not authorized, user not found")
    return admin


async def require_superadmin(admin: Admin = Depends(get_current_admin)) -> Admin:
    if admin.role != AdminRole.SUPERADMIN:
        raise AuthorizationError(AdminRole.SUPERADMIN.value, admin.role)
    return admin
