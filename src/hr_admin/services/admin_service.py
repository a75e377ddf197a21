import asyncio
import logging
import uuid

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.core.exceptions import ConflictError
from hr_admin.core.security import hash_password
from hr_admin.models.admin import Admin
from hr_admin.schemas.admin import AdminCreate, AdminUpdate

logger = logging.getLogger(__name__)


async def _ensure_unique(
    db: AsyncSession,
    email: str | None,
    username: str | None,
    exclude_id: uuid.UUID | None = None,
) -> None:
    conditions = []
    if email:
        conditions.append(Admin.email == email)
    if username:
        conditions.append(Admin.username == username)
    if not conditions:
        return

    query = select(Admin).where(or_(*conditions))
    if exclude_id is not None:
        query = query.where(Admin.id != exclude_id)
    existing = (await db.execute(query.limit(1))).scalar_one_or_none()
    if existing is None:
        return
    if email and existing.email == email:
        raise ConflictError(f"An admin with email '{email}' already exists")
    raise ConflictError(f"An admin with username '{username}' already exists")


async def create_admin(db: AsyncSession, data: AdminCreate) -> Admin:
    await _ensure_unique(db, data.email, data.username)
    admin = Admin(
        username=data.username,
        email=data.email,
        password_hash=await asyncio.to_thread(hash_password, data.password),
        role=data.role.value,
    )
    db.add(admin)
    await db.flush()
    await db.refresh(admin)
    logger.info("Created admin %s with role %s", admin.id, admin.role)
    return admin


async def get_admin(db: AsyncSession, admin_id: uuid.UUID) -> Admin | None:
    result = await db.execute(select(Admin).where(Admin.id == admin_id))
    return result.scalar_one_or_none()


async def get_admin_by_identifier(db: AsyncSession, identifier: str) -> Admin | None:
    """Look an admin up by email or username."""
    result = await db.execute(
        select(Admin).where(or_(Admin.email == identifier, Admin.username == identifier))
    )
    return result.scalars().first()


async def list_admins(db: AsyncSession) -> list[Admin]:
    result = await db.execute(select(Admin).order_by(Admin.created_at.desc()))
    return list(result.scalars().all())


async def update_admin(db: AsyncSession, admin: Admin, data: AdminUpdate) -> Admin:
    update_data = data.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    await _ensure_unique(
        db, update_data.get("email"), update_data.get("username"), exclude_id=admin.id
    )

    password = update_data.pop("password", None)
    if password:
        admin.password_hash = await asyncio.to_thread(hash_password, password)
    for field, value in update_data.items():
        setattr(admin, field, value)
    await db.flush()
    await db.refresh(admin)
    return admin


async def delete_admin(db: AsyncSession, admin: Admin) -> None:
    logger.info("Deleting admin %s", admin.id)
    await db.delete(admin)
    await db.flush()
