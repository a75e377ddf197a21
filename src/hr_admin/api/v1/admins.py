import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.api.deps import get_db, require_superadmin
from hr_admin.core.exceptions import ConflictError, NotFoundError
from hr_admin.models.admin import Admin
from hr_admin.schemas.admin import AdminCreate, AdminRead, AdminUpdate
from hr_admin.services import admin_service

router = APIRouter(
    prefix="/admins",
    tags=["admins"],
    dependencies=[Depends(require_superadmin)],
)


async def _get_or_404(db: AsyncSession, admin_id: uuid.UUID) -> Admin:
    admin = await admin_service.get_admin(db, admin_id)
    if not admin:
        raise NotFoundError("Admin", str(admin_id))
    return admin


@router.post("/", response_model=AdminRead, status_code=status.HTTP_201_CREATED)
async def create_admin(
    data: AdminCreate,
    db: AsyncSession = Depends(get_db),
) -> AdminRead:
    try:
        admin = await admin_service.create_admin(db, data)
    except IntegrityError as e:
        raise ConflictError(f"An admin with email '{data.email}' already exists") from e
    return AdminRead.model_validate(admin)


@router.get("/", response_model=list[AdminRead])
async def list_admins(
    db: AsyncSession = Depends(get_db),
) -> list[AdminRead]:
    admins = await admin_service.list_admins(db)
    return [AdminRead.model_validate(a) for a in admins]


@router.get("/{admin_id}", response_model=AdminRead)
async def get_admin(
    admin_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> AdminRead:
    admin = await _get_or_404(db, admin_id)
    return AdminRead.model_validate(admin)


@router.put("/{admin_id}", response_model=AdminRead)
async def update_admin(
    admin_id: uuid.UUID,
    data: AdminUpdate,
    db: AsyncSession = Depends(get_db),
) -> AdminRead:
    admin = await _get_or_404(db, admin_id)
    try:
        updated = await admin_service.update_admin(db, admin, data)
    except IntegrityError as e:
        raise ConflictError("Email or username already in use by another admin") from e
    return AdminRead.model_validate(updated)


@router.delete("/{admin_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_admin(
    admin_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> None:
    admin = await _get_or_404(db, admin_id)
    await admin_service.delete_admin(db, admin)
