from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.api.deps import get_current_admin, get_db, require_superadmin
from hr_admin.core.config import get_settings
from hr_admin.models.admin import Admin
from hr_admin.schemas.admin import AdminRead
from hr_admin.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from hr_admin.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    admin, token = await auth_service.login(db, get_settings(), data.identifier, data.password)
    return TokenResponse(user=AdminRead.model_validate(admin), token=token)


@router.post(
    "/register",
    response_model=AdminRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_superadmin)],
)
async def register(
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> AdminRead:
    admin = await auth_service.register(db, data)
    return AdminRead.model_validate(admin)


@router.get("/me", response_model=AdminRead)
async def me(admin: Admin = Depends(get_current_admin)) -> AdminRead:
    return AdminRead.model_validate(admin)
