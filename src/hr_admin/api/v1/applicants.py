import logging
import mimetypes
import uuid
from pathlib import Path

from fastapi import APIRouter, Depends, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.api.deps import get_current_admin, get_db, get_file_storage
from hr_admin.core.config import get_settings
from hr_admin.core.exceptions import FileValidationError, NotFoundError
from hr_admin.models.admin import Admin
from hr_admin.models.applicant import Applicant
from hr_admin.schemas import PaginatedResponse
from hr_admin.schemas.applicant import (
    ApplicantCreate,
    ApplicantRead,
    ApplicantStatus,
    ApplicantStatusUpdate,
    ApplicantUpdate,
    StatusTransitionRead,
)
from hr_admin.services import applicant_service
from hr_admin.storage.base import FileStorage

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/applicants",
    tags=["applicants"],
    dependencies=[Depends(get_current_admin)],
)


async def _get_or_404(db: AsyncSession, applicant_id: uuid.UUID) -> Applicant:
    applicant = await applicant_service.get_applicant(db, applicant_id)
    if not applicant:
        raise NotFoundError("Applicant", str(applicant_id))
    return applicant


def _validate_upload(file: UploadFile) -> str:
    settings = get_settings()
    if not file.filename:
        raise FileValidationError("Filename is required")

    ext = Path(file.filename).suffix.lower()
    if ext not in settings.allowed_extensions:
        allowed = ", ".join(sorted(settings.allowed_extensions))
        raise FileValidationError(f"File type '{ext}' not allowed. Allowed: {allowed}")
    return file.filename


@router.post("/", response_model=ApplicantRead, status_code=status.HTTP_201_CREATED)
async def create_applicant(
    data: ApplicantCreate,
    db: AsyncSession = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
) -> ApplicantRead:
    applicant = await applicant_service.create_applicant(db, data, creator=admin)
    return ApplicantRead.model_validate(applicant)


@router.get("/", response_model=PaginatedResponse[ApplicantRead])
async def list_applicants(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    status_filter: ApplicantStatus | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> PaginatedResponse[ApplicantRead]:
    items, total = await applicant_service.list_applicants(
        db, skip, limit, status_filter.value if status_filter else None
    )
    return PaginatedResponse(
        items=[ApplicantRead.model_validate(a) for a in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/{applicant_id}", response_model=ApplicantRead)
async def get_applicant(
    applicant_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> ApplicantRead:
    applicant = await _get_or_404(db, applicant_id)
    return ApplicantRead.model_validate(applicant)


@router.put("/{applicant_id}", response_model=ApplicantRead)
async def update_applicant(
    applicant_id: uuid.UUID,
    data: ApplicantUpdate,
    db: AsyncSession = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
) -> ApplicantRead:
    applicant = await _get_or_404(db, applicant_id)
    updated = await applicant_service.update_applicant(db, applicant, data, actor=admin)
    return ApplicantRead.model_validate(updated)


@router.patch("/{applicant_id}", response_model=ApplicantRead)
async def update_applicant_status(
    applicant_id: uuid.UUID,
    data: ApplicantStatusUpdate,
    db: AsyncSession = Depends(get_db),
    admin: Admin = Depends(get_current_admin),
) -> ApplicantRead:
    applicant = await _get_or_404(db, applicant_id)
    updated = await applicant_service.set_status(db, applicant, data.status, actor=admin)
    return ApplicantRead.model_validate(updated)


@router.delete("/{applicant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_applicant(
    applicant_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> None:
    applicant = await _get_or_404(db, applicant_id)
    cv_file = applicant.cv_file
    await applicant_service.delete_applicant(db, applicant)
    # Files are removed only once the row change is durable
    await db.commit()

    if cv_file and await storage.exists(cv_file):
        await storage.delete(cv_file)


@router.get("/{applicant_id}/status-history", response_model=list[StatusTransitionRead])
async def get_status_history(
    applicant_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> list[StatusTransitionRead]:
    await _get_or_404(db, applicant_id)
    transitions = await applicant_service.list_transitions(db, applicant_id)
    return [StatusTransitionRead.model_validate(t) for t in transitions]


@router.post("/{applicant_id}/cv", response_model=ApplicantRead)
async def upload_cv(
    applicant_id: uuid.UUID,
    file: UploadFile,
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> ApplicantRead:
    applicant = await _get_or_404(db, applicant_id)
    filename = _validate_upload(file)

    settings = get_settings()
    content = await file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise FileValidationError(f"File size exceeds maximum of {settings.max_upload_size_mb}MB")

    previous = applicant.cv_file
    storage_path = await storage.store(content, filename)
    updated = await applicant_service.set_cv_file(db, applicant, storage_path)
    # Files are removed only once the row change is durable
    try:
        await db.commit()
    except Exception:
        await storage.delete(storage_path)
        raise

    if previous and previous != storage_path and await storage.exists(previous):
        await storage.delete(previous)

    logger.info("Stored CV for applicant %s at %s", applicant_id, storage_path)
    return ApplicantRead.model_validate(updated)


@router.get("/{applicant_id}/cv")
async def download_cv(
    applicant_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_file_storage),
) -> Response:
    applicant = await _get_or_404(db, applicant_id)
    if not applicant.cv_file:
        raise NotFoundError("CV for applicant", str(applicant_id))

    try:
        content = await storage.retrieve(applicant.cv_file)
    except FileNotFoundError as e:
        raise NotFoundError("CV for applicant", str(applicant_id)) from e

    filename = Path(applicant.cv_file).name
    media_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
