import logging
import uuid
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.core.exceptions import ValidationError
from hr_admin.models.admin import Admin
from hr_admin.models.applicant import INTERVIEWER_FIELDS, INTERVIEWER_SLOTS, Applicant
from hr_admin.models.base import utcnow
from hr_admin.models.status_transition import StatusTransition
from hr_admin.schemas.applicant import (
    Appointment,
    ApplicantCreate,
    ApplicantUpdate,
    Interviewer,
)
from hr_admin.services import scoring, status_machine

logger = logging.getLogger(__name__)

APPOINTMENT_FIELDS = (
    "position",
    "company_name",
    "department",
    "agreed_salary",
    "appointment_date",
    "benefits",
)


def _interviewer_columns(panel: list[Interviewer]) -> dict[str, Any]:
    columns: dict[str, Any] = {}
    for index, slot in enumerate(INTERVIEWER_SLOTS):
        entry = panel[index] if index < len(panel) else None
        for field in INTERVIEWER_FIELDS:
            columns[f"interviewer{slot}_{field}"] = getattr(entry, field) if entry else None
    return columns


def _appointment_columns(appointment: Appointment | None) -> dict[str, Any]:
    if appointment is None:
        return dict.fromkeys(APPOINTMENT_FIELDS)
    return {field: getattr(appointment, field) for field in APPOINTMENT_FIELDS}


def _current_scores(applicant: Applicant) -> dict[str, int | None]:
    return {field: getattr(applicant, field) for field in scoring.SUB_SCORE_FIELDS}


async def create_applicant(
    db: AsyncSession, data: ApplicantCreate, creator: Admin | None = None
) -> Applicant:
    values = data.model_dump(mode="json", exclude={"interviewers", "appointment"})
    values.update(_interviewer_columns(data.interviewers))
    values.update(_appointment_columns(data.appointment))
    values["status"] = status_machine.ensure_status(values["status"]).value
    values["total_marks"] = scoring.compute_total_marks(values)
    if creator is not None:
        values["created_by"] = creator.id
        values["created_by_name"] = creator.username

    applicant = Applicant(**values)
    applicant.transitions.append(
        StatusTransition(
            from_status=None,
            to_status=applicant.status,
            actor_id=values.get("created_by"),
            actor_name=values.get("created_by_name"),
        )
    )
    db.add(applicant)
    await db.flush()
    await db.refresh(applicant)
    logger.info("Created applicant %s (total_marks=%d)", applicant.id, applicant.total_marks)
    return applicant


async def get_applicant(db: AsyncSession, applicant_id: uuid.UUID) -> Applicant | None:
    result = await db.execute(select(Applicant).where(Applicant.id == applicant_id))
    return result.scalar_one_or_none()


async def list_applicants(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 20,
    status: str | None = None,
) -> tuple[list[Applicant], int]:
    query = select(Applicant)
    count_query = select(func.count()).select_from(Applicant)

    if status:
        query = query.where(Applicant.status == status)
        count_query = count_query.where(Applicant.status == status)

    total = (await db.execute(count_query)).scalar_one()
    results = await db.execute(
        query.offset(skip)
        .limit(limit)
        .order_by(Applicant.created_at.desc(), Applicant.id.desc())
    )
    return list(results.scalars().all()), total


async def update_applicant(
    db: AsyncSession,
    applicant: Applicant,
    data: ApplicantUpdate,
    actor: Admin | None = None,
) -> Applicant:
    changes = data.model_dump(mode="json", exclude_unset=True)

    if "name" in changes and changes["name"] is None:
        raise ValidationError("'name' cannot be removed")
    new_status = changes.pop("status", None)
    if new_status is not None:
        status_machine.ensure_status(new_status)
    if "interviewers" in changes:
        changes.pop("interviewers")
        changes.update(_interviewer_columns(data.interviewers or []))
    if "appointment" in changes:
        changes.pop("appointment")
        changes.update(_appointment_columns(data.appointment))

    if scoring.touches_scores(changes):
        merged = scoring.merge_scores(_current_scores(applicant), changes)
        changes["total_marks"] = scoring.compute_total_marks(merged)

    for field, value in changes.items():
        setattr(applicant, field, value)
    if new_status is not None:
        status_machine.apply_status(
            applicant,
            new_status,
            actor_id=actor.id if actor else None,
            actor_name=actor.username if actor else None,
        )
    applicant.updated_at = utcnow()

    await db.flush()
    await db.refresh(applicant)
    logger.info("Updated applicant %s fields=%s", applicant.id, sorted(changes))
    return applicant


async def set_status(
    db: AsyncSession,
    applicant: Applicant,
    new_status: str,
    actor: Admin | None = None,
) -> Applicant:
    """Move ``applicant`` to ``new_status``; invalid values leave it untouched."""
    status_machine.apply_status(
        applicant,
        new_status,
        actor_id=actor.id if actor else None,
        actor_name=actor.username if actor else None,
    )
    await db.flush()
    await db.refresh(applicant)
    return applicant


async def set_cv_file(db: AsyncSession, applicant: Applicant, cv_file: str) -> Applicant:
    applicant.cv_file = cv_file
    await db.flush()
    await db.refresh(applicant)
    return applicant


async def list_transitions(db: AsyncSession, applicant_id: uuid.UUID) -> list[StatusTransition]:
    result = await db.execute(
        select(StatusTransition)
        .where(StatusTransition.applicant_id == applicant_id)
        .order_by(StatusTransition.created_at, StatusTransition.id)
    )
    return list(result.scalars().all())


async def delete_applicant(db: AsyncSession, applicant: Applicant) -> None:
    logger.info("Deleting applicant %s", applicant.id)
    await db.delete(applicant)
    await db.flush()
