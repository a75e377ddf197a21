"""
Applicant pipeline status.

The machine is permissive: any of the four statuses may move to any other.
The only rule is membership in ``ApplicantStatus``.
"""
import logging
import uuid

from hr_admin.core.exceptions import ValidationError
from hr_admin.models.applicant import Applicant
from hr_admin.models.base import utcnow
from hr_admin.models.status_transition import StatusTransition
from hr_admin.schemas.applicant import ApplicantStatus

logger = logging.getLogger(__name__)

DEFAULT_STATUS = ApplicantStatus.PENDING


def ensure_status(value: str) -> ApplicantStatus:
    try:
        return ApplicantStatus(value)
    except ValueError as e:
        allowed = ", ".join(s.value for s in ApplicantStatus)
        raise ValidationError(f"Invalid status '{value}'. Allowed: {allowed}") from e


def apply_status(
    applicant: Applicant,
    new_status: str,
    actor_id: uuid.UUID | None = None,
    actor_name: str | None = None,
) -> bool:
    """Assign ``new_status`` and log the transition; return whether it changed.

    Nothing is flushed here; callers persist it together with their other changes.
    ``updated_at`` is bumped even when the status is unchanged.
    """
    status = ensure_status(new_status)
    old_status = applicant.status
    applicant.status = status.value
    applicant.updated_at = utcnow()
    if old_status == status.value:
        return False

    applicant.transitions.append(
        StatusTransition(
            from_status=old_status,
            to_status=status.value,
            actor_id=actor_id,
            actor_name=actor_name,
        )
    )
    logger.info(
        "Applicant %s status %s -> %s by %s",
        applicant.id,
        old_status,
        status.value,
        actor_name or "unknown",
    )
    return True
