"""
Score aggregation for applicant evaluations.

An applicant carries five sub-scores in the closed range [0, 10]; the stored
``total_marks`` is always their sum, with a missing sub-score counted as 0.
"""
from collections.abc import Mapping

from hr_admin.core.exceptions import ValidationError

SUB_SCORE_FIELDS = (
    "punctuality",
    "preparedness",
    "communication_skills",
    "experience_required",
    "qualification_required",
)
MIN_SUB_SCORE = 0
MAX_SUB_SCORE = 10


def validate_sub_score(field: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"'{field}' must be an integer")
    if not MIN_SUB_SCORE <= value <= MAX_SUB_SCORE:
        raise ValidationError(
            f"'{field}' must be between {MIN_SUB_SCORE} and {MAX_SUB_SCORE}, got {value}"
        )


def compute_total_marks(scores: Mapping[str, int | None]) -> int:
    """Sum the five sub-scores found in ``scores``."""
    total = 0
    for field in SUB_SCORE_FIELDS:
        value = scores.get(field)
        validate_sub_score(field, value)
        total += value or 0
    return total


def touches_scores(changes: Mapping[str, object]) -> bool:
    return any(field in changes for field in SUB_SCORE_FIELDS)


def merge_scores(
    current: Mapping[str, int | None], changes: Mapping[str, int | None]
) -> dict[str, int | None]:
    """Overlay the sub-scores present in ``changes`` on ``current``."""
    merged = {field: current.get(field) for field in SUB_SCORE_FIELDS}
    for field in SUB_SCORE_FIELDS:
        if field in changes:
            merged[field] = changes[field]
    return merged
