from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from sqlalchemy import Select

from hr_admin.models.applicant import Applicant
from hr_admin.schemas.dashboard import DateRange


def parse_range(raw: str | None) -> DateRange:
    """Unknown or missing values fall back to all-time."""
    if not raw:
        return DateRange.ALL_TIME
    try:
        return DateRange(raw)
    except ValueError:
        return DateRange.ALL_TIME


def range_start(
    date_range: DateRange,
    now: datetime | None = None,
    tz: str = "UTC",
) -> datetime | None:
    """Lower bound on ``created_at`` for ``date_range``, in UTC, or None."""
    now = now or datetime.now(UTC)
    if date_range == DateRange.LAST_7_DAYS:
        start = now - timedelta(days=7)
    elif date_range == DateRange.LAST_30_DAYS:
        start = now - timedelta(days=30)
    elif date_range == DateRange.THIS_YEAR:
        local_now = now.astimezone(ZoneInfo(tz))
        start = local_now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    else:
        return None
    return start.astimezone(UTC)


def apply_created_filter(query: Select, start: datetime | None) -> Select:
    if start is None:
        return query
    return query.where(Applicant.created_at >= start)
