"""
Dashboard aggregation over applicants.

Counts are taken over the applicants whose ``created_at`` falls inside the
requested range. Month buckets use the calendar month number in the report
timezone only, so March of two different years lands in the same bucket.
"""
from collections import Counter
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.models.applicant import Applicant
from hr_admin.schemas.applicant import ApplicantStatus
from hr_admin.schemas.dashboard import ActivityEntry, DashboardStats, DateRange, MonthlyBucket
from hr_admin.services.date_filters import apply_created_filter, range_start

ACTIVITY_USER_NAME = "System Update"


async def count_by_status(db: AsyncSession, start: datetime | None) -> dict[str, int]:
    query = apply_created_filter(
        select(Applicant.status, func.count()).group_by(Applicant.status), start
    )
    rows = (await db.execute(query)).all()
    return {status: count for status, count in rows}


async def monthly_counts(
    db: AsyncSession, start: datetime | None, tz: str = "UTC"
) -> list[MonthlyBucket]:
    query = apply_created_filter(
        select(Applicant.created_at).where(Applicant.created_at.is_not(None)), start
    )
    zone = ZoneInfo(tz)
    # Month boundaries follow the report timezone
    months = Counter(
        (created if created.tzinfo else created.replace(tzinfo=UTC)).astimezone(zone).month
        for created in (await db.execute(query)).scalars()
    )
    return [MonthlyBucket(month=month, applicants=months[month]) for month in sorted(months)]


async def get_dashboard_stats(
    db: AsyncSession,
    date_range: DateRange = DateRange.ALL_TIME,
    now: datetime | None = None,
    tz: str = "UTC",
) -> DashboardStats:
    start = range_start(date_range, now=now, tz=tz)

    total_query = apply_created_filter(select(func.count()).select_from(Applicant), start)
    total = (await db.execute(total_query)).scalar_one()
    # Unknown status values still count towards the total but not a bucket
    by_status = await count_by_status(db, start)

    return DashboardStats(
        total_applicants=total,
        selected_count=by_status.get(ApplicantStatus.SELECTED.value, 0),
        not_selected_count=by_status.get(ApplicantStatus.NOT_SELECTED.value, 0),
        future_select_count=by_status.get(ApplicantStatus.FUTURE_SELECT.value, 0),
        pending_count=by_status.get(ApplicantStatus.PENDING.value, 0),
        monthly=await monthly_counts(db, start, tz=tz),
    )


def describe_status(status: str) -> str:
    return f"updated status to {status.replace('-', ' ')}"


async def get_recent_activity(db: AsyncSession, limit: int = 10) -> list[ActivityEntry]:
    result = await db.execute(
        select(Applicant.id, Applicant.name, Applicant.status, Applicant.updated_at)
        .order_by(Applicant.updated_at.desc(), Applicant.id.desc())
        .limit(limit)
    )
    return [
        ActivityEntry(
            id=row.id,
            applicant_name=row.name,
            action=describe_status(row.status),
            timestamp=row.updated_at,
            user_name=ACTIVITY_USER_NAME,
        )
        for row in result.all()
    ]
