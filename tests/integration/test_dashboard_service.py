"""Integration tests for dashboard aggregation and the activity feed."""

from datetime import UTC, datetime, timedelta

import pytest

from hr_admin.schemas.applicant import ApplicantCreate
from hr_admin.schemas.dashboard import DateRange
from hr_admin.services import applicant_service, dashboard_service
from hr_admin.services.date_filters import parse_range
from tests.conftest import make_applicant_payload

pytestmark = pytest.mark.integration

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=UTC)


# ── helpers ──────────────────────────────────────────────────────────────


async def _seed(db_session, created_at: datetime, **overrides):
    applicant = await applicant_service.create_applicant(
        db_session, ApplicantCreate(**make_applicant_payload(**overrides))
    )
    applicant.created_at = created_at
    await db_session.flush()
    return applicant


# ── stats ────────────────────────────────────────────────────────────────


async def test_empty_dashboard(db_session):
    stats = await dashboard_service.get_dashboard_stats(db_session, now=NOW)

    assert stats.total_applicants == 0
    assert stats.pending_count == 0
    assert stats.monthly == []


async def test_counts_by_status(db_session):
    await _seed(db_session, NOW - timedelta(days=1), status="selected")
    await _seed(db_session, NOW - timedelta(days=1), status="selected")
    await _seed(db_session, NOW - timedelta(days=2), status="not-selected")
    await _seed(db_session, NOW - timedelta(days=3), status="future-select")
    await _seed(db_session, NOW - timedelta(days=4))

    stats = await dashboard_service.get_dashboard_stats(db_session, now=NOW)

    assert stats.total_applicants == 5
    assert stats.selected_count == 2
    assert stats.not_selected_count == 1
    assert stats.future_select_count == 1
    assert stats.pending_count == 1
    assert (
        stats.selected_count
        + stats.not_selected_count
        + stats.future_select_count
        + stats.pending_count
        == stats.total_applicants
    )


async def test_last_7_days_excludes_older_records(db_session):
    """Created 1 day ago and 60 days ago; only the recent one is in range."""
    await _seed(db_session, NOW - timedelta(days=1), status="selected")
    await _seed(db_session, NOW - timedelta(days=60), status="selected")

    recent = await dashboard_service.get_dashboard_stats(
        db_session, DateRange.LAST_7_DAYS, now=NOW
    )
    everything = await dashboard_service.get_dashboard_stats(
        db_session, DateRange.ALL_TIME, now=NOW
    )

    assert recent.total_applicants == 1
    assert recent.selected_count == 1
    assert everything.total_applicants == 2


async def test_last_7_days_with_only_an_older_record(db_session):
    await _seed(db_session, NOW - timedelta(days=10))

    stats = await dashboard_service.get_dashboard_stats(
        db_session, DateRange.LAST_7_DAYS, now=NOW
    )

    assert stats.total_applicants == 0
    assert stats.monthly == []


async def test_last_30_days_and_this_year(db_session):
    await _seed(db_session, NOW - timedelta(days=10))
    await _seed(db_session, datetime(2025, 2, 1, tzinfo=UTC))
    await _seed(db_session, datetime(2024, 12, 31, tzinfo=UTC))

    last_30 = await dashboard_service.get_dashboard_stats(
        db_session, DateRange.LAST_30_DAYS, now=NOW
    )
    this_year = await dashboard_service.get_dashboard_stats(
        db_session, DateRange.THIS_YEAR, now=NOW
    )

    assert last_30.total_applicants == 1
    assert this_year.total_applicants == 2


async def test_unknown_range_behaves_like_all_time(db_session):
    await _seed(db_session, NOW - timedelta(days=400))

    stats = await dashboard_service.get_dashboard_stats(
        db_session, parse_range("last-decade"), now=NOW
    )

    assert stats.total_applicants == 1


async def test_same_month_of_two_years_share_one_bucket(db_session):
    await _seed(db_session, datetime(2024, 3, 5, tzinfo=UTC))
    await _seed(db_session, datetime(2025, 3, 20, tzinfo=UTC))

    stats = await dashboard_service.get_dashboard_stats(db_session, now=NOW)

    assert len(stats.monthly) == 1
    assert stats.monthly[0].month == 3
    assert stats.monthly[0].applicants == 2


async def test_monthly_buckets_ignore_year(db_session):
    """March 2024 and March 2025 share a bucket."""
    await _seed(db_session, datetime(2024, 3, 5, tzinfo=UTC))
    await _seed(db_session, datetime(2025, 3, 20, tzinfo=UTC))
    await _seed(db_session, datetime(2025, 7, 1, tzinfo=UTC))

    stats = await dashboard_service.get_dashboard_stats(db_session, now=NOW)

    assert [(b.month, b.applicants) for b in stats.monthly] == [(3, 2), (7, 1)]


async def test_monthly_buckets_respect_range(db_session):
    await _seed(db_session, datetime(2024, 3, 5, tzinfo=UTC))
    await _seed(db_session, datetime(2025, 3, 20, tzinfo=UTC))

    stats = await dashboard_service.get_dashboard_stats(
        db_session, DateRange.THIS_YEAR, now=NOW
    )

    assert [(b.month, b.applicants) for b in stats.monthly] == [(3, 1)]


async def test_monthly_buckets_follow_report_timezone(db_session):
    """20:00 UTC on 31 March is already 1 April in Colombo (UTC+05:30)."""
    await _seed(db_session, datetime(2025, 3, 31, 20, 0, tzinfo=UTC))

    utc = await dashboard_service.get_dashboard_stats(db_session, now=NOW)
    colombo = await dashboard_service.get_dashboard_stats(
        db_session, now=NOW, tz="Asia/Colombo"
    )

    assert [(b.month, b.applicants) for b in utc.monthly] == [(3, 1)]
    assert [(b.month, b.applicants) for b in colombo.monthly] == [(4, 1)]


async def test_this_year_and_buckets_agree_on_new_year(db_session):
    """A record from local New Year's morning counts as January of this year."""
    await _seed(db_session, datetime(2024, 12, 31, 20, 0, tzinfo=UTC))

    stats = await dashboard_service.get_dashboard_stats(
        db_session, DateRange.THIS_YEAR, now=NOW, tz="Asia/Colombo"
    )

    assert stats.total_applicants == 1
    assert [(b.month, b.applicants) for b in stats.monthly] == [(1, 1)]


# ── activity ─────────────────────────────────────────────────────────────


def test_describe_status():
    assert dashboard_service.describe_status("not-selected") == "updated status to not selected"
    assert dashboard_service.describe_status("pending") == "updated status to pending"


async def test_recent_activity_orders_by_last_update(db_session):
    old = await _seed(db_session, NOW - timedelta(days=3), name="Old")
    mid = await _seed(db_session, NOW - timedelta(days=2), name="Mid")
    old.updated_at = NOW - timedelta(days=3)
    mid.updated_at = NOW - timedelta(days=2)
    await db_session.flush()

    await applicant_service.set_status(db_session, old, "not-selected")

    feed = await dashboard_service.get_recent_activity(db_session)

    assert [entry.applicant_name for entry in feed] == ["Old", "Mid"]
    assert feed[0].id == old.id
    assert feed[0].action == "updated status to not selected"
    assert feed[1].action == "updated status to pending"
    assert all(entry.user_name == "System Update" for entry in feed)


async def test_recent_activity_limit(db_session):
    for i in range(4):
        await _seed(db_session, NOW - timedelta(days=i), name=f"Applicant {i}")

    feed = await dashboard_service.get_recent_activity(db_session, limit=3)

    assert len(feed) == 3
