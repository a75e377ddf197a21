import asyncio

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.api.deps import get_current_admin, get_db
from hr_admin.core.config import get_settings
from hr_admin.schemas.dashboard import ActivityEntry, DashboardStats
from hr_admin.services import dashboard_service, report_service
from hr_admin.services.date_filters import parse_range

# Shares the /applicants prefix; registered ahead of the /{applicant_id} routes
router = APIRouter(
    prefix="/applicants",
    tags=["reports"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("/dashboard-stats", response_model=DashboardStats)
async def get_dashboard_stats(
    range_: str | None = Query(None, alias="range"),
    db: AsyncSession = Depends(get_db),
) -> DashboardStats:
    settings = get_settings()
    return await dashboard_service.get_dashboard_stats(
        db, parse_range(range_), tz=settings.report_timezone
    )


@router.get("/recent-activity", response_model=list[ActivityEntry])
async def get_recent_activity(
    db: AsyncSession = Depends(get_db),
) -> list[ActivityEntry]:
    settings = get_settings()
    return await dashboard_service.get_recent_activity(db, limit=settings.activity_feed_limit)


@router.get("/report/csv")
async def export_csv_report(
    range_: str | None = Query(None, alias="range"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    settings = get_settings()
    applicants = await report_service.fetch_report_applicants(
        db, parse_range(range_), tz=settings.report_timezone
    )
    return Response(
        content=report_service.render_csv(applicants),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{report_service.CSV_FILENAME}"'
        },
    )


@router.get("/report/pdf")
async def export_pdf_report(
    range_: str | None = Query(None, alias="range"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    settings = get_settings()
    date_range = parse_range(range_)
    applicants = await report_service.fetch_report_applicants(
        db, date_range, tz=settings.report_timezone
    )
    # reportlab layout is CPU bound
    content = await asyncio.to_thread(report_service.render_pdf, applicants, date_range)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{report_service.PDF_FILENAME}"'
        },
    )
