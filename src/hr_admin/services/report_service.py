import csv
import logging
from collections.abc import Sequence
from datetime import datetime
from io import BytesIO, StringIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.models.applicant import Applicant
from hr_admin.schemas.dashboard import DateRange
from hr_admin.services.date_filters import apply_created_filter, range_start

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["Name", "Email", "Status", "Date Applied"]
CSV_FILENAME = "applicants_report.csv"
PDF_FILENAME = "applicants_report.pdf"


async def fetch_report_applicants(
    db: AsyncSession,
    date_range: DateRange = DateRange.ALL_TIME,
    now: datetime | None = None,
    tz: str = "UTC",
) -> list[Applicant]:
    start = range_start(date_range, now=now, tz=tz)
    query = apply_created_filter(
        select(Applicant).order_by(Applicant.created_at.desc(), Applicant.id.desc()), start
    )
    result = await db.execute(query)
    return list(result.scalars().all())


def report_rows(applicants: Sequence[Applicant]) -> list[list[str]]:
    return [
        [
            applicant.name,
            applicant.email or "",
            applicant.status,
            applicant.created_at.date().isoformat(),
        ]
        for applicant in applicants
    ]


def render_csv(applicants: Sequence[Applicant]) -> str:
    output = StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(REPORT_COLUMNS)
    writer.writerows(report_rows(applicants))
    return output.getvalue()


def render_pdf(
    applicants: Sequence[Applicant],
    date_range: DateRange = DateRange.ALL_TIME,
    title: str = "Applicants Report",
) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=0.75 * inch,
        leftMargin=0.75 * inch,
        topMargin=0.75 * inch,
        bottomMargin=0.75 * inch,
        title=title,
    )
    styles = getSampleStyleSheet()

    story = [
        Paragraph(title, styles["Title"]),
        Paragraph(f"Range: {date_range.value}, {len(applicants)} applicants", styles["Normal"]),
        Spacer(1, 0.25 * inch),
    ]

    # Wrap free-text cells so long names do not overflow the column
    cell_style = styles["BodyText"]
    body = [
        [Paragraph(escape(cell), cell_style) for cell in row] for row in report_rows(applicants)
    ]
    col_widths = [2.2 * inch, 2.2 * inch, 1.1 * inch, 1.1 * inch]
    table = Table([REPORT_COLUMNS, *body], repeatRows=1, colWidths=col_widths)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#1f2937")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f3f4f6")]),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    story.append(table)

    doc.build(story)
    logger.debug("Rendered PDF report with %d rows", len(applicants))
    return buffer.getvalue()
