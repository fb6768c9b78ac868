# api/exports/views.py
"""
Spreadsheet export endpoints.
"""
from fastapi import APIRouter, Query
from fastapi.responses import Response

from core.deps import DbSession, ReferenceDate
from . import db_manager
from . import workbooks

router = APIRouter(prefix="/exports", tags=["exports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _xlsx_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/template",
    summary="Download the asset import template",
    response_class=Response,
)
async def export_template_endpoint() -> Response:
    return _xlsx_response(workbooks.build_template(), "asset_import_template.xlsx")


@router.get(
    "/report",
    summary="Download the depreciation report",
    response_class=Response,
)
async def export_report_endpoint(
    db: DbSession,
    today: ReferenceDate,
    year: int | None = Query(None, description="Book values as of this year; defaults to the current year"),
) -> Response:
    """
    Workbook with the asset list, every schedule row and yearly totals.
    """
    if year is None:
        year = today.year
    content = await db_manager.build_depreciation_report(db, year)
    return _xlsx_response(content, "depreciation_report.xlsx")
