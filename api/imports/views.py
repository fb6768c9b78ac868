# api/imports/views.py
"""
Spreadsheet import endpoint.
"""
from fastapi import APIRouter, File, UploadFile

from api.errors import http_error
from core.deps import DbSession, ReferenceDate
from core.errors import DepreciationError
from .models import ImportResult
from . import db_manager

router = APIRouter(prefix="/imports", tags=["imports"])


@router.post(
    "/assets",
    response_model=ImportResult,
    summary="Import assets from an .xlsx workbook",
)
async def import_assets_endpoint(
    db: DbSession,
    today: ReferenceDate,
    file: UploadFile = File(..., description="Workbook laid out like the import template"),
) -> ImportResult:
    """
    Import assets row by row. Rows that fail to parse or validate are
    skipped and reported with their sheet row number.
    """
    content = await file.read()
    try:
        result = await db_manager.import_assets(db, content, today=today)
    except DepreciationError as exc:
        raise http_error(exc) from exc

    return ImportResult(**result)
