# api/dashboard/views.py
"""
Dashboard and aggregate statistics endpoints.
"""
from fastapi import APIRouter, Query

from core.deps import DbSession, ReferenceDate
from .models import AnnualSummary, DashboardStats
from . import db_manager

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Get portfolio totals for a year",
)
async def get_stats_endpoint(
    db: DbSession,
    today: ReferenceDate,
    year: int | None = Query(None, description="Defaults to the current year"),
) -> DashboardStats:
    """
    Totals for assets that have not been disposed: count, cost, book value
    at the end of the year and that year's depreciation.
    """
    if year is None:
        year = today.year
    stats = await db_manager.get_dashboard_stats(db, year)
    return DashboardStats(**stats)


@router.get(
    "/annual-summary",
    response_model=list[AnnualSummary],
    summary="Get scheduled depreciation per year",
)
async def get_annual_summary_endpoint(db: DbSession) -> list[AnnualSummary]:
    rows = await db_manager.get_annual_summary(db)
    return [AnnualSummary(**row) for row in rows]
