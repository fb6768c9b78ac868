# api/dashboard/db_manager.py
"""
Business logic for dashboard statistics.

Totals are folds over the valuation functions; no depreciation logic
lives here.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from core.depreciation import current_book_value, depreciation_for_year, round_money
from . import queries


async def get_dashboard_stats(db: AsyncSession, year: int) -> dict:
    """
    Count, cost, book value and depreciation for `year` across all
    non-disposed assets.
    """
    result = await db.execute(queries.select_active_assets())
    assets = list(result.scalars().all())

    return {
        "year": year,
        "total_assets": len(assets),
        "total_cost": round_money(sum(a.cost for a in assets)),
        "total_book_value": round_money(sum(current_book_value(a, year) for a in assets)),
        "current_year_depreciation": round_money(sum(depreciation_for_year(a, year) for a in assets)),
    }


async def get_annual_summary(db: AsyncSession) -> list[dict]:
    """Scheduled depreciation per year from the persisted schedules."""
    result = await db.execute(queries.select_annual_summary())
    return [
        {
            "year": row.year,
            "total_depreciation": round_money(row.total_depreciation or 0.0),
            "asset_count": row.asset_count,
        }
        for row in result.all()
    ]
