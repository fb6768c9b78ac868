# api/exports/db_manager.py
"""
Read-only data gathering for exports.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from core.depreciation import current_book_value, round_money
from . import queries
from . import workbooks


async def build_depreciation_report(db: AsyncSession, as_of_year: int) -> bytes:
    """Build the report workbook with book values as of `as_of_year`."""
    result = await db.execute(queries.select_assets_for_report())
    assets = [
        {
            "name": asset.name,
            "category_name": category_name,
            "cost": asset.cost,
            "salvage_value": asset.salvage_value,
            "useful_life_years": asset.useful_life_years,
            "date_placed_in_service": asset.date_placed_in_service.isoformat(),
            "book_value": current_book_value(asset, as_of_year),
            "disposed": asset.disposed_date is not None,
        }
        for asset, category_name in result.all()
    ]

    result = await db.execute(queries.select_schedule_rows_for_report())
    schedule_rows = [tuple(row) for row in result.all()]

    result = await db.execute(queries.select_yearly_totals())
    yearly_totals = [(year, round_money(total or 0.0), count) for year, total, count in result.all()]

    return workbooks.build_report(assets, schedule_rows, yearly_totals)
