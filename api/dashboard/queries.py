# api/dashboard/queries.py
"""
SQLAlchemy query builders for dashboard statistics.
"""
from sqlalchemy import select, func, or_, extract, distinct

from db_models.asset import Asset
from db_models.depreciation_entry import DepreciationEntry


def select_active_assets():
    """Select assets that have not been disposed."""
    return select(Asset).where(Asset.disposed_date.is_(None)).order_by(Asset.id)


def select_annual_summary():
    """
    Sum scheduled expense per year, skipping years after an asset's
    disposal year.
    """
    return (
        select(
            DepreciationEntry.year,
            func.sum(DepreciationEntry.depreciation_expense).label("total_depreciation"),
            func.count(distinct(DepreciationEntry.asset_id)).label("asset_count"),
        )
        .join(Asset, DepreciationEntry.asset_id == Asset.id)
        .where(
            or_(
                Asset.disposed_date.is_(None),
                extract("year", Asset.disposed_date) >= DepreciationEntry.year,
            )
        )
        .group_by(DepreciationEntry.year)
        .order_by(DepreciationEntry.year)
    )
