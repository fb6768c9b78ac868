# api/exports/queries.py
"""
SQLAlchemy query builders for report exports.
"""
from sqlalchemy import select, func, distinct

from db_models.asset import Asset
from db_models.category import Category
from db_models.depreciation_entry import DepreciationEntry


def select_assets_for_report():
    """Select all assets with category names, ordered by asset name."""
    return (
        select(Asset, Category.name)
        .outerjoin(Category, Asset.category_id == Category.id)
        .order_by(Asset.name, Asset.id)
    )


def select_schedule_rows_for_report():
    """Select every schedule row with its asset name, by asset then year."""
    return (
        select(
            Asset.name,
            DepreciationEntry.year,
            DepreciationEntry.beginning_book_value,
            DepreciationEntry.depreciation_expense,
            DepreciationEntry.accumulated_depreciation,
            DepreciationEntry.ending_book_value,
        )
        .join(Asset, DepreciationEntry.asset_id == Asset.id)
        .order_by(Asset.name, Asset.id, DepreciationEntry.year)
    )


def select_yearly_totals():
    """Sum scheduled expense and count assets per year."""
    return (
        select(
            DepreciationEntry.year,
            func.sum(DepreciationEntry.depreciation_expense),
            func.count(distinct(DepreciationEntry.asset_id)),
        )
        .group_by(DepreciationEntry.year)
        .order_by(DepreciationEntry.year)
    )
