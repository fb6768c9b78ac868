# api/assets/queries.py
"""
SQLAlchemy query builders for asset and schedule operations.
"""
from sqlalchemy import select, delete

from db_models.asset import Asset
from db_models.category import Category
from db_models.depreciation_entry import DepreciationEntry


def select_asset_by_id(asset_id: int):
    """Select an asset by its ID."""
    return select(Asset).where(Asset.id == asset_id)


def select_asset_with_category_name(asset_id: int):
    """Select an asset and the name of its category (if any)."""
    return (
        select(Asset, Category.name)
        .outerjoin(Category, Asset.category_id == Category.id)
        .where(Asset.id == asset_id)
    )


def select_all_assets_with_category_name():
    """Select all assets with category names, ordered by asset name."""
    return (
        select(Asset, Category.name)
        .outerjoin(Category, Asset.category_id == Category.id)
        .order_by(Asset.name, Asset.id)
    )


def select_schedule_for_asset(asset_id: int):
    """Select all schedule rows for an asset, ordered by year."""
    return (
        select(DepreciationEntry)
        .where(DepreciationEntry.asset_id == asset_id)
        .order_by(DepreciationEntry.year)
    )


def select_schedule_entry(asset_id: int, year: int):
    """Select the schedule row for one asset and year."""
    return select(DepreciationEntry).where(
        DepreciationEntry.asset_id == asset_id,
        DepreciationEntry.year == year,
    )


def delete_schedule_for_asset(asset_id: int):
    """Delete all schedule rows for an asset."""
    return delete(DepreciationEntry).where(DepreciationEntry.asset_id == asset_id)


def delete_asset_by_id(asset_id: int):
    """Delete an asset row."""
    return delete(Asset).where(Asset.id == asset_id)
