# api/categories/queries.py
"""
SQLAlchemy query builders for category operations.
"""
from sqlalchemy import select, func

from db_models.asset import Asset
from db_models.category import Category


def select_category_by_id(category_id: int):
    """Select a category by its ID."""
    return select(Category).where(Category.id == category_id)


def select_category_by_name(name: str):
    """Select a category by its exact name."""
    return select(Category).where(Category.name == name)


def select_all_categories():
    """Select all categories ordered by name."""
    return select(Category).order_by(Category.name)


def select_categories_with_counts():
    """Select every category with the number of assets referencing it."""
    return (
        select(Category, func.count(Asset.id).label("asset_count"))
        .outerjoin(Asset, Asset.category_id == Category.id)
        .group_by(Category.id)
        .order_by(Category.name)
    )


def count_assets_for_category(category_id: int):
    """Count assets referencing a category."""
    return select(func.count(Asset.id)).where(Asset.category_id == category_id)
