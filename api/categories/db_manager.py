# api/categories/db_manager.py
"""
Business logic for category management.

Categories only supply defaults for new assets, so none of these operations
touch depreciation schedules.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from core import validation
from core.errors import DuplicateNameError, NotFoundError, ReferentialError
from db_models.category import Category
from .models import CategoryCreate, CategoryUpdate
from . import queries

logger = logging.getLogger(__name__)


def _clean_property_class(value: str | None) -> str | None:
    # Empty string means "unset"
    if value is None or not value.strip():
        return None
    return value.strip()


async def get_category_by_id(db: AsyncSession, category_id: int) -> Category:
    """Get a category by ID. Raises NotFoundError if not found."""
    result = await db.execute(queries.select_category_by_id(category_id))
    category = result.scalar_one_or_none()
    if category is None:
        raise NotFoundError(f"Category {category_id} not found")
    return category


async def get_category_by_name(db: AsyncSession, name: str) -> Category | None:
    result = await db.execute(queries.select_category_by_name(name))
    return result.scalar_one_or_none()


async def list_categories(db: AsyncSession) -> list[Category]:
    """Return all categories ordered by name."""
    result = await db.execute(queries.select_all_categories())
    return list(result.scalars().all())


async def list_categories_with_counts(db: AsyncSession) -> list[dict]:
    """Return all categories with the number of assets using each one."""
    result = await db.execute(queries.select_categories_with_counts())
    return [
        {
            "id": category.id,
            "name": category.name,
            "default_useful_life": category.default_useful_life,
            "default_property_class": category.default_property_class,
            "asset_count": asset_count,
        }
        for category, asset_count in result.all()
    ]


async def _ensure_name_available(db: AsyncSession, name: str, exclude_id: int | None = None) -> None:
    existing = await get_category_by_name(db, name)
    if existing is not None and existing.id != exclude_id:
        raise DuplicateNameError(f"Category '{name}' already exists")


async def create_category(db: AsyncSession, payload: CategoryCreate) -> Category:
    """
    Create a new category.

    Raises:
        ValidationError: If any field rule is violated
        DuplicateNameError: If the name is already taken
    """
    validation.validate_category(payload)
    name = payload.name.strip()
    await _ensure_name_available(db, name)

    category = Category(
        name=name,
        default_useful_life=payload.default_useful_life,
        default_property_class=_clean_property_class(payload.default_property_class),
    )
    db.add(category)
    await db.commit()
    await db.refresh(category)
    logger.info("Created category %s (%s)", category.id, category.name)
    return category


async def update_category(db: AsyncSession, category_id: int, payload: CategoryUpdate) -> Category:
    """
    Update a category's name and defaults. Existing assets are unaffected.

    Raises:
        NotFoundError: If the category doesn't exist
        ValidationError: If any field rule is violated
        DuplicateNameError: If the new name belongs to another category
    """
    category = await get_category_by_id(db, category_id)
    validation.validate_category(payload)
    name = payload.name.strip()
    await _ensure_name_available(db, name, exclude_id=category_id)

    category.name = name
    category.default_useful_life = payload.default_useful_life
    category.default_property_class = _clean_property_class(payload.default_property_class)
    await db.commit()
    await db.refresh(category)
    return category


async def delete_category(db: AsyncSession, category_id: int) -> None:
    """
    Delete a category that no asset references.

    Raises:
        NotFoundError: If the category doesn't exist
        ReferentialError: If assets still use the category
    """
    category = await get_category_by_id(db, category_id)

    result = await db.execute(queries.count_assets_for_category(category_id))
    asset_count = result.scalar() or 0
    if asset_count > 0:
        logger.info("Refused to delete category %s: %d asset(s) use it", category_id, asset_count)
        raise ReferentialError(
            f"Cannot delete category: {asset_count} asset(s) are using this category. "
            "Please reassign them first.",
            blocking_count=asset_count,
        )

    await db.delete(category)
    await db.commit()
