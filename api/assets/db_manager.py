# api/assets/db_manager.py
"""
Business logic for assets and their depreciation schedules.

Every write that changes an asset regenerates its schedule in the same
transaction. Validation always runs before anything is written, so a
rejected request leaves the database untouched.
"""
import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from core import validation
from core.depreciation import current_book_value, depreciation_for_year
from core.errors import NotFoundError
from core.schedule_sync import sync_schedule
from db_models.asset import Asset
from db_models.category import Category
from db_models.depreciation_entry import DepreciationEntry
from api.categories import queries as category_queries
from .models import AssetCreate, AssetUpdate
from . import queries

logger = logging.getLogger(__name__)


async def get_asset_by_id(db: AsyncSession, asset_id: int) -> Asset:
    """Get an asset by ID. Raises NotFoundError if not found."""
    result = await db.execute(queries.select_asset_by_id(asset_id))
    asset = result.scalar_one_or_none()
    if asset is None:
        raise NotFoundError(f"Asset {asset_id} not found")
    return asset


async def get_asset_with_category_name(db: AsyncSession, asset_id: int) -> tuple[Asset, str | None]:
    result = await db.execute(queries.select_asset_with_category_name(asset_id))
    row = result.one_or_none()
    if row is None:
        raise NotFoundError(f"Asset {asset_id} not found")
    return row[0], row[1]


async def list_assets(db: AsyncSession) -> list[tuple[Asset, str | None]]:
    """Return all assets with their category names, ordered by name."""
    result = await db.execute(queries.select_all_assets_with_category_name())
    return [(asset, category_name) for asset, category_name in result.all()]


async def get_schedule(db: AsyncSession, asset_id: int) -> list[DepreciationEntry]:
    """Return the persisted schedule of an existing asset, ordered by year."""
    await get_asset_by_id(db, asset_id)
    result = await db.execute(queries.select_schedule_for_asset(asset_id))
    return list(result.scalars().all())


async def _get_category(db: AsyncSession, category_id: int | None) -> Category | None:
    if category_id is None:
        return None
    result = await db.execute(category_queries.select_category_by_id(category_id))
    category = result.scalar_one_or_none()
    if category is None:
        raise NotFoundError(f"Category {category_id} not found")
    return category


def _clean_text(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _apply_fields(asset: Asset, payload: AssetCreate | AssetUpdate) -> None:
    """Copy validated payload fields onto the ORM row."""
    asset.name = payload.name.strip()
    asset.description = payload.description
    asset.category_id = payload.category_id
    asset.date_placed_in_service = validation.parse_date(payload.date_placed_in_service)
    asset.cost = payload.cost
    asset.salvage_value = payload.salvage_value
    asset.useful_life_years = payload.useful_life_years
    asset.property_class = _clean_text(payload.property_class)
    asset.notes = payload.notes
    asset.disposed_date = validation.parse_date(payload.disposed_date) if payload.disposed_date else None
    asset.disposed_value = payload.disposed_value


async def save_with_schedule(db: AsyncSession, asset: Asset) -> None:
    """
    Flush the asset, replace its schedule and commit both together.

    Any failure rolls the whole unit back and propagates.
    """
    try:
        await db.flush()
        await sync_schedule(db, asset)
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    await db.refresh(asset)


async def create_asset(db: AsyncSession, payload: AssetCreate, today: date | None = None) -> Asset:
    """
    Create an asset and its schedule.

    Omitted useful life and property class are taken from the category
    defaults when a category is given.

    Raises:
        ValidationError: If any asset rule is violated
        NotFoundError: If the category doesn't exist
        ConsistencyError: If the schedule could not be written
    """
    category = await _get_category(db, payload.category_id)
    if category is not None:
        defaults = {}
        if payload.useful_life_years is None and category.default_useful_life is not None:
            defaults["useful_life_years"] = category.default_useful_life
        if payload.property_class is None and category.default_property_class is not None:
            defaults["property_class"] = category.default_property_class
        if defaults:
            payload = payload.model_copy(update=defaults)

    validation.validate_asset(payload, today=today)

    asset = Asset()
    _apply_fields(asset, payload)
    db.add(asset)
    await save_with_schedule(db, asset)

    logger.info("Created asset %s (%s)", asset.id, asset.name)
    return asset


async def update_asset(
    db: AsyncSession,
    asset_id: int,
    payload: AssetUpdate,
    today: date | None = None,
) -> Asset:
    """
    Replace an asset's fields and regenerate its schedule.

    Raises:
        NotFoundError: If the asset or the category doesn't exist
        ValidationError: If any asset rule is violated
        ConsistencyError: If the schedule could not be written
    """
    asset = await get_asset_by_id(db, asset_id)
    validation.validate_asset(payload, today=today)
    await _get_category(db, payload.category_id)

    _apply_fields(asset, payload)
    await save_with_schedule(db, asset)

    logger.info("Updated asset %s", asset.id)
    return asset


async def dispose_asset(
    db: AsyncSession,
    asset_id: int,
    disposed_date: str,
    disposed_value: float | None,
    today: date | None = None,
) -> Asset:
    """
    Mark an asset as disposed. Goes through `update_asset`, so the full
    record is re-validated and the schedule regenerated.

    Raises:
        NotFoundError: If the asset doesn't exist
        ValidationError: If the disposal fields are invalid
    """
    asset = await get_asset_by_id(db, asset_id)
    validation.validate_disposal(
        disposed_date,
        disposed_value,
        asset.date_placed_in_service,
        today=today,
    )

    payload = AssetUpdate(
        name=asset.name,
        description=asset.description,
        category_id=asset.category_id,
        date_placed_in_service=asset.date_placed_in_service.isoformat(),
        cost=asset.cost,
        salvage_value=asset.salvage_value,
        useful_life_years=asset.useful_life_years,
        property_class=asset.property_class,
        notes=asset.notes,
        disposed_date=disposed_date.strip(),
        disposed_value=disposed_value,
    )
    return await update_asset(db, asset_id, payload, today=today)


async def regenerate_schedule(db: AsyncSession, asset_id: int) -> list[DepreciationEntry]:
    """Rebuild the schedule of an unchanged asset and return the new rows."""
    asset = await get_asset_by_id(db, asset_id)
    await save_with_schedule(db, asset)
    result = await db.execute(queries.select_schedule_for_asset(asset_id))
    return list(result.scalars().all())


async def delete_asset(db: AsyncSession, asset_id: int) -> None:
    """
    Delete an asset together with its schedule.

    Raises:
        NotFoundError: If the asset doesn't exist
    """
    await get_asset_by_id(db, asset_id)
    try:
        await db.execute(queries.delete_schedule_for_asset(asset_id))
        await db.execute(queries.delete_asset_by_id(asset_id))
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Deleted asset %s and its schedule", asset_id)


async def get_valuation(db: AsyncSession, asset_id: int, year: int) -> dict:
    """Book value and expense for one year, next to the persisted row for that year."""
    asset = await get_asset_by_id(db, asset_id)
    result = await db.execute(queries.select_schedule_entry(asset_id, year))

    return {
        "asset_id": asset.id,
        "year": year,
        "book_value": current_book_value(asset, year),
        "depreciation_expense": depreciation_for_year(asset, year),
        "scheduled_entry": result.scalar_one_or_none(),
    }
