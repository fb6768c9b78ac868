# api/imports/db_manager.py
"""
Spreadsheet import of assets.

Each row is handled as its own unit of work: parsed, validated, inserted
and given a schedule, or skipped with a "Row <n>: ..." message. A bad row
never stops the rest of the batch.
"""
import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core import validation
from core.errors import DepreciationError, ValidationError
from db_models.asset import Asset
from db_models.category import Category
from api.assets import db_manager as asset_manager
from api.categories import db_manager as category_manager
from api.categories.models import CategoryCreate
from .models import AssetImport
from . import parser

logger = logging.getLogger(__name__)


async def _find_or_create_category(db: AsyncSession, name: str | None) -> int | None:
    if name is None or not name.strip():
        return None
    name = name.strip()

    existing = await category_manager.get_category_by_name(db, name)
    if existing is not None:
        return existing.id

    validation.validate_category(CategoryCreate(name=name))
    category = Category(name=name)
    db.add(category)
    await db.flush()
    logger.info("Created category %s (%s) during import", category.id, name)
    return category.id


async def insert_imported_asset(db: AsyncSession, candidate: AssetImport) -> Asset:
    """Insert a validated candidate and its schedule in one transaction."""
    try:
        category_id = await _find_or_create_category(db, candidate.category)
    except Exception:
        await db.rollback()
        raise

    property_class = candidate.property_class.strip() if candidate.property_class else None
    asset = Asset(
        name=candidate.name.strip(),
        description=candidate.description,
        category_id=category_id,
        date_placed_in_service=validation.parse_date(candidate.date_placed_in_service),
        cost=candidate.cost,
        salvage_value=candidate.salvage_value or 0.0,
        useful_life_years=candidate.useful_life_years,
        property_class=property_class or None,
        notes=candidate.notes,
    )
    db.add(asset)
    await asset_manager.save_with_schedule(db, asset)
    return asset


async def import_assets(db: AsyncSession, content: bytes, today: date | None = None) -> dict:
    """
    Import every usable row of the workbook.

    Returns:
        {"imported": count of inserted assets, "errors": per-row messages}

    Raises:
        ImportFileError: If the upload is not a readable workbook
    """
    imported = 0
    errors: list[str] = []

    for row_number, cells in parser.iter_rows(content):
        try:
            candidate = parser.parse_row(cells)
        except parser.RowParseError as exc:
            errors.append(f"Row {row_number}: {exc}")
            continue

        row_errors = validation.collect_import_row_errors(candidate, row_number, today=today)
        if row_errors:
            errors.append(ValidationError.render(row_errors))
            continue

        try:
            await insert_imported_asset(db, candidate)
        except (DepreciationError, SQLAlchemyError) as exc:
            errors.append(f"Row {row_number}: {exc}")
            continue
        imported += 1

    if errors:
        logger.warning("Import skipped %d row(s): %s", len(errors), " | ".join(errors))
    logger.info("Imported %d asset(s)", imported)
    return {"imported": imported, "errors": errors}
