# core/schedule_sync.py
"""
Keeps the persisted depreciation schedule in step with its asset.

The schedule is a cache of `generate_schedule(asset)`. Whenever an asset's
record changes, the rows for that asset are thrown away and written again
from scratch inside the caller's transaction, so a reader either sees the
old complete schedule or the new complete one.
"""
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.depreciation import ScheduleEntry, generate_schedule
from core.errors import ConsistencyError
from db_models.asset import Asset
from db_models.depreciation_entry import DepreciationEntry

logger = logging.getLogger(__name__)


def to_rows(asset_id: int, schedule: list[ScheduleEntry]) -> list[DepreciationEntry]:
    return [
        DepreciationEntry(
            asset_id=asset_id,
            year=entry.year,
            beginning_book_value=entry.beginning_book_value,
            depreciation_expense=entry.depreciation_expense,
            accumulated_depreciation=entry.accumulated_depreciation,
            ending_book_value=entry.ending_book_value,
        )
        for entry in schedule
    ]


async def sync_schedule(db: AsyncSession, asset: Asset) -> list[DepreciationEntry]:
    """
    Replace every schedule row of `asset` with a freshly generated schedule.

    Runs inside the caller's unit of work and does not commit; the caller
    commits the asset change and the new schedule together, or rolls both
    back.

    Raises:
        ConsistencyError: If the asset has no id yet, the write fails, or
            the number of stored rows does not match the generated schedule.
    """
    if asset.id is None:
        raise ConsistencyError("Cannot synchronize schedule: asset has not been persisted")

    schedule = generate_schedule(asset)
    rows = to_rows(asset.id, schedule)

    try:
        await db.execute(
            delete(DepreciationEntry).where(DepreciationEntry.asset_id == asset.id)
        )
        db.add_all(rows)
        await db.flush()

        result = await db.execute(
            select(func.count(DepreciationEntry.id)).where(DepreciationEntry.asset_id == asset.id)
        )
        stored = result.scalar() or 0
    except SQLAlchemyError as exc:
        logger.error("Schedule write failed for asset %s: %s", asset.id, exc)
        raise ConsistencyError(
            f"Failed to regenerate depreciation schedule for asset {asset.id}"
        ) from exc

    if stored != len(rows):
        logger.error(
            "Schedule for asset %s has %d rows, expected %d", asset.id, stored, len(rows)
        )
        raise ConsistencyError(
            f"Depreciation schedule for asset {asset.id} is incomplete "
            f"({stored} of {len(rows)} years written)"
        )

    logger.debug("Regenerated %d schedule rows for asset %s", len(rows), asset.id)
    return rows
