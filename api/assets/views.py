# api/assets/views.py
"""
Asset and depreciation schedule endpoints.
"""
from fastapi import APIRouter, Query, status

from api.errors import http_error
from core.deps import DbSession, ReferenceDate
from core.errors import DepreciationError
from .models import (
    AssetCreate,
    AssetDetail,
    AssetRead,
    AssetUpdate,
    AssetValuation,
    DepreciationEntryRead,
    DisposeRequest,
)
from . import db_manager

router = APIRouter(prefix="/assets", tags=["assets"])


def _asset_read(asset, category_name: str | None) -> AssetRead:
    return AssetRead.model_validate(asset).model_copy(update={"category_name": category_name})


async def _asset_detail(db, asset_id: int) -> AssetDetail:
    asset, category_name = await db_manager.get_asset_with_category_name(db, asset_id)
    schedule = await db_manager.get_schedule(db, asset_id)
    return AssetDetail(
        asset=_asset_read(asset, category_name),
        schedule=[DepreciationEntryRead.model_validate(e) for e in schedule],
    )


@router.get(
    "",
    response_model=list[AssetRead],
    summary="List assets",
)
async def list_assets_endpoint(db: DbSession) -> list[AssetRead]:
    """
    List all assets ordered by name, with category names.
    """
    rows = await db_manager.list_assets(db)
    return [_asset_read(asset, category_name) for asset, category_name in rows]


@router.post(
    "",
    response_model=AssetDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create an asset",
)
async def create_asset_endpoint(
    payload: AssetCreate,
    db: DbSession,
    today: ReferenceDate,
) -> AssetDetail:
    """
    Create an asset and generate its depreciation schedule.
    """
    try:
        asset = await db_manager.create_asset(db, payload, today=today)
        return await _asset_detail(db, asset.id)
    except DepreciationError as exc:
        raise http_error(exc) from exc


@router.get(
    "/{asset_id}",
    response_model=AssetDetail,
    summary="Get an asset with its schedule",
)
async def get_asset_endpoint(asset_id: int, db: DbSession) -> AssetDetail:
    try:
        return await _asset_detail(db, asset_id)
    except DepreciationError as exc:
        raise http_error(exc) from exc


@router.put(
    "/{asset_id}",
    response_model=AssetDetail,
    summary="Update an asset",
)
async def update_asset_endpoint(
    asset_id: int,
    payload: AssetUpdate,
    db: DbSession,
    today: ReferenceDate,
) -> AssetDetail:
    """
    Replace an asset's fields. The schedule is regenerated from scratch.
    """
    try:
        await db_manager.update_asset(db, asset_id, payload, today=today)
        return await _asset_detail(db, asset_id)
    except DepreciationError as exc:
        raise http_error(exc) from exc


@router.delete(
    "/{asset_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an asset and its schedule",
)
async def delete_asset_endpoint(asset_id: int, db: DbSession) -> None:
    try:
        await db_manager.delete_asset(db, asset_id)
    except DepreciationError as exc:
        raise http_error(exc) from exc


@router.post(
    "/{asset_id}/dispose",
    response_model=AssetDetail,
    summary="Dispose of an asset",
)
async def dispose_asset_endpoint(
    asset_id: int,
    payload: DisposeRequest,
    db: DbSession,
    today: ReferenceDate,
) -> AssetDetail:
    """
    Record a disposal date and value. No expense accrues after the
    disposal year.
    """
    try:
        await db_manager.dispose_asset(
            db,
            asset_id,
            disposed_date=payload.disposed_date,
            disposed_value=payload.disposed_value,
            today=today,
        )
        return await _asset_detail(db, asset_id)
    except DepreciationError as exc:
        raise http_error(exc) from exc


@router.get(
    "/{asset_id}/schedule",
    response_model=list[DepreciationEntryRead],
    summary="Get the persisted depreciation schedule",
)
async def get_schedule_endpoint(asset_id: int, db: DbSession) -> list[DepreciationEntryRead]:
    try:
        schedule = await db_manager.get_schedule(db, asset_id)
    except DepreciationError as exc:
        raise http_error(exc) from exc

    return [DepreciationEntryRead.model_validate(e) for e in schedule]


@router.post(
    "/{asset_id}/schedule/regenerate",
    response_model=list[DepreciationEntryRead],
    summary="Regenerate the depreciation schedule",
)
async def regenerate_schedule_endpoint(asset_id: int, db: DbSession) -> list[DepreciationEntryRead]:
    """
    Rebuild the schedule from the stored asset record. Running it on an
    unchanged asset yields the same figures.
    """
    try:
        schedule = await db_manager.regenerate_schedule(db, asset_id)
    except DepreciationError as exc:
        raise http_error(exc) from exc

    return [DepreciationEntryRead.model_validate(e) for e in schedule]


@router.get(
    "/{asset_id}/valuation",
    response_model=AssetValuation,
    summary="Book value and expense for a year",
)
async def get_valuation_endpoint(
    asset_id: int,
    db: DbSession,
    today: ReferenceDate,
    year: int | None = Query(None, description="Defaults to the current year"),
) -> AssetValuation:
    if year is None:
        year = today.year
    try:
        data = await db_manager.get_valuation(db, asset_id, year)
    except DepreciationError as exc:
        raise http_error(exc) from exc

    entry = data["scheduled_entry"]
    return AssetValuation(
        asset_id=data["asset_id"],
        year=data["year"],
        book_value=data["book_value"],
        depreciation_expense=data["depreciation_expense"],
        scheduled_entry=DepreciationEntryRead.model_validate(entry) if entry else None,
    )
