# api/categories/views.py
"""
Category management endpoints.
"""
from fastapi import APIRouter, status

from api.errors import http_error
from core.deps import DbSession
from core.errors import DepreciationError
from .models import CategoryCreate, CategoryRead, CategoryUpdate, CategoryWithCount
from . import db_manager

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=list[CategoryRead],
    summary="List categories",
)
async def list_categories_endpoint(db: DbSession) -> list[CategoryRead]:
    """
    List all categories ordered by name.
    """
    categories = await db_manager.list_categories(db)
    return [CategoryRead.model_validate(c) for c in categories]


@router.get(
    "/with-counts",
    response_model=list[CategoryWithCount],
    summary="List categories with asset counts",
)
async def list_categories_with_counts_endpoint(db: DbSession) -> list[CategoryWithCount]:
    rows = await db_manager.list_categories_with_counts(db)
    return [CategoryWithCount(**row) for row in rows]


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
async def create_category_endpoint(payload: CategoryCreate, db: DbSession) -> CategoryRead:
    """
    Create a category. Names are unique.
    """
    try:
        category = await db_manager.create_category(db, payload)
    except DepreciationError as exc:
        raise http_error(exc) from exc

    return CategoryRead.model_validate(category)


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Get category by ID",
)
async def get_category_endpoint(category_id: int, db: DbSession) -> CategoryRead:
    try:
        category = await db_manager.get_category_by_id(db, category_id)
    except DepreciationError as exc:
        raise http_error(exc) from exc

    return CategoryRead.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Update a category",
)
async def update_category_endpoint(
    category_id: int,
    payload: CategoryUpdate,
    db: DbSession,
) -> CategoryRead:
    """
    Update a category's name and defaults. Existing assets keep their values.
    """
    try:
        category = await db_manager.update_category(db, category_id, payload)
    except DepreciationError as exc:
        raise http_error(exc) from exc

    return CategoryRead.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
)
async def delete_category_endpoint(category_id: int, db: DbSession) -> None:
    """
    Delete a category. Rejected with 409 while any asset still uses it.
    """
    try:
        await db_manager.delete_category(db, category_id)
    except DepreciationError as exc:
        raise http_error(exc) from exc
