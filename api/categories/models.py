# api/categories/models.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    # Lengths and ranges are checked by core.validation so that every
    # violation is reported together.
    name: str = Field(..., description="Category name, e.g. 'Computer Equipment'")
    default_useful_life: int | None = Field(None, description="Pre-fills useful life on new assets")
    default_property_class: str | None = Field(None, description="Pre-fills property class on new assets")


class CategoryUpdate(CategoryCreate):
    pass


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    default_useful_life: int | None = None
    default_property_class: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CategoryWithCount(BaseModel):
    id: int
    name: str
    default_useful_life: int | None = None
    default_property_class: str | None = None
    asset_count: int
