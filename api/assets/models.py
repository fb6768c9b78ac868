# api/assets/models.py
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field


class AssetBase(BaseModel):
    # Field rules live in core.validation so that all violations are
    # reported at once; only types are enforced here.
    name: str
    description: str | None = None
    category_id: int | None = None
    date_placed_in_service: str = Field(..., description="YYYY-MM-DD")
    cost: float
    salvage_value: float = 0.0
    property_class: str | None = None
    notes: str | None = None
    disposed_date: str | None = Field(None, description="YYYY-MM-DD")
    disposed_value: float | None = None


class AssetCreate(AssetBase):
    # Falls back to the category's default when omitted
    useful_life_years: int | None = None


class AssetUpdate(AssetBase):
    useful_life_years: int


class DisposeRequest(BaseModel):
    disposed_date: str = Field(..., description="YYYY-MM-DD")
    disposed_value: float | None = None


class AssetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    category_id: int | None = None
    category_name: str | None = None
    date_placed_in_service: date
    cost: float
    salvage_value: float
    useful_life_years: int
    property_class: str | None = None
    notes: str | None = None
    disposed_date: date | None = None
    disposed_value: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DepreciationEntryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    asset_id: int
    year: int
    beginning_book_value: float
    depreciation_expense: float
    accumulated_depreciation: float
    ending_book_value: float


class AssetDetail(BaseModel):
    """An asset with its persisted schedule."""
    asset: AssetRead
    schedule: list[DepreciationEntryRead]


class AssetValuation(BaseModel):
    """Point-in-time figures for one asset and year."""
    asset_id: int
    year: int
    book_value: float
    depreciation_expense: float
    # The persisted schedule row for the same year, if the year is in service
    scheduled_entry: DepreciationEntryRead | None = None
