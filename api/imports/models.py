# api/imports/models.py
from pydantic import BaseModel


class AssetImport(BaseModel):
    """A candidate asset read from one spreadsheet row, before validation."""
    name: str
    description: str | None = None
    # Category name as free text; looked up or created on insert
    category: str | None = None
    date_placed_in_service: str
    cost: float
    salvage_value: float | None = None
    useful_life_years: int
    property_class: str | None = None
    notes: str | None = None


class ImportResult(BaseModel):
    imported: int
    errors: list[str]
