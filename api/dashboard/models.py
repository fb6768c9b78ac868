# api/dashboard/models.py
"""
Pydantic models for dashboard responses.
"""
from pydantic import BaseModel


class DashboardStats(BaseModel):
    """Portfolio totals for non-disposed assets in one year."""
    year: int
    total_assets: int
    total_cost: float
    total_book_value: float
    current_year_depreciation: float


class AnnualSummary(BaseModel):
    """Scheduled depreciation for one year across all assets."""
    year: int
    total_depreciation: float
    asset_count: int
