# Importing the models registers their tables on Base.metadata
from db_models.category import Category
from db_models.asset import Asset
from db_models.depreciation_entry import DepreciationEntry

__all__ = ["Category", "Asset", "DepreciationEntry"]
