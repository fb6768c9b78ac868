"""Script to manually seed the database with sample categories and assets"""
import asyncio

from sqlalchemy import select, func

from config import settings
from db import AsyncSessionLocal, init_db
from db_models.asset import Asset
from api.assets import db_manager as asset_manager
from api.assets.models import AssetCreate
from api.categories import db_manager as category_manager
from api.categories.models import CategoryCreate

SAMPLE_CATEGORIES = [
    {"name": "Computer Equipment", "default_useful_life": 5, "default_property_class": "5"},
    {"name": "Office Furniture", "default_useful_life": 7, "default_property_class": "7"},
    {"name": "Vehicles", "default_useful_life": 5, "default_property_class": "5"},
    {"name": "Buildings", "default_useful_life": 39, "default_property_class": "39"},
]

SAMPLE_ASSETS = [
    ("Dell Laptop", "Computer Equipment", "2024-01-15", 2000.00, 200.00),
    ("Standing Desk", "Office Furniture", "2023-06-01", 850.00, 50.00),
    ("Delivery Van", "Vehicles", "2022-03-10", 32000.00, 6000.00),
    ("Conference Table", "Office Furniture", "2021-09-20", 1450.00, 0.00),
    ("Office Building", "Buildings", "2020-01-02", 450000.00, 0.00),
]


async def seed() -> None:
    await init_db()

    async with AsyncSessionLocal() as db:
        existing = (await db.execute(select(func.count(Asset.id)))).scalar() or 0
        if existing > 0:
            print(f"Database already has {existing} assets, skipping seed")
            return

        category_ids = {}
        for data in SAMPLE_CATEGORIES:
            category = await category_manager.get_category_by_name(db, data["name"])
            if category is None:
                category = await category_manager.create_category(db, CategoryCreate(**data))
                print(f"  Added category: {category.name}")
            category_ids[category.name] = category.id

        for name, category_name, placed, cost, salvage in SAMPLE_ASSETS:
            asset = await asset_manager.create_asset(
                db,
                AssetCreate(
                    name=name,
                    category_id=category_ids[category_name],
                    date_placed_in_service=placed,
                    cost=cost,
                    salvage_value=salvage,
                ),
            )
            schedule = await asset_manager.get_schedule(db, asset.id)
            print(f"  Added: {asset.id} - {asset.name} ({len(schedule)} schedule years)")

        total = (await db.execute(select(func.count(Asset.id)))).scalar()
        print(f"\n[OK] Total assets in database: {total}")


if __name__ == "__main__":
    print("=" * 60)
    print("DATABASE SEEDING SCRIPT")
    print("=" * 60)
    print(f"Database: {settings.DATABASE_URL}")
    print()

    try:
        asyncio.run(seed())
        print("\n" + "=" * 60)
        print("[OK] Database setup complete!")
        print("=" * 60)
    except Exception as e:
        print(f"\n[ERROR] {e}")
        import traceback
        traceback.print_exc()
