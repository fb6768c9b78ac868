from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """
    Declarative base for the asset, category and depreciation schedule tables.

    Kept free of engine/session imports so Alembic and the test fixtures can
    build the schema without pulling in async drivers.
    """
    pass
