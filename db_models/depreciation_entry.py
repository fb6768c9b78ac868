# db_models/depreciation_entry.py
from sqlalchemy import Float, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from db_base import Base


class DepreciationEntry(Base):
    """
    One persisted year of an asset's schedule.

    Derived data: rows are always regenerated from the asset record and
    never edited in place.
    """
    __tablename__ = "depreciation_schedule"
    __table_args__ = (
        UniqueConstraint("asset_id", "year", name="uq_schedule_asset_year"),
        Index("ix_schedule_year", "year"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    asset_id: Mapped[int] = mapped_column(
        ForeignKey("assets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    year: Mapped[int] = mapped_column(nullable=False)

    # Money columns, rounded to cents before storage
    beginning_book_value: Mapped[float] = mapped_column(Float, nullable=False)
    depreciation_expense: Mapped[float] = mapped_column(Float, nullable=False)
    accumulated_depreciation: Mapped[float] = mapped_column(Float, nullable=False)
    ending_book_value: Mapped[float] = mapped_column(Float, nullable=False)
