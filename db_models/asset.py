# db_models/asset.py
from datetime import date, datetime

from sqlalchemy import String, Text, Date, DateTime, Float, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from db_base import Base


class Asset(Base):
    __tablename__ = "assets"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Weak reference: lookup only, the category does not own its assets
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id"),
        nullable=True,
        index=True,
    )

    # Start of depreciation; only the calendar year drives the schedule
    date_placed_in_service: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        index=True,
    )

    cost: Mapped[float] = mapped_column(Float, nullable=False)

    salvage_value: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        server_default="0",
    )

    useful_life_years: Mapped[int] = mapped_column(nullable=False)

    # Tax classification bucket: 3, 5, 7, 10, 15, 20, 27.5 or 39
    property_class: Mapped[str | None] = mapped_column(String(10), nullable=True)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    disposed_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    disposed_value: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=func.now(),
    )
