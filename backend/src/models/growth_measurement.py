"""Growth measurement model (height, weight, head circumference)."""
from datetime import date

from sqlalchemy import Date, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, ChildOwnedMixin, CreatedAtMixin


class GrowthMeasurement(Base, ChildOwnedMixin, CreatedAtMixin):
    """A single growth measurement for a child."""

    __tablename__ = "growth_measurements"

    id: Mapped[int] = mapped_column(primary_key=True)
    height: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), comment="cm")
    weight: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), comment="kg")
    head_circumference: Mapped[float | None] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=True,
        comment="cm",
    )
    measurement_date: Mapped[date] = mapped_column(Date, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
