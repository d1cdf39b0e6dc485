"""Nutrition log model."""
from datetime import date

from sqlalchemy import Date, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, ChildOwnedMixin, CreatedAtMixin


class NutritionLog(Base, ChildOwnedMixin, CreatedAtMixin):
    """A feeding or meal entry."""

    __tablename__ = "nutrition_logs"

    id: Mapped[int] = mapped_column(primary_key=True)
    log_date: Mapped[date] = mapped_column(Date, index=True)
    type: Mapped[str] = mapped_column(
        Enum(
            "breastfeeding", "formula", "solid_food", "snack", "water",
            name="nutrition_type",
        ),
    )
    description: Mapped[str] = mapped_column(String(255))
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True, comment="minutes")
    quantity: Mapped[str | None] = mapped_column(String(100), nullable=True)
    time: Mapped[str | None] = mapped_column(String(10), nullable=True, comment="HH:MM")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
