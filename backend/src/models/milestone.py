"""Developmental milestone model."""
from datetime import date

from sqlalchemy import Boolean, Date, Enum, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, ChildOwnedMixin, TimestampMixin


class DevelopmentalMilestone(Base, ChildOwnedMixin, TimestampMixin):
    """A motor, language, social or cognitive milestone and whether it was reached."""

    __tablename__ = "developmental_milestones"

    id: Mapped[int] = mapped_column(primary_key=True)
    category: Mapped[str] = mapped_column(
        Enum("motor", "language", "social", "cognitive", name="milestone_category"),
    )
    milestone: Mapped[str] = mapped_column(String(255))
    expected_age_months: Mapped[int] = mapped_column(Integer)
    achieved: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    achieved_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
