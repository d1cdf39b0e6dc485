"""Vaccination schedule model."""
from datetime import date

from sqlalchemy import Boolean, Date, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, ChildOwnedMixin, TimestampMixin


class Vaccination(Base, ChildOwnedMixin, TimestampMixin):
    """A scheduled or administered vaccine dose."""

    __tablename__ = "vaccinations"

    id: Mapped[int] = mapped_column(primary_key=True)
    vaccine_name: Mapped[str] = mapped_column(String(255))
    recommended_age_months: Mapped[int] = mapped_column(Integer)
    scheduled_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    administered_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    administered: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    doctor_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    clinic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    batch_number: Mapped[str | None] = mapped_column(String(255), nullable=True)
    side_effects: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
