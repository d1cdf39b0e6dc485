"""Health note model (medications, doctor visits, allergies, illnesses)."""
from datetime import date

from sqlalchemy import Date, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, ChildOwnedMixin, TimestampMixin


class HealthNote(Base, ChildOwnedMixin, TimestampMixin):
    """A dated health note, optionally describing a medication course."""

    __tablename__ = "health_notes"

    id: Mapped[int] = mapped_column(primary_key=True)
    type: Mapped[str] = mapped_column(
        Enum(
            "medication", "doctor_visit", "allergy", "illness", "general",
            name="health_note_type",
        ),
    )
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    medication_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    dosage: Mapped[str | None] = mapped_column(String(100), nullable=True)
    frequency: Mapped[str | None] = mapped_column(String(100), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    doctor_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    clinic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    note_date: Mapped[date] = mapped_column(Date, index=True)
