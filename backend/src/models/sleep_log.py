"""Sleep log model."""
from datetime import date

from sqlalchemy import Date, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, ChildOwnedMixin, CreatedAtMixin


class SleepLog(Base, ChildOwnedMixin, CreatedAtMixin):
    """A sleep period."""

    __tablename__ = "sleep_logs"

    id: Mapped[int] = mapped_column(primary_key=True)
    sleep_date: Mapped[date] = mapped_column(Date, index=True)
    start_time: Mapped[str] = mapped_column(String(10), comment="HH:MM")
    end_time: Mapped[str] = mapped_column(String(10), comment="HH:MM")
    duration: Mapped[int] = mapped_column(Integer, comment="minutes")
    quality: Mapped[str] = mapped_column(
        Enum("poor", "fair", "good", "excellent", name="sleep_quality"),
        default="good",
        server_default="good",
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
