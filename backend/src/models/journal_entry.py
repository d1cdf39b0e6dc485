"""Memory journal entry model."""
from datetime import date

from sqlalchemy import Date, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, ChildOwnedMixin, TimestampMixin


class JournalEntry(Base, ChildOwnedMixin, TimestampMixin):
    """A memory: text, or a photo/video referenced by URL."""

    __tablename__ = "journal_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_type: Mapped[str] = mapped_column(Enum("photo", "video", "text", name="media_type"))
    tags: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Comma-separated free-form tags",
    )
    journal_date: Mapped[date] = mapped_column(Date, index=True)
