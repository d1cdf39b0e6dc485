"""Pydantic schemas for memory journal endpoints."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from schemas.validators import Name255

MediaType = Literal["photo", "video", "text"]


class JournalCreate(BaseModel):
    """Schema for creating a journal entry."""

    child_id: int
    title: Name255
    description: str | None = None
    media_url: str | None = None
    media_type: MediaType
    tags: str | None = Field(default=None, max_length=500)
    journal_date: date


class JournalUpdate(BaseModel):
    """Schema for editing a journal entry's text."""

    title: Name255 | None = None
    description: str | None = None
    tags: str | None = Field(default=None, max_length=500)


class JournalResponse(BaseModel):
    """Schema for journal entry responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    child_id: int
    title: str
    description: str | None
    media_url: str | None
    media_type: MediaType
    tags: str | None
    journal_date: date
    created_at: datetime
    updated_at: datetime
