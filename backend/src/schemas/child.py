"""Pydantic schemas for child profile endpoints."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from schemas.validators import Name255

Gender = Literal["male", "female", "other"]


class ChildCreate(BaseModel):
    """Schema for creating a child profile."""

    name: Name255
    date_of_birth: date
    gender: Gender
    photo_url: str | None = None
    blood_type: str | None = Field(default=None, max_length=10)
    notes: str | None = None


class ChildUpdate(BaseModel):
    """Schema for updating a child profile. Only provided fields change."""

    name: Name255 | None = None
    photo_url: str | None = None
    blood_type: str | None = Field(default=None, max_length=10)
    notes: str | None = None


class ChildResponse(BaseModel):
    """Schema for child profile responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    date_of_birth: date
    gender: Gender
    photo_url: str | None
    blood_type: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
