"""Pydantic schemas for developmental milestone endpoints."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from schemas.validators import Name255

MilestoneCategory = Literal["motor", "language", "social", "cognitive"]


class MilestoneCreate(BaseModel):
    """Schema for adding a milestone to track."""

    child_id: int
    category: MilestoneCategory
    milestone: Name255
    expected_age_months: int = Field(..., gt=0)
    achieved: bool = False
    achieved_date: date | None = None
    photo_url: str | None = None
    notes: str | None = None


class MilestoneUpdate(BaseModel):
    """Schema for marking progress on a milestone."""

    achieved: bool | None = None
    achieved_date: date | None = None
    photo_url: str | None = None
    notes: str | None = None


class MilestoneResponse(BaseModel):
    """Schema for milestone responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    child_id: int
    category: MilestoneCategory
    milestone: str
    expected_age_months: int
    achieved: bool
    achieved_date: date | None
    photo_url: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
