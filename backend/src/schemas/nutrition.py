"""Pydantic schemas for nutrition log endpoints."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from schemas.validators import ClockTime, Name255, Text100

NutritionType = Literal["breastfeeding", "formula", "solid_food", "snack", "water"]


class NutritionCreate(BaseModel):
    """Schema for logging a feeding or meal."""

    child_id: int
    log_date: date
    type: NutritionType
    description: Name255
    duration: int | None = Field(default=None, ge=0, description="Minutes")
    quantity: Text100 | None = None
    time: ClockTime | None = Field(default=None, description="HH:MM")
    notes: str | None = None


class NutritionResponse(BaseModel):
    """Schema for nutrition log responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    child_id: int
    log_date: date
    type: NutritionType
    description: str
    duration: int | None
    quantity: str | None
    time: str | None
    notes: str | None
    created_at: datetime
