"""Pydantic schemas for growth measurement endpoints."""
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from schemas.validators import PositiveMeasure


class GrowthCreate(BaseModel):
    """Schema for recording a growth measurement."""

    child_id: int
    height: PositiveMeasure
    weight: PositiveMeasure
    head_circumference: PositiveMeasure | None = None
    measurement_date: date
    notes: str | None = None


class GrowthUpdate(BaseModel):
    """Schema for correcting a growth measurement."""

    height: PositiveMeasure | None = None
    weight: PositiveMeasure | None = None
    head_circumference: PositiveMeasure | None = None
    notes: str | None = None


class GrowthResponse(BaseModel):
    """Schema for growth measurement responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    child_id: int
    height: float
    weight: float
    head_circumference: float | None
    measurement_date: date
    notes: str | None
    created_at: datetime
