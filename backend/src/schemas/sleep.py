"""Pydantic schemas for sleep log endpoints."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from schemas.validators import ClockTime

SleepQuality = Literal["poor", "fair", "good", "excellent"]


class SleepCreate(BaseModel):
    """Schema for logging a sleep period."""

    child_id: int
    sleep_date: date
    start_time: ClockTime
    end_time: ClockTime
    duration: int = Field(..., gt=0, description="Minutes")
    quality: SleepQuality = "good"
    notes: str | None = None


class SleepResponse(BaseModel):
    """Schema for sleep log responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    child_id: int
    sleep_date: date
    start_time: str
    end_time: str
    duration: int
    quality: SleepQuality
    notes: str | None
    created_at: datetime
