"""Pydantic schemas for vaccination schedule endpoints."""
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from schemas.validators import Name255, Text255


class VaccinationCreate(BaseModel):
    """Schema for adding a vaccine to a child's schedule."""

    child_id: int
    vaccine_name: Name255
    recommended_age_months: int = Field(..., ge=0)
    scheduled_date: date | None = None
    administered_date: date | None = None
    administered: bool = False
    doctor_name: Text255 | None = None
    clinic: Text255 | None = None
    batch_number: Text255 | None = None
    side_effects: str | None = None
    notes: str | None = None


class VaccinationUpdate(BaseModel):
    """Schema for recording that a vaccine was given (or correcting the record)."""

    administered: bool | None = None
    administered_date: date | None = None
    doctor_name: Text255 | None = None
    clinic: Text255 | None = None
    batch_number: Text255 | None = None
    side_effects: str | None = None
    notes: str | None = None


class VaccinationResponse(BaseModel):
    """Schema for vaccination responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    child_id: int
    vaccine_name: str
    recommended_age_months: int
    scheduled_date: date | None
    administered_date: date | None
    administered: bool
    doctor_name: str | None
    clinic: str | None
    batch_number: str | None
    side_effects: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
