"""Pydantic schemas for health note endpoints."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

from schemas.validators import Name255, Text100, Text255

HealthNoteType = Literal["medication", "doctor_visit", "allergy", "illness", "general"]


class HealthNoteCreate(BaseModel):
    """Schema for creating a health note."""

    child_id: int
    type: HealthNoteType
    title: Name255
    description: str | None = None
    medication_name: Text255 | None = None
    dosage: Text100 | None = None
    frequency: Text100 | None = None
    start_date: date | None = None
    end_date: date | None = None
    doctor_name: Text255 | None = None
    clinic: Text255 | None = None
    note_date: date


class HealthNoteUpdate(BaseModel):
    """Schema for updating a health note."""

    title: Name255 | None = None
    description: str | None = None
    medication_name: Text255 | None = None
    dosage: Text100 | None = None
    frequency: Text100 | None = None


class HealthNoteResponse(BaseModel):
    """Schema for health note responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    child_id: int
    type: HealthNoteType
    title: str
    description: str | None
    medication_name: str | None
    dosage: str | None
    frequency: str | None
    start_date: date | None
    end_date: date | None
    doctor_name: str | None
    clinic: str | None
    note_date: date
    created_at: datetime
    updated_at: datetime
