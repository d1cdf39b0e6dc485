"""Pydantic schemas for subscription endpoints."""
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

Plan = Literal["free", "premium", "premium_plus"]
SubscriptionStatus = Literal["active", "cancelled", "expired"]


class SubscriptionCreate(BaseModel):
    """Schema for starting a subscription."""

    plan: Plan = "free"
    start_date: date
    end_date: date | None = None
    auto_renew: bool = True


class SubscriptionResponse(BaseModel):
    """Schema for subscription responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    plan: Plan
    status: SubscriptionStatus
    start_date: date
    end_date: date | None
    auto_renew: bool
    created_at: datetime
    updated_at: datetime
