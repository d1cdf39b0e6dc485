"""Subscription endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.subscription import SubscriptionCreate, SubscriptionResponse
from services import subscription_service

router = APIRouter(prefix="/subscription", tags=["subscription"])


@router.get("", response_model=SubscriptionResponse | None)
async def get_subscription(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> SubscriptionResponse | None:
    """Get the current subscription, or null if the user never subscribed."""
    subscription = await subscription_service.get_subscription(db, current_user.id)
    if subscription is None:
        return None
    return SubscriptionResponse.model_validate(subscription)


@router.post("", response_model=SubscriptionResponse, status_code=201)
async def create_subscription(
    data: SubscriptionCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> SubscriptionResponse:
    """Start a subscription."""
    subscription = await subscription_service.create_subscription(db, current_user.id, data)
    return SubscriptionResponse.model_validate(subscription)
