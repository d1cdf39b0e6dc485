"""Service layer for subscriptions."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.subscription import Subscription
from schemas.subscription import SubscriptionCreate


async def get_subscription(db: AsyncSession, user_id: int) -> Subscription | None:
    """Get the user's current (most recently created) subscription, if any."""
    result = await db.execute(
        select(Subscription)
        .where(Subscription.user_id == user_id)
        .order_by(Subscription.id.desc())
        .limit(1),
    )
    return result.scalar_one_or_none()


async def create_subscription(
    db: AsyncSession,
    user_id: int,
    data: SubscriptionCreate,
) -> Subscription:
    """
    Start a subscription for the user. New subscriptions are always active.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    subscription = Subscription(user_id=user_id, status="active", **data.model_dump())
    db.add(subscription)
    await db.flush()
    await db.refresh(subscription)
    return subscription
