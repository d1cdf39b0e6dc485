"""Service layer for child profiles."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import ChildOwnedMixin
from models.child_profile import ChildProfile
from models.growth_measurement import GrowthMeasurement
from models.health_note import HealthNote
from models.journal_entry import JournalEntry
from models.milestone import DevelopmentalMilestone
from models.nutrition_log import NutritionLog
from models.sleep_log import SleepLog
from models.vaccination import Vaccination
from schemas.child import ChildCreate, ChildUpdate
from services.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

# Records removed together with their child
DEPENDENT_MODELS: tuple[type[ChildOwnedMixin], ...] = (
    GrowthMeasurement,
    DevelopmentalMilestone,
    Vaccination,
    NutritionLog,
    SleepLog,
    HealthNote,
    JournalEntry,
)


async def get_children(db: AsyncSession, user_id: int) -> list[ChildProfile]:
    """List a user's children, oldest profile first."""
    result = await db.execute(
        select(ChildProfile)
        .where(ChildProfile.user_id == user_id)
        .order_by(ChildProfile.id),
    )
    return list(result.scalars().all())


async def get_child(db: AsyncSession, user_id: int, child_id: int) -> ChildProfile | None:
    """
    Get a child by ID, scoped to user.

    Returns:
        ChildProfile if found and owned by the user, None otherwise.
    """
    result = await db.execute(
        select(ChildProfile).where(
            ChildProfile.id == child_id,
            ChildProfile.user_id == user_id,
        ),
    )
    return result.scalar_one_or_none()


async def require_child(db: AsyncSession, user_id: int, child_id: int) -> ChildProfile:
    """
    Get a child owned by the user or raise.

    Raises:
        EntityNotFoundError: If the child does not exist or belongs to someone else.
    """
    child = await get_child(db, user_id, child_id)
    if child is None:
        raise EntityNotFoundError("Child")
    return child


async def create_child(db: AsyncSession, user_id: int, data: ChildCreate) -> ChildProfile:
    """
    Create a child profile for a user.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    child = ChildProfile(user_id=user_id, **data.model_dump())
    db.add(child)
    await db.flush()
    await db.refresh(child)
    return child


async def update_child(
    db: AsyncSession,
    user_id: int,
    child_id: int,
    data: ChildUpdate,
) -> ChildProfile | None:
    """Update a child profile. Returns None if not found or not owned."""
    child = await get_child(db, user_id, child_id)
    if child is None:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field == "name":
            continue
        setattr(child, field, value)

    await db.flush()
    await db.refresh(child)
    return child


async def delete_child(db: AsyncSession, user_id: int, child_id: int) -> bool:
    """
    Delete a child profile and every record that belongs to it.

    Returns:
        True if deleted, False if not found or not owned.
    """
    child = await get_child(db, user_id, child_id)
    if child is None:
        return False

    for model in DEPENDENT_MODELS:
        await db.execute(delete(model).where(model.child_id == child.id))
    await db.delete(child)
    await db.flush()
    logger.info("Deleted child_id=%s for user_id=%s", child_id, user_id)
    return True
