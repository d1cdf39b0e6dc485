"""
Base service for records that belong to a child profile.

Growth measurements, milestones, vaccinations, nutrition and sleep logs,
health notes and journal entries share the same ownership rule: a record is
visible to a user only through a child that user owns. Every query here joins
through ChildProfile and filters on its user_id, so a record owned by another
user behaves exactly like a missing one.
"""
from datetime import date
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import ChildOwnedMixin
from models.child_profile import ChildProfile
from services import child_service

T = TypeVar("T", bound=ChildOwnedMixin)


class ChildRecordService(Generic[T]):
    """
    CRUD for one child-owned model.

    Subclasses define:
    - model: The SQLAlchemy model class
    - entity_name: Human-readable name for error messages (e.g., "Sleep log")
    - order_by: Columns used to order list results
    - date_column: Optional name of the date column used by list_for_child(on_date=...)
    """

    model: ClassVar[type[Any]]
    entity_name: ClassVar[str]
    order_by: ClassVar[tuple[Any, ...]] = ()
    date_column: ClassVar[str | None] = None

    def _owned(self, user_id: int) -> Select:
        """SELECT of this model restricted to children owned by user_id."""
        return (
            select(self.model)
            .join(ChildProfile, ChildProfile.id == self.model.child_id)
            .where(ChildProfile.user_id == user_id)
        )

    def _list_order(self, on_date: date | None) -> tuple[Any, ...]:  # noqa: ARG002
        return self.order_by

    async def list_for_child(
        self,
        db: AsyncSession,
        user_id: int,
        child_id: int,
        on_date: date | None = None,
    ) -> list[T]:
        """
        List a child's records.

        Raises:
            EntityNotFoundError: If the child does not exist or is not owned by the user.
        """
        await child_service.require_child(db, user_id, child_id)
        query = self._owned(user_id).where(self.model.child_id == child_id)
        if on_date is not None and self.date_column is not None:
            query = query.where(getattr(self.model, self.date_column) == on_date)
        result = await db.execute(query.order_by(*self._list_order(on_date), self.model.id))
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, user_id: int, record_id: int) -> T | None:
        """Get a record by ID, scoped to user. None if missing or not owned."""
        result = await db.execute(self._owned(user_id).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def create(self, db: AsyncSession, user_id: int, data: BaseModel) -> T:
        """
        Create a record for one of the user's children (``data.child_id``).

        Raises:
            EntityNotFoundError: If the child does not exist or is not owned by the user.

        Note:
            Does not commit. Caller (session generator) handles commit at request end.
        """
        values = data.model_dump()
        await child_service.require_child(db, user_id, values["child_id"])
        record = self.model(**values)
        db.add(record)
        await db.flush()
        await db.refresh(record)
        return record

    async def update(
        self,
        db: AsyncSession,
        user_id: int,
        record_id: int,
        data: BaseModel,
    ) -> T | None:
        """
        Apply the fields the client actually sent.

        An explicit null for a NOT NULL column is ignored rather than written.
        Returns None if the record is missing or not owned.
        """
        record = await self.get(db, user_id, record_id)
        if record is None:
            return None

        columns = self.model.__table__.columns
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and not columns[field].nullable:
                continue
            setattr(record, field, value)

        await db.flush()
        await db.refresh(record)
        return record

    async def delete(self, db: AsyncSession, user_id: int, record_id: int) -> bool:
        """Delete a record. Returns False if missing or not owned."""
        record = await self.get(db, user_id, record_id)
        if record is None:
            return False
        await db.delete(record)
        await db.flush()
        return True
