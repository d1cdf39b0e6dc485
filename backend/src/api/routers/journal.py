"""Memory journal endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.journal import JournalCreate, JournalResponse, JournalUpdate
from services.exceptions import EntityNotFoundError
from services.journal_service import journal_service

router = APIRouter(tags=["journal"])


@router.get("/children/{child_id}/journal", response_model=list[JournalResponse])
async def list_journal(
    child_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[JournalResponse]:
    """List a child's journal entries, newest first."""
    try:
        records = await journal_service.list_for_child(db, current_user.id, child_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [JournalResponse.model_validate(r) for r in records]


@router.post("/journal", response_model=JournalResponse, status_code=201)
async def create_journal(
    data: JournalCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> JournalResponse:
    """Add a journal entry."""
    try:
        record = await journal_service.create(db, current_user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return JournalResponse.model_validate(record)


@router.patch("/journal/{record_id}", response_model=JournalResponse)
async def update_journal(
    record_id: int,
    data: JournalUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> JournalResponse:
    """Edit a journal entry's title, description or tags."""
    record = await journal_service.update(db, current_user.id, record_id, data)
    if record is None:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return JournalResponse.model_validate(record)


@router.delete("/journal/{record_id}", status_code=204)
async def delete_journal(
    record_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a journal entry."""
    deleted = await journal_service.delete(db, current_user.id, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Journal entry not found")
