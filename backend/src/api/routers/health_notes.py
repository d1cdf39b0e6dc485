"""Health note endpoints (medications, doctor visits, allergies, illnesses)."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.health_note import HealthNoteCreate, HealthNoteResponse, HealthNoteUpdate
from services.exceptions import EntityNotFoundError
from services.health_note_service import health_note_service

router = APIRouter(tags=["health-notes"])


@router.get("/children/{child_id}/health-notes", response_model=list[HealthNoteResponse])
async def list_health_notes(
    child_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[HealthNoteResponse]:
    """List a child's health notes, newest first."""
    try:
        records = await health_note_service.list_for_child(db, current_user.id, child_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [HealthNoteResponse.model_validate(r) for r in records]


@router.post("/health-notes", response_model=HealthNoteResponse, status_code=201)
async def create_health_note(
    data: HealthNoteCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> HealthNoteResponse:
    """Add a health note."""
    try:
        record = await health_note_service.create(db, current_user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return HealthNoteResponse.model_validate(record)


@router.patch("/health-notes/{record_id}", response_model=HealthNoteResponse)
async def update_health_note(
    record_id: int,
    data: HealthNoteUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> HealthNoteResponse:
    """Edit a health note."""
    record = await health_note_service.update(db, current_user.id, record_id, data)
    if record is None:
        raise HTTPException(status_code=404, detail="Health note not found")
    return HealthNoteResponse.model_validate(record)


@router.delete("/health-notes/{record_id}", status_code=204)
async def delete_health_note(
    record_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a health note."""
    deleted = await health_note_service.delete(db, current_user.id, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Health note not found")
