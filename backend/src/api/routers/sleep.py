"""Sleep log endpoints."""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.sleep import SleepCreate, SleepResponse
from services.exceptions import EntityNotFoundError
from services.sleep_service import sleep_service

router = APIRouter(tags=["sleep"])


@router.get("/children/{child_id}/sleep", response_model=list[SleepResponse])
async def list_sleep(
    child_id: int,
    sleep_date: date | None = Query(default=None, description="Only entries for this day"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[SleepResponse]:
    """List a child's sleep logs, newest first."""
    try:
        records = await sleep_service.list_for_child(
            db, current_user.id, child_id, on_date=sleep_date,
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [SleepResponse.model_validate(r) for r in records]


@router.post("/sleep", response_model=SleepResponse, status_code=201)
async def create_sleep(
    data: SleepCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> SleepResponse:
    """Log a sleep period."""
    try:
        record = await sleep_service.create(db, current_user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SleepResponse.model_validate(record)


@router.delete("/sleep/{record_id}", status_code=204)
async def delete_sleep(
    record_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a sleep log entry."""
    deleted = await sleep_service.delete(db, current_user.id, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Sleep log not found")
