"""Growth measurement endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.growth import GrowthCreate, GrowthResponse, GrowthUpdate
from services.exceptions import EntityNotFoundError
from services.growth_service import growth_service

router = APIRouter(tags=["growth"])


@router.get("/children/{child_id}/growth", response_model=list[GrowthResponse])
async def list_growth(
    child_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[GrowthResponse]:
    """List a child's measurements, newest first."""
    try:
        records = await growth_service.list_for_child(db, current_user.id, child_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [GrowthResponse.model_validate(r) for r in records]


@router.post("/growth", response_model=GrowthResponse, status_code=201)
async def create_growth(
    data: GrowthCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> GrowthResponse:
    """Record a measurement for one of the user's children."""
    try:
        record = await growth_service.create(db, current_user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return GrowthResponse.model_validate(record)


@router.patch("/growth/{record_id}", response_model=GrowthResponse)
async def update_growth(
    record_id: int,
    data: GrowthUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> GrowthResponse:
    """Correct a measurement."""
    record = await growth_service.update(db, current_user.id, record_id, data)
    if record is None:
        raise HTTPException(status_code=404, detail="Growth measurement not found")
    return GrowthResponse.model_validate(record)


@router.delete("/growth/{record_id}", status_code=204)
async def delete_growth(
    record_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a measurement."""
    deleted = await growth_service.delete(db, current_user.id, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Growth measurement not found")
