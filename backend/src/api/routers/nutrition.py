"""Nutrition log endpoints."""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.nutrition import NutritionCreate, NutritionResponse
from services.exceptions import EntityNotFoundError
from services.nutrition_service import nutrition_service

router = APIRouter(tags=["nutrition"])


@router.get("/children/{child_id}/nutrition", response_model=list[NutritionResponse])
async def list_nutrition(
    child_id: int,
    log_date: date | None = Query(
        default=None,
        description="Only entries for this day, ordered by time",
    ),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[NutritionResponse]:
    """List a child's nutrition logs."""
    try:
        records = await nutrition_service.list_for_child(
            db, current_user.id, child_id, on_date=log_date,
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [NutritionResponse.model_validate(r) for r in records]


@router.post("/nutrition", response_model=NutritionResponse, status_code=201)
async def create_nutrition(
    data: NutritionCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> NutritionResponse:
    """Log a feeding or meal."""
    try:
        record = await nutrition_service.create(db, current_user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return NutritionResponse.model_validate(record)


@router.delete("/nutrition/{record_id}", status_code=204)
async def delete_nutrition(
    record_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a nutrition log entry."""
    deleted = await nutrition_service.delete(db, current_user.id, record_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Nutrition log not found")
