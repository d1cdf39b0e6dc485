"""Vaccination schedule endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.vaccination import VaccinationCreate, VaccinationResponse, VaccinationUpdate
from services.exceptions import EntityNotFoundError
from services.vaccination_service import vaccination_service

router = APIRouter(tags=["vaccinations"])


@router.get("/children/{child_id}/vaccinations", response_model=list[VaccinationResponse])
async def list_vaccinations(
    child_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[VaccinationResponse]:
    """List a child's vaccinations by recommended age."""
    try:
        records = await vaccination_service.list_for_child(db, current_user.id, child_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [VaccinationResponse.model_validate(r) for r in records]


@router.post("/vaccinations", response_model=VaccinationResponse, status_code=201)
async def create_vaccination(
    data: VaccinationCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> VaccinationResponse:
    """Add a vaccination to a child's schedule."""
    try:
        record = await vaccination_service.create(db, current_user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return VaccinationResponse.model_validate(record)


@router.patch("/vaccinations/{record_id}", response_model=VaccinationResponse)
async def update_vaccination(
    record_id: int,
    data: VaccinationUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> VaccinationResponse:
    """Record that a vaccination was given, or edit its details."""
    record = await vaccination_service.update(db, current_user.id, record_id, data)
    if record is None:
        raise HTTPException(status_code=404, detail="Vaccination not found")
    return VaccinationResponse.model_validate(record)
