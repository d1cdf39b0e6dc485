"""Developmental milestone endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.milestone import MilestoneCreate, MilestoneResponse, MilestoneUpdate
from services.exceptions import EntityNotFoundError
from services.milestone_service import milestone_service

router = APIRouter(tags=["milestones"])


@router.get("/children/{child_id}/milestones", response_model=list[MilestoneResponse])
async def list_milestones(
    child_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[MilestoneResponse]:
    """List a child's milestones by expected age."""
    try:
        records = await milestone_service.list_for_child(db, current_user.id, child_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [MilestoneResponse.model_validate(r) for r in records]


@router.post("/milestones", response_model=MilestoneResponse, status_code=201)
async def create_milestone(
    data: MilestoneCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> MilestoneResponse:
    """Track a new milestone."""
    try:
        record = await milestone_service.create(db, current_user.id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MilestoneResponse.model_validate(record)


@router.patch("/milestones/{record_id}", response_model=MilestoneResponse)
async def update_milestone(
    record_id: int,
    data: MilestoneUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> MilestoneResponse:
    """Mark a milestone achieved, or edit its notes and photo."""
    record = await milestone_service.update(db, current_user.id, record_id, data)
    if record is None:
        raise HTTPException(status_code=404, detail="Milestone not found")
    return MilestoneResponse.model_validate(record)
