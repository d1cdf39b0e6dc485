"""Child profile CRUD endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.child import ChildCreate, ChildResponse, ChildUpdate
from services import child_service

router = APIRouter(prefix="/children", tags=["children"])


@router.get("", response_model=list[ChildResponse])
async def list_children(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[ChildResponse]:
    """List the current user's children."""
    children = await child_service.get_children(db, current_user.id)
    return [ChildResponse.model_validate(c) for c in children]


@router.post("", response_model=ChildResponse, status_code=201)
async def create_child(
    data: ChildCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> ChildResponse:
    """Add a child profile."""
    child = await child_service.create_child(db, current_user.id, data)
    return ChildResponse.model_validate(child)


@router.get("/{child_id}", response_model=ChildResponse)
async def get_child(
    child_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> ChildResponse:
    """Get a single child profile."""
    child = await child_service.get_child(db, current_user.id, child_id)
    if child is None:
        raise HTTPException(status_code=404, detail="Child not found")
    return ChildResponse.model_validate(child)


@router.patch("/{child_id}", response_model=ChildResponse)
async def update_child(
    child_id: int,
    data: ChildUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> ChildResponse:
    """Update a child profile. Date of birth and gender are fixed at creation."""
    child = await child_service.update_child(db, current_user.id, child_id, data)
    if child is None:
        raise HTTPException(status_code=404, detail="Child not found")
    return ChildResponse.model_validate(child)


@router.delete("/{child_id}", status_code=204)
async def delete_child(
    child_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a child profile together with all of its records."""
    deleted = await child_service.delete_child(db, current_user.id, child_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Child not found")
