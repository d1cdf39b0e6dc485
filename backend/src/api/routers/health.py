"""Liveness endpoint for load balancers and the start script's operators."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import Database, get_async_session, get_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Service status plus the state of the configured database."""

    status: str
    database: str
    dialect: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_async_session),
    database: Database = Depends(get_database),
) -> HealthResponse:
    """
    Report whether the API can reach its database. Does not require authentication.

    A failing query degrades the status instead of failing the request, so the
    endpoint keeps answering while the database is down.
    """
    reachable = True
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database health check failed (%s)", database.dialect)
        reachable = False

    return HealthResponse(
        status="healthy" if reachable else "degraded",
        database="healthy" if reachable else "unhealthy",
        dialect=database.dialect,
    )
