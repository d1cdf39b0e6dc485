"""
Request authentication for session tokens (Bearer header or cookie).

authenticate_request() is the single "who is calling?" operation. Every
protected endpoint depends on get_current_user, which runs it before any
domain table is touched and turns every failure into the same 401.
"""
import logging

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from core.session_transport import get_token_from_request
from core.tokens import verify_token
from db.session import get_async_session
from models.user import User
from services import user_service

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """
    Raised when a request cannot be tied to a user.

    The message is for operators (logs). Every AuthenticationError is a 401
    to the caller, whatever the message says.
    """


async def authenticate_request(
    request: Request,
    db: AsyncSession,
    settings: Settings,
) -> User:
    """
    Resolve a request to its user.

    Reads the token from the Authorization header or the session cookie,
    verifies it, loads the user, and stamps last_signed_in.

    Raises:
        AuthenticationError: "Missing or invalid token" (raised before any
            database access), "Invalid or expired token", or "User not found".
    """
    token = get_token_from_request(request)
    if not token:
        raise AuthenticationError("Missing or invalid token")

    payload = verify_token(token, settings)
    if payload is None:
        raise AuthenticationError("Invalid or expired token")

    user = await user_service.get_user_by_id(db, payload.user_id)
    if user is None:
        raise AuthenticationError("User not found")

    await _touch_last_signed_in(db, user)
    return user


async def _touch_last_signed_in(db: AsyncSession, user: User) -> None:
    """
    Best-effort last_signed_in update.

    Runs in a SAVEPOINT; if it fails the request still succeeds and the
    failure is logged at WARNING.
    """
    try:
        async with db.begin_nested():
            await user_service.update_last_signed_in(db, user)
    except SQLAlchemyError:
        logger.warning(
            "Failed to update last_signed_in for user_id=%s", user.id, exc_info=True,
        )
        # The savepoint rollback expired the user's attributes
        await db.refresh(user)


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> User:
    """Dependency that authenticates the request and returns the current user."""
    try:
        return await authenticate_request(request, db, settings)
    except AuthenticationError as e:
        logger.info("Rejected request to %s: %s", request.url.path, e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
