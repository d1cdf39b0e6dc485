"""
Local email/password auth endpoints.

These routes answer with ``{"error": message}`` bodies instead of FastAPI's
``{"detail": ...}`` because the mobile and web clients already parse that
shape. Every route sets or clears the session cookie on the response it
returns, so web clients get the cookie while native clients keep the token
from the body and send it back as a Bearer header.
"""
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from core.auth import AuthenticationError, authenticate_request
from core.config import Settings, get_settings
from core.cookies import clear_session_cookie, set_session_cookie
from core.passwords import MAX_PASSWORD_BYTES, hash_password_async
from core.session_transport import get_bearer_token
from core.tokens import create_token, verify_token
from db.session import get_async_session
from models.user import User
from schemas.auth import (
    MIN_PASSWORD_LENGTH,
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    SessionResponse,
    SuccessResponse,
)
from schemas.user import AuthUser
from services import user_service
from services.exceptions import UserAlreadyExistsError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

BodyT = TypeVar("BodyT", bound=BaseModel)

INVALID_CREDENTIALS = "Invalid email or password"
MISSING_CREDENTIALS = "Email and password are required"


def error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    """Build an ``{"error": message}`` response."""
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def auth_response(
    request: Request,
    settings: Settings,
    user: User,
    token: str,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Return ``{token, user}`` and set the session cookie to the same token."""
    body = AuthResponse(token=token, user=AuthUser.from_user(user))
    response = JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )
    set_session_cookie(response, request, settings, token)
    return response


async def read_body(request: Request, model: type[BodyT]) -> BodyT | None:
    """Parse the JSON body into ``model``. Returns None for malformed or mistyped bodies."""
    try:
        payload = await request.json()
    except ValueError:
        return None
    try:
        return model.model_validate(payload)
    except ValidationError:
        return None


async def run_guarded(
    operation: str,
    db: AsyncSession,
    handler: Callable[[], Awaitable[JSONResponse]],
) -> JSONResponse:
    """
    Run an auth handler, turning unexpected errors into a logged 500.

    The transaction is rolled back so nothing half-written is committed at
    request end.
    """
    try:
        return await handler()
    except Exception:
        logger.exception("%s failed", operation)
        await db.rollback()
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"{operation} failed")


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Create a local account and sign it in.

    Body: ``{email, password, name?}``. Emails are trimmed and lower-cased,
    so addresses differing only in case or surrounding whitespace collide.
    """

    async def handle() -> JSONResponse:
        body = await read_body(request, RegisterRequest)
        if body is None or body.email is None or body.password is None:
            return error_response(400, MISSING_CREDENTIALS)

        email = user_service.normalize_email(body.email)
        if not email:
            return error_response(400, "Email is required")
        if len(body.password) < MIN_PASSWORD_LENGTH:
            return error_response(
                400, f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            )
        if len(body.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return error_response(
                400, f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
            )

        if await user_service.get_user_by_local_email(db, email) is not None:
            return error_response(409, "An account with this email already exists")

        password_hash = await hash_password_async(body.password, settings.bcrypt_rounds)
        name = body.name.strip() if body.name and body.name.strip() else None
        try:
            user = await user_service.create_user(db, email, password_hash, name=name)
        except UserAlreadyExistsError as e:
            return error_response(409, str(e))

        token = create_token(user.id, settings)
        return auth_response(request, settings, user, token, status_code=201)

    return await run_guarded("Registration", db, handle)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Sign in with email and password.

    Unknown email, an account without a password, and a wrong password all
    produce the same 401.
    """

    async def handle() -> JSONResponse:
        body = await read_body(request, LoginRequest)
        if body is None or not body.email or not body.password:
            return error_response(400, MISSING_CREDENTIALS)

        user = await user_service.get_user_by_local_email(db, body.email)
        if not await user_service.check_password(user, body.password, settings.bcrypt_rounds):
            logger.info("Failed login attempt")
            return error_response(401, INVALID_CREDENTIALS)

        await user_service.update_last_signed_in(db, user)
        token = create_token(user.id, settings)
        return auth_response(request, settings, user, token)

    return await run_guarded("Login", db, handle)


@router.post(
    "/refresh",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
)
async def refresh(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Exchange a valid Bearer token for a new one with a fresh expiry."""

    async def handle() -> JSONResponse:
        token = get_bearer_token(request)
        if not token:
            return error_response(401, "Token required")

        payload = verify_token(token, settings)
        if payload is None:
            return error_response(401, "Invalid or expired token")

        user = await user_service.get_user_by_id(db, payload.user_id)
        if user is None:
            return error_response(401, "User not found")

        await user_service.update_last_signed_in(db, user)
        new_token = create_token(user.id, settings)
        return auth_response(request, settings, user, new_token)

    return await run_guarded("Refresh", db, handle)


@router.get(
    "/me",
    response_model=MeResponse,
    responses={401: {"model": ErrorResponse}},
)
async def me(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Return the user behind the Bearer token or session cookie."""

    async def handle() -> JSONResponse:
        try:
            user = await authenticate_request(request, db, settings)
        except AuthenticationError as e:
            logger.info("/api/auth/me rejected: %s", e)
            return error_response(401, "Not authenticated", user=None)
        body = MeResponse(user=AuthUser.from_user(user))
        return JSONResponse(content=body.model_dump(mode="json", by_alias=True))

    return await run_guarded("Fetching the current user", db, handle)


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Clear the session cookie.

    Tokens are not revoked server-side; a Bearer token held by a native
    client stays valid until it expires or the client discards it.
    """
    response = JSONResponse(content=SuccessResponse().model_dump())
    clear_session_cookie(response, request, settings)
    return response


@router.post(
    "/session",
    response_model=SessionResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def establish_session(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """
    Set the session cookie from a Bearer token.

    Lets a web client that obtained a token some other way switch to cookie
    auth. A cookie alone is not accepted here.
    """

    async def handle() -> JSONResponse:
        token = get_bearer_token(request)
        if not token:
            return error_response(400, "Bearer token required")

        try:
            user = await authenticate_request(request, db, settings)
        except AuthenticationError as e:
            logger.info("/api/auth/session rejected: %s", e)
            return error_response(401, "Invalid token")

        body = SessionResponse(user=AuthUser.from_user(user))
        response = JSONResponse(content=body.model_dump(mode="json", by_alias=True))
        set_session_cookie(response, request, settings, token)
        return response

    return await run_guarded("Session", db, handle)
