"""Pydantic schemas for the local auth endpoints."""
from typing import Any

from pydantic import BaseModel, Field, field_validator

from schemas.user import AuthUser

MIN_PASSWORD_LENGTH = 6


class RegisterRequest(BaseModel):
    """
    Registration body.

    Fields are optional at the schema level; the endpoint reports missing
    values with its own 400 messages. A ``name`` that is not a string is
    dropped rather than rejecting the registration.
    """

    email: str | None = None
    password: str | None = None
    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def drop_non_string_name(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class LoginRequest(BaseModel):
    """Login body."""

    email: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    """Token plus user, returned by register, login and refresh."""

    token: str
    user: AuthUser


class MeResponse(BaseModel):
    """Response of GET /api/auth/me."""

    user: AuthUser | None


class SessionResponse(BaseModel):
    """Response of POST /api/auth/session."""

    success: bool = True
    user: AuthUser


class SuccessResponse(BaseModel):
    """Generic acknowledgement."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Error body used by the auth endpoints."""

    error: str = Field(..., description="Human-readable message")
    user: AuthUser | None = None
