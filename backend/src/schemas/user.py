"""Pydantic schema for the user object returned to clients."""
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.user import User


class AuthUser(BaseModel):
    """
    Public view of a user.

    Serialized with camelCase keys (``openId``, ``loginMethod``,
    ``lastSignedIn``) for the mobile/web clients. Never includes the password
    hash.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    open_id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None
    last_signed_in: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("last_signed_in", mode="after")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps (SQLite) as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @classmethod
    def from_user(cls, user: User) -> "AuthUser":
        """Build the public view from a User row."""
        return cls(
            id=user.id,
            open_id=user.open_id,
            name=user.name,
            email=user.email,
            login_method=user.login_method,
            last_signed_in=user.last_signed_in or datetime.now(UTC),
        )

    def to_json(self) -> dict:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
