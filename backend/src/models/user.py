"""User model for accounts from every login method."""
from datetime import datetime

from sqlalchemy import DateTime, Enum, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin

LOCAL_OPEN_ID_PREFIX = "local:"


class User(Base, TimestampMixin):
    """
    An account.

    open_id is the provider-qualified identity: ``local:<email>`` for password
    accounts, provider-prefixed for OAuth accounts. It is the join key between
    login methods and this table.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    open_id: Mapped[str] = mapped_column(
        String(320),
        unique=True,
        index=True,
        comment="Provider-qualified identity, e.g. 'local:a@example.com'",
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    login_method: Mapped[str | None] = mapped_column(String(64), nullable=True)
    password_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="bcrypt hash; NULL for accounts without a local password",
    )
    role: Mapped[str] = mapped_column(
        Enum("user", "admin", name="role"),
        default="user",
        server_default="user",
        nullable=False,
    )
    last_signed_in: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
