"""Subscription model."""
from datetime import date

from sqlalchemy import Boolean, Date, Enum, ForeignKey, true
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin


class Subscription(Base, TimestampMixin):
    """A user's plan. The most recent row is the current subscription."""

    __tablename__ = "subscriptions"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    plan: Mapped[str] = mapped_column(
        Enum("free", "premium", "premium_plus", name="plan"),
        default="free",
        server_default="free",
    )
    status: Mapped[str] = mapped_column(
        Enum("active", "cancelled", "expired", name="subscription_status"),
        default="active",
        server_default="active",
    )
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    auto_renew: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true())
