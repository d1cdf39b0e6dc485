"""
Create BabySteps schema: users, child profiles, tracking logs, subscriptions.

Revision ID: 5b2f1c7d9e30
Revises:
Create Date: 2026-10-19 09:14:52.118403
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5b2f1c7d9e30"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUM_TYPES = (
    sa.Enum("user", "admin", name="role"),
    sa.Enum("male", "female", "other", name="gender"),
    sa.Enum("motor", "language", "social", "cognitive", name="milestone_category"),
    sa.Enum("breastfeeding", "formula", "solid_food", "snack", "water", name="nutrition_type"),
    sa.Enum("poor", "fair", "good", "excellent", name="sleep_quality"),
    sa.Enum("medication", "doctor_visit", "allergy", "illness", "general", name="health_note_type"),
    sa.Enum("photo", "video", "text", name="media_type"),
    sa.Enum("free", "premium", "premium_plus", name="plan"),
    sa.Enum("active", "cancelled", "expired", name="subscription_status"),
)


def _timestamps(updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]
    if updated:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.text("now()"),
                nullable=False,
            ),
        )
    return columns


def _child_id() -> sa.Column:
    return sa.Column(
        "child_id",
        sa.Integer(),
        sa.ForeignKey("child_profiles.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "open_id",
            sa.String(length=320),
            nullable=False,
            comment="Provider-qualified identity, e.g. 'local:a@example.com'",
        ),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("login_method", sa.String(length=64), nullable=True),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=True,
            comment="bcrypt hash; NULL for accounts without a local password",
        ),
        sa.Column(
            "role",
            sa.Enum("user", "admin", name="role"),
            server_default="user",
            nullable=False,
        ),
        sa.Column(
            "last_signed_in",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_open_id"), "users", ["open_id"], unique=True)

    op.create_table(
        "child_profiles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("gender", sa.Enum("male", "female", "other", name="gender"), nullable=False),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column("blood_type", sa.String(length=10), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_child_profiles_user_id"), "child_profiles", ["user_id"])

    op.create_table(
        "growth_measurements",
        sa.Column("id", sa.Integer(), nullable=False),
        _child_id(),
        sa.Column("height", sa.Numeric(5, 2), nullable=False, comment="cm"),
        sa.Column("weight", sa.Numeric(5, 2), nullable=False, comment="kg"),
        sa.Column("head_circumference", sa.Numeric(5, 2), nullable=True, comment="cm"),
        sa.Column("measurement_date", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "developmental_milestones",
        sa.Column("id", sa.Integer(), nullable=False),
        _child_id(),
        sa.Column(
            "category",
            sa.Enum("motor", "language", "social", "cognitive", name="milestone_category"),
            nullable=False,
        ),
        sa.Column("milestone", sa.String(length=255), nullable=False),
        sa.Column("expected_age_months", sa.Integer(), nullable=False),
        sa.Column("achieved", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("achieved_date", sa.Date(), nullable=True),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "vaccinations",
        sa.Column("id", sa.Integer(), nullable=False),
        _child_id(),
        sa.Column("vaccine_name", sa.String(length=255), nullable=False),
        sa.Column("recommended_age_months", sa.Integer(), nullable=False),
        sa.Column("scheduled_date", sa.Date(), nullable=True),
        sa.Column("administered_date", sa.Date(), nullable=True),
        sa.Column("administered", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("doctor_name", sa.String(length=255), nullable=True),
        sa.Column("clinic", sa.String(length=255), nullable=True),
        sa.Column("batch_number", sa.String(length=255), nullable=True),
        sa.Column("side_effects", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "nutrition_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        _child_id(),
        sa.Column("log_date", sa.Date(), nullable=False),
        sa.Column(
            "type",
            sa.Enum(
                "breastfeeding", "formula", "solid_food", "snack", "water",
                name="nutrition_type",
            ),
            nullable=False,
        ),
        sa.Column("description", sa.String(length=255), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=True, comment="minutes"),
        sa.Column("quantity", sa.String(length=100), nullable=True),
        sa.Column("time", sa.String(length=10), nullable=True, comment="HH:MM"),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "sleep_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        _child_id(),
        sa.Column("sleep_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.String(length=10), nullable=False, comment="HH:MM"),
        sa.Column("end_time", sa.String(length=10), nullable=False, comment="HH:MM"),
        sa.Column("duration", sa.Integer(), nullable=False, comment="minutes"),
        sa.Column(
            "quality",
            sa.Enum("poor", "fair", "good", "excellent", name="sleep_quality"),
            server_default="good",
            nullable=False,
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "health_notes",
        sa.Column("id", sa.Integer(), nullable=False),
        _child_id(),
        sa.Column(
            "type",
            sa.Enum(
                "medication", "doctor_visit", "allergy", "illness", "general",
                name="health_note_type",
            ),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("medication_name", sa.String(length=255), nullable=True),
        sa.Column("dosage", sa.String(length=100), nullable=True),
        sa.Column("frequency", sa.String(length=100), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("doctor_name", sa.String(length=255), nullable=True),
        sa.Column("clinic", sa.String(length=255), nullable=True),
        sa.Column("note_date", sa.Date(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "journal_entries",
        sa.Column("id", sa.Integer(), nullable=False),
        _child_id(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("media_url", sa.Text(), nullable=True),
        sa.Column(
            "media_type",
            sa.Enum("photo", "video", "text", name="media_type"),
            nullable=False,
        ),
        sa.Column(
            "tags",
            sa.String(length=500),
            nullable=True,
            comment="Comma-separated free-form tags",
        ),
        sa.Column("journal_date", sa.Date(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "subscriptions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "plan",
            sa.Enum("free", "premium", "premium_plus", name="plan"),
            server_default="free",
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Enum("active", "cancelled", "expired", name="subscription_status"),
            server_default="active",
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("auto_renew", sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_subscriptions_user_id"), "subscriptions", ["user_id"])

    for table in (
        "developmental_milestones",
        "growth_measurements",
        "health_notes",
        "journal_entries",
        "nutrition_logs",
        "sleep_logs",
        "vaccinations",
    ):
        op.create_index(op.f(f"ix_{table}_child_id"), table, ["child_id"])
    op.create_index(
        op.f("ix_growth_measurements_measurement_date"),
        "growth_measurements",
        ["measurement_date"],
    )
    op.create_index(op.f("ix_nutrition_logs_log_date"), "nutrition_logs", ["log_date"])
    op.create_index(op.f("ix_sleep_logs_sleep_date"), "sleep_logs", ["sleep_date"])
    op.create_index(op.f("ix_health_notes_note_date"), "health_notes", ["note_date"])
    op.create_index(op.f("ix_journal_entries_journal_date"), "journal_entries", ["journal_date"])


def downgrade() -> None:
    """Downgrade schema."""
    # Indexes go with their tables
    op.drop_table("subscriptions")
    op.drop_table("journal_entries")
    op.drop_table("health_notes")
    op.drop_table("sleep_logs")
    op.drop_table("nutrition_logs")
    op.drop_table("vaccinations")
    op.drop_table("developmental_milestones")
    op.drop_table("growth_measurements")
    op.drop_table("child_profiles")
    op.drop_table("users")

    bind = op.get_bind()
    for enum_type in ENUM_TYPES:
        enum_type.drop(bind, checkfirst=True)
