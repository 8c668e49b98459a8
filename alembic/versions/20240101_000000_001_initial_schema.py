"""Initial schema: services, users, bookings, payments, doctors.

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create initial database schema."""

    # Treatment services
    op.create_table(
        "services",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("slots", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_services"),
    )
    op.create_index("ix_services_name", "services", ["name"], unique=True)

    # Users
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("role", sa.String(50), nullable=True),
        sa.Column("profile", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # Bookings
    op.create_table(
        "bookings",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("treatment", sa.String(255), nullable=False),
        sa.Column("date", sa.String(50), nullable=False),
        sa.Column("slot", sa.String(50), nullable=False),
        sa.Column("patient", sa.String(255), nullable=False),
        sa.Column("patient_name", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("paid", sa.Boolean(), nullable=False),
        sa.Column("transaction_id", sa.String(255), nullable=True),
        sa.Column("paid_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_bookings"),
        sa.UniqueConstraint(
            "treatment", "date", "patient", name="uq_bookings_treatment_date_patient"
        ),
    )
    op.create_index("ix_bookings_treatment", "bookings", ["treatment"])
    op.create_index("ix_bookings_date", "bookings", ["date"])
    op.create_index("ix_bookings_patient", "bookings", ["patient"])

    # Payments (append-only)
    op.create_table(
        "payments",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("booking_id", sa.String(36), nullable=False),
        sa.Column("transaction_id", sa.String(255), nullable=False),
        sa.Column("amount", sa.Float(), nullable=True),
        sa.Column("details", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_payments"),
    )
    op.create_index("ix_payments_booking_id", "payments", ["booking_id"])
    op.create_index("ix_payments_transaction_id", "payments", ["transaction_id"])

    # Doctors
    op.create_table(
        "doctors",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("specialty", sa.String(255), nullable=False),
        sa.Column("img", sa.String(1024), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_doctors"),
    )
    op.create_index("ix_doctors_email", "doctors", ["email"], unique=True)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("doctors")
    op.drop_table("payments")
    op.drop_table("bookings")
    op.drop_table("users")
    op.drop_table("services")
