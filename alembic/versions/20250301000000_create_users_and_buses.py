"""Create users and buses tables.

Revision ID: 20250301000000
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20250301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.PrimaryKeyConstraint("id"),
    )
    # Unique index is what makes concurrent registrations of one username safe.
    op.create_index(
        op.f("ix_users_username"),
        "users",
        ["username"],
        unique=True,
    )
    op.create_table(
        "buses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("bus_number", sa.String(length=64), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.Column("route", sa.String(length=255), nullable=False),
        sa.Column("departure_point", sa.String(length=255), nullable=False),
        sa.Column("destination_point", sa.String(length=255), nullable=False),
        sa.Column("departure_time", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_buses_bus_number"), "buses", ["bus_number"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_buses_bus_number"), table_name="buses")
    op.drop_table("buses")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
