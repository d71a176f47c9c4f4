"""Create users, pets and adoption_requests tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # --- users ---
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            primary_key=True,
        ),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("photo_url", sa.String(2048), nullable=True),
        sa.Column("role", sa.String(16), nullable=False, server_default="user"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
        sa.CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),
    )

    # --- pets ---
    op.create_table(
        "pets",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            primary_key=True,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("image", sa.String(2048), nullable=True),
        sa.Column("short_description", sa.Text(), nullable=True),
        sa.Column("long_description", sa.Text(), nullable=True),
        sa.Column("adopted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("added_by", postgresql.JSONB(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("ix_pets_category", "pets", ["category"])
    op.create_index("ix_pets_created_at", "pets", ["created_at"])
    op.execute("CREATE INDEX ix_pets_added_by_email ON pets ((added_by->>'email'))")

    # --- adoption_requests ---
    op.create_table(
        "adoption_requests",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            primary_key=True,
        ),
        sa.Column(
            "pet_id",
            sa.UUID(),
            sa.ForeignKey("pets.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("pet_name", sa.String(255), nullable=True),
        sa.Column("pet_image", sa.String(2048), nullable=True),
        sa.Column("owner_email", sa.String(320), nullable=False),
        sa.Column("user_name", sa.String(255), nullable=True),
        sa.Column("user_email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="pending"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
        sa.UniqueConstraint("user_email", "pet_id", name="uq_adoption_requests_user_pet"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_adoption_requests_status",
        ),
    )
    op.create_index("ix_adoption_requests_pet_id", "adoption_requests", ["pet_id"])
    op.create_index("ix_adoption_requests_owner_email", "adoption_requests", ["owner_email"])


def downgrade() -> None:
    op.drop_table("adoption_requests")
    op.execute("DROP INDEX IF EXISTS ix_pets_added_by_email")
    op.drop_table("pets")
    op.drop_table("users")
