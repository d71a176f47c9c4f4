"""Create donation_campaigns (JSONB ledger) and reviews tables

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "0002"
down_revision: Union[str, None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- donation_campaigns ---
    op.create_table(
        "donation_campaigns",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            primary_key=True,
        ),
        sa.Column("pet_name", sa.String(255), nullable=False),
        sa.Column("pet_image", sa.String(2048), nullable=True),
        sa.Column("max_donation", sa.Integer(), nullable=False),
        sa.Column("donated_amount", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_paused", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("last_date", sa.Date(), nullable=True),
        sa.Column("short_description", sa.Text(), nullable=True),
        sa.Column("long_description", sa.Text(), nullable=True),
        sa.Column("added_by", postgresql.JSONB(), nullable=False),
        sa.Column(
            "donation_details",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("ix_donation_campaigns_created_at", "donation_campaigns", ["created_at"])
    # Containment lookups for "my donations" (donation_details @> [{"donator_email": ...}])
    op.execute(
        "CREATE INDEX ix_donation_campaigns_details_gin "
        "ON donation_campaigns USING gin (donation_details jsonb_path_ops)"
    )

    # --- reviews ---
    op.create_table(
        "reviews",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            primary_key=True,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("photo_url", sa.String(2048), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
        ),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating"),
    )


def downgrade() -> None:
    op.drop_table("reviews")
    op.execute("DROP INDEX IF EXISTS ix_donation_campaigns_details_gin")
    op.drop_table("donation_campaigns")
