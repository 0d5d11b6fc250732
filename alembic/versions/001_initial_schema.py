"""Initial schema: colleges table.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "colleges",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("short_name", sa.Text, nullable=True),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("year_established", sa.Integer, nullable=True),
        # Location
        sa.Column("city", sa.String(200), nullable=False),
        sa.Column("district", sa.String(200), nullable=False),
        sa.Column("state", sa.String(200), nullable=False),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        # Academics
        sa.Column("programs", JSONB, nullable=True),
        sa.Column("streams", ARRAY(sa.String(50)), nullable=False, server_default="{}"),
        sa.Column("affiliated_university", sa.Text, nullable=True),
        sa.Column("governing_body", sa.Text, nullable=True),
        # Admissions
        sa.Column("entrance_exams", ARRAY(sa.String(100)), nullable=False, server_default="{}"),
        sa.Column("cutoff_info", JSONB, nullable=False, server_default="[]"),
        sa.Column("eligibility_criteria", sa.Text, nullable=True),
        sa.Column("admission_process", sa.Text, nullable=True),
        sa.Column(
            "medium_of_instruction", ARRAY(sa.String(50)), nullable=False, server_default="{}"
        ),
        sa.Column("facilities", JSONB, nullable=True),
        sa.Column("contact", JSONB, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("idx_colleges_active", "colleges", ["is_active"])
    op.create_index("idx_colleges_state", "colleges", ["state"])
    op.create_index("idx_colleges_coords", "colleges", ["latitude", "longitude"])


def downgrade() -> None:
    op.drop_index("idx_colleges_coords", table_name="colleges")
    op.drop_index("idx_colleges_state", table_name="colleges")
    op.drop_index("idx_colleges_active", table_name="colleges")
    op.drop_table("colleges")
