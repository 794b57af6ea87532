"""Plan tables: plan_versions, adherence_records, revision_state.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "plan_versions",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("profile", postgresql.JSONB(), nullable=False),
        sa.Column("nutrition", postgresql.JSONB(), nullable=False),
        sa.Column("fitness", postgresql.JSONB(), nullable=False),
        sa.Column("wellness", postgresql.JSONB(), nullable=False),
        sa.Column("products", postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_plan_versions"),
        sa.UniqueConstraint("user_id", "version", name="uq_plan_versions_user_version"),
    )
    op.create_index("ix_plan_versions_user_id", "plan_versions", ["user_id"], unique=False)

    op.create_table(
        "adherence_records",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("plan_version_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("week_start", sa.Date(), nullable=False),
        sa.Column("week_end", sa.Date(), nullable=False),
        sa.Column("adherence_score", sa.Float(), nullable=False),
        sa.Column("calories_avg", sa.Float(), nullable=False),
        sa.Column("protein_avg", sa.Float(), nullable=False),
        sa.Column("workouts_completed", sa.Integer(), nullable=False),
        sa.Column("sleep_avg", sa.Float(), nullable=False),
        sa.Column("mood_avg", sa.Float(), nullable=False),
        sa.Column("weight_change_kg", sa.Float(), nullable=True),
        sa.Column("stalled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("proposed_deltas", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["plan_version_id"], ["plan_versions.id"], ondelete="SET NULL",
            name="fk_adherence_records_plan_version_id_plan_versions",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_adherence_records"),
    )
    op.create_index(
        "ix_adherence_records_user_week", "adherence_records", ["user_id", "week_end"], unique=False
    )

    op.create_table(
        "revision_state",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("last_revision_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("user_id", name="pk_revision_state"),
    )


def downgrade() -> None:
    op.drop_table("revision_state")
    op.drop_index("ix_adherence_records_user_week", table_name="adherence_records")
    op.drop_table("adherence_records")
    op.drop_index("ix_plan_versions_user_id", table_name="plan_versions")
    op.drop_table("plan_versions")
