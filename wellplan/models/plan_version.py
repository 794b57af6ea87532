"""PlanVersion model: one immutable row per generated or revised plan."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from wellplan.db.base import Base


class PlanVersion(Base):
    """Nutrition, fitness and wellness plans for a user, stored together.

    Plans are replaced wholesale: a revision appends version N+1, it never edits N.
    """

    __tablename__ = "plan_versions"
    __table_args__ = (
        UniqueConstraint("user_id", "version", name="uq_plan_versions_user_version"),
        Index("ix_plan_versions_user_id", "user_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    profile: Mapped[dict] = mapped_column(JSONB, nullable=False)
    nutrition: Mapped[dict] = mapped_column(JSONB, nullable=False)
    fitness: Mapped[dict] = mapped_column(JSONB, nullable=False)
    wellness: Mapped[dict] = mapped_column(JSONB, nullable=False)
    products: Mapped[list] = mapped_column(JSONB, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
