"""AdherenceRecord model: append-only, one row per completed revision cycle."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, Index, Integer
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from wellplan.db.base import Base


class AdherenceRecordRow(Base):
    __tablename__ = "adherence_records"
    __table_args__ = (Index("ix_adherence_records_user_week", "user_id", "week_end"),)

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    plan_version_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("plan_versions.id", ondelete="SET NULL"), nullable=True
    )
    week_start: Mapped[date] = mapped_column(Date, nullable=False)
    week_end: Mapped[date] = mapped_column(Date, nullable=False)
    adherence_score: Mapped[float] = mapped_column(Float, nullable=False)
    calories_avg: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    protein_avg: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    workouts_completed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sleep_avg: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    mood_avg: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    weight_change_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    stalled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    proposed_deltas: Mapped[dict] = mapped_column(JSONB, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
