"""Persistence boundary for plan versions, adherence records and revision timestamps.

Generation and revision both read-then-write the latest plan, so callers take
lock_user() first; it holds a Postgres transaction-scoped advisory lock until
the request's session commits or rolls back. The unique (user_id, version)
constraint backs this up if two writers ever race.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from sqlalchemy import desc, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wellplan.core.errors import PersistenceError
from wellplan.models.adherence_record import AdherenceRecordRow
from wellplan.models.plan_version import PlanVersion
from wellplan.models.revision_state import RevisionState
from wellplan.schemas.plan import PlanBundle, PlanVersionRead
from wellplan.schemas.revision import AdherenceRecord

logger = logging.getLogger(__name__)


def _to_read(row: PlanVersion) -> PlanVersionRead:
    return PlanVersionRead.model_validate(
        {
            "user_id": row.user_id,
            "version": row.version,
            "created_at": row.created_at,
            "profile": row.profile,
            "nutrition": row.nutrition,
            "fitness": row.fitness,
            "wellness": row.wellness,
            "products": row.products or [],
        }
    )


def _record_from_row(row: AdherenceRecordRow) -> AdherenceRecord:
    return AdherenceRecord.model_validate(
        {
            "week_start": row.week_start,
            "week_end": row.week_end,
            "adherence_score": row.adherence_score,
            "calories_avg": row.calories_avg,
            "protein_avg": row.protein_avg,
            "workouts_completed": row.workouts_completed,
            "sleep_avg": row.sleep_avg,
            "mood_avg": row.mood_avg,
            "weight_change_kg": row.weight_change_kg,
            "stalled": row.stalled,
            "proposed_deltas": row.proposed_deltas or {},
        }
    )


class PlanStore:
    """Plan storage keyed by user id, backed by one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def lock_user(self, user_id: uuid.UUID) -> None:
        try:
            await self.db.execute(
                text("SELECT pg_advisory_xact_lock(hashtext(:key))"), {"key": str(user_id)}
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"could not lock plans for user {user_id}") from e

    async def get_latest_plan(self, user_id: uuid.UUID) -> PlanVersionRead | None:
        try:
            result = await self.db.execute(
                select(PlanVersion)
                .where(PlanVersion.user_id == user_id)
                .order_by(desc(PlanVersion.version))
                .limit(1)
            )
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceError("could not load latest plan") from e
        return _to_read(row) if row else None

    async def append_plan_version(
        self, user_id: uuid.UUID, bundle: PlanBundle
    ) -> tuple[PlanVersionRead, uuid.UUID]:
        """Store bundle as the next version. Returns the stored plan and its row id."""
        data = bundle.model_dump(mode="json")
        try:
            result = await self.db.execute(
                select(func.max(PlanVersion.version)).where(PlanVersion.user_id == user_id)
            )
            version = (result.scalar() or 0) + 1
            row = PlanVersion(
                user_id=user_id,
                version=version,
                profile=data["profile"],
                nutrition=data["nutrition"],
                fitness=data["fitness"],
                wellness=data["wellness"],
                products=data["products"],
            )
            self.db.add(row)
            await self.db.flush()
            await self.db.refresh(row)
        except SQLAlchemyError as e:
            raise PersistenceError("could not store plan version") from e
        logger.info("Stored plan v%d for user %s", version, user_id)
        return _to_read(row), row.id

    async def get_last_revision_at(self, user_id: uuid.UUID) -> datetime | None:
        try:
            result = await self.db.execute(
                select(RevisionState.last_revision_at).where(RevisionState.user_id == user_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceError("could not load revision state") from e

    async def set_last_revision_at(self, user_id: uuid.UUID, at: datetime) -> None:
        try:
            state = await self.db.get(RevisionState, user_id)
            if state:
                state.last_revision_at = at
            else:
                self.db.add(RevisionState(user_id=user_id, last_revision_at=at))
            await self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError("could not store revision state") from e

    async def list_adherence_records(self, user_id: uuid.UUID, limit: int | None = None) -> list[AdherenceRecord]:
        """Records oldest first; with limit, the most recent `limit` of them."""
        stmt = (
            select(AdherenceRecordRow)
            .where(AdherenceRecordRow.user_id == user_id)
            .order_by(desc(AdherenceRecordRow.week_end), desc(AdherenceRecordRow.created_at))
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            result = await self.db.execute(stmt)
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceError("could not load adherence history") from e
        return [_record_from_row(r) for r in reversed(rows)]

    async def append_adherence_record(
        self, user_id: uuid.UUID, record: AdherenceRecord, plan_version_id: uuid.UUID | None = None
    ) -> None:
        data = record.model_dump(mode="json")
        try:
            self.db.add(
                AdherenceRecordRow(
                    user_id=user_id,
                    plan_version_id=plan_version_id,
                    week_start=record.week_start,
                    week_end=record.week_end,
                    adherence_score=record.adherence_score,
                    calories_avg=record.calories_avg,
                    protein_avg=record.protein_avg,
                    workouts_completed=record.workouts_completed,
                    sleep_avg=record.sleep_avg,
                    mood_avg=record.mood_avg,
                    weight_change_kg=record.weight_change_kg,
                    stalled=record.stalled,
                    proposed_deltas=data["proposed_deltas"],
                )
            )
            await self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError("could not store adherence record") from e
