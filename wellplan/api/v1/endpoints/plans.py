"""Plan endpoints: generate on onboarding, read latest, weekly revision, content."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from wellplan.core.config import get_settings
from wellplan.core.enums import RevisionStatus
from wellplan.core.errors import ContentGenerationError, PersistenceError
from wellplan.db.session import get_db
from wellplan.schemas.plan import PlanVersionRead
from wellplan.schemas.profile import OnboardingAnswers
from wellplan.schemas.revision import AdherenceRecord, LogWindow, RevisionResult
from wellplan.services.content import ContentClient, ContentResponse, build_content_request
from wellplan.services.plan_assembler import generate_plan
from wellplan.services.plan_store import PlanStore
from wellplan.services.profile_normalizer import normalize_profile
from wellplan.services.revision import maybe_revise

logger = logging.getLogger(__name__)
router = APIRouter()


def get_plan_store(db: AsyncSession = Depends(get_db)) -> PlanStore:
    return PlanStore(db)


def get_content_client(request: Request) -> ContentClient | None:
    """Client built once in the app lifespan; None when no API key is configured."""
    return getattr(request.app.state, "content_client", None)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def _latest_or_404(store: PlanStore, user_id: uuid.UUID) -> PlanVersionRead:
    plan = await store.get_latest_plan(user_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan yet. Complete onboarding first.")
    return plan


@router.post("/{user_id}/generate", response_model=PlanVersionRead, status_code=201)
async def generate(
    user_id: uuid.UUID,
    answers: OnboardingAnswers,
    store: PlanStore = Depends(get_plan_store),
):
    """Build all three plans from onboarding answers and store them as a new version."""
    profile = normalize_profile(answers)
    bundle = generate_plan(profile)
    try:
        await store.lock_user(user_id)
        stored, _ = await store.append_plan_version(user_id, bundle)
    except PersistenceError as e:
        logger.exception("Storing generated plan failed for %s", user_id)
        # Plan is still valid; the client may cache it and retry the save.
        return JSONResponse(
            status_code=503,
            content={"detail": str(e), "plan": bundle.model_dump(mode="json")},
        )
    return stored


@router.get("/{user_id}/latest", response_model=PlanVersionRead)
async def get_latest(user_id: uuid.UUID, store: PlanStore = Depends(get_plan_store)):
    return await _latest_or_404(store, user_id)


@router.post("/{user_id}/revise", response_model=RevisionResult)
async def revise(
    user_id: uuid.UUID,
    logs: LogWindow,
    store: PlanStore = Depends(get_plan_store),
    now: datetime = Depends(utcnow),
):
    """Weekly revision. Safe to call daily: inside the 7-day window it returns not_due."""
    await store.lock_user(user_id)
    last = await store.get_last_revision_at(user_id)
    current = await _latest_or_404(store, user_id)
    history = await store.list_adherence_records(user_id)

    result = maybe_revise(
        current, logs, history, last, now, window_days=get_settings().revision_window_days
    )
    if result.status is RevisionStatus.NOT_DUE:
        return result

    _, version_id = await store.append_plan_version(user_id, result.plan)
    await store.append_adherence_record(user_id, result.adherence, version_id)
    await store.set_last_revision_at(user_id, now)
    return result


@router.get("/{user_id}/revisions", response_model=list[AdherenceRecord])
async def list_revisions(
    user_id: uuid.UUID,
    limit: int = Query(10, ge=1, le=100),
    store: PlanStore = Depends(get_plan_store),
):
    """Adherence history, most recent first."""
    records = await store.list_adherence_records(user_id, limit=limit)
    return list(reversed(records))


@router.post("/{user_id}/content", response_model=ContentResponse)
async def generate_content(
    user_id: uuid.UUID,
    store: PlanStore = Depends(get_plan_store),
    client: ContentClient | None = Depends(get_content_client),
):
    """Free-text meal ideas and workout notes for the latest plan's targets."""
    plan = await _latest_or_404(store, user_id)
    fallback = {
        "recipe_tags": plan.nutrition.recipe_tags,
        "meal_templates": [m.model_dump(mode="json") for m in plan.nutrition.meal_templates],
    }
    if client is None:
        return JSONResponse(
            status_code=503,
            content={"detail": "Content generation is not configured", "fallback": fallback},
        )
    try:
        return await client.generate(build_content_request(plan))
    except ContentGenerationError as e:
        logger.exception("Content generation failed for %s", user_id)
        return JSONResponse(status_code=502, content={"detail": str(e), "fallback": fallback})
