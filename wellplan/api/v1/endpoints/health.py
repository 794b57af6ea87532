"""Liveness and readiness probes."""

import logging
import os

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wellplan.db.session import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    """Liveness. Includes built_at when BACKEND_BUILT_AT is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(request: Request, db: AsyncSession = Depends(get_db)):
    """Readiness: plan tables reachable (migrations applied); reports content generation state."""
    content = "configured" if getattr(request.app.state, "content_client", None) else "disabled"
    try:
        await db.execute(text("SELECT 1 FROM plan_versions LIMIT 1"))
    except SQLAlchemyError as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": str(e), "content_generation": content},
        )
    return {"status": "ok", "database": "connected", "content_generation": content}
