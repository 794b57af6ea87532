"""RevisionState model: last-revision timestamp per user."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from wellplan.db.base import Base


class RevisionState(Base):
    __tablename__ = "revision_state"

    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    last_revision_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
