"""ORM models - import all so Base.metadata is complete for migrations."""

from wellplan.models.adherence_record import AdherenceRecordRow
from wellplan.models.plan_version import PlanVersion
from wellplan.models.revision_state import RevisionState

__all__ = [
    "AdherenceRecordRow",
    "PlanVersion",
    "RevisionState",
]
