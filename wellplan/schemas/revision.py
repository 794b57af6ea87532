"""Revision schemas: trailing log window in, adherence record and revised plan out."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wellplan.core.enums import RecommendationKind, RevisionStatus
from wellplan.schemas.plan import PlanBundle


class MealLog(BaseModel):
    model_config = ConfigDict(extra="allow")

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


class WorkoutLog(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    duration_minutes: Optional[float] = None


class SleepLog(BaseModel):
    hours: float = Field(0, ge=0, le=24)


class MoodLog(BaseModel):
    mood: float = Field(0, ge=0, le=5, description="1 (low) to 5 (great)")


class WeightLog(BaseModel):
    weight_kg: float = Field(..., gt=0)


class WaterLog(BaseModel):
    oz: float = Field(0, ge=0)


class StepsLog(BaseModel):
    steps: int = Field(0, ge=0)


class LogWindow(BaseModel):
    """Everything the user logged over the prior 7 days. Lists are in chronological order."""

    meals: list[MealLog] = Field(default_factory=list)
    workouts: list[WorkoutLog] = Field(default_factory=list)
    sleep: list[SleepLog] = Field(default_factory=list)
    mood: list[MoodLog] = Field(default_factory=list)
    weights: list[WeightLog] = Field(default_factory=list)
    water: list[WaterLog] = Field(default_factory=list)
    steps: list[StepsLog] = Field(default_factory=list)


class ProposedDeltas(BaseModel):
    calorie_delta: int = 0
    protein_delta: int = 0
    carbs_delta: int = 0
    fat_delta: int = 0


class AdherenceRecord(BaseModel):
    week_start: date
    week_end: date
    adherence_score: float = Field(..., ge=0, le=100)
    calories_avg: float
    protein_avg: float
    workouts_completed: int
    sleep_avg: float
    mood_avg: float
    weight_change_kg: Optional[float] = None
    stalled: bool = False
    proposed_deltas: ProposedDeltas = Field(default_factory=ProposedDeltas)


class Recommendation(BaseModel):
    kind: RecommendationKind
    message: str


class RevisionResult(BaseModel):
    status: RevisionStatus
    plan: Optional[PlanBundle] = None
    adherence: Optional[AdherenceRecord] = None
    recommendations: list[Recommendation] = Field(default_factory=list)
