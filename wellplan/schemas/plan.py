"""Plan output schemas: nutrition, fitness, wellness and the assembled bundle."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from wellplan.core.enums import MealFrequencyMode, MealSlot, ProgressionType, TimeOfDay
from wellplan.schemas.profile import Profile


# ── Nutrition ────────────────────────────────────────────────────────────

class EnergyTargets(BaseModel):
    bmr: float = Field(..., ge=0)
    tdee: float = Field(..., ge=0)
    calorie_target: int = Field(..., ge=0)
    calorie_floor: float = Field(..., ge=0, description="(tdee / activity multiplier) x 1.1")


class MacroTargets(BaseModel):
    protein_g: int = Field(..., ge=0)
    carbs_g: int = Field(..., ge=0)
    fat_g: int = Field(..., ge=0)

    @property
    def calories(self) -> int:
        return self.protein_g * 4 + self.carbs_g * 4 + self.fat_g * 9


class MealTemplate(BaseModel):
    slot: MealSlot
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    suggestion_tags: list[str] = Field(default_factory=list, max_length=3)


class NutritionPlan(BaseModel):
    energy: EnergyTargets
    macros: MacroTargets
    meal_frequency_mode: MealFrequencyMode
    meal_templates: list[MealTemplate]
    water_goal_oz: int
    recipe_tags: list[str] = Field(default_factory=list, description="Ordered, de-duplicated")


# ── Fitness ──────────────────────────────────────────────────────────────

class WorkoutDay(BaseModel):
    day: str
    focus: str
    exercise_names: list[str]
    duration_minutes: int


class Volume(BaseModel):
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    rest_seconds: int = Field(..., ge=0)


class ExerciseRecommendation(BaseModel):
    name: str
    category: str
    equipment: list[str] = Field(default_factory=list)
    difficulty: str
    reason: str


class FitnessPlan(BaseModel):
    program_type: str
    weekly_schedule: list[WorkoutDay]
    volume: Volume
    progression_type: ProgressionType
    weekly_increase_pct: float
    exercises: list[ExerciseRecommendation] = Field(default_factory=list)


# ── Wellness ─────────────────────────────────────────────────────────────

class DailyPractice(BaseModel):
    name: str
    duration_min: int
    time_of_day: TimeOfDay
    description: str = ""


class Breathwork(BaseModel):
    technique: str
    frequency: str
    duration_min: int


class HydrationReminder(BaseModel):
    time: str
    amount_oz: int
    message: str


class HabitSuggestion(BaseModel):
    name: str
    category: str
    reason: str
    difficulty: str


class BedtimeRoutine(BaseModel):
    steps: list[str]
    soundscape: str
    duration_min: int


class WellnessPlan(BaseModel):
    daily_practices: list[DailyPractice]
    breathwork: Breathwork
    journaling_prompts: list[str] = Field(..., min_length=3, max_length=3)
    hydration_reminders: list[HydrationReminder]
    habit_suggestions: list[HabitSuggestion]
    bedtime_routine: BedtimeRoutine
    soundscape_tags: list[str]
    meditation_tags: list[str]


# ── Bundle ───────────────────────────────────────────────────────────────

class ProductRecommendation(BaseModel):
    sku: str
    title: str
    category: str


class PlanBundle(BaseModel):
    """The three plans produced together; replaced wholesale on revision."""

    profile: Profile
    nutrition: NutritionPlan
    fitness: FitnessPlan
    wellness: WellnessPlan
    products: list[ProductRecommendation] = Field(default_factory=list)


class PlanVersionRead(PlanBundle):
    user_id: UUID
    version: int
    created_at: datetime
