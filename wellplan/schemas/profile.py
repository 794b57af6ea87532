"""Profile schemas: raw onboarding answers in, canonical Profile out."""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from wellplan.core.enums import (
    ActivityLevel,
    DietPreference,
    Experience,
    Goal,
    MealFrequency,
    Sex,
    StressLevel,
    TimeAvailability,
    WorkoutPreference,
)


class OnboardingAnswers(BaseModel):
    """Answers as the onboarding flow sends them: human labels or slugs, mixed units.

    Only the Profile normalizer reads this model.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sex: Optional[str] = Field(None, validation_alias=AliasChoices("sex", "gender"))
    age: Optional[int] = None
    weight: Optional[float] = Field(None, description="Body weight in weight_unit")
    weight_unit: str = Field("kg", description="kg or lbs")
    height: Optional[float] = Field(
        None, description="Height in height_unit; ft is decimal feet (5.5 = 5 ft 6 in)"
    )
    height_unit: str = Field("cm", description="cm, in or ft")
    target_weight: Optional[float] = Field(None, description="Optional, same unit as weight")
    activity_level: Optional[str] = None
    fitness_goal: Optional[str] = Field(None, validation_alias=AliasChoices("fitness_goal", "goal"))
    experience: Optional[str] = None
    workout_preference: Optional[str] = None
    time_available: Optional[str] = None
    nutrition_preference: Optional[str] = Field(
        None, validation_alias=AliasChoices("nutrition_preference", "diet_preference")
    )
    meal_frequency: Optional[str] = None
    sleep_hours: Optional[float] = None
    stress_level: Optional[str] = None
    equipment: Optional[list[str]] = None
    dietary_restrictions: Optional[list[str]] = None
    challenges: Optional[list[str]] = None


class Profile(BaseModel):
    """Canonical, unit-consistent profile. Immutable per generation."""

    model_config = ConfigDict(frozen=True)

    sex: Sex
    age: int = Field(..., ge=13, le=100)
    weight_kg: float = Field(..., gt=0)
    height_cm: float = Field(..., gt=0)
    target_weight_kg: float = Field(..., gt=0)
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    goal: Goal = Goal.GENERAL_HEALTH
    experience: Experience = Experience.BEGINNER
    time_available: TimeAvailability = TimeAvailability.FROM_2_TO_4H
    workout_preference: WorkoutPreference = WorkoutPreference.MIXED
    diet_preference: DietPreference = DietPreference.BALANCED
    meal_frequency: MealFrequency = MealFrequency.THREE_MEALS
    sleep_hours: float = 7.0
    stress_level: StressLevel = StressLevel.MODERATE
    equipment: tuple[str, ...] = ()
    dietary_restrictions: tuple[str, ...] = ()
    challenges: tuple[str, ...] = ()
