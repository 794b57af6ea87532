"""Canonical enums for profile fields and plan outputs."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex; only the two Mifflin-St Jeor variants are modeled."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Ordinal activity tiers, lowest first."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly-active"
    MODERATELY_ACTIVE = "moderately-active"
    VERY_ACTIVE = "very-active"
    EXTREMELY_ACTIVE = "extremely-active"


class Goal(str, Enum):
    LOSE_WEIGHT = "lose-weight"
    BUILD_MUSCLE = "build-muscle"
    MAINTAIN = "maintain"
    IMPROVE_ENDURANCE = "improve-endurance"
    GENERAL_HEALTH = "general-health"


class Experience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TimeAvailability(str, Enum):
    """Weekly workout time bucket."""

    UNDER_2H = "<2h"
    FROM_2_TO_4H = "2-4h"
    FROM_4_TO_6H = "4-6h"
    OVER_5H = "5+h"
    FROM_6_TO_8H = "6-8h"
    OVER_8H = "8+h"


class WorkoutPreference(str, Enum):
    STRENGTH = "strength-training"
    CARDIO = "cardio"
    HIIT = "hiit"
    FLEXIBILITY = "flexibility-yoga"
    MIXED = "mixed"
    HOME_BODYWEIGHT = "home-bodyweight"


class DietPreference(str, Enum):
    BALANCED = "balanced"
    HIGH_PROTEIN = "high-protein"
    LOW_CARB = "low-carb"
    PLANT_BASED = "plant-based"
    MEDITERRANEAN = "mediterranean"
    FLEXIBLE = "flexible"
    INTERMITTENT_FASTING = "intermittent-fasting"


class MealFrequency(str, Enum):
    """Stated meals-per-day preference (input side)."""

    TWO_MEALS = "2-meals"
    THREE_MEALS = "3-meals"
    FOUR_TO_FIVE_MEALS = "4-5-meals"
    SIX_PLUS_MEALS = "6+-meals"
    INTERMITTENT_FASTING = "intermittent-fasting"


class MealFrequencyMode(str, Enum):
    """How the daily budget is split (output side)."""

    THREE_MEALS = "3meals"
    FIVE_MEALS = "5meals"
    INTERMITTENT = "intermittent"


class MealSlot(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class StressLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"


class ProgressionType(str, Enum):
    LINEAR = "linear"
    PERIODIZED = "periodized"
    AUTO_REGULATED = "auto-regulated"


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class RevisionStatus(str, Enum):
    REVISED = "revised"
    NOT_DUE = "not_due"


class RecommendationKind(str, Enum):
    """Tags attached to revision recommendations."""

    ADHERENCE_STRATEGY = "adherence_strategy"
    CALORIE_REDUCTION = "calorie_reduction"
    REDUCE_VOLUME = "reduce_volume"
    SIMPLIFY_PROGRAM = "simplify_program"
    INCREASE_PROGRESSION = "increase_progression"
    MINDFULNESS = "mindfulness"
    RECOVERY = "recovery"
    BASELINE_WALKING = "baseline_walking"
