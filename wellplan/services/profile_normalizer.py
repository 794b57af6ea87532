"""Profile normalizer: raw onboarding answers -> canonical Profile.

This is the only place that knows about human-facing labels ("Lightly Active
(light exercise 1-3 days/week)"), legacy slugs ("light", "gain") and imperial
units. Everything downstream consumes the canonical Profile only.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from wellplan.core.constants import (
    AGE_MAX,
    AGE_MIN,
    DEFAULT_SLEEP_HOURS,
    FT_TO_CM,
    IN_TO_CM,
    LB_TO_KG,
    SLEEP_HOURS_MAX,
    SLEEP_HOURS_MIN,
)
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
from wellplan.core.errors import ConfigurationError
from wellplan.schemas.profile import OnboardingAnswers, Profile

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Keyword tables are checked in order; first hit wins.
_SEX_ALIASES = {"male": Sex.MALE, "m": Sex.MALE, "man": Sex.MALE, "female": Sex.FEMALE, "f": Sex.FEMALE, "woman": Sex.FEMALE}

_ACTIVITY_ALIASES = {
    # Legacy server slugs
    "light": ActivityLevel.LIGHTLY_ACTIVE,
    "moderate": ActivityLevel.MODERATELY_ACTIVE,
    "active": ActivityLevel.VERY_ACTIVE,
    "very": ActivityLevel.EXTREMELY_ACTIVE,
}
_ACTIVITY_KEYWORDS: Sequence[tuple[tuple[str, ...], ActivityLevel]] = (
    (("sedentary",), ActivityLevel.SEDENTARY),
    (("extreme",), ActivityLevel.EXTREMELY_ACTIVE),
    (("very",), ActivityLevel.VERY_ACTIVE),
    (("moderate",), ActivityLevel.MODERATELY_ACTIVE),
    (("light",), ActivityLevel.LIGHTLY_ACTIVE),
)

_GOAL_ALIASES = {"lose": Goal.LOSE_WEIGHT, "gain": Goal.BUILD_MUSCLE, "muscle": Goal.BUILD_MUSCLE}
_GOAL_KEYWORDS: Sequence[tuple[tuple[str, ...], Goal]] = (
    (("lose", "fat-loss", "cut"), Goal.LOSE_WEIGHT),
    (("muscle", "build", "gain", "bulk"), Goal.BUILD_MUSCLE),
    (("endurance",), Goal.IMPROVE_ENDURANCE),
    (("maintain",), Goal.MAINTAIN),
    (("health",), Goal.GENERAL_HEALTH),
)

_EXPERIENCE_KEYWORDS: Sequence[tuple[tuple[str, ...], Experience]] = (
    (("beginner", "novice", "new"), Experience.BEGINNER),
    (("intermediate",), Experience.INTERMEDIATE),
    (("advanced", "expert"), Experience.ADVANCED),
)

_TIME_KEYWORDS: Sequence[tuple[tuple[str, ...], TimeAvailability]] = (
    (("less-than-2", "under-2", "<2", "1-2", "0-2"), TimeAvailability.UNDER_2H),
    (("2-4",), TimeAvailability.FROM_2_TO_4H),
    (("4-6",), TimeAvailability.FROM_4_TO_6H),
    (("6-8",), TimeAvailability.FROM_6_TO_8H),
    (("more-than-8", "over-8", "8+"), TimeAvailability.OVER_8H),
    (("5+",), TimeAvailability.OVER_5H),
)

_WORKOUT_KEYWORDS: Sequence[tuple[tuple[str, ...], WorkoutPreference]] = (
    (("home", "bodyweight"), WorkoutPreference.HOME_BODYWEIGHT),
    (("strength",), WorkoutPreference.STRENGTH),
    (("hiit",), WorkoutPreference.HIIT),
    (("cardio",), WorkoutPreference.CARDIO),
    (("yoga", "flexibility", "mobility"), WorkoutPreference.FLEXIBILITY),
    (("mixed", "any"), WorkoutPreference.MIXED),
)

_DIET_KEYWORDS: Sequence[tuple[tuple[str, ...], DietPreference]] = (
    (("fasting",), DietPreference.INTERMITTENT_FASTING),
    (("protein",), DietPreference.HIGH_PROTEIN),
    (("low-carb", "lowcarb", "keto"), DietPreference.LOW_CARB),
    (("plant", "vegan", "vegetarian"), DietPreference.PLANT_BASED),
    (("mediterranean",), DietPreference.MEDITERRANEAN),
    (("flexible", "iifym"), DietPreference.FLEXIBLE),
    (("balanced",), DietPreference.BALANCED),
)

_MEAL_FREQUENCY_KEYWORDS: Sequence[tuple[tuple[str, ...], MealFrequency]] = (
    (("fasting",), MealFrequency.INTERMITTENT_FASTING),
    (("6",), MealFrequency.SIX_PLUS_MEALS),
    (("4", "5"), MealFrequency.FOUR_TO_FIVE_MEALS),
    (("3",), MealFrequency.THREE_MEALS),
    (("2",), MealFrequency.TWO_MEALS),
)

_STRESS_KEYWORDS: Sequence[tuple[tuple[str, ...], StressLevel]] = (
    (("very",), StressLevel.VERY_HIGH),
    (("high",), StressLevel.HIGH),
    (("moderate", "medium"), StressLevel.MODERATE),
    (("low",), StressLevel.LOW),
)


def _slug(raw: str) -> str:
    """'Lightly Active (light exercise ...)' -> 'lightly-active'."""
    text = raw.split("(", 1)[0].strip().lower()
    return re.sub(r"[\s_/]+", "-", text)


def _match_enum(
    field: str,
    raw: str | None,
    enum_cls: type[E],
    keywords: Sequence[tuple[tuple[str, ...], E]] = (),
    aliases: dict[str, E] | None = None,
    default: E | None = None,
) -> E:
    """Resolve a label/slug to an enum member.

    Absent (None or blank) -> default. Present but unrecognized -> ConfigurationError.
    """
    if raw is None or not str(raw).strip():
        if default is None:
            raise ConfigurationError(field, raw, "required field is missing")
        return default
    slug = _slug(str(raw))
    for member in enum_cls:
        if slug == member.value:
            return member
    if aliases and slug in aliases:
        return aliases[slug]
    for words, member in keywords:
        if any(w in slug for w in words):
            return member
    raise ConfigurationError(field, raw)


def _stress_from_answer(raw: str | None) -> StressLevel:
    """Stress label, or a 1-10 self-report score."""
    if raw is not None and str(raw).strip().isdigit():
        score = int(str(raw).strip())
        if not 1 <= score <= 10:
            raise ConfigurationError("stress_level", raw, "score must be within [1, 10]")
        if score >= 9:
            return StressLevel.VERY_HIGH
        if score >= 7:
            return StressLevel.HIGH
        if score >= 4:
            return StressLevel.MODERATE
        return StressLevel.LOW
    return _match_enum("stress_level", raw, StressLevel, _STRESS_KEYWORDS, default=StressLevel.MODERATE)


def _weight_to_kg(field: str, value: float, unit: str) -> float:
    u = unit.strip().lower()
    if u in ("kg", "kgs", "kilograms"):
        return float(value)
    if u in ("lb", "lbs", "pounds"):
        return float(value) * LB_TO_KG
    raise ConfigurationError(f"{field}_unit", unit)


def _height_to_cm(value: float, unit: str) -> float:
    u = unit.strip().lower()
    if u in ("cm", "centimeters"):
        return float(value)
    if u in ("in", "inches"):
        return float(value) * IN_TO_CM
    if u in ("ft", "feet"):
        # Decimal feet as the onboarding picker encodes it: 5.5 -> 5 ft 6 in
        feet = math.floor(value)
        return feet * FT_TO_CM + (value - feet) * 12 * IN_TO_CM
    raise ConfigurationError("height_unit", unit)


def _clean_list(items: list[str] | None) -> tuple[str, ...]:
    if not items:
        return ()
    return tuple(i.strip() for i in items if i and i.strip())


def normalize_profile(answers: OnboardingAnswers) -> Profile:
    """Validate and canonicalize onboarding answers into a Profile.

    Raises ConfigurationError naming the field for anything required that is
    missing or out of range, and for any enum answer that is present but unknown.
    """
    sex = _match_enum("sex", answers.sex, Sex, aliases=_SEX_ALIASES)

    if answers.age is None:
        raise ConfigurationError("age", None, "required field is missing")
    if not AGE_MIN <= answers.age <= AGE_MAX:
        raise ConfigurationError("age", answers.age, f"must be within [{AGE_MIN}, {AGE_MAX}]")

    if answers.weight is None:
        raise ConfigurationError("weight", None, "required field is missing")
    if answers.weight <= 0:
        raise ConfigurationError("weight", answers.weight, "must be positive")
    weight_kg = _weight_to_kg("weight", answers.weight, answers.weight_unit)

    if answers.height is None:
        raise ConfigurationError("height", None, "required field is missing")
    if answers.height <= 0:
        raise ConfigurationError("height", answers.height, "must be positive")
    height_cm = _height_to_cm(answers.height, answers.height_unit)

    if answers.target_weight is not None and answers.target_weight <= 0:
        raise ConfigurationError("target_weight", answers.target_weight, "must be positive")
    target_weight_kg = (
        _weight_to_kg("weight", answers.target_weight, answers.weight_unit)
        if answers.target_weight is not None
        else weight_kg
    )

    sleep_hours = DEFAULT_SLEEP_HOURS if answers.sleep_hours is None else float(answers.sleep_hours)
    sleep_hours = max(SLEEP_HOURS_MIN, min(SLEEP_HOURS_MAX, sleep_hours))

    profile = Profile(
        sex=sex,
        age=answers.age,
        weight_kg=round(weight_kg, 2),
        height_cm=round(height_cm, 1),
        target_weight_kg=round(target_weight_kg, 2),
        activity_level=_match_enum(
            "activity_level", answers.activity_level, ActivityLevel,
            _ACTIVITY_KEYWORDS, _ACTIVITY_ALIASES, ActivityLevel.SEDENTARY,
        ),
        goal=_match_enum(
            "fitness_goal", answers.fitness_goal, Goal, _GOAL_KEYWORDS, _GOAL_ALIASES, Goal.GENERAL_HEALTH
        ),
        experience=_match_enum(
            "experience", answers.experience, Experience, _EXPERIENCE_KEYWORDS, default=Experience.BEGINNER
        ),
        time_available=_match_enum(
            "time_available", answers.time_available, TimeAvailability,
            _TIME_KEYWORDS, default=TimeAvailability.FROM_2_TO_4H,
        ),
        workout_preference=_match_enum(
            "workout_preference", answers.workout_preference, WorkoutPreference,
            _WORKOUT_KEYWORDS, default=WorkoutPreference.MIXED,
        ),
        diet_preference=_match_enum(
            "nutrition_preference", answers.nutrition_preference, DietPreference,
            _DIET_KEYWORDS, default=DietPreference.BALANCED,
        ),
        meal_frequency=_match_enum(
            "meal_frequency", answers.meal_frequency, MealFrequency,
            _MEAL_FREQUENCY_KEYWORDS, default=MealFrequency.THREE_MEALS,
        ),
        sleep_hours=sleep_hours,
        stress_level=_stress_from_answer(answers.stress_level),
        equipment=_clean_list(answers.equipment),
        dietary_restrictions=_clean_list(answers.dietary_restrictions),
        challenges=_clean_list(answers.challenges),
    )
    logger.debug("Normalized profile: %s", profile)
    return profile
