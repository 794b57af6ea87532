"""Program selector: decision table from profile to a catalogue workout template.

Rules are evaluated top to bottom and the first match wins:

1. goal mentions muscle/build -> split chosen by weekly time available
2. goal mentions lose/weight  -> Weight Loss + Cardio
3. preference mentions home/bodyweight -> Home Bodyweight
4. goal mentions strength/power -> Strength/Power
5. otherwise -> 3-Day Full Body
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from wellplan.core.enums import Experience, ProgressionType, TimeAvailability
from wellplan.core.program_catalog import (
    BODYWEIGHT_EXERCISES,
    DEFAULT_VOLUME,
    FULL_BODY_3_DAY,
    HOME_BODYWEIGHT,
    MUSCLE_EXERCISES,
    PROGRAM_SCHEDULES,
    PROGRAM_VOLUMES,
    PUSH_PULL_LEGS_5_DAY,
    STRENGTH_POWER,
    UPPER_LOWER_4_DAY,
    WEIGHT_LOSS_CARDIO,
)
from wellplan.schemas.plan import ExerciseRecommendation, FitnessPlan, Volume, WorkoutDay
from wellplan.schemas.profile import Profile

logger = logging.getLogger(__name__)

SHORT_WEEK = {TimeAvailability.UNDER_2H.value, TimeAvailability.FROM_2_TO_4H.value}
LONG_WEEK = {TimeAvailability.FROM_4_TO_6H.value, TimeAvailability.OVER_5H.value}


def _mentions(text: str, words: Sequence[str]) -> bool:
    return any(w in text for w in words)


def select_program(goal: str, time_available: TimeAvailability | str, preference: str) -> str:
    goal = str(getattr(goal, "value", goal)).lower()
    preference = str(getattr(preference, "value", preference)).lower()
    time = str(getattr(time_available, "value", time_available))

    if _mentions(goal, ("muscle", "build")):
        if time in SHORT_WEEK:
            return FULL_BODY_3_DAY
        if time in LONG_WEEK:
            return PUSH_PULL_LEGS_5_DAY
        return UPPER_LOWER_4_DAY
    if _mentions(goal, ("lose", "weight")):
        return WEIGHT_LOSS_CARDIO
    if _mentions(preference, ("home", "bodyweight")):
        return HOME_BODYWEIGHT
    if _mentions(goal, ("strength", "power")):
        return STRENGTH_POWER
    return FULL_BODY_3_DAY


def weekly_schedule(program_type: str) -> list[WorkoutDay]:
    return [
        WorkoutDay(day=day, focus=focus, exercise_names=list(names), duration_minutes=minutes)
        for day, focus, names, minutes in PROGRAM_SCHEDULES[program_type]
    ]


def default_volume(program_type: str) -> Volume:
    sets, reps, rest = PROGRAM_VOLUMES.get(program_type, DEFAULT_VOLUME)
    return Volume(sets=sets, reps=reps, rest_seconds=rest)


def progression_for(experience: Experience) -> tuple[ProgressionType, float]:
    """Beginners progress linearly; intermediates get the larger weekly step."""
    ptype = ProgressionType.LINEAR if experience is Experience.BEGINNER else ProgressionType.PERIODIZED
    pct = 5.0 if experience is Experience.INTERMEDIATE else 2.5
    return ptype, pct


def recommend_exercises(goal: str, preference: str, experience: Experience) -> list[ExerciseRecommendation]:
    """Standalone suggestions keyed by goal and equipment preference (not the weekly schedule)."""
    goal = str(getattr(goal, "value", goal)).lower()
    preference = str(getattr(preference, "value", preference)).lower()
    out: list[ExerciseRecommendation] = []
    if _mentions(goal, ("muscle", "build")):
        for name, category, equipment, reason in MUSCLE_EXERCISES:
            out.append(
                ExerciseRecommendation(
                    name=name, category=category, equipment=list(equipment),
                    difficulty=experience.value, reason=reason,
                )
            )
    if _mentions(preference, ("home", "bodyweight")):
        for name, category, equipment, difficulty, reason in BODYWEIGHT_EXERCISES:
            out.append(
                ExerciseRecommendation(
                    name=name, category=category, equipment=list(equipment),
                    difficulty=difficulty, reason=reason,
                )
            )
    return out


def build_fitness_plan(profile: Profile) -> FitnessPlan:
    program = select_program(profile.goal.value, profile.time_available, profile.workout_preference.value)
    ptype, pct = progression_for(profile.experience)
    logger.debug("Program for goal=%s time=%s: %s", profile.goal.value, profile.time_available.value, program)
    return FitnessPlan(
        program_type=program,
        weekly_schedule=weekly_schedule(program),
        volume=default_volume(program),
        progression_type=ptype,
        weekly_increase_pct=pct,
        exercises=recommend_exercises(profile.goal.value, profile.workout_preference.value, profile.experience),
    )
