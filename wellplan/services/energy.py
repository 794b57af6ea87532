"""Energy model and goal adjuster.

BMR uses Mifflin-St Jeor; TDEE scales it by a fixed activity multiplier.
The goal adjuster turns TDEE into a daily calorie target and never lets the
target drop below 1.1x the sedentary-equivalent baseline (tdee / multiplier),
whatever the goal.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from wellplan.core.constants import (
    ACTIVITY_MULTIPLIERS,
    CALORIE_FLOOR_FACTOR,
    DEFICIT_DEFAULT,
    DEFICIT_HEAVY,
    HEAVY_WEIGHT_KG,
    SURPLUS_BUILD_MUSCLE,
    SURPLUS_ENDURANCE,
)
from wellplan.core.enums import ActivityLevel, Goal, Sex
from wellplan.core.errors import ConfigurationError
from wellplan.schemas.plan import EnergyTargets
from wellplan.schemas.profile import Profile

logger = logging.getLogger(__name__)


def _coerce(field: str, value, enum_cls):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError(field, value) from None


def calc_bmr(weight_kg: float, height_cm: float, age: int, sex: Sex | str) -> float:
    """Mifflin-St Jeor BMR equation (kcal/day), never negative."""
    sex = _coerce("sex", sex, Sex)
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    # Very small bodies at high ages drive the equation below zero
    return max(0.0, base + 5 if sex is Sex.MALE else base - 161)


def activity_multiplier(activity_level: ActivityLevel | str) -> float:
    return ACTIVITY_MULTIPLIERS[_coerce("activity_level", activity_level, ActivityLevel)]


def calc_tdee(bmr: float, activity_level: ActivityLevel | str) -> float:
    return bmr * activity_multiplier(activity_level)


def calorie_floor(tdee: float, activity_level: ActivityLevel | str) -> float:
    """Minimum safe target: 1.1x the sedentary-equivalent baseline."""
    return tdee / activity_multiplier(activity_level) * CALORIE_FLOOR_FACTOR


def adjust_for_goal(
    tdee: float,
    goal: Goal | str,
    activity_level: ActivityLevel | str,
    current_weight_kg: Optional[float] = None,
) -> int:
    """Daily calorie target for the goal, floored, rounded to the nearest kcal."""
    goal = _coerce("goal", goal, Goal)
    if goal is Goal.LOSE_WEIGHT:
        heavy = current_weight_kg is not None and current_weight_kg > HEAVY_WEIGHT_KG
        deficit = DEFICIT_HEAVY if heavy else DEFICIT_DEFAULT
        calories = tdee * (1 - deficit)
    elif goal is Goal.BUILD_MUSCLE:
        calories = tdee * SURPLUS_BUILD_MUSCLE
    elif goal is Goal.IMPROVE_ENDURANCE:
        calories = tdee * SURPLUS_ENDURANCE
    else:
        calories = tdee
    # Rounding up when the floor binds keeps the target from dipping under it
    floor = calorie_floor(tdee, activity_level)
    return max(round(calories), math.ceil(floor))


def compute_energy(profile: Profile) -> EnergyTargets:
    bmr = calc_bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex)
    tdee = calc_tdee(bmr, profile.activity_level)
    target = adjust_for_goal(tdee, profile.goal, profile.activity_level, profile.weight_kg)
    floor = calorie_floor(tdee, profile.activity_level)
    logger.debug("Energy: bmr=%.2f tdee=%.2f target=%d floor=%.2f", bmr, tdee, target, floor)
    return EnergyTargets(
        bmr=round(bmr, 2),
        tdee=round(tdee, 2),
        calorie_target=target,
        calorie_floor=round(floor, 2),
    )


def profile_calorie_floor(profile: Profile) -> float:
    bmr = calc_bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex)
    return calorie_floor(calc_tdee(bmr, profile.activity_level), profile.activity_level)
