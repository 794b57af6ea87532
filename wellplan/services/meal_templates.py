"""Meal template generator, water goal and recipe tags.

The daily budget is split by fixed shares per meal-frequency mode. Per-slot
numbers are apportioned with a largest-remainder pass so the integers add up
exactly to the rounded total of the shares (3meals and 5meals: the full target).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from wellplan.core.constants import WATER_GOAL_MAX_OZ, WATER_GOAL_MIN_OZ, WATER_OZ_PER_KG
from wellplan.core.enums import (
    ActivityLevel,
    DietPreference,
    MealFrequency,
    MealFrequencyMode,
    MealSlot,
)
from wellplan.schemas.plan import MacroTargets, MealTemplate

logger = logging.getLogger(__name__)

# (slot, share of calories, share of macros)
MODE_SPLITS: dict[MealFrequencyMode, tuple[tuple[MealSlot, float, float], ...]] = {
    MealFrequencyMode.THREE_MEALS: (
        (MealSlot.BREAKFAST, 0.30, 0.30),
        (MealSlot.LUNCH, 0.30, 0.30),
        (MealSlot.DINNER, 0.30, 0.30),
        (MealSlot.SNACK, 0.10, 0.10),
    ),
    MealFrequencyMode.FIVE_MEALS: (
        (MealSlot.BREAKFAST, 0.25, 0.25),
        (MealSlot.LUNCH, 0.25, 0.25),
        (MealSlot.DINNER, 0.25, 0.25),
        (MealSlot.SNACK, 0.125, 0.125),
        (MealSlot.SNACK, 0.125, 0.125),
    ),
    # Compressed window: 60/40 of half the day's calories. Macros split 60/40 of the full day.
    MealFrequencyMode.INTERMITTENT: (
        (MealSlot.LUNCH, 0.5 * 0.6, 0.6),
        (MealSlot.DINNER, 0.5 * 0.4, 0.4),
    ),
}

SLOT_DEFAULT_TAGS: dict[MealSlot, tuple[str, ...]] = {
    MealSlot.BREAKFAST: ("Oatmeal", "Eggs", "Smoothies"),
    MealSlot.LUNCH: ("Salads", "Sandwiches", "Bowls"),
    MealSlot.DINNER: ("Grilled proteins", "Vegetables", "Whole grains"),
    MealSlot.SNACK: ("Nuts", "Fruits", "Yogurt"),
}

DIET_SUGGESTION_TAGS: dict[DietPreference, str] = {
    DietPreference.HIGH_PROTEIN: "High-protein options",
    DietPreference.LOW_CARB: "Low-carb alternatives",
    DietPreference.PLANT_BASED: "Plant-based recipes",
}

DIET_RECIPE_TAGS: dict[DietPreference, tuple[str, ...]] = {
    DietPreference.HIGH_PROTEIN: ("High-Protein",),
    DietPreference.LOW_CARB: ("Low-Carb", "Keto"),
    DietPreference.PLANT_BASED: ("Plant-Based", "Vegan"),
}
PASS_THROUGH_RESTRICTIONS = ("Gluten-Free", "Dairy-Free")
DEFAULT_RECIPE_TAGS = ("Balanced", "Quick & Easy", "Meal Prep")

MAX_SUGGESTION_TAGS = 3


def select_meal_mode(meal_frequency: MealFrequency | str, diet_preference: DietPreference | str) -> MealFrequencyMode:
    """5meals if the frequency mentions 5; intermittent if the diet mentions fasting; else 3meals."""
    frequency = getattr(meal_frequency, "value", meal_frequency) or ""
    diet = getattr(diet_preference, "value", diet_preference) or ""
    if "5" in frequency:
        return MealFrequencyMode.FIVE_MEALS
    if "fasting" in diet.lower():
        return MealFrequencyMode.INTERMITTENT
    return MealFrequencyMode.THREE_MEALS


def apportion(total: int, shares: Sequence[float]) -> list[int]:
    """Largest-remainder split of total by shares; result sums to round(total * sum(shares))."""
    raw = [total * s for s in shares]
    parts = [math.floor(r) for r in raw]
    short = max(0, round(sum(raw)) - sum(parts))
    by_remainder = sorted(range(len(raw)), key=lambda i: raw[i] - parts[i], reverse=True)
    for i in by_remainder[:short]:
        parts[i] += 1
    return parts


def meal_suggestions(slot: MealSlot, diet_preference: DietPreference) -> list[str]:
    tags: list[str] = []
    if diet_preference in DIET_SUGGESTION_TAGS:
        tags.append(DIET_SUGGESTION_TAGS[diet_preference])
    tags.extend(SLOT_DEFAULT_TAGS[slot])
    return tags[:MAX_SUGGESTION_TAGS]


def generate_meal_templates(
    calorie_target: int,
    macros: MacroTargets,
    mode: MealFrequencyMode,
    diet_preference: DietPreference,
) -> list[MealTemplate]:
    split = MODE_SPLITS[mode]
    calorie_shares = [c for _, c, _ in split]
    macro_shares = [m for _, _, m in split]
    calories = apportion(calorie_target, calorie_shares)
    protein = apportion(macros.protein_g, macro_shares)
    carbs = apportion(macros.carbs_g, macro_shares)
    fat = apportion(macros.fat_g, macro_shares)
    logger.debug("Meal split %s: %s", mode.value, calories)
    return [
        MealTemplate(
            slot=slot,
            calories=calories[i],
            protein_g=protein[i],
            carbs_g=carbs[i],
            fat_g=fat[i],
            suggestion_tags=meal_suggestions(slot, diet_preference),
        )
        for i, (slot, _, _) in enumerate(split)
    ]


def water_goal_oz(weight_kg: float, activity_level: ActivityLevel) -> int:
    """Daily water goal in oz, clamped to [64, 128]."""
    level = activity_level.value
    if "very" in level:
        adj = 1.2
    elif "moderate" in level:
        adj = 1.1
    else:
        adj = 1.0
    oz = round(weight_kg * WATER_OZ_PER_KG * adj)
    return max(WATER_GOAL_MIN_OZ, min(WATER_GOAL_MAX_OZ, oz))


def recipe_tags(diet_preference: DietPreference, dietary_restrictions: Sequence[str] = ()) -> list[str]:
    tags = list(DIET_RECIPE_TAGS.get(diet_preference, ()))
    restrictions = {r.lower() for r in dietary_restrictions}
    tags.extend(r for r in PASS_THROUGH_RESTRICTIONS if r.lower() in restrictions)
    if not tags:
        tags = list(DEFAULT_RECIPE_TAGS)
    return list(dict.fromkeys(tags))
