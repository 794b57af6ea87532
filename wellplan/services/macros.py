"""Macro allocator: split a calorie target into protein / carb / fat grams."""

from __future__ import annotations

from wellplan.core.constants import (
    BUILD_MUSCLE_MIN_PROTEIN_RATIO,
    DEFAULT_MACRO_RATIO,
    KCAL_PER_G_CARB,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    MACRO_RATIOS,
)
from wellplan.core.enums import DietPreference, Goal
from wellplan.core.errors import ConfigurationError
from wellplan.schemas.plan import MacroTargets


def macro_ratios(diet_preference: DietPreference, goal: Goal) -> tuple[float, float, float]:
    """(protein, fat, carb) fractions of calories; always sums to 1.

    Build-muscle lifts protein to at least 30%; fat and carb shrink in
    proportion to their table values to absorb the difference.
    """
    protein, fat, carb = MACRO_RATIOS.get(diet_preference, DEFAULT_MACRO_RATIO)
    if goal is Goal.BUILD_MUSCLE and protein < BUILD_MUSCLE_MIN_PROTEIN_RATIO:
        protein = BUILD_MUSCLE_MIN_PROTEIN_RATIO
        rest = 1 - protein
        fat, carb = fat / (fat + carb) * rest, carb / (fat + carb) * rest
    return protein, fat, carb


def allocate_macros(calorie_target: int, diet_preference: DietPreference, goal: Goal) -> MacroTargets:
    if calorie_target < 0:
        raise ConfigurationError("calorie_target", calorie_target, "must not be negative")
    protein_ratio, fat_ratio, carb_ratio = macro_ratios(diet_preference, goal)

    protein_kcal = calorie_target * protein_ratio
    # Whatever protein leaves over is shared by fat and carbs; never negative.
    remaining = max(0.0, calorie_target - protein_kcal)
    fat_share = fat_ratio / (fat_ratio + carb_ratio)

    return MacroTargets(
        protein_g=round(protein_kcal / KCAL_PER_G_PROTEIN),
        carbs_g=round(remaining * (1 - fat_share) / KCAL_PER_G_CARB),
        fat_g=round(remaining * fat_share / KCAL_PER_G_FAT),
    )
