"""Macro allocator."""

import pytest

from wellplan.core.enums import DietPreference, Goal
from wellplan.core.errors import ConfigurationError
from wellplan.services.macros import allocate_macros, macro_ratios


def test_balanced_split():
    macros = allocate_macros(2000, DietPreference.BALANCED, Goal.MAINTAIN)
    assert (macros.protein_g, macros.carbs_g, macros.fat_g) == (125, 250, 56)


@pytest.mark.parametrize("diet", list(DietPreference))
@pytest.mark.parametrize("goal", list(Goal))
def test_ratios_sum_to_one(diet, goal):
    assert sum(macro_ratios(diet, goal)) == pytest.approx(1.0)


@pytest.mark.parametrize("diet", list(DietPreference))
@pytest.mark.parametrize("target", [1200, 1650, 2207, 2800, 3500, 4200])
def test_macro_calories_match_target(diet, target):
    macros = allocate_macros(target, diet, Goal.MAINTAIN)
    assert abs(macros.calories - target) / target <= 0.02


def test_build_muscle_lifts_protein_to_thirty_percent():
    macros = allocate_macros(2000, DietPreference.BALANCED, Goal.BUILD_MUSCLE)
    assert macros.protein_g == 150
    protein, fat, carb = macro_ratios(DietPreference.BALANCED, Goal.BUILD_MUSCLE)
    # fat and carb keep their 1:2 proportion
    assert carb / fat == pytest.approx(2.0)


def test_build_muscle_keeps_higher_protein_table_value():
    protein, _, _ = macro_ratios(DietPreference.HIGH_PROTEIN, Goal.BUILD_MUSCLE)
    assert protein == pytest.approx(0.35)


def test_intermittent_fasting_uses_balanced_ratios():
    assert macro_ratios(DietPreference.INTERMITTENT_FASTING, Goal.MAINTAIN) == macro_ratios(
        DietPreference.BALANCED, Goal.MAINTAIN
    )


def test_zero_target_gives_zero_macros():
    macros = allocate_macros(0, DietPreference.LOW_CARB, Goal.LOSE_WEIGHT)
    assert macros.calories == 0


def test_negative_target_rejected():
    with pytest.raises(ConfigurationError) as exc:
        allocate_macros(-100, DietPreference.BALANCED, Goal.MAINTAIN)
    assert exc.value.field == "calorie_target"
