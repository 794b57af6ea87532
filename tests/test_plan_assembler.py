"""End-to-end plan generation from a canonical Profile."""

from wellplan.core.enums import DietPreference, Goal, MealFrequency, MealFrequencyMode
from wellplan.core.program_catalog import WEIGHT_LOSS_CARDIO
from wellplan.schemas.profile import OnboardingAnswers
from wellplan.services.plan_assembler import (
    PROTEIN_SHAKE,
    SLEEP_MASK,
    generate_plan,
    product_recommendations,
)
from wellplan.services.profile_normalizer import normalize_profile


def test_generate_plan(profile):
    bundle = generate_plan(profile)
    nutrition = bundle.nutrition
    assert nutrition.energy.calorie_target == 2207
    assert nutrition.meal_frequency_mode is MealFrequencyMode.THREE_MEALS
    assert sum(m.calories for m in nutrition.meal_templates) == nutrition.energy.calorie_target
    assert nutrition.water_goal_oz == 128
    assert bundle.fitness.program_type == WEIGHT_LOSS_CARDIO
    assert len(bundle.wellness.journaling_prompts) == 3
    assert bundle.products == []
    assert bundle.profile == profile


def test_generation_is_deterministic(profile):
    assert generate_plan(profile) == generate_plan(profile)



def test_intermittent_plan_covers_half_the_day(make_profile):
    bundle = generate_plan(make_profile(diet_preference=DietPreference.INTERMITTENT_FASTING))
    nutrition = bundle.nutrition
    assert nutrition.meal_frequency_mode is MealFrequencyMode.INTERMITTENT
    assert len(nutrition.meal_templates) == 2
    assert abs(sum(m.calories for m in nutrition.meal_templates) - nutrition.energy.calorie_target * 0.5) <= 1


def test_products(make_profile):
    assert product_recommendations(make_profile(sleep_hours=5.0, goal=Goal.BUILD_MUSCLE)) == [
        SLEEP_MASK,
        PROTEIN_SHAKE,
    ]
    assert product_recommendations(make_profile(sleep_hours=6.0)) == []


def test_restrictions_flow_into_recipe_tags(make_profile):
    bundle = generate_plan(
        make_profile(diet_preference=DietPreference.HIGH_PROTEIN, dietary_restrictions=("Dairy-Free",))
    )
    assert bundle.nutrition.recipe_tags == ["High-Protein", "Dairy-Free"]


def test_fasting_meal_frequency_alone_keeps_full_day(make_profile):
    bundle = generate_plan(make_profile(meal_frequency=MealFrequency.INTERMITTENT_FASTING))
    nutrition = bundle.nutrition
    assert nutrition.meal_frequency_mode is MealFrequencyMode.THREE_MEALS
    assert sum(m.calories for m in nutrition.meal_templates) == nutrition.energy.calorie_target


def test_tiny_body_yields_zero_energy_plan():
    profile = normalize_profile(OnboardingAnswers(sex="female", age=90, weight=5, height=50))
    bundle = generate_plan(profile)
    energy = bundle.nutrition.energy
    assert energy.bmr == 0
    assert energy.calorie_target == 0
    assert all(m.calories == 0 for m in bundle.nutrition.meal_templates)
