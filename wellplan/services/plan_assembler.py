"""Plan assembler: runs the nutrition, fitness and wellness branches for one Profile."""

from __future__ import annotations

import logging

from wellplan.core.enums import Goal
from wellplan.schemas.plan import NutritionPlan, PlanBundle, ProductRecommendation
from wellplan.schemas.profile import Profile
from wellplan.services.energy import compute_energy
from wellplan.services.macros import allocate_macros
from wellplan.services.meal_templates import (
    generate_meal_templates,
    recipe_tags,
    select_meal_mode,
    water_goal_oz,
)
from wellplan.services.program_selector import build_fitness_plan
from wellplan.services.wellness import build_wellness_plan

logger = logging.getLogger(__name__)

SLEEP_MASK = ProductRecommendation(sku="sleep_mask_01", title="Weighted Sleep Mask", category="sleep")
PROTEIN_SHAKE = ProductRecommendation(sku="protein_shake_01", title="High-Protein Shake", category="nutrition")
SMART_BOTTLE = ProductRecommendation(sku="smart_bottle_01", title="Smart Water Bottle", category="hydration")

POOR_SLEEP_HOURS = 6


def build_nutrition_plan(profile: Profile) -> NutritionPlan:
    energy = compute_energy(profile)
    macros = allocate_macros(energy.calorie_target, profile.diet_preference, profile.goal)
    mode = select_meal_mode(profile.meal_frequency, profile.diet_preference)
    return NutritionPlan(
        energy=energy,
        macros=macros,
        meal_frequency_mode=mode,
        meal_templates=generate_meal_templates(energy.calorie_target, macros, mode, profile.diet_preference),
        water_goal_oz=water_goal_oz(profile.weight_kg, profile.activity_level),
        recipe_tags=recipe_tags(profile.diet_preference, profile.dietary_restrictions),
    )


def product_recommendations(profile: Profile) -> list[ProductRecommendation]:
    recs = []
    if profile.sleep_hours < POOR_SLEEP_HOURS:
        recs.append(SLEEP_MASK)
    if profile.goal is Goal.BUILD_MUSCLE:
        recs.append(PROTEIN_SHAKE)
    return recs


def generate_plan(profile: Profile) -> PlanBundle:
    """Full first-time generation. Pure: no I/O, safe to call concurrently."""
    bundle = PlanBundle(
        profile=profile,
        nutrition=build_nutrition_plan(profile),
        fitness=build_fitness_plan(profile),
        wellness=build_wellness_plan(profile),
        products=product_recommendations(profile),
    )
    logger.info(
        "Generated plan: target=%d kcal mode=%s program=%s",
        bundle.nutrition.energy.calorie_target,
        bundle.nutrition.meal_frequency_mode.value,
        bundle.fitness.program_type,
    )
    return bundle
