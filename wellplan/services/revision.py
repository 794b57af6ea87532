"""Adherence scoring and weekly plan revision.

A revision reads the active plan plus a trailing 7-day log window and emits a
new plan version (replacing all three plans) and one AdherenceRecord. Every
adjustment is bounded: no single revision moves calories by more than
MAX_CALORIE_DELTA or macros by more than the same energy in grams.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date, datetime, timedelta
from typing import Optional

from wellplan.core.constants import (
    CALORIE_PENALTY_WEIGHT,
    HIGH_SLEEP_HOURS,
    KCAL_PER_G_CARB,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    LOW_MOOD_THRESHOLD,
    LOW_SLEEP_HOURS,
    LOW_STEPS_THRESHOLD,
    LOW_WATER_RATIO,
    MAX_CALORIE_DELTA,
    MAX_WEEKLY_INCREASE_PCT,
    MIN_SETS,
    ON_TARGET_CALORIE_TOLERANCE,
    ON_TARGET_PROTEIN_RATIO,
    PROGRESSION_STEP_PCT,
    REVISION_WINDOW_DAYS,
    STALL_CALORIE_REDUCTION,
    STALL_CYCLES,
    STALL_WEIGHT_CHANGE_KG,
    UNDER_EATING_RATIO,
    WORKOUT_DOWNGRADE_RATIO,
    WORKOUT_PENALTY_WEIGHT,
    WORKOUT_SKIP_RATIO,
)
from wellplan.core.enums import Goal, RecommendationKind, RevisionStatus, StressLevel
from wellplan.core.program_catalog import SIMPLER_PROGRAM
from wellplan.schemas.plan import FitnessPlan, MacroTargets, NutritionPlan, PlanBundle, WellnessPlan
from wellplan.schemas.revision import (
    AdherenceRecord,
    LogWindow,
    ProposedDeltas,
    Recommendation,
    RevisionResult,
)
from wellplan.services.energy import profile_calorie_floor
from wellplan.services.macros import allocate_macros
from wellplan.services.meal_templates import generate_meal_templates
from wellplan.services.plan_assembler import SMART_BOTTLE, product_recommendations
from wellplan.services.program_selector import default_volume, weekly_schedule
from wellplan.services.wellness import compose_wellness, is_stressed

logger = logging.getLogger(__name__)

MAX_PROTEIN_DELTA_G = MAX_CALORIE_DELTA // KCAL_PER_G_PROTEIN
MAX_CARBS_DELTA_G = MAX_CALORIE_DELTA // KCAL_PER_G_CARB
MAX_FAT_DELTA_G = MAX_CALORIE_DELTA // KCAL_PER_G_FAT


def is_revision_due(
    last_revision_at: Optional[datetime],
    now: datetime,
    window_days: int = REVISION_WINDOW_DAYS,
) -> bool:
    """True when no revision ran within the rolling window ending at now."""
    if last_revision_at is None:
        return True
    return now - last_revision_at >= timedelta(days=window_days)


def _average(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _clamp(value: int, limit: int) -> int:
    return max(-limit, min(limit, value))


def adherence_score(
    calories_avg: float,
    calorie_target: float,
    workouts_completed: int,
    workouts_targeted: int,
) -> float:
    """100 minus calorie and workout penalties, clamped to [0, 100]."""
    score = 100.0
    if calorie_target > 0:
        score -= abs(calories_avg - calorie_target) / calorie_target * CALORIE_PENALTY_WEIGHT
    if workouts_targeted > 0:
        # Extra sessions earn no credit beyond a full week
        completion = min(1.0, workouts_completed / workouts_targeted)
        score -= (1 - completion) * WORKOUT_PENALTY_WEIGHT
    return round(max(0.0, min(100.0, score)), 1)


def weight_change(logs: LogWindow) -> Optional[float]:
    if len(logs.weights) < 2:
        return None
    return round(logs.weights[-1].weight_kg - logs.weights[0].weight_kg, 2)


def _revise_nutrition(
    current: NutritionPlan,
    bundle: PlanBundle,
    calorie_delta: int,
) -> tuple[NutritionPlan, ProposedDeltas]:
    profile = bundle.profile
    old_macros = current.macros
    target = current.energy.calorie_target + calorie_delta
    fresh = allocate_macros(target, profile.diet_preference, profile.goal)
    deltas = ProposedDeltas(
        calorie_delta=calorie_delta,
        protein_delta=_clamp(fresh.protein_g - old_macros.protein_g, MAX_PROTEIN_DELTA_G),
        carbs_delta=_clamp(fresh.carbs_g - old_macros.carbs_g, MAX_CARBS_DELTA_G),
        fat_delta=_clamp(fresh.fat_g - old_macros.fat_g, MAX_FAT_DELTA_G),
    )
    macros = MacroTargets(
        protein_g=max(0, old_macros.protein_g + deltas.protein_delta),
        carbs_g=max(0, old_macros.carbs_g + deltas.carbs_delta),
        fat_g=max(0, old_macros.fat_g + deltas.fat_delta),
    )
    nutrition = current.model_copy(
        update={
            "energy": current.energy.model_copy(update={"calorie_target": target}),
            "macros": macros,
            "meal_templates": generate_meal_templates(
                target, macros, current.meal_frequency_mode, profile.diet_preference
            ),
        }
    )
    return nutrition, deltas


def _revise_fitness(
    current: FitnessPlan,
    completion: float,
    on_target: bool,
    recs: list[Recommendation],
) -> FitnessPlan:
    if completion < WORKOUT_SKIP_RATIO:
        simpler = SIMPLER_PROGRAM.get(current.program_type)
        if completion < WORKOUT_DOWNGRADE_RATIO and simpler:
            logger.info("Workouts skipped (%.0f%%): %s -> %s", completion * 100, current.program_type, simpler)
            recs.append(Recommendation(
                kind=RecommendationKind.SIMPLIFY_PROGRAM,
                message=f"Switching from {current.program_type} to {simpler} to fit your week.",
            ))
            return current.model_copy(
                update={
                    "program_type": simpler,
                    "weekly_schedule": weekly_schedule(simpler),
                    "volume": default_volume(simpler),
                }
            )
        if current.volume.sets > MIN_SETS:
            sets = current.volume.sets - 1
            logger.info("Workouts skipped (%.0f%%): sets %d -> %d", completion * 100, current.volume.sets, sets)
            recs.append(Recommendation(
                kind=RecommendationKind.REDUCE_VOLUME,
                message=f"Dropping to {sets} sets per exercise so sessions are easier to finish.",
            ))
            return current.model_copy(update={"volume": current.volume.model_copy(update={"sets": sets})})
        return current
    if on_target and current.weekly_increase_pct < MAX_WEEKLY_INCREASE_PCT:
        pct = min(MAX_WEEKLY_INCREASE_PCT, current.weekly_increase_pct + PROGRESSION_STEP_PCT)
        recs.append(Recommendation(
            kind=RecommendationKind.INCREASE_PROGRESSION,
            message=f"You hit your targets all week; weekly load increase is now {pct:g}%.",
        ))
        return current.model_copy(update={"weekly_increase_pct": pct})
    return current


def _revise_wellness(
    bundle: PlanBundle,
    logs: LogWindow,
    sleep_avg: float,
    mood_avg: float,
    recs: list[Recommendation],
) -> tuple[WellnessPlan, float]:
    """Logged sleep and mood become the composer's inputs for the next cycle."""
    profile = bundle.profile
    sleep_hours = sleep_avg if logs.sleep else profile.sleep_hours
    stress = profile.stress_level
    if logs.mood and mood_avg <= LOW_MOOD_THRESHOLD and not is_stressed(stress):
        stress = StressLevel.HIGH

    steps_avg = _average([s.steps for s in logs.steps])
    low_steps = bool(logs.steps) and steps_avg < LOW_STEPS_THRESHOLD

    if is_stressed(stress):
        recs.append(Recommendation(
            kind=RecommendationKind.MINDFULNESS,
            message="Stress looks high; your plan now leans on meditation and box breathing.",
        ))
    if logs.sleep and (sleep_avg < LOW_SLEEP_HOURS or sleep_avg > HIGH_SLEEP_HOURS):
        recs.append(Recommendation(
            kind=RecommendationKind.RECOVERY,
            message=f"You averaged {sleep_avg:.1f} h of sleep; prioritize a consistent bedtime this week.",
        ))
    if low_steps:
        recs.append(Recommendation(
            kind=RecommendationKind.BASELINE_WALKING,
            message=f"Averaging {steps_avg:.0f} steps a day; add a daily walk.",
        ))
    wellness = compose_wellness(stress, sleep_hours, profile.weight_kg, add_walking=low_steps)
    return wellness, sleep_hours


def revise_plan(
    bundle: PlanBundle,
    logs: LogWindow,
    history: Sequence[AdherenceRecord] = (),
    week_end: Optional[date] = None,
) -> RevisionResult:
    """Score the past week and produce the next plan version.

    history is the user's prior AdherenceRecords, oldest first.
    """
    profile = bundle.profile
    nutrition = bundle.nutrition
    target = nutrition.energy.calorie_target
    week_end = week_end or date.today()
    week_start = week_end - timedelta(days=REVISION_WINDOW_DAYS)

    calories_avg = _average([m.calories for m in logs.meals])
    protein_avg = _average([m.protein for m in logs.meals])
    sleep_avg = _average([s.hours for s in logs.sleep])
    mood_avg = _average([m.mood for m in logs.mood])
    workouts_completed = len(logs.workouts)
    workouts_targeted = len(bundle.fitness.weekly_schedule)
    completion = workouts_completed / workouts_targeted if workouts_targeted else 1.0

    change = weight_change(logs)
    stalled = change is not None and change > STALL_WEIGHT_CHANGE_KG
    score = adherence_score(calories_avg, target, workouts_completed, workouts_targeted)
    recs: list[Recommendation] = []

    calorie_delta = 0
    under_eating = bool(logs.meals) and calories_avg < target * UNDER_EATING_RATIO
    prior_stalls = [r.stalled for r in history][-(STALL_CYCLES - 1):]
    stall_streak = stalled and len(prior_stalls) == STALL_CYCLES - 1 and all(prior_stalls)
    if under_eating:
        logger.info("Intake %.0f kcal is under %.0f%% of %d; holding calories", calories_avg,
                    UNDER_EATING_RATIO * 100, target)
        recs.append(Recommendation(
            kind=RecommendationKind.ADHERENCE_STRATEGY,
            message="You're eating well below target. Focus on hitting your current plan before any cuts.",
        ))
    elif profile.goal is Goal.LOSE_WEIGHT and stall_streak:
        floor = math.ceil(profile_calorie_floor(profile))
        new_target = max(target - STALL_CALORIE_REDUCTION, floor)
        calorie_delta = _clamp(new_target - target, MAX_CALORIE_DELTA)
        if calorie_delta:
            logger.info("Weight loss stalled %d cycles; calories %d -> %d", STALL_CYCLES, target,
                        target + calorie_delta)
            recs.append(Recommendation(
                kind=RecommendationKind.CALORIE_REDUCTION,
                message=f"Weight has held steady for {STALL_CYCLES} weeks; daily target lowered by "
                        f"{-calorie_delta} kcal.",
            ))

    new_nutrition, deltas = _revise_nutrition(nutrition, bundle, calorie_delta)

    on_target = (
        target > 0
        and bool(logs.meals)
        and abs(calories_avg - target) / target <= ON_TARGET_CALORIE_TOLERANCE
        and protein_avg >= nutrition.macros.protein_g * ON_TARGET_PROTEIN_RATIO
        and completion >= 1.0
    )
    new_fitness = _revise_fitness(bundle.fitness, completion, on_target, recs)
    new_wellness, sleep_hours = _revise_wellness(bundle, logs, sleep_avg, mood_avg, recs)

    products = product_recommendations(profile.model_copy(update={"sleep_hours": sleep_hours}))
    water_avg = _average([w.oz for w in logs.water])
    if logs.water and water_avg < nutrition.water_goal_oz * LOW_WATER_RATIO:
        products.append(SMART_BOTTLE)

    record = AdherenceRecord(
        week_start=week_start,
        week_end=week_end,
        adherence_score=score,
        calories_avg=round(calories_avg, 1),
        protein_avg=round(protein_avg, 1),
        workouts_completed=workouts_completed,
        sleep_avg=round(sleep_avg, 1),
        mood_avg=round(mood_avg, 1),
        weight_change_kg=change,
        stalled=stalled,
        proposed_deltas=deltas,
    )
    plan = PlanBundle(
        profile=profile,
        nutrition=new_nutrition,
        fitness=new_fitness,
        wellness=new_wellness,
        products=products,
    )
    logger.info("Revision scored %.1f with %d recommendations", score, len(recs))
    return RevisionResult(status=RevisionStatus.REVISED, plan=plan, adherence=record, recommendations=recs)


def maybe_revise(
    bundle: PlanBundle,
    logs: LogWindow,
    history: Sequence[AdherenceRecord],
    last_revision_at: Optional[datetime],
    now: datetime,
    window_days: int = REVISION_WINDOW_DAYS,
) -> RevisionResult:
    """Revise only when due; otherwise an explicit not_due result (not an error)."""
    if not is_revision_due(last_revision_at, now, window_days):
        return RevisionResult(status=RevisionStatus.NOT_DUE)
    return revise_plan(bundle, logs, history, week_end=now.date())
