"""Program decision table, volume and progression."""

import pytest

from wellplan.core.enums import Experience, Goal, ProgressionType, TimeAvailability, WorkoutPreference
from wellplan.core.program_catalog import (
    FULL_BODY_3_DAY,
    HOME_BODYWEIGHT,
    PUSH_PULL_LEGS_5_DAY,
    STRENGTH_POWER,
    UPPER_LOWER_4_DAY,
    WEIGHT_LOSS_CARDIO,
)
from wellplan.schemas.profile import OnboardingAnswers
from wellplan.services.profile_normalizer import normalize_profile
from wellplan.services.program_selector import (
    build_fitness_plan,
    default_volume,
    progression_for,
    recommend_exercises,
    select_program,
    weekly_schedule,
)


def test_build_muscle_with_four_to_six_hours_from_labels(onboarding_payload):
    onboarding_payload.update(fitness_goal="Build Muscle", time_available="4-6 hours")
    plan = build_fitness_plan(normalize_profile(OnboardingAnswers.model_validate(onboarding_payload)))
    assert plan.program_type == PUSH_PULL_LEGS_5_DAY
    assert (plan.volume.sets, plan.volume.reps, plan.volume.rest_seconds) == (4, 8, 90)
    assert len(plan.weekly_schedule) == 5


@pytest.mark.parametrize(
    "goal, time, preference, expected",
    [
        (Goal.BUILD_MUSCLE, TimeAvailability.UNDER_2H, "", FULL_BODY_3_DAY),
        (Goal.BUILD_MUSCLE, TimeAvailability.FROM_2_TO_4H, "", FULL_BODY_3_DAY),
        (Goal.BUILD_MUSCLE, TimeAvailability.OVER_5H, "", PUSH_PULL_LEGS_5_DAY),
        (Goal.BUILD_MUSCLE, TimeAvailability.FROM_6_TO_8H, "", UPPER_LOWER_4_DAY),
        (Goal.BUILD_MUSCLE, TimeAvailability.OVER_8H, "home-bodyweight", UPPER_LOWER_4_DAY),
        (Goal.LOSE_WEIGHT, TimeAvailability.FROM_4_TO_6H, "home-bodyweight", WEIGHT_LOSS_CARDIO),
        (Goal.MAINTAIN, TimeAvailability.FROM_2_TO_4H, "home-bodyweight", HOME_BODYWEIGHT),
        (Goal.GENERAL_HEALTH, TimeAvailability.FROM_2_TO_4H, "cardio", FULL_BODY_3_DAY),
        (Goal.IMPROVE_ENDURANCE, TimeAvailability.OVER_8H, "mixed", FULL_BODY_3_DAY),
    ],
)
def test_decision_table(goal, time, preference, expected):
    assert select_program(goal.value, time, preference) == expected


def test_free_text_strength_goal():
    assert select_program("Strength & Power", "2-4h", "") == STRENGTH_POWER
    volume = default_volume(STRENGTH_POWER)
    assert (volume.sets, volume.reps, volume.rest_seconds) == (5, 5, 180)


def test_home_preference_wins_over_strength_goal():
    assert select_program("strength", "2-4h", "Home / Bodyweight") == HOME_BODYWEIGHT


def test_default_volume_for_unlisted_program():
    volume = default_volume(FULL_BODY_3_DAY)
    assert (volume.sets, volume.reps, volume.rest_seconds) == (3, 10, 60)


def test_weight_loss_schedule():
    days = weekly_schedule(WEIGHT_LOSS_CARDIO)
    assert [d.day for d in days] == ["Monday", "Wednesday", "Friday", "Saturday"]
    assert days[-1].duration_minutes == 30


@pytest.mark.parametrize(
    "experience, ptype, pct",
    [
        (Experience.BEGINNER, ProgressionType.LINEAR, 2.5),
        (Experience.INTERMEDIATE, ProgressionType.PERIODIZED, 5.0),
        (Experience.ADVANCED, ProgressionType.PERIODIZED, 2.5),
    ],
)
def test_progression(experience, ptype, pct):
    assert progression_for(experience) == (ptype, pct)


class TestExerciseRecommendations:
    def test_muscle_goal_gets_barbell_lifts(self):
        recs = recommend_exercises("build-muscle", "mixed", Experience.INTERMEDIATE)
        assert [r.name for r in recs] == ["Squats", "Bench Press", "Deadlifts"]
        assert all(r.difficulty == "intermediate" for r in recs)

    def test_home_preference_adds_bodyweight(self):
        recs = recommend_exercises("build-muscle", "home-bodyweight", Experience.BEGINNER)
        assert len(recs) == 6
        assert recs[3].name == "Push-ups"
        assert recs[3].equipment == []

    def test_nothing_for_other_goals(self):
        assert recommend_exercises("maintain", "cardio", Experience.BEGINNER) == []


def test_fitness_plan_from_profile(make_profile):
    plan = build_fitness_plan(
        make_profile(goal=Goal.MAINTAIN, workout_preference=WorkoutPreference.HOME_BODYWEIGHT)
    )
    assert plan.program_type == HOME_BODYWEIGHT
    assert plan.progression_type is ProgressionType.LINEAR
    assert plan.weekly_increase_pct == 2.5
    assert len(plan.exercises) == 3
