"""Shared fixtures: canonical profiles and log windows."""

import pytest

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
from wellplan.schemas.profile import Profile


@pytest.fixture
def make_profile():
    """Factory for a Profile; keyword overrides replace the defaults."""

    def _make(**overrides) -> Profile:
        data = dict(
            sex=Sex.MALE,
            age=30,
            weight_kg=80.0,
            height_cm=180.0,
            target_weight_kg=75.0,
            activity_level=ActivityLevel.MODERATELY_ACTIVE,
            goal=Goal.LOSE_WEIGHT,
            experience=Experience.BEGINNER,
            time_available=TimeAvailability.FROM_2_TO_4H,
            workout_preference=WorkoutPreference.MIXED,
            diet_preference=DietPreference.BALANCED,
            meal_frequency=MealFrequency.THREE_MEALS,
            sleep_hours=7.0,
            stress_level=StressLevel.MODERATE,
        )
        data.update(overrides)
        return Profile(**data)

    return _make


@pytest.fixture
def profile(make_profile):
    return make_profile()


@pytest.fixture
def onboarding_payload():
    """Answers as the mobile onboarding flow posts them: labels and imperial units."""
    return {
        "gender": "Male",
        "age": 30,
        "weight": 176,
        "weight_unit": "lbs",
        "height": 5.9,
        "height_unit": "ft",
        "activity_level": "Moderately Active (exercise 3-5 days/week)",
        "fitness_goal": "Lose Weight",
        "experience": "Beginner",
        "time_available": "2-4 hours",
        "workout_preference": "Mixed",
        "nutrition_preference": "Balanced",
        "meal_frequency": "3 meals",
        "sleep_hours": 7,
        "stress_level": "Moderate",
    }
