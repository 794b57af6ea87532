"""Onboarding answers -> canonical Profile."""

import pytest

from wellplan.core.enums import (
    ActivityLevel,
    DietPreference,
    Goal,
    MealFrequency,
    Sex,
    StressLevel,
    TimeAvailability,
    WorkoutPreference,
)
from wellplan.core.errors import ConfigurationError
from wellplan.schemas.profile import OnboardingAnswers
from wellplan.services.profile_normalizer import normalize_profile


def _normalize(payload: dict):
    return normalize_profile(OnboardingAnswers.model_validate(payload))


@pytest.fixture
def minimal():
    return {"sex": "female", "age": 28, "weight": 60, "height": 165}


class TestUnits:
    def test_pounds_and_decimal_feet(self, onboarding_payload):
        profile = _normalize(onboarding_payload)
        assert profile.weight_kg == pytest.approx(79.83)
        # 5.9 ft -> 5 ft 10.8 in
        assert profile.height_cm == pytest.approx(179.8)

    def test_inches(self, minimal):
        minimal.update(height=70, height_unit="in")
        assert _normalize(minimal).height_cm == pytest.approx(177.8)

    def test_half_foot_is_six_inches(self, minimal):
        minimal.update(height=5.5, height_unit="ft")
        assert _normalize(minimal).height_cm == pytest.approx(167.6)

    def test_target_weight_uses_weight_unit(self, minimal):
        minimal.update(weight=150, target_weight=140, weight_unit="lbs")
        assert _normalize(minimal).target_weight_kg == pytest.approx(63.5)

    def test_unknown_weight_unit(self, minimal):
        minimal.update(weight_unit="stone")
        with pytest.raises(ConfigurationError) as exc:
            _normalize(minimal)
        assert exc.value.field == "weight_unit"


class TestLabels:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Sedentary (little or no exercise)", ActivityLevel.SEDENTARY),
            ("Lightly Active (light exercise 1-3 days/week)", ActivityLevel.LIGHTLY_ACTIVE),
            ("light", ActivityLevel.LIGHTLY_ACTIVE),
            ("moderate", ActivityLevel.MODERATELY_ACTIVE),
            ("active", ActivityLevel.VERY_ACTIVE),
            ("Very Active", ActivityLevel.VERY_ACTIVE),
            ("very", ActivityLevel.EXTREMELY_ACTIVE),
            ("Extremely Active (athlete)", ActivityLevel.EXTREMELY_ACTIVE),
        ],
    )
    def test_activity_levels(self, minimal, raw, expected):
        minimal["activity_level"] = raw
        assert _normalize(minimal).activity_level is expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Lose Weight", Goal.LOSE_WEIGHT),
            ("gain", Goal.BUILD_MUSCLE),
            ("Build Muscle", Goal.BUILD_MUSCLE),
            ("Improve Endurance", Goal.IMPROVE_ENDURANCE),
            ("Maintain Weight", Goal.MAINTAIN),
            ("General Health", Goal.GENERAL_HEALTH),
        ],
    )
    def test_goals(self, minimal, raw, expected):
        minimal["goal"] = raw
        assert _normalize(minimal).goal is expected

    def test_aliases_for_sex_and_diet(self, minimal):
        minimal.pop("sex")
        minimal.update(gender="M", diet_preference="Keto / Low Carb")
        profile = _normalize(minimal)
        assert profile.sex is Sex.MALE
        assert profile.diet_preference is DietPreference.LOW_CARB

    def test_time_workout_and_meals(self, minimal):
        minimal.update(
            time_available="Less than 2 hours",
            workout_preference="Home / Bodyweight",
            meal_frequency="4-5 smaller meals",
        )
        profile = _normalize(minimal)
        assert profile.time_available is TimeAvailability.UNDER_2H
        assert profile.workout_preference is WorkoutPreference.HOME_BODYWEIGHT
        assert profile.meal_frequency is MealFrequency.FOUR_TO_FIVE_MEALS

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("8", StressLevel.HIGH),
            ("10", StressLevel.VERY_HIGH),
            ("2", StressLevel.LOW),
            ("Very High", StressLevel.VERY_HIGH),
            ("low", StressLevel.LOW),
        ],
    )
    def test_stress(self, minimal, raw, expected):
        minimal["stress_level"] = raw
        assert _normalize(minimal).stress_level is expected


class TestDefaults:
    def test_optional_fields(self, minimal):
        profile = _normalize(minimal)
        assert profile.activity_level is ActivityLevel.SEDENTARY
        assert profile.goal is Goal.GENERAL_HEALTH
        assert profile.diet_preference is DietPreference.BALANCED
        assert profile.meal_frequency is MealFrequency.THREE_MEALS
        assert profile.stress_level is StressLevel.MODERATE
        assert profile.sleep_hours == 7.0
        assert profile.target_weight_kg == profile.weight_kg
        assert profile.equipment == ()

    @pytest.mark.parametrize("hours, expected", [(2, 4.0), (15, 12.0), (6.5, 6.5)])
    def test_sleep_clamped(self, minimal, hours, expected):
        minimal["sleep_hours"] = hours
        assert _normalize(minimal).sleep_hours == expected

    def test_lists_are_cleaned(self, minimal):
        minimal["dietary_restrictions"] = [" Gluten-Free ", "", "Dairy-Free"]
        assert _normalize(minimal).dietary_restrictions == ("Gluten-Free", "Dairy-Free")


class TestErrors:
    @pytest.mark.parametrize("field", ["sex", "age", "weight", "height"])
    def test_missing_required(self, minimal, field):
        minimal.pop(field)
        with pytest.raises(ConfigurationError) as exc:
            _normalize(minimal)
        assert exc.value.field == field

    @pytest.mark.parametrize("age", [12, 101])
    def test_age_out_of_range(self, minimal, age):
        minimal["age"] = age
        with pytest.raises(ConfigurationError) as exc:
            _normalize(minimal)
        assert exc.value.field == "age"

    def test_non_positive_weight(self, minimal):
        minimal["weight"] = 0
        with pytest.raises(ConfigurationError) as exc:
            _normalize(minimal)
        assert exc.value.field == "weight"

    @pytest.mark.parametrize(
        "field, raw",
        [
            ("activity_level", "couch potato"),
            ("fitness_goal", "get famous"),
            ("sex", "robot"),
            ("nutrition_preference", "carnivore"),
        ],
    )
    def test_unrecognized_value(self, minimal, field, raw):
        minimal[field] = raw
        with pytest.raises(ConfigurationError) as exc:
            _normalize(minimal)
        assert exc.value.field == field

    def test_stress_score_out_of_range(self, minimal):
        minimal["stress_level"] = "11"
        with pytest.raises(ConfigurationError) as exc:
            _normalize(minimal)
        assert exc.value.field == "stress_level"
