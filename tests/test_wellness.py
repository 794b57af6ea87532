"""Wellness plan composer."""

import pytest

from wellplan.core.enums import StressLevel, TimeOfDay
from wellplan.services.wellness import (
    DAILY_WALK,
    build_wellness_plan,
    compose_wellness,
    is_stressed,
    wellness_water_goal_oz,
)


@pytest.mark.parametrize(
    "level, expected",
    [
        (StressLevel.LOW, False),
        (StressLevel.MODERATE, False),
        (StressLevel.HIGH, True),
        (StressLevel.VERY_HIGH, True),
    ],
)
def test_is_stressed(level, expected):
    assert is_stressed(level) is expected


class TestStressedUser:
    @pytest.fixture
    def plan(self):
        return compose_wellness(StressLevel.VERY_HIGH, 8, 70)

    def test_two_practices(self, plan):
        assert [(p.name, p.duration_min, p.time_of_day) for p in plan.daily_practices] == [
            ("Morning Meditation", 5, TimeOfDay.MORNING),
            ("Evening Wind-Down", 10, TimeOfDay.EVENING),
        ]

    def test_box_breathing(self, plan):
        assert plan.breathwork.technique == "box-breathing"
        assert plan.breathwork.duration_min == 10

    def test_stress_journaling_and_tags(self, plan):
        assert plan.journaling_prompts[0] == "What caused stress today?"
        assert plan.soundscape_tags[0] == "brownNoise"
        assert "anxiety" in plan.meditation_tags
        assert plan.bedtime_routine.soundscape == "brownNoise"

    def test_meditation_habit(self, plan):
        names = [h.name for h in plan.habit_suggestions]
        assert names == ["Daily Meditation", "Morning Stretch"]


class TestCalmUser:
    @pytest.fixture
    def plan(self):
        return compose_wellness(StressLevel.LOW, 8, 70)

    def test_single_quick_practice(self, plan):
        assert len(plan.daily_practices) == 1
        assert plan.daily_practices[0].time_of_day is TimeOfDay.AFTERNOON
        assert plan.breathwork.technique == "deep-breathing"

    def test_gratitude_journaling(self, plan):
        assert len(plan.journaling_prompts) == 3
        assert plan.journaling_prompts[0] == "What are you grateful for?"

    def test_light_bedtime_routine(self, plan):
        assert plan.bedtime_routine.steps[0] == "Wind down with light reading"
        assert plan.bedtime_routine.soundscape == "rain"
        assert plan.bedtime_routine.duration_min == 15

    def test_only_morning_stretch(self, plan):
        assert [h.name for h in plan.habit_suggestions] == ["Morning Stretch"]


def test_short_sleep_adds_schedule_habit_and_routine():
    plan = compose_wellness(StressLevel.MODERATE, 6, 70)
    assert plan.habit_suggestions[0].name == "Consistent Sleep Schedule"
    assert plan.bedtime_routine.steps[0] == "Dim lights 1 hour before bed"


def test_hydration_reminders_split_wellness_water_goal():
    plan = compose_wellness(StressLevel.LOW, 8, 70)
    water = wellness_water_goal_oz(70)
    assert [r.time for r in plan.hydration_reminders] == ["09:00", "12:00", "15:00", "18:00"]
    assert [r.amount_oz for r in plan.hydration_reminders] == [
        round(water * 0.2),
        round(water * 0.3),
        round(water * 0.3),
        round(water * 0.2),
    ]


def test_walking_habit_is_appended():
    plan = compose_wellness(StressLevel.LOW, 8, 70, add_walking=True)
    assert plan.habit_suggestions[-1] == DAILY_WALK


def test_build_from_profile(make_profile):
    plan = build_wellness_plan(make_profile(stress_level=StressLevel.HIGH, sleep_hours=5.0))
    names = [h.name for h in plan.habit_suggestions]
    assert names == ["Consistent Sleep Schedule", "Daily Meditation", "Morning Stretch"]
