"""Wellness plan composer: stress, sleep and body weight -> daily practices and routines."""

from __future__ import annotations

from wellplan.core.constants import WATER_OZ_PER_KG, WELLNESS_WATER_FACTOR
from wellplan.core.enums import StressLevel, TimeOfDay
from wellplan.schemas.plan import (
    BedtimeRoutine,
    Breathwork,
    DailyPractice,
    HabitSuggestion,
    HydrationReminder,
    WellnessPlan,
)
from wellplan.schemas.profile import Profile

SHORT_SLEEP_HOURS = 7

STRESS_PROMPTS = ("What caused stress today?", "How did you handle it?", "What can you do differently?")
GRATITUDE_PROMPTS = ("What are you grateful for?", "What went well today?", "What are you looking forward to?")

# (time, share of the wellness water goal, message)
HYDRATION_SLOTS = (
    ("09:00", 0.2, "Start your day hydrated"),
    ("12:00", 0.3, "Midday hydration boost"),
    ("15:00", 0.3, "Afternoon refresh"),
    ("18:00", 0.2, "Evening hydration"),
)

SHORT_SLEEP_ROUTINE = (
    "Dim lights 1 hour before bed",
    "Avoid screens 30 min before sleep",
    "Practice deep breathing",
    "Listen to calming soundscape",
)
LIGHT_ROUTINE = (
    "Wind down with light reading",
    "Practice gratitude",
    "Set tomorrow's intentions",
)
BEDTIME_ROUTINE_MINUTES = 15

STRESSED_SOUNDSCAPES = ("brownNoise", "rain", "ocean")
CALM_SOUNDSCAPES = ("forest", "river", "whiteNoise")
STRESSED_MEDITATIONS = ("anxiety", "sleep", "stress-relief")
CALM_MEDITATIONS = ("focus", "morning", "gratitude")

DAILY_WALK = HabitSuggestion(
    name="Daily Walk", category="Fitness", reason="Build a baseline of daily steps", difficulty="easy"
)


def is_stressed(stress_level: StressLevel) -> bool:
    return stress_level in (StressLevel.HIGH, StressLevel.VERY_HIGH)


def wellness_water_goal_oz(weight_kg: float) -> int:
    return round(weight_kg * WATER_OZ_PER_KG * WELLNESS_WATER_FACTOR)


def compose_wellness(
    stress_level: StressLevel,
    sleep_hours: float,
    weight_kg: float,
    add_walking: bool = False,
) -> WellnessPlan:
    stressed = is_stressed(stress_level)
    short_sleep = sleep_hours < SHORT_SLEEP_HOURS

    if stressed:
        practices = [
            DailyPractice(name="Morning Meditation", duration_min=5, time_of_day=TimeOfDay.MORNING,
                          description="Start your day with calm"),
            DailyPractice(name="Evening Wind-Down", duration_min=10, time_of_day=TimeOfDay.EVENING,
                          description="Release daily tension"),
        ]
        breathwork = Breathwork(technique="box-breathing", frequency="daily", duration_min=10)
    else:
        practices = [
            DailyPractice(name="Quick Mindfulness", duration_min=3, time_of_day=TimeOfDay.AFTERNOON,
                          description="Midday reset"),
        ]
        breathwork = Breathwork(technique="deep-breathing", frequency="daily", duration_min=5)

    water = wellness_water_goal_oz(weight_kg)
    reminders = [
        HydrationReminder(time=t, amount_oz=round(water * share), message=msg)
        for t, share, msg in HYDRATION_SLOTS
    ]

    habits: list[HabitSuggestion] = []
    if short_sleep:
        habits.append(HabitSuggestion(name="Consistent Sleep Schedule", category="Health",
                                      reason="Improve sleep quality", difficulty="medium"))
    if stressed:
        habits.append(HabitSuggestion(name="Daily Meditation", category="Mindfulness",
                                      reason="Reduce stress levels", difficulty="easy"))
    habits.append(HabitSuggestion(name="Morning Stretch", category="Fitness",
                                  reason="Improve mobility", difficulty="easy"))
    if add_walking:
        habits.append(DAILY_WALK)

    bedtime = BedtimeRoutine(
        steps=list(SHORT_SLEEP_ROUTINE if short_sleep else LIGHT_ROUTINE),
        soundscape="brownNoise" if stressed else "rain",
        duration_min=BEDTIME_ROUTINE_MINUTES,
    )

    return WellnessPlan(
        daily_practices=practices,
        breathwork=breathwork,
        journaling_prompts=list(STRESS_PROMPTS if stressed else GRATITUDE_PROMPTS),
        hydration_reminders=reminders,
        habit_suggestions=habits,
        bedtime_routine=bedtime,
        soundscape_tags=list(STRESSED_SOUNDSCAPES if stressed else CALM_SOUNDSCAPES),
        meditation_tags=list(STRESSED_MEDITATIONS if stressed else CALM_MEDITATIONS),
    )


def build_wellness_plan(profile: Profile) -> WellnessPlan:
    return compose_wellness(profile.stress_level, profile.sleep_hours, profile.weight_kg)
