"""Static workout program catalogue.

Each template is a fixed weekly schedule: (day, focus, exercises, duration in minutes).
Nothing here is generated; the program selector only picks among these.
"""

from __future__ import annotations

FULL_BODY_3_DAY = "3-Day Full Body"
UPPER_LOWER_4_DAY = "4-Day Upper/Lower"
PUSH_PULL_LEGS_5_DAY = "5-Day Push/Pull/Legs"
WEIGHT_LOSS_CARDIO = "Weight Loss + Cardio"
HOME_BODYWEIGHT = "Home Bodyweight"
STRENGTH_POWER = "Strength/Power"

ScheduleRow = tuple[str, str, tuple[str, ...], int]

PROGRAM_SCHEDULES: dict[str, tuple[ScheduleRow, ...]] = {
    FULL_BODY_3_DAY: (
        ("Monday", "Full Body", ("Squats", "Bench Press", "Rows", "Shoulder Press"), 60),
        ("Wednesday", "Full Body", ("Deadlifts", "Pull-ups", "Dips", "Lunges"), 60),
        ("Friday", "Full Body", ("Squats", "Overhead Press", "Rows", "Leg Press"), 60),
    ),
    UPPER_LOWER_4_DAY: (
        ("Monday", "Upper Body", ("Bench Press", "Rows", "Shoulder Press", "Bicep Curls"), 60),
        ("Tuesday", "Lower Body", ("Squats", "Deadlifts", "Leg Press", "Calf Raises"), 60),
        ("Thursday", "Upper Body", ("Pull-ups", "Overhead Press", "Tricep Extensions", "Lateral Raises"), 60),
        ("Friday", "Lower Body", ("Romanian Deadlifts", "Lunges", "Leg Curls", "Hip Thrusts"), 60),
    ),
    PUSH_PULL_LEGS_5_DAY: (
        ("Monday", "Push", ("Bench Press", "Overhead Press", "Tricep Dips", "Lateral Raises"), 75),
        ("Tuesday", "Pull", ("Deadlifts", "Pull-ups", "Rows", "Bicep Curls"), 75),
        ("Wednesday", "Legs", ("Squats", "Leg Press", "Leg Curls", "Calf Raises"), 75),
        ("Friday", "Push", ("Incline Bench", "Shoulder Press", "Tricep Extensions", "Chest Flyes"), 75),
        ("Saturday", "Pull", ("Barbell Rows", "Lat Pulldowns", "Face Pulls", "Hammer Curls"), 75),
    ),
    WEIGHT_LOSS_CARDIO: (
        ("Monday", "Strength + Cardio", ("Circuit Training", "HIIT"), 45),
        ("Wednesday", "Full Body", ("Compound Movements", "Cardio Finisher"), 45),
        ("Friday", "Strength + Cardio", ("Circuit Training", "HIIT"), 45),
        ("Saturday", "Cardio", ("Running", "Cycling", "Swimming"), 30),
    ),
    HOME_BODYWEIGHT: (
        ("Monday", "Upper Body", ("Push-ups", "Pull-ups", "Dips", "Planks"), 30),
        ("Wednesday", "Lower Body", ("Squats", "Lunges", "Jump Squats", "Calf Raises"), 30),
        ("Friday", "Full Body", ("Burpees", "Mountain Climbers", "Planks", "Jumping Jacks"), 30),
    ),
    STRENGTH_POWER: (
        ("Monday", "Squat Day", ("Back Squats", "Front Squats", "Leg Press"), 90),
        ("Wednesday", "Bench Day", ("Bench Press", "Close Grip Bench", "Tricep Work"), 90),
        ("Friday", "Deadlift Day", ("Deadlifts", "Romanian Deadlifts", "Rows"), 90),
    ),
}

# (sets, reps, rest seconds)
DEFAULT_VOLUME = (3, 10, 60)
PROGRAM_VOLUMES: dict[str, tuple[int, int, int]] = {
    PUSH_PULL_LEGS_5_DAY: (4, 8, 90),
    WEIGHT_LOSS_CARDIO: (3, 12, 45),
    STRENGTH_POWER: (5, 5, 180),
}

# Next simpler template when workouts keep getting skipped; absent = already simplest.
SIMPLER_PROGRAM: dict[str, str] = {
    PUSH_PULL_LEGS_5_DAY: UPPER_LOWER_4_DAY,
    UPPER_LOWER_4_DAY: FULL_BODY_3_DAY,
    STRENGTH_POWER: FULL_BODY_3_DAY,
    WEIGHT_LOSS_CARDIO: HOME_BODYWEIGHT,
}

# Standalone exercise suggestions: (name, category, equipment, reason)
MUSCLE_EXERCISES: tuple[tuple[str, str, tuple[str, ...], str], ...] = (
    ("Squats", "Legs", ("Barbell", "Rack"), "Builds lower body strength"),
    ("Bench Press", "Chest", ("Barbell", "Bench"), "Primary chest builder"),
    ("Deadlifts", "Back", ("Barbell",), "Full body strength"),
)

# Bodyweight suggestions carry a fixed difficulty: (name, category, equipment, difficulty, reason)
BODYWEIGHT_EXERCISES: tuple[tuple[str, str, tuple[str, ...], str, str], ...] = (
    ("Push-ups", "Chest", (), "beginner", "No equipment needed"),
    ("Pull-ups", "Back", ("Pull-up Bar",), "intermediate", "Bodyweight back exercise"),
    ("Squats", "Legs", (), "beginner", "Bodyweight leg builder"),
)
