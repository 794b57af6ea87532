"""Engine constants and lookup tables."""

from wellplan.core.enums import ActivityLevel, DietPreference

# Energy density (kcal per gram)
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9

# TDEE multipliers by activity tier
ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

# Goal adjustment
DEFICIT_DEFAULT = 0.20
DEFICIT_HEAVY = 0.25
HEAVY_WEIGHT_KG = 90.0
SURPLUS_BUILD_MUSCLE = 1.15
SURPLUS_ENDURANCE = 1.05
CALORIE_FLOOR_FACTOR = 1.1  # x sedentary-equivalent baseline (tdee / multiplier)

# Macro ratios: (protein, fat, carb), each row sums to 1.0
MACRO_RATIOS: dict[DietPreference, tuple[float, float, float]] = {
    DietPreference.BALANCED: (0.25, 0.25, 0.50),
    DietPreference.HIGH_PROTEIN: (0.35, 0.25, 0.40),
    DietPreference.LOW_CARB: (0.30, 0.45, 0.25),
    DietPreference.PLANT_BASED: (0.20, 0.25, 0.55),
    DietPreference.MEDITERRANEAN: (0.20, 0.35, 0.45),
    DietPreference.FLEXIBLE: (0.25, 0.25, 0.50),
}
DEFAULT_MACRO_RATIO = MACRO_RATIOS[DietPreference.BALANCED]
BUILD_MUSCLE_MIN_PROTEIN_RATIO = 0.30

# Water goal (oz): kg x 0.67 x ml->oz factor
WATER_OZ_PER_KG = 0.67 * 33.814
WATER_GOAL_MIN_OZ = 64
WATER_GOAL_MAX_OZ = 128
WELLNESS_WATER_FACTOR = 1.1

# Unit conversions
LB_TO_KG = 0.453592
FT_TO_CM = 30.48
IN_TO_CM = 2.54

# Profile ranges
AGE_MIN = 13
AGE_MAX = 100
SLEEP_HOURS_MIN = 4.0
SLEEP_HOURS_MAX = 12.0
DEFAULT_SLEEP_HOURS = 7.0

# Revision engine
REVISION_WINDOW_DAYS = 7
MAX_CALORIE_DELTA = 150  # kcal; no single revision swings further than this
STALL_CALORIE_REDUCTION = 150
STALL_WEIGHT_CHANGE_KG = -0.1  # weekly change above this counts as stalled
STALL_CYCLES = 2
UNDER_EATING_RATIO = 0.75
WORKOUT_SKIP_RATIO = 0.75  # completion below this means workouts are being skipped
WORKOUT_DOWNGRADE_RATIO = 0.5
MIN_SETS = 2
ON_TARGET_CALORIE_TOLERANCE = 0.10
ON_TARGET_PROTEIN_RATIO = 0.90
PROGRESSION_STEP_PCT = 2.5
MAX_WEEKLY_INCREASE_PCT = 7.5
LOW_MOOD_THRESHOLD = 2.0  # 1-5 scale
LOW_SLEEP_HOURS = 6.0
HIGH_SLEEP_HOURS = 10.0
LOW_STEPS_THRESHOLD = 5000
LOW_WATER_RATIO = 0.6

# Adherence scoring
CALORIE_PENALTY_WEIGHT = 30
WORKOUT_PENALTY_WEIGHT = 20
