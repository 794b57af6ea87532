"""Stateless calculators (no DB): energy/macro targets and program lookup."""

from fastapi import APIRouter, Query
from pydantic import BaseModel

from wellplan.core.enums import MealFrequencyMode
from wellplan.schemas.plan import EnergyTargets, MacroTargets, Volume
from wellplan.schemas.profile import OnboardingAnswers
from wellplan.services.energy import compute_energy
from wellplan.services.macros import allocate_macros
from wellplan.services.meal_templates import select_meal_mode, water_goal_oz
from wellplan.services.profile_normalizer import normalize_profile
from wellplan.services.program_selector import default_volume, select_program

router = APIRouter()


class TargetsResponse(BaseModel):
    energy: EnergyTargets
    macros: MacroTargets
    water_goal_oz: int
    meal_frequency_mode: MealFrequencyMode


class ProgramResponse(BaseModel):
    program_type: str
    volume: Volume


@router.post("/targets", response_model=TargetsResponse)
async def targets(answers: OnboardingAnswers):
    """BMR, TDEE, calorie target, macros and water goal for a set of onboarding answers."""
    profile = normalize_profile(answers)
    energy = compute_energy(profile)
    return TargetsResponse(
        energy=energy,
        macros=allocate_macros(energy.calorie_target, profile.diet_preference, profile.goal),
        water_goal_oz=water_goal_oz(profile.weight_kg, profile.activity_level),
        meal_frequency_mode=select_meal_mode(profile.meal_frequency, profile.diet_preference),
    )


@router.get("/program", response_model=ProgramResponse)
async def program(
    goal: str = Query(..., description="Goal text, e.g. 'Build Muscle' or 'strength'"),
    time_available: str = Query("2-4h", description="<2h, 2-4h, 4-6h, 5+h, 6-8h or 8+h"),
    preference: str = Query("", description="Workout style, e.g. 'home bodyweight'"),
):
    """Program template for free-form goal text (the decision table on its own)."""
    program_type = select_program(goal, time_available, preference)
    return ProgramResponse(program_type=program_type, volume=default_volume(program_type))
