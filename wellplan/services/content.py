"""Content-generation boundary (recipes / workout instructions via an LLM).

The deterministic engine never calls this. Routes hand it only target numbers
and tags through a ContentRequest; if it is unavailable or fails, the static
templates and tags already in the plan are what the user gets.
"""

from __future__ import annotations

import json
import logging

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel, Field

from wellplan.core.config import Settings
from wellplan.core.errors import ContentGenerationError
from wellplan.schemas.plan import PlanBundle

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a nutrition and fitness coach. Write short, practical meal ideas and workout "
    "notes that fit the numeric targets you are given exactly. Return JSON with keys "
    '"meals" (list of {"slot", "title", "description"}) and "workout_notes" (list of strings).'
)


class MealSlotTarget(BaseModel):
    slot: str
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    tags: list[str] = Field(default_factory=list)


class ContentRequest(BaseModel):
    """Everything the content service is allowed to see: numbers and tags."""

    calorie_target: int
    protein_g: int
    carbs_g: int
    fat_g: int
    diet_tags: list[str]
    meals: list[MealSlotTarget]
    program_type: str
    workout_focus: list[str]


class ContentResponse(BaseModel):
    meals: list[dict] = Field(default_factory=list)
    workout_notes: list[str] = Field(default_factory=list)


def build_content_request(bundle: PlanBundle) -> ContentRequest:
    nutrition = bundle.nutrition
    return ContentRequest(
        calorie_target=nutrition.energy.calorie_target,
        protein_g=nutrition.macros.protein_g,
        carbs_g=nutrition.macros.carbs_g,
        fat_g=nutrition.macros.fat_g,
        diet_tags=list(nutrition.recipe_tags),
        meals=[
            MealSlotTarget(
                slot=m.slot.value,
                calories=m.calories,
                protein_g=m.protein_g,
                carbs_g=m.carbs_g,
                fat_g=m.fat_g,
                tags=m.suggestion_tags,
            )
            for m in nutrition.meal_templates
        ],
        program_type=bundle.fitness.program_type,
        workout_focus=[d.focus for d in bundle.fitness.weekly_schedule],
    )


class ContentClient:
    """Thin async wrapper over the OpenAI chat API. Construct once and inject."""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", timeout: float = 30.0):
        self.model = model
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentClient | None":
        if not settings.openai_api_key:
            return None
        return cls(settings.openai_api_key, settings.content_model, settings.content_timeout_seconds)

    async def generate(self, request: ContentRequest) -> ContentResponse:
        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": request.model_dump_json()},
                ],
                response_format={"type": "json_object"},
                temperature=0.7,
            )
            raw = completion.choices[0].message.content or "{}"
            return ContentResponse.model_validate(json.loads(raw))
        except OpenAIError as e:
            raise ContentGenerationError(f"content service failed: {e}") from e
        except (ValueError, IndexError) as e:
            raise ContentGenerationError("content service returned an unusable response") from e

    async def close(self) -> None:
        await self._client.close()
