"""Content-generation boundary: request shaping and client construction."""

from wellplan.core.config import Settings
from wellplan.services.content import ContentClient, build_content_request
from wellplan.services.plan_assembler import generate_plan


def test_request_carries_only_targets_and_tags(profile):
    bundle = generate_plan(profile)
    request = build_content_request(bundle)
    assert request.calorie_target == bundle.nutrition.energy.calorie_target
    assert request.protein_g == bundle.nutrition.macros.protein_g
    assert [m.slot for m in request.meals] == ["breakfast", "lunch", "dinner", "snack"]
    assert request.diet_tags == bundle.nutrition.recipe_tags
    assert request.program_type == bundle.fitness.program_type
    assert "weight_kg" not in request.model_dump_json()


def test_no_client_without_api_key():
    assert ContentClient.from_settings(Settings(openai_api_key=None)) is None


def test_client_from_settings():
    client = ContentClient.from_settings(Settings(openai_api_key="sk-test", content_model="gpt-4o"))
    assert client is not None
    assert client.model == "gpt-4o"
