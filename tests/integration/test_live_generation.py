"""Integration tests against the live Gemini API.

Requires GEMINI_API_KEY. These make real (billable) requests; keep them few.
"""

import os

import pytest
from fastapi.testclient import TestClient

from pantry_chef.api.routes import create_app
from pantry_chef.models.outcomes import BlockedOutcome, EmptyResponseOutcome, SuccessOutcome
from pantry_chef.orchestrator.generator import RecipeGenerator
from pantry_chef.orchestrator.orchestrator import GenerationOrchestrator, OrchestratorState
from pantry_chef.pantry.catalog import DEFAULT_PANTRY, PantryCatalog
from pantry_chef.providers.gemini import GenerationClient


pytestmark = pytest.mark.integration


@pytest.fixture
def live_generator():
    return RecipeGenerator(client=GenerationClient(api_key=os.environ["GEMINI_API_KEY"]))


class TestLiveGeneration:
    """End-to-end generation with the real provider."""

    @pytest.mark.asyncio
    async def test_generates_structured_recipe(self, live_generator):
        outcome = await live_generator.run(["Chicken", "Rice"])

        # Safety or length stops are legitimate provider outcomes, but must be classified
        assert isinstance(outcome, (SuccessOutcome, BlockedOutcome, EmptyResponseOutcome))
        if isinstance(outcome, SuccessOutcome):
            assert "Ingredients" in outcome.text
            assert "Instructions" in outcome.text

    @pytest.mark.asyncio
    async def test_orchestrator_records_history(self, live_generator):
        orchestrator = GenerationOrchestrator(generator=live_generator, catalog=PantryCatalog(DEFAULT_PANTRY))
        orchestrator.add_to_basket("9")  # Eggs
        orchestrator.add_to_basket("11")  # Cheese

        recipe = await orchestrator.generate()

        assert orchestrator.state is OrchestratorState.SUCCEEDED
        assert [item.name for item in recipe.ingredients_used] == ["Eggs", "Cheese"]
        assert orchestrator.basket.count() == 0
        assert orchestrator.ledger.latest() == recipe

    def test_http_endpoint(self, live_generator):
        api = TestClient(create_app(generator=live_generator))

        response = api.post("/api/generate-recipe", json={"ingredients": [{"name": "Pasta"}, {"name": "Tomatoes"}]})

        assert response.status_code == 200
        assert response.json()["recipeText"]
