"""Shared fixtures for unit tests.

The Gemini SDK is replaced by a MagicMock whose `models.generate_content`
returns objects shaped like GenerateContentResponse (see fakes.py), so the
real parsing path in GenerationClient runs without network access.
"""

from unittest.mock import MagicMock

import pytest

from fakes import make_sdk_response
from pantry_chef.models.models import Ingredient
from pantry_chef.orchestrator.generator import RecipeGenerator
from pantry_chef.orchestrator.orchestrator import GenerationOrchestrator
from pantry_chef.pantry.catalog import DEFAULT_PANTRY, PantryCatalog
from pantry_chef.providers.gemini import GenerationClient


@pytest.fixture
def sdk():
    """Fake genai.Client returning a successful recipe by default."""
    client = MagicMock()
    client.models.generate_content.return_value = make_sdk_response(
        text="**Chicken & Rice**\n\n**Ingredients:**\n* Chicken\n* Rice",
        finish_reason="STOP",
    )
    return client


@pytest.fixture
def generation_client(sdk):
    return GenerationClient(api_key="test-key", model="gemini-test", client=sdk)


@pytest.fixture
def generator(generation_client):
    return RecipeGenerator(client=generation_client)


@pytest.fixture
def catalog():
    return PantryCatalog(DEFAULT_PANTRY)


@pytest.fixture
def orchestrator(generator, catalog):
    return GenerationOrchestrator(generator=generator, catalog=catalog)


@pytest.fixture
def chicken():
    return Ingredient(id="1", name="Chicken")


@pytest.fixture
def rice():
    return Ingredient(id="2", name="Rice")
