"""Data models and schemas for Pantry Chef.

Defines Pydantic models for domain objects (ingredients, recipes) and for
HTTP request/response validation. JSON field names use camelCase aliases
(`recipeText`, `ingredientsUsed`, `generatedAt`) to match the web client.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Ingredient(BaseModel):
    """A pantry item. Identity is by `id`; `name` is used for prompts and display."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: Annotated[str, Field(min_length=1, description="Opaque ingredient identifier")]
    name: Annotated[str, Field(min_length=1, description="Display name")]


class Recipe(BaseModel):
    """History record for one successful generation.

    `ingredients_used` is a snapshot of the basket at generation time and is
    independent of later basket changes.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: Annotated[str, Field(description="Opaque recipe identifier")]
    ingredients_used: Annotated[List[Ingredient], Field(description="Ingredients that produced this recipe")]
    recipe_text: Annotated[str, Field(description="Markdown recipe text returned by the model")]
    generated_at: Annotated[datetime, Field(description="UTC timestamp of generation")]


class IngredientInput(BaseModel):
    """Ingredient as posted by the web client. Only `name` is used."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    id: Optional[str] = None
    name: Annotated[str, Field(min_length=1)]


class GenerateRecipeRequest(BaseModel):
    """Request body for POST /api/generate-recipe."""

    ingredients: Annotated[List[IngredientInput], Field(min_length=1, description="Non-empty ingredient list")]


class GenerateRecipeResponse(BaseModel):
    """Success body for POST /api/generate-recipe."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipe_text: str


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""

    error: str


class PantryItemCreate(BaseModel):
    """Request body for POST /api/pantry. Blank names are rejected by the catalog."""

    name: str = ""


class BasketItemAdd(BaseModel):
    """Request body for POST /api/basket."""

    id: Annotated[str, Field(min_length=1)]


class BasketView(BaseModel):
    """Current basket contents in insertion order."""

    items: List[Ingredient]
    count: int


class StatusView(BaseModel):
    """Orchestrator state snapshot for the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    state: str
    busy: bool
    last_error: Optional[str] = None
    basket_count: int
    history_count: int
