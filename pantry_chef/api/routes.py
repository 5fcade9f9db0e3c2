"""FastAPI application for Pantry Chef.

Endpoints:
- POST /api/generate-recipe: Stateless generation from a posted ingredient list
- GET/POST /api/pantry: Search and extend the ingredient catalog
- GET/POST/DELETE /api/basket: Manage the session basket
- POST /api/basket/generate: Generate from the basket and record it in history
- GET /api/history: Past recipes, most recent first
- GET /api/status: Orchestrator state (busy flag, last error, counts)

Every error is returned as {"error": "<message>"}. Malformed request bodies are
400; other failures use the status code carried by the raised PantryChefError
subclass.
"""

from typing import List, Optional

from fastapi import FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pantry_chef.models.models import (
    BasketItemAdd,
    BasketView,
    ErrorResponse,
    GenerateRecipeRequest,
    GenerateRecipeResponse,
    Ingredient,
    PantryItemCreate,
    Recipe,
    StatusView,
)
from pantry_chef.orchestrator.generator import RecipeGenerator
from pantry_chef.orchestrator.orchestrator import GenerationOrchestrator
from pantry_chef.pantry.catalog import DEFAULT_PANTRY, PantryCatalog
from pantry_chef.utils.config import config
from pantry_chef.utils.errors import ConfigurationError, PantryChefError, ValidationError
from pantry_chef.utils.logger import logger


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten the first request error into one line.

    Example: "Invalid request: name: Input should be a valid string"
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    detail = first.get("msg", "invalid value")
    return f"Invalid request: {location}: {detail}" if location else f"Invalid request: {detail}"


def create_app(
    generator: Optional[RecipeGenerator] = None,
    orchestrator: Optional[GenerationOrchestrator] = None,
) -> FastAPI:
    """Build the FastAPI app around one generator and one session orchestrator.

    Args:
        generator: Generation pipeline. Defaults to a Gemini-backed RecipeGenerator.
        orchestrator: Session state owner. Defaults to one sharing `generator`,
            with the default pantry when SEED_PANTRY is enabled.

    Returns:
        FastAPI: Configured application.
    """
    generator = generator or RecipeGenerator()
    if orchestrator is None:
        catalog = PantryCatalog(DEFAULT_PANTRY if config.SEED_PANTRY else None)
        orchestrator = GenerationOrchestrator(generator=generator, catalog=catalog)

    app = FastAPI(
        title="Pantry Chef API",
        description="Generate recipes from a basket of ingredients with Gemini",
        version="1.0.0",
    )
    app.state.generator = generator
    app.state.orchestrator = orchestrator

    @app.exception_handler(PantryChefError)
    async def handle_pantry_chef_error(request: Request, exc: PantryChefError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_validation_error(exc)
        logger.warning(f"{request.method} {request.url.path} rejected: {message}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.post("/api/generate-recipe", response_model=GenerateRecipeResponse, responses=ERROR_RESPONSES)
    async def generate_recipe(request: Request) -> GenerateRecipeResponse:
        # Credential first: a missing key fails every request regardless of body
        if not generator.is_configured:
            raise ConfigurationError()

        try:
            payload = GenerateRecipeRequest.model_validate(await request.json())
        except ValueError:
            raise ValidationError("Missing or invalid ingredients list") from None

        text = await generator.generate_text([item.name for item in payload.ingredients])
        return GenerateRecipeResponse(recipe_text=text)

    @app.get("/api/pantry", response_model=List[Ingredient])
    async def search_pantry(search: str = Query("", description="Case-insensitive name filter")) -> List[Ingredient]:
        return orchestrator.catalog.search(search)

    @app.post(
        "/api/pantry",
        response_model=Ingredient,
        status_code=status.HTTP_201_CREATED,
        responses=ERROR_RESPONSES,
    )
    async def add_pantry_item(item: PantryItemCreate) -> Ingredient:
        ingredient = orchestrator.catalog.add(item.name)
        logger.info(f"Added pantry item {ingredient.name!r}")
        return ingredient

    def basket_view() -> BasketView:
        return BasketView(items=orchestrator.basket.items(), count=orchestrator.basket.count())

    @app.get("/api/basket", response_model=BasketView)
    async def get_basket() -> BasketView:
        return basket_view()

    @app.post("/api/basket", response_model=BasketView, responses=ERROR_RESPONSES)
    async def add_to_basket(item: BasketItemAdd) -> BasketView:
        orchestrator.add_to_basket(item.id)
        return basket_view()

    @app.delete("/api/basket/{ingredient_id}", response_model=BasketView)
    async def remove_from_basket(ingredient_id: str) -> BasketView:
        orchestrator.remove_from_basket(ingredient_id)
        return basket_view()

    @app.delete("/api/basket", response_model=BasketView)
    async def clear_basket() -> BasketView:
        orchestrator.clear_basket()
        return basket_view()

    @app.post("/api/basket/generate", response_model=Recipe, responses=ERROR_RESPONSES)
    async def generate_from_basket() -> Recipe:
        return await orchestrator.generate()

    @app.get("/api/history", response_model=List[Recipe])
    async def get_history() -> List[Recipe]:
        return orchestrator.ledger.records()

    @app.get("/api/status", response_model=StatusView)
    async def get_status() -> StatusView:
        return StatusView(
            state=orchestrator.state.value,
            busy=orchestrator.is_busy,
            last_error=orchestrator.last_error,
            basket_count=orchestrator.basket.count(),
            history_count=len(orchestrator.ledger),
        )

    return app
