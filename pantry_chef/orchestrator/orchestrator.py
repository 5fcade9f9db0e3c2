"""Session orchestrator: basket + ledger + one generation at a time.

State machine:
    IDLE -> GENERATING -> SUCCEEDED | FAILED
SUCCEEDED and FAILED return to IDLE on the next basket mutation.

Runs on a single event loop. The provider await is the only suspension point
and the busy flag is checked and set before it, so at most one generation is
in flight.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pantry_chef.models.models import Ingredient, Recipe
from pantry_chef.orchestrator.generator import RecipeGenerator
from pantry_chef.pantry.basket import BasketSelection
from pantry_chef.pantry.catalog import PantryCatalog
from pantry_chef.pantry.history import HistoryLedger
from pantry_chef.utils.errors import (
    GenerationInProgressError,
    NotFoundError,
    RecipeGenerationError,
    ValidationError,
)
from pantry_chef.utils.logger import logger


class OrchestratorState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class GenerationOrchestrator:
    """Owns the session's basket and history and drives recipe generation.

    The web layer only observes state and dispatches through these methods;
    it never mutates the basket or ledger directly.
    """

    def __init__(
        self,
        generator: Optional[RecipeGenerator] = None,
        catalog: Optional[PantryCatalog] = None,
        basket: Optional[BasketSelection] = None,
        ledger: Optional[HistoryLedger] = None,
    ) -> None:
        self.generator = generator or RecipeGenerator()
        self.catalog = catalog if catalog is not None else PantryCatalog()
        self.basket = basket if basket is not None else BasketSelection()
        self.ledger = ledger if ledger is not None else HistoryLedger()
        self.state = OrchestratorState.IDLE
        self.last_error: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        return self.state is OrchestratorState.GENERATING

    def _reset_terminal_state(self) -> None:
        if self.state in (OrchestratorState.SUCCEEDED, OrchestratorState.FAILED):
            self.state = OrchestratorState.IDLE
        self.last_error = None

    def add_to_basket(self, ingredient_id: str) -> Ingredient:
        """Add a catalog item to the basket by id.

        Raises:
            NotFoundError: If the id is not in the catalog.
        """
        ingredient = self.catalog.get(ingredient_id)
        if ingredient is None:
            raise NotFoundError(f"Ingredient {ingredient_id!r} not found")
        self.basket.add(ingredient)
        self._reset_terminal_state()
        return ingredient

    def remove_from_basket(self, ingredient_id: str) -> None:
        self.basket.remove(ingredient_id)
        self._reset_terminal_state()

    def clear_basket(self) -> None:
        self.basket.clear()
        self._reset_terminal_state()

    async def generate(self) -> Recipe:
        """Generate a recipe from the current basket.

        On success the basket snapshot is recorded in the ledger and the
        basket is cleared. On failure the basket and ledger are untouched.

        Returns:
            Recipe: The new ledger entry.

        Raises:
            ValidationError: If the basket is empty (no state change, no provider call).
            GenerationInProgressError: If a generation is already running.
            RecipeGenerationError: Typed provider/config/transport failure.
        """
        if self.is_busy:
            raise GenerationInProgressError()
        if self.basket.count() == 0:
            raise ValidationError("basket empty: add some ingredients first!")

        snapshot = self.basket.items()
        self.state = OrchestratorState.GENERATING
        self.last_error = None
        logger.info(f"Generating recipe from basket of {len(snapshot)} ingredients")

        try:
            text = await self.generator.generate_text([item.name for item in snapshot])
        except RecipeGenerationError as e:
            self.state = OrchestratorState.FAILED
            self.last_error = e.message
            raise
        except Exception as e:
            # GENERATING must not outlive the call
            self.state = OrchestratorState.FAILED
            self.last_error = str(e) or "An unexpected error occurred while generating the recipe."
            raise

        recipe = Recipe(
            id=f"recipe_{uuid.uuid4().hex}",
            ingredients_used=snapshot,
            recipe_text=text,
            generated_at=datetime.now(timezone.utc),
        )
        self.ledger.append(recipe)
        self.basket.clear()
        self.state = OrchestratorState.SUCCEEDED
        logger.info("Recipe added to history", extra={"recipe_id": recipe.id})
        return recipe
