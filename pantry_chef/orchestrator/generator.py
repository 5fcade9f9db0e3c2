"""Stateless recipe generation pipeline.

prompt -> Gemini client -> interpreter -> (text | typed error). Used directly
by POST /api/generate-recipe and by the session orchestrator.
"""

from typing import Optional, Sequence

from pantry_chef.models.outcomes import (
    ConfigurationErrorOutcome,
    GenerationOutcome,
    SuccessOutcome,
    TransportFailureOutcome,
)
from pantry_chef.prompts.prompts import build_recipe_prompt
from pantry_chef.providers.gemini import GenerationClient
from pantry_chef.providers.interpreter import interpret_response
from pantry_chef.utils.errors import (
    API_KEY_MISSING_MESSAGE,
    ConfigurationError,
    TransportError,
    ValidationError,
    error_from_outcome,
)
from pantry_chef.utils.logger import logger


class RecipeGenerator:
    """Runs one generation and classifies the result."""

    def __init__(self, client: Optional[GenerationClient] = None) -> None:
        self.client = client or GenerationClient()

    @property
    def is_configured(self) -> bool:
        return self.client.is_configured

    async def run(self, ingredient_names: Sequence[str]) -> GenerationOutcome:
        """Generate a recipe and return the classified outcome.

        The credential is checked before the prompt is built. Provider and
        transport failures come back as outcomes, not exceptions.

        Args:
            ingredient_names: Ordered ingredient names.

        Returns:
            GenerationOutcome for the attempt.

        Raises:
            ValidationError: If ingredient_names is empty.
        """
        if not self.is_configured:
            return ConfigurationErrorOutcome(message=API_KEY_MISSING_MESSAGE)
        if not ingredient_names:
            raise ValidationError("Missing or invalid ingredients list")

        prompt = build_recipe_prompt(ingredient_names)
        try:
            result = await self.client.generate(prompt)
        except ConfigurationError as e:
            outcome: GenerationOutcome = ConfigurationErrorOutcome(message=e.message)
        except TransportError as e:
            outcome = TransportFailureOutcome(message=e.message)
        else:
            outcome = interpret_response(result)

        logger.info(
            f"Generation finished for {len(ingredient_names)} ingredients",
            extra={"outcome": outcome.kind, "ingredient_count": len(ingredient_names)},
        )
        return outcome

    async def generate_text(self, ingredient_names: Sequence[str]) -> str:
        """Generate a recipe and return its text.

        Returns:
            str: Recipe text from a successful generation.

        Raises:
            ValidationError: If ingredient_names is empty.
            RecipeGenerationError: Typed subclass for every other failure, with
                the user-facing message.
        """
        outcome = await self.run(ingredient_names)
        if isinstance(outcome, SuccessOutcome):
            return outcome.text

        error = error_from_outcome(outcome)
        logger.error(f"Recipe generation failed: {error.message}", extra={"outcome": outcome.kind})
        raise error
