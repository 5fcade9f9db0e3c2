"""Exception taxonomy for Pantry Chef.

Every error that can reach a caller derives from PantryChefError and carries
the HTTP status the API layer answers with. Provider failures derive from
RecipeGenerationError and keep the classified outcome for inspection.
"""

from typing import Optional

from pantry_chef.models.outcomes import (
    SAFETY_FINISH_REASON,
    BlockedOutcome,
    ConfigurationErrorOutcome,
    EmptyResponseOutcome,
    GenerationOutcome,
    TransportFailureOutcome,
    format_safety_info,
)


FAILURE_PREFIX = "Failed to generate recipe."
API_KEY_MISSING_MESSAGE = "API key not configured"


class PantryChefError(Exception):
    """Base class for errors surfaced to callers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PantryChefError):
    """Empty or malformed ingredient input. Recoverable by the caller."""

    status_code = 400


class NotFoundError(PantryChefError):
    """Referenced pantry item does not exist."""

    status_code = 404


class GenerationInProgressError(PantryChefError):
    """A generation is already in flight for this session."""

    status_code = 409

    def __init__(self, message: str = "A recipe is already being generated.") -> None:
        super().__init__(message)


class RecipeGenerationError(PantryChefError):
    """A generation attempt that finished without a recipe."""

    status_code = 500

    def __init__(self, message: str, outcome: Optional[GenerationOutcome] = None) -> None:
        super().__init__(message)
        self.outcome = outcome


class ConfigurationError(RecipeGenerationError):
    """Provider credential missing. Every generation fails until it is set."""

    def __init__(self, message: str = API_KEY_MISSING_MESSAGE) -> None:
        super().__init__(message, ConfigurationErrorOutcome(message=message))


class ProviderNoResponseError(RecipeGenerationError):
    """Provider returned no response object."""


class ProviderBlockedError(RecipeGenerationError):
    """Provider stopped generation for safety reasons."""


class ProviderEmptyError(RecipeGenerationError):
    """Provider returned empty text with a non-safety or absent finish reason."""


class TransportFailureError(RecipeGenerationError):
    """Network, SDK, or parsing failure during the provider call."""


class TransportError(Exception):
    """Raised by the provider client; mapped to TransportFailureError by the generator."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def error_from_outcome(outcome: GenerationOutcome) -> RecipeGenerationError:
    """Map a failed outcome to the exception surfaced to callers.

    Args:
        outcome: Any non-success GenerationOutcome.

    Returns:
        The matching RecipeGenerationError subclass with its user-facing message.

    Raises:
        ValueError: If called with a SuccessOutcome.
    """
    if isinstance(outcome, ConfigurationErrorOutcome):
        return ConfigurationError(outcome.message)

    if isinstance(outcome, TransportFailureOutcome):
        return TransportFailureError(f"{FAILURE_PREFIX} {outcome.message}", outcome)

    if isinstance(outcome, BlockedOutcome):
        message = "Failed to generate recipe due to safety settings."
        return ProviderBlockedError(message + format_safety_info(outcome.safety_ratings), outcome)

    if isinstance(outcome, EmptyResponseOutcome):
        if outcome.no_response_object:
            return ProviderNoResponseError(f"{FAILURE_PREFIX} No response object from AI.", outcome)
        if outcome.reason and outcome.reason != SAFETY_FINISH_REASON:
            message = f"{FAILURE_PREFIX} (Finish Reason: {outcome.reason})"
        else:
            message = f"{FAILURE_PREFIX} The AI response was empty or blocked."
        return ProviderEmptyError(message + format_safety_info(outcome.safety_ratings), outcome)

    raise ValueError(f"Outcome {outcome.kind!r} is not a failure")
