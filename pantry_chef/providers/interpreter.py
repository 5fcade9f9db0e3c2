"""Classify a parsed provider result into a GenerationOutcome."""

from pantry_chef.models.outcomes import (
    SAFETY_FINISH_REASON,
    BlockedOutcome,
    EmptyResponseOutcome,
    GenerationOutcome,
    ProviderResult,
    SuccessOutcome,
)


def interpret_response(result: ProviderResult) -> GenerationOutcome:
    """Classify a provider result.

    Decision order:
    1. No response object -> EmptyResponseOutcome(no_response_object=True).
    2. Response with empty/absent text -> look at the finish reason:
       SAFETY -> BlockedOutcome; any other reason -> EmptyResponseOutcome(reason);
       none -> EmptyResponseOutcome(reason=None).
       Safety ratings are attached for diagnostics and never change the category.
    3. Otherwise -> SuccessOutcome(text).

    Args:
        result: ProviderResult produced by GenerationClient.

    Returns:
        GenerationOutcome: One of the outcome variants above.
    """
    response = result.response
    if response is None:
        return EmptyResponseOutcome(reason=None, no_response_object=True)

    if not response.text:
        finish_reason = response.finish_reason
        if finish_reason == SAFETY_FINISH_REASON:
            return BlockedOutcome(safety_ratings=response.safety_ratings)
        return EmptyResponseOutcome(reason=finish_reason or None, safety_ratings=response.safety_ratings)

    return SuccessOutcome(text=response.text)
