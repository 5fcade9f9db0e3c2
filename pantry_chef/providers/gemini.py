"""Gemini text-generation client for recipe prompts.

Sends one prompt per call with fixed decoding parameters and safety
thresholds, then parses the SDK response into the typed ProviderResult
schema so nothing SDK-shaped leaves this module.

Core Functions:
- build_generation_config(): Fixed temperature/top-k/top-p/max tokens + safety settings
- parse_provider_response(): SDK response -> ProviderResult (first candidate only)
- describe_exception(): Best-effort human-readable message for a caught failure
- GenerationClient.generate(): Single async request, no retries, no streaming
"""

import asyncio
from typing import Any, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from pantry_chef.models.outcomes import ProviderResponse, ProviderResult, SafetyRatingInfo
from pantry_chef.utils.config import config
from pantry_chef.utils.errors import ConfigurationError, TransportError
from pantry_chef.utils.logger import logger


TEMPERATURE = 0.8
TOP_K = 1
TOP_P = 1.0
MAX_OUTPUT_TOKENS = 512

SAFETY_CATEGORIES = (
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
)


def build_generation_config() -> types.GenerateContentConfig:
    """Decoding parameters and safety thresholds sent with every request.

    Returns:
        GenerateContentConfig blocking medium-and-above severity in all four
        harm categories.
    """
    return types.GenerateContentConfig(
        temperature=TEMPERATURE,
        top_k=TOP_K,
        top_p=TOP_P,
        max_output_tokens=MAX_OUTPUT_TOKENS,
        safety_settings=[
            types.SafetySetting(
                category=category,
                threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
            )
            for category in SAFETY_CATEGORIES
        ],
    )


def _enum_text(value: Any) -> Optional[str]:
    """SDK enums are str enums; plain strings pass through."""
    if value is None:
        return None
    return str(getattr(value, "value", value))


def _parse_safety_ratings(ratings: Any) -> Optional[list[SafetyRatingInfo]]:
    if not ratings:
        return None
    return [
        SafetyRatingInfo(
            category=_enum_text(getattr(rating, "category", None)),
            probability=_enum_text(getattr(rating, "probability", None)),
            blocked=getattr(rating, "blocked", None),
        )
        for rating in ratings
    ]


def parse_provider_response(response: Any) -> ProviderResult:
    """Parse a GenerateContentResponse into ProviderResult.

    Only the first candidate is inspected, matching how the response text
    itself is assembled by the SDK.

    Args:
        response: Object returned by `client.models.generate_content`, or None.

    Returns:
        ProviderResult with `response=None` when the SDK returned nothing,
        otherwise text/finish_reason/safety_ratings each set when available.
    """
    if response is None:
        return ProviderResult(response=None)

    candidates = getattr(response, "candidates", None) or []
    candidate = candidates[0] if candidates else None

    return ProviderResult(
        response=ProviderResponse(
            text=getattr(response, "text", None),
            finish_reason=_enum_text(getattr(candidate, "finish_reason", None)) if candidate else None,
            safety_ratings=_parse_safety_ratings(getattr(candidate, "safety_ratings", None)) if candidate else None,
        )
    )


def describe_exception(exc: BaseException) -> str:
    """Extract a message from a caught failure.

    Args:
        exc: Exception raised during the provider call.

    Returns:
        The SDK error message for APIError, str(exc) for other exceptions,
        or "Unknown error" when neither carries text.
    """
    if isinstance(exc, genai_errors.APIError) and exc.message:
        return str(exc.message)
    return str(exc) or "Unknown error"


class GenerationClient:
    """Single-shot Gemini client with fixed generation settings."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Provider credential. Defaults to config.GEMINI_API_KEY.
            model: Model id. Defaults to config.GEMINI_MODEL.
            client: Pre-built `genai.Client` (tests inject fakes here). Built
                lazily from api_key when omitted.
        """
        self.api_key = config.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or config.GEMINI_MODEL
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> ProviderResult:
        """Send one prompt and return the parsed provider result.

        Runs the synchronous SDK call in a worker thread. No retries, no
        streaming, no cancellation; timeouts are the SDK's defaults.

        Args:
            prompt: Full prompt text.

        Returns:
            ProviderResult for the interpreter to classify.

        Raises:
            ConfigurationError: If no API key is configured (raised before any call).
            TransportError: On any SDK, network, or response parsing failure.
        """
        if not self.is_configured:
            logger.error("Gemini API key not configured; refusing to call provider")
            raise ConfigurationError()

        try:
            client = self._get_client()
            logger.debug(f"Calling Gemini model {self.model} ({len(prompt)} prompt chars)")
            response = await asyncio.to_thread(
                client.models.generate_content,
                model=self.model,
                contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
                config=build_generation_config(),
            )
            return parse_provider_response(response)
        except Exception as e:
            message = describe_exception(e)
            logger.error(f"Error calling Gemini API: {message}", exc_info=True)
            raise TransportError(message) from e
