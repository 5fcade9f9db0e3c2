"""Typed provider response schema and generation outcomes.

`ProviderResult` is what the Gemini client hands back after parsing the SDK
response; every field that the SDK only sometimes sets is an explicit
Optional here. `GenerationOutcome` is the classified result produced by the
response interpreter, discriminated on `kind`.
"""

import json
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


SAFETY_FINISH_REASON = "SAFETY"


class SafetyRatingInfo(BaseModel):
    """Per-category severity assessment attached to a candidate."""

    model_config = ConfigDict(frozen=True)

    category: Optional[str] = None
    probability: Optional[str] = None
    blocked: Optional[bool] = None


class ProviderResponse(BaseModel):
    """Fields read from the first candidate of a provider response."""

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    finish_reason: Optional[str] = None
    safety_ratings: Optional[List[SafetyRatingInfo]] = None


class ProviderResult(BaseModel):
    """Result of a single provider call. `response` is None when the SDK returned nothing."""

    model_config = ConfigDict(frozen=True)

    response: Optional[ProviderResponse] = None


class _Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)


class SuccessOutcome(_Outcome):
    kind: Literal["success"] = "success"
    text: str


class BlockedOutcome(_Outcome):
    kind: Literal["blocked"] = "blocked"
    reason: Literal["safety"] = "safety"
    safety_ratings: Optional[List[SafetyRatingInfo]] = None


class EmptyResponseOutcome(_Outcome):
    """Empty text. `reason` is the finish reason, or None when absent.

    `no_response_object` distinguishes "SDK returned no response at all" from
    "response present but without finish reason".
    """

    kind: Literal["empty"] = "empty"
    reason: Optional[str] = None
    no_response_object: bool = False
    safety_ratings: Optional[List[SafetyRatingInfo]] = None


class TransportFailureOutcome(_Outcome):
    kind: Literal["transport_failure"] = "transport_failure"
    message: str


class ConfigurationErrorOutcome(_Outcome):
    kind: Literal["configuration_error"] = "configuration_error"
    message: str


GenerationOutcome = Annotated[
    Union[
        SuccessOutcome,
        BlockedOutcome,
        EmptyResponseOutcome,
        TransportFailureOutcome,
        ConfigurationErrorOutcome,
    ],
    Field(discriminator="kind"),
]


def format_safety_info(safety_ratings: Optional[List[SafetyRatingInfo]]) -> str:
    """Diagnostic suffix for empty/blocked messages; empty string when no ratings."""
    if not safety_ratings:
        return ""
    ratings = [rating.model_dump(exclude_none=True) for rating in safety_ratings]
    return f" (Safety Ratings: {json.dumps(ratings)})"
