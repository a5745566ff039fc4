"""Lightweight quality check for a single live response.

Used on the serving path after a reply is sent, where there is no labeled
sample and no time for the full scorer set.
"""

from pydantic import BaseModel, Field

# Tools a correct reply to each intent is expected to call.
INTENT_TOOL_MAP: dict[str, tuple[str, ...]] = {
    "create": ("createActivityDraft",),
    "explore": ("exploreNearby",),
    "partner": ("createPartnerIntent", "askPreference"),
    "manage": ("getMyActivities",),
    "chitchat": (),
}

_MIN_USEFUL_LENGTH = 10


class ResponseQuality(BaseModel, frozen=True):
    score: float = Field(ge=0.0, le=1.0)
    details: dict[str, float]


def evaluate_response_quality(
    input: str,
    output: str,
    expected_intent: str,
    actual_tool_calls: list[str],
) -> ResponseQuality:
    """Score one reply on output presence, tool choice and length.

    ``score`` is the unweighted mean of the three detail checks. An intent
    missing from INTENT_TOOL_MAP expects no tools.
    """
    expected_tools = INTENT_TOOL_MAP.get(expected_intent, ())
    if not expected_tools:
        tool_match = 1.0
    else:
        tool_match = (
            1.0 if any(tool in expected_tools for tool in actual_tool_calls) else 0.0
        )

    details = {
        "hasOutput": 1.0 if output else 0.0,
        "toolMatch": tool_match,
        "outputLength": 1.0 if len(output) >= _MIN_USEFUL_LENGTH else 0.5,
    }
    return ResponseQuality(score=sum(details.values()) / len(details), details=details)
