"""Heuristic scorers shipped with the harness.

Every scorer is a frozen dataclass so callers can rename or reweight an
instance (``IntentScorer(name="intent_v2")``) without subclassing. None of
them keep state between calls.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from xiaoju_eval.dataset.domain.sample import EvalSample
from xiaoju_eval.evaluation.domain.result import EvalResult

# Phrases that read as stiff or system-speak in a chat reply.
_STIFF_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"已为您"),
    re.compile(r"正在解析"),
    re.compile(r"向量"),
    re.compile(r"契约"),
    re.compile(r"配额已耗尽"),
    re.compile(r"系统检测到"),
)

# Phrases and emoji that read as warm and casual.
_WARM_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"帮你"),
    re.compile(r"收到"),
    re.compile(r"好的"),
    re.compile(r"～"),
    re.compile(r"😊|😅|🎉"),
)

_TONE_BASE = 0.7
_TONE_PENALTY = 0.15
_TONE_BONUS = 0.1

# A reply that says "today" or "tomorrow" counts as using the context time.
_RELATIVE_DAY_WORDS: tuple[str, ...] = ("今天", "明天")


@dataclass(frozen=True)
class IntentScorer:
    name: str = "intent"
    description: str = "Exact match of the inferred intent"
    weight: float = 1.0

    async def score(self, sample: EvalSample, result: EvalResult) -> float:
        if not sample.expected_intent:
            return 1.0
        if not result.actual_intent:
            return 0.0
        return 1.0 if result.actual_intent == sample.expected_intent else 0.0


@dataclass(frozen=True)
class ToolCallScorer:
    name: str = "toolCall"
    description: str = "Recall of expected tool names among the actual tool calls"
    weight: float = 1.0

    async def score(self, sample: EvalSample, result: EvalResult) -> float:
        expected = sample.expected_tool_calls
        if not expected:
            return 1.0
        actual = set(result.actual_tool_calls or [])
        matched = sum(1 for tool in expected if tool in actual)
        return matched / len(expected)


@dataclass(frozen=True)
class RelevanceScorer:
    """Token-overlap recall of the expected output."""

    name: str = "relevance"
    description: str = "Keyword overlap between expected and actual output"
    weight: float = 1.0

    async def score(self, sample: EvalSample, result: EvalResult) -> float:
        if not sample.expected_output:
            return 1.0
        expected_tokens = [
            token for token in sample.expected_output.lower().split() if len(token) > 1
        ]
        if not expected_tokens:
            return 1.0
        actual_tokens = set(result.actual_output.lower().split())
        matched = sum(1 for token in expected_tokens if token in actual_tokens)
        return matched / len(expected_tokens)


@dataclass(frozen=True)
class ToneScorer:
    """Judges style only: warm and casual beats stiff and robotic."""

    name: str = "tone"
    description: str = "Casual, friendly tone heuristics"
    weight: float = 0.5

    async def score(self, sample: EvalSample, result: EvalResult) -> float:
        output = result.actual_output
        value = _TONE_BASE
        value -= _TONE_PENALTY * sum(1 for p in _STIFF_PATTERNS if p.search(output))
        value += _TONE_BONUS * sum(1 for p in _WARM_PATTERNS if p.search(output))
        return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class ContextScorer:
    """Share of the sample's location name, nickname and time the reply mentions.

    Only keys present in the context count toward the denominator. A location
    without a name is checkable but can never be matched.
    """

    name: str = "context"
    description: str = "Use of location, nickname and time from the context"
    weight: float = 0.8

    async def score(self, sample: EvalSample, result: EvalResult) -> float:
        context = sample.context
        if not context:
            return 1.0

        output = result.actual_output.lower()
        utilized = 0
        total = 0

        location = context.get("location")
        if location:
            total += 1
            location_name = (
                location.get("name") if isinstance(location, Mapping) else None
            )
            if location_name and str(location_name).lower() in output:
                utilized += 1

        nickname = context.get("nickname")
        if nickname:
            total += 1
            if str(nickname).lower() in output:
                utilized += 1

        time = context.get("time")
        if time:
            total += 1
            if str(time).lower() in output or any(
                word in output for word in _RELATIVE_DAY_WORDS
            ):
                utilized += 1

        if total == 0:
            return 1.0
        return utilized / total


@dataclass(frozen=True)
class LengthScorer:
    """Too short is bad; too long is worse than ideal but not terrible."""

    name: str = "length"
    description: str = "Reply length in characters, ideal 50-500"
    weight: float = 0.3

    async def score(self, sample: EvalSample, result: EvalResult) -> float:
        length = len(result.actual_output)
        if length < 10:
            return 0.2
        if length < 50:
            return 0.6
        if length <= 500:
            return 1.0
        if length <= 1000:
            return 0.8
        return 0.5
