"""
Parse raw model text into a Classification.

The model is an unreliable collaborator: its answer may be wrapped in prose
or markdown, truncated, or carry fields of the wrong type. Every branch
below returns a value and ``parse_classification`` has no error channel.
"""

import json
import math
import re
from typing import Any

import structlog

from carbon_mail.models.enums import DecisionEnum
from carbon_mail.models.output_models import DEFAULT_CONFIDENCE, Classification

logger = structlog.get_logger(__name__)

UNPARSABLE_REASON = "Could not parse LLM response."
INVALID_DECISION_REASON = "Invalid decision from LLM."
MISSING_REASON = "No reason provided."

# First "{" up to the nearest following "}"
_JSON_OBJECT_PATTERN = re.compile(r"\{.*?\}", re.DOTALL)


def extract_json_object(text: str) -> str | None:
    """
    Return the first substring that looks like a single JSON object.

    Examples:
        >>> extract_json_object('Sure! {"decision": "KEEP"} Hope it helps')
        '{"decision": "KEEP"}'
        >>> extract_json_object("no braces") is None
        True
    """
    match = _JSON_OBJECT_PATTERN.search(text or "")
    return match.group(0) if match else None


def coerce_confidence(value: Any) -> float:
    """Numbers and numeric strings pass through; anything else is 0.5."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return DEFAULT_CONFIDENCE
    try:
        number = float(value)
    except ValueError:
        return DEFAULT_CONFIDENCE
    except OverflowError:
        # Integer literals too large for a float
        number = math.inf if value > 0 else -math.inf
    if math.isnan(number):
        return DEFAULT_CONFIDENCE
    return max(0.0, min(1.0, number))


def coerce_reason(value: Any) -> str:
    # Falsy scalars (None, "", 0, false) count as no reason
    if not value and not isinstance(value, (list, dict)):
        return MISSING_REASON
    return value if isinstance(value, str) else str(value)


def parse_classification(text: str) -> Classification:
    """
    Turn raw model text into a well-formed Classification.

    Args:
        text: Assistant message content, possibly empty or malformed

    Returns:
        Classification with decision in DELETE/KEEP/REVIEW, confidence in
        [0, 1] and a reason of at most 200 characters. Unusable input yields
        a REVIEW/0.5 classification explaining what went wrong.
    """
    candidate = extract_json_object(text)
    if candidate is None:
        logger.debug("No JSON object in model output", content_snippet=(text or "")[:100])
        return Classification.review(UNPARSABLE_REASON)

    try:
        parsed = json.loads(candidate)
    except (ValueError, RecursionError):
        logger.debug("Model output is not valid JSON", content_snippet=candidate[:100])
        return Classification.review(UNPARSABLE_REASON)

    if not isinstance(parsed, dict):
        return Classification.review(UNPARSABLE_REASON)

    raw_decision = parsed.get("decision")
    if raw_decision is None:
        raw_decision = DecisionEnum.REVIEW.value
    if not isinstance(raw_decision, str):
        return Classification.review(UNPARSABLE_REASON)

    try:
        decision = DecisionEnum(raw_decision.strip().upper())
    except ValueError:
        logger.debug("Model returned an unknown decision", decision=raw_decision[:50])
        return Classification.review(INVALID_DECISION_REASON)

    return Classification(
        decision=decision,
        confidence=coerce_confidence(parsed.get("confidence")),
        reason=coerce_reason(parsed.get("reason")),
    )
