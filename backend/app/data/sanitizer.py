"""
Request sanitizer.

Turns untrusted, loosely typed form input into the bounded ``RecipeQuery``
shape. Nothing here raises: problems come back as ``SanitizeResult.error``
so the route can answer 400 directly.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .constants import (
    COOKING_TIME_STEP,
    DEFAULT_COOKING_TIME,
    DIETARY_ALLOWLIST,
    DIETARY_MAX_TAGS,
    INGREDIENTS_MAX_LENGTH,
    MAX_COOKING_TIME,
    MIN_COOKING_TIME,
)
from ..core.errors import INGREDIENTS_REQUIRED_MESSAGE
from ..schemas.recipes import RecipeQuery

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class SanitizeResult(Generic[T]):
    value: T
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def strip_control_chars(text: str) -> str:
    return CONTROL_CHARS.sub("", text)


def _is_number(value: Any) -> bool:
    # bool is an int subclass; True is not a cooking time
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sanitize_display_string(raw: Any, max_length: int) -> str:
    """Strip control chars, trim and cap a string for display or prompting."""
    if not isinstance(raw, str):
        return ""
    return strip_control_chars(raw).strip()[:max_length]


def sanitize_ingredients(raw: Any) -> SanitizeResult[str]:
    """
    Sanitize the free-text ingredients field.

    Empty (or whitespace-only) input is an error. Overlong input is
    truncated to INGREDIENTS_MAX_LENGTH without one.
    """
    if isinstance(raw, str):
        text = raw
    elif _is_number(raw):
        text = str(raw)
    else:
        text = ""

    # line breaks and tabs separate ingredients; turn them into spaces first
    text = strip_control_chars(WHITESPACE_RUN.sub(" ", text))
    text = WHITESPACE_RUN.sub(" ", text).strip()
    if not text:
        return SanitizeResult(value="", error=INGREDIENTS_REQUIRED_MESSAGE)

    if len(text) > INGREDIENTS_MAX_LENGTH:
        logger.debug("Truncating ingredients from %d chars", len(text))
        text = text[:INGREDIENTS_MAX_LENGTH]
    return SanitizeResult(value=text)


def _parse_number(raw: Any) -> Optional[float]:
    if _is_number(raw):
        try:
            return float(raw)
        except OverflowError:
            return math.inf
    if isinstance(raw, str):
        try:
            return float(raw.strip())
        except ValueError:
            return None
    return None


def sanitize_cooking_time(raw: Any) -> SanitizeResult[int]:
    """
    Clamp the cooking time into [10, 120] and snap it to a multiple of 5.

    Garbage falls back to the default instead of failing.
    """
    number = _parse_number(raw)
    if number is None or not math.isfinite(number):
        return SanitizeResult(value=DEFAULT_COOKING_TIME)

    clamped = min(max(number, MIN_COOKING_TIME), MAX_COOKING_TIME)
    # round half up on value / step
    snapped = math.floor(clamped / COOKING_TIME_STEP + 0.5) * COOKING_TIME_STEP
    return SanitizeResult(value=int(snapped))


def sanitize_dietary(raw: Any) -> list[str]:
    """Keep allow-listed dietary tags in input order, capped at DIETARY_MAX_TAGS."""
    if not isinstance(raw, list):
        return []
    tags = [item for item in raw if isinstance(item, str) and item in DIETARY_ALLOWLIST]
    return tags[:DIETARY_MAX_TAGS]


def sanitize_query(
    ingredients: Any, cooking_time: Any, dietary: Any
) -> SanitizeResult[Optional[RecipeQuery]]:
    """Run all three field sanitizers and assemble a RecipeQuery."""
    ingredients_result = sanitize_ingredients(ingredients)
    if not ingredients_result.ok:
        return SanitizeResult(value=None, error=ingredients_result.error)

    query = RecipeQuery(
        ingredients=ingredients_result.value,
        cooking_time_minutes=sanitize_cooking_time(cooking_time).value,
        dietary_tags=sanitize_dietary(dietary),
    )
    return SanitizeResult(value=query)
