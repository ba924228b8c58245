"""
Recipe normalizer.

Coerces whatever the model sent back into fully populated ``Recipe``
records. Total by construction: every input maps to a valid Recipe, and a
bad field only costs that field (it falls back to its default).
"""

from __future__ import annotations

import logging
import math
from typing import Any, List

from .constants import (
    CUISINE_MAX_LENGTH,
    DEFAULT_COOK_TIME,
    DEFAULT_CUISINE,
    DEFAULT_DIFFICULTY,
    DEFAULT_PREP_TIME,
    DEFAULT_RECIPE_NAME,
    RECIPE_ITEM_MAX_LENGTH,
    RECIPE_NAME_MAX_LENGTH,
    VALID_DIFFICULTIES,
)
from .sanitizer import sanitize_display_string
from ..schemas.recipes import Recipe

logger = logging.getLogger(__name__)


def _text_field(value: Any, max_length: int, default: str) -> str:
    if not isinstance(value, str):
        return default
    return sanitize_display_string(value, max_length) or default


def _minutes_field(value: Any, default: int) -> int:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return default
    try:
        minutes = float(value)
    except OverflowError:
        return default
    if not math.isfinite(minutes) or minutes < 0:
        return default
    return int(math.floor(minutes + 0.5))


def _text_list_field(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        text = sanitize_display_string(item, RECIPE_ITEM_MAX_LENGTH)
        if text:
            items.append(text)
    return items


def _difficulty_field(value: Any) -> str:
    if isinstance(value, str) and value in VALID_DIFFICULTIES:
        return value
    return DEFAULT_DIFFICULTY


def normalize_recipe(candidate: Any) -> Recipe:
    """
    Normalize a single recipe-like object.

    Args:
        candidate: Anything decoded from the model output.

    Returns:
        A Recipe where every field is either the sanitized input value or
        that field's default.
    """
    if not isinstance(candidate, dict):
        return Recipe()

    return Recipe(
        name=_text_field(candidate.get("name"), RECIPE_NAME_MAX_LENGTH, DEFAULT_RECIPE_NAME),
        difficulty=_difficulty_field(candidate.get("difficulty")),
        prep_time=_minutes_field(candidate.get("prepTime"), DEFAULT_PREP_TIME),
        cook_time=_minutes_field(candidate.get("cookTime"), DEFAULT_COOK_TIME),
        cuisine=_text_field(candidate.get("cuisine"), CUISINE_MAX_LENGTH, DEFAULT_CUISINE),
        ingredients=_text_list_field(candidate.get("ingredients")),
        instructions=_text_list_field(candidate.get("instructions")),
    )


def normalize_recipes(candidates: Any) -> List[Recipe]:
    """Normalize a decoded array of recipes, dropping null entries."""
    if not isinstance(candidates, list):
        return []

    recipes = [normalize_recipe(item) for item in candidates if item is not None]
    dropped = len(candidates) - len(recipes)
    if dropped:
        logger.debug("Dropped %d null recipe entries", dropped)
    return recipes

