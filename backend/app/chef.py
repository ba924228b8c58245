"""
InsightChef (Main Application)
==============================

The core application logic for InsightChef:
  1) Sanitize the form input into a RecipeQuery
  2) Mock mode: return the fixed sample recipes, no network
  3) RecipeGenerator (LLM): prompt -> single call -> extract -> normalize

"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Optional

from .core.config import Settings
from .core.errors import InputValidationError
from .data.mock_recipes import get_mock_recipes
from .data.sanitizer import sanitize_query
from .llm.recipe_generator import RecipeGenerator
from .schemas.recipes import RecipesResponse

logger = logging.getLogger(__name__)


class InsightChef:
    def __init__(self, settings: Settings, generator: Optional[RecipeGenerator] = None):
        self.settings = settings
        self.generator = generator or RecipeGenerator(settings)

    @property
    def mock_mode(self) -> bool:
        return self.settings.is_mock_mode

    async def suggest(
        self, ingredients: Any, cooking_time: Any, dietary: Any
    ) -> RecipesResponse:
        request_id = str(uuid.uuid4())[:8]

        # 1) Sanitize
        result = sanitize_query(ingredients, cooking_time, dietary)
        if result.value is None:
            logger.info("[%s] rejected request: %s", request_id, result.error)
            raise InputValidationError(result.error or "invalid input", public_message=result.error)
        query = result.value

        # 2) Mock mode is decided before any network object exists
        if self.mock_mode:
            response = RecipesResponse(recipes=get_mock_recipes(), mock=True)
        else:
            # 3) Generate
            recipes = await self.generator.generate(query)
            response = RecipesResponse(recipes=recipes, mock=False)

        log_recipe_trace(
            request_id=request_id,
            ingredients_length=len(query.ingredients),
            cooking_time=query.cooking_time_minutes,
            dietary=query.dietary_tags,
            response=response,
        )
        return response


def log_recipe_trace(
    *,
    request_id: str,
    ingredients_length: int,
    cooking_time: int,
    dietary: list[str],
    response: RecipesResponse,
) -> None:
    """Log one compact line per served request. User text is never logged."""
    compact_trace = {
        "id": request_id,
        "mode": "mock" if response.mock else "live",
        "ingredients_chars": ingredients_length,
        "time": cooking_time,
        "dietary": dietary,
        "recipes": len(response.recipes),
    }
    logger.info("[TRACE] %s", json.dumps(compact_trace, ensure_ascii=False))
