"""
Recipe Schemas
==============

Structured schemas for the InsightChef request/response cycle.

Wire names follow the frontend contract (``prepTime``, ``cookTime``,
``cookingTime``); Python attributes are snake_case with aliases.
"""

from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..data.constants import (
    DEFAULT_COOK_TIME,
    DEFAULT_COOKING_TIME,
    DEFAULT_CUISINE,
    DEFAULT_DIFFICULTY,
    DEFAULT_PREP_TIME,
    DEFAULT_RECIPE_NAME,
)

Difficulty = Literal["Easy", "Medium", "Hard"]


class RecipeQuery(BaseModel):
    """
    Sanitized user request.

    Only ever built from the output of the sanitizer, so every field already
    satisfies its bounds.
    """

    model_config = ConfigDict(frozen=True)

    ingredients: str
    cooking_time_minutes: int
    dietary_tags: List[str] = Field(default_factory=list)


class Recipe(BaseModel):
    """
    A single recipe, fully populated and safe to render.

    The defaults double as the fallback values used by the normalizer.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = DEFAULT_RECIPE_NAME
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    prep_time: int = Field(default=DEFAULT_PREP_TIME, ge=0, alias="prepTime")
    cook_time: int = Field(default=DEFAULT_COOK_TIME, ge=0, alias="cookTime")
    cuisine: str = DEFAULT_CUISINE
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)


class RecipeRequest(BaseModel):
    """
    Raw request body for POST /api/recipes.

    Fields are deliberately untyped: coercion is the sanitizer's job, so a
    malformed value degrades instead of failing validation.
    """

    model_config = ConfigDict(extra="ignore")

    ingredients: Any = ""
    cookingTime: Any = DEFAULT_COOKING_TIME
    dietary: Any = Field(default_factory=list)


class RecipesResponse(BaseModel):
    recipes: List[Recipe] = Field(default_factory=list)
    mock: bool = False


class ErrorResponse(BaseModel):
    error: str
