"""
InsightChef Schemas
===================

Pydantic schemas for structured data.

- RecipeQuery: sanitized user request
- Recipe: normalized recipe, safe to render
- RecipeRequest / RecipesResponse / ErrorResponse: HTTP payloads
"""

from .recipes import (
    ErrorResponse,
    Recipe,
    RecipeQuery,
    RecipeRequest,
    RecipesResponse,
)

__all__ = [
    "ErrorResponse",
    "Recipe",
    "RecipeQuery",
    "RecipeRequest",
    "RecipesResponse",
]
