"""
InsightChef LLM Components
==========================

Prompt construction, the outbound provider call and extraction of the
recipe array from model text.
"""

from .extraction import extract_recipe_array
from .prompts import build_recipe_prompt
from .recipe_generator import RecipeGenerator

__all__ = [
    "RecipeGenerator",
    "build_recipe_prompt",
    "extract_recipe_array",
]
