"""
Recipe prompt construction.

Only values that went through the sanitizer are embedded here.
"""

from ..schemas.recipes import RecipeQuery

RECIPE_COUNT = 3

RECIPE_PROMPT_TEMPLATE = """You are a professional chef. Generate {count} different recipe suggestions based on:

Available ingredients: {ingredients}
Max cooking time: {cooking_time} minutes
{dietary_line}

For each recipe provide:
1. Recipe name
2. Difficulty (Easy/Medium/Hard)
3. Prep time (minutes)
4. Cook time (minutes)
5. Cuisine type (e.g., Italian, Mexican, Asian, American, Mediterranean, etc.)
6. Ingredient list with measurements
7. Short step-by-step instructions (4-6 steps max)

Respond ONLY with a JSON array like this:
[
  {{
    "name": "Recipe Name",
    "difficulty": "Easy",
    "prepTime": 10,
    "cookTime": 20,
    "cuisine": "Italian",
    "ingredients": ["1 cup rice", "2 chicken breasts"],
    "instructions": ["Step 1", "Step 2", "Step 3"]
  }}
]"""


def build_recipe_prompt(query: RecipeQuery) -> str:
    dietary_line = ""
    if query.dietary_tags:
        dietary_line = f"Dietary requirements: {', '.join(query.dietary_tags)}."

    return RECIPE_PROMPT_TEMPLATE.format(
        count=RECIPE_COUNT,
        ingredients=query.ingredients,
        cooking_time=query.cooking_time_minutes,
        dietary_line=dietary_line,
    )
