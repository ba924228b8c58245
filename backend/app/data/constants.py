"""
Shared allow-lists, bounds and defaults for sanitizing and normalizing.
"""

DIETARY_ALLOWLIST = (
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
    "Dairy-Free",
    "Keto",
    "Low-Carb",
)
DIETARY_MAX_TAGS = 6

INGREDIENTS_MAX_LENGTH = 2000

MIN_COOKING_TIME = 10
MAX_COOKING_TIME = 120
COOKING_TIME_STEP = 5
DEFAULT_COOKING_TIME = 30

VALID_DIFFICULTIES = ("Easy", "Medium", "Hard")

RECIPE_NAME_MAX_LENGTH = 200
CUISINE_MAX_LENGTH = 100
RECIPE_ITEM_MAX_LENGTH = 1000

DEFAULT_RECIPE_NAME = "Untitled Recipe"
DEFAULT_DIFFICULTY = "Medium"
DEFAULT_PREP_TIME = 10
DEFAULT_COOK_TIME = 20
DEFAULT_CUISINE = ""
