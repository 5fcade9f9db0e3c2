"""Prompt text for recipe generation.

The staple-suggestion policy (1-2 of salt, pepper, oil, water only when the
given ingredients are not enough) lives in the prompt and is left to the
model; nothing downstream enforces it.
"""

from typing import Sequence


RECIPE_PROMPT_TEMPLATE = """You are a helpful recipe assistant.
Generate a simple recipe using ONLY the following ingredients: {ingredient_names}.
Provide a title for the recipe, a list of the ingredients provided, and step-by-step instructions.
Keep the instructions concise and easy to follow.
If the ingredients don't seem sufficient for a meaningful recipe, suggest adding 1-2 common pantry staples (like salt, pepper, oil, water) if necessary, but prioritize using only the provided ingredients.
Format the output clearly. Example:

**Recipe Title**

**Ingredients:**
* Ingredient 1
* Ingredient 2
* ...

**Instructions:**
1. Step 1...
2. Step 2...
3. Step 3...
"""


def build_recipe_prompt(ingredient_names: Sequence[str]) -> str:
    """Build the generation prompt for an ordered list of ingredient names.

    Args:
        ingredient_names: Non-empty ordered ingredient names, as they appear in the basket.

    Returns:
        str: Prompt text. Identical input always yields identical output.

    Raises:
        ValueError: If ingredient_names is empty (callers must check the basket first).
    """
    if not ingredient_names:
        raise ValueError("ingredient_names must not be empty")
    return RECIPE_PROMPT_TEMPLATE.format(ingredient_names=", ".join(ingredient_names))
