"""
Apply accepted substitutions to a recipe.

Once a user accepts a substitution, the preparation steps should mention
the substitute instead of the original ingredient, followed by any cooking
adjustment that comes with it.
"""

import re
import logging
from typing import List, Sequence

from cookmind.models.recipe import Recipe, RecipeIngredient
from cookmind.models.substitution import Substitution

# Configure logging
logger = logging.getLogger(__name__)


def apply_substitutions(steps: Sequence[str], substitutions: Sequence[Substitution]) -> List[str]:
    """
    Rewrite preparation steps for a set of substitutions.

    Substitutions are applied in order. For each one, every case-insensitive
    occurrence of the original ingredient in every step is replaced by the
    substitute, and when the substitution carries adjustments they are
    appended to every step as " (adjustments)".

    Args:
        steps: Preparation steps
        substitutions: Accepted substitutions

    Returns:
        List[str]: New list of rewritten steps (a copy when nothing applies)

    Example:
        >>> apply_substitutions(
        ...     ["Voeg de Room toe."],
        ...     [Substitution(original="room", substitute="kokosmelk")]
        ... )
        ['Voeg de kokosmelk toe.']
    """
    updated = list(steps)
    if not substitutions:
        return updated

    for sub in substitutions:
        pattern = re.compile(re.escape(sub.original), re.IGNORECASE)
        rewritten = []
        for step in updated:
            # Lambda so backslashes in the substitute are taken literally
            step = pattern.sub(lambda _: sub.substitute, step)
            if sub.adjustments:
                step = f"{step} ({sub.adjustments})"
            rewritten.append(step)
        updated = rewritten

    logger.debug(f"Applied {len(substitutions)} substitution(s) to {len(updated)} step(s)")
    return updated


def adapt_recipe(recipe: Recipe, substitutions: Sequence[Substitution]) -> Recipe:
    """
    Return a copy of a recipe with substitutions applied.

    Steps are rewritten with ``apply_substitutions``. Ingredient lines whose
    name equals an original (case-insensitive) are renamed to the substitute;
    amount and unit are kept.

    Args:
        recipe: Recipe to adapt
        substitutions: Accepted substitutions

    Returns:
        Recipe: Adapted copy; the input recipe is not modified
    """
    replacements = {sub.original.lower(): sub.substitute for sub in substitutions}

    ingredients = [
        RecipeIngredient(
            name=replacements.get(ingredient.name.lower(), ingredient.name),
            amount=ingredient.amount,
            unit=ingredient.unit,
        )
        for ingredient in recipe.ingredients
    ]

    logger.info(
        f"Adapting recipe {recipe.id} ('{recipe.title}') "
        f"with {len(substitutions)} substitution(s)"
    )

    return recipe.model_copy(
        update={
            "ingredients": ingredients,
            "steps": apply_substitutions(recipe.steps, substitutions),
        }
    )
