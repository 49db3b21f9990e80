"""
Recipe ranking against a user's inventory.

Scores every recipe with the match scorer, applies the recipe-list filters
(quick, vegetarian, favorites, time range, difficulty, cuisine, diet,
missing-one) and orders the result by match score, highest first. Ties
keep the input order.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from cookmind.models.recipe import Recipe, RecipeFilters, RankedRecipe
from cookmind.services.match_scorer import analyze_match
from cookmind.utils.constants import (
    HIGH_MATCH_THRESHOLD,
    QUICK_RECIPE_MAX_MINUTES,
    VEGETARIAN_TAG,
)

# Configure logging
logger = logging.getLogger(__name__)


class RecipeRanker:
    """
    Service for filtering and ordering recipes by inventory match.

    Attributes:
        quick_max_minutes: Recipes with a shorter prep time count as quick
        high_threshold: Lowest score that counts as a high match
    """

    def __init__(
        self,
        quick_max_minutes: int = QUICK_RECIPE_MAX_MINUTES,
        high_threshold: int = HIGH_MATCH_THRESHOLD
    ):
        self.quick_max_minutes = quick_max_minutes
        self.high_threshold = high_threshold

        logger.info(
            f"RecipeRanker initialized with quick_max_minutes={quick_max_minutes}, "
            f"high_threshold={high_threshold}"
        )

    def rank_recipes(
        self,
        recipes: Iterable[Recipe],
        inventory: Sequence[str],
        filters: Optional[RecipeFilters] = None,
        favorite_ids: Optional[Iterable[int]] = None
    ) -> List[RankedRecipe]:
        """
        Match, filter and sort recipes.

        Args:
            recipes: Candidate recipes
            inventory: Ingredient names the user has
            filters: Optional recipe-list filters
            favorite_ids: Ids of the user's favorite recipes

        Returns:
            List[RankedRecipe]: Matching recipes, best match first
        """
        filters = filters or RecipeFilters()
        favorites = set(favorite_ids or ())

        ranked = [
            RankedRecipe(
                recipe=recipe,
                match=analyze_match(recipe.ingredient_names, inventory, self.high_threshold),
            )
            for recipe in recipes
        ]
        total = len(ranked)

        ranked = [item for item in ranked if self._passes(item, filters, favorites)]

        # sorted() is stable, so equal scores keep their input order
        ranked = sorted(ranked, key=lambda item: item.match.score, reverse=True)

        logger.info(f"Ranked {len(ranked)} of {total} recipe(s) after filtering")
        return ranked

    def _passes(self, item: RankedRecipe, filters: RecipeFilters, favorites: set) -> bool:
        """Check one ranked recipe against every active filter."""
        recipe = item.recipe

        if filters.quick and recipe.prep_time >= self.quick_max_minutes:
            return False

        if filters.vegetarian and VEGETARIAN_TAG not in recipe.tags:
            return False

        if filters.favorites_only and recipe.id not in favorites:
            return False

        if filters.time_range is not None:
            low, high = filters.time_range
            if not low <= recipe.prep_time <= high:
                return False

        if filters.difficulty and recipe.difficulty not in filters.difficulty:
            return False

        if filters.cuisine:
            tags = [tag.lower() for tag in recipe.tags]
            if not any(c.lower() in tag for c in filters.cuisine for tag in tags):
                return False

        if filters.diet and not any(diet in recipe.tags for diet in filters.diet):
            return False

        if filters.missing_one and len(item.match.missing) != 1:
            return False

        return True


def rank_recipes(
    recipes: Iterable[Recipe],
    inventory: Sequence[str],
    filters: Optional[RecipeFilters] = None,
    favorite_ids: Optional[Iterable[int]] = None
) -> List[RankedRecipe]:
    """Rank recipes with the default quick-recipe limit and match threshold."""
    return RecipeRanker().rank_recipes(recipes, inventory, filters, favorite_ids)
