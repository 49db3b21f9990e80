"""
Pydantic models for recipe data.

This module defines the data models for recipes, recipe-list filters and
ranking results, including request schemas for the recipe endpoints. All
models use Pydantic for automatic validation, serialization, and type safety.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Literal, Optional, Tuple

from cookmind.models.match import MatchResult
from cookmind.models.substitution import Substitution
from cookmind.utils.constants import DIET_TAGS

Difficulty = Literal["Makkelijk", "Gemiddeld", "Moeilijk"]


class RecipeIngredient(BaseModel):
    """
    A single ingredient line of a recipe.

    Attributes:
        name: Ingredient name as shown to the user
        amount: Quantity for the recipe's default servings
        unit: Unit of measurement (e.g., "gram", "stuks")
    """
    name: str = Field(..., description="Ingredient name")
    amount: float = Field(0, ge=0, description="Quantity")
    unit: str = Field("", description="Unit of measurement")


class Recipe(BaseModel):
    """
    Recipe model.

    Attributes:
        id: Unique recipe identifier
        title: Recipe title
        description: Short description
        prep_time: Preparation time in minutes
        servings: Number of servings
        difficulty: Makkelijk / Gemiddeld / Moeilijk
        ingredients: Ingredient lines
        steps: Preparation steps, in order
        tags: Free-form tags used by the filters (e.g., "vegetarisch", "italiaans")
        image_url: Optional image location
    """
    id: int = Field(..., description="Unique recipe identifier")
    title: str = Field(..., min_length=1, description="Recipe title")
    description: str = Field("", description="Short description")
    prep_time: int = Field(..., ge=0, description="Preparation time in minutes")
    servings: int = Field(1, ge=1, description="Number of servings")
    difficulty: Difficulty = Field("Makkelijk", description="Difficulty level")
    ingredients: List[RecipeIngredient] = Field(
        default_factory=list,
        description="Ingredient lines"
    )
    steps: List[str] = Field(default_factory=list, description="Preparation steps")
    tags: List[str] = Field(default_factory=list, description="Filter tags")
    image_url: Optional[str] = Field(None, description="Image URL")

    @property
    def ingredient_names(self) -> List[str]:
        """Ingredient names in recipe order."""
        return [ingredient.name for ingredient in self.ingredients]

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "title": "Pasta Carbonara",
                "description": "Romige Italiaanse klassieker",
                "prep_time": 20,
                "servings": 2,
                "difficulty": "Makkelijk",
                "ingredients": [
                    {"name": "pasta", "amount": 200, "unit": "gram"},
                    {"name": "spek", "amount": 100, "unit": "gram"},
                    {"name": "parmezaanse kaas", "amount": 50, "unit": "gram"}
                ],
                "steps": ["Kook de pasta 10 minuten.", "Bak het spek krokant."],
                "tags": ["italiaans", "snel"]
            }
        }
    }


class RecipeFilters(BaseModel):
    """
    Filters applied to the ranked recipe list.

    All filters are optional and combined with AND.

    Attributes:
        quick: Only recipes below the quick prep-time limit
        vegetarian: Only recipes tagged "vegetarisch"
        favorites_only: Only recipes whose id is among the favorites
        time_range: Inclusive (min, max) prep time in minutes
        difficulty: Accepted difficulty levels
        cuisine: Cuisines, matched as substrings of tags
        diet: Diets, matched as exact tags
        missing_one: Only recipes missing exactly one ingredient
    """
    quick: bool = Field(False, description="Only quick recipes")
    vegetarian: bool = Field(False, description="Only vegetarian recipes")
    favorites_only: bool = Field(False, description="Only favorite recipes")
    time_range: Optional[Tuple[int, int]] = Field(
        None,
        description="Inclusive prep time range in minutes"
    )
    difficulty: List[Difficulty] = Field(default_factory=list)
    cuisine: List[str] = Field(default_factory=list)
    diet: List[str] = Field(default_factory=list)
    missing_one: bool = Field(False, description="Only recipes missing one ingredient")

    @field_validator('diet')
    @classmethod
    def validate_diet(cls, v: List[str]) -> List[str]:
        for diet in v:
            if diet not in DIET_TAGS:
                raise ValueError(
                    f"Invalid diet '{diet}'. Valid: {', '.join(DIET_TAGS)}"
                )
        return v

    @model_validator(mode='after')
    def validate_time_range(self) -> 'RecipeFilters':
        if self.time_range is not None:
            low, high = self.time_range
            if low < 0 or high < low:
                raise ValueError('time_range must be (min, max) with 0 <= min <= max')
        return self

    @property
    def active_count(self) -> int:
        """Number of advanced filters in use (shown as a badge in the filter bar)."""
        return sum([
            self.time_range is not None,
            len(self.difficulty) > 0,
            len(self.cuisine) > 0,
            len(self.diet) > 0,
            self.missing_one,
        ])


class RankedRecipe(BaseModel):
    """
    A recipe together with its inventory match.

    Attributes:
        recipe: The recipe
        match: Match result against the user's inventory
    """
    recipe: Recipe
    match: MatchResult


class StepTimer(BaseModel):
    """
    Cooking timer extracted from a preparation step.

    Attributes:
        seconds: Total duration in seconds
        hours: Whole hours component
        minutes: Remaining whole minutes
        original_text: The time expressions found, comma separated
    """
    seconds: int = Field(..., gt=0)
    hours: int = Field(..., ge=0)
    minutes: int = Field(..., ge=0, lt=60)
    original_text: str


class RankRecipesRequest(BaseModel):
    """Request model for the /recipes/rank endpoint."""
    recipes: List[Recipe] = Field(..., description="Recipes to rank")
    inventory: List[str] = Field(default_factory=list, description="Inventory names")
    filters: Optional[RecipeFilters] = Field(None, description="Optional filters")
    favorite_ids: List[int] = Field(default_factory=list, description="Favorite recipe ids")


class AdaptRecipeRequest(BaseModel):
    """Request model for the /recipes/adapt endpoint."""
    recipe: Recipe
    substitutions: List[Substitution] = Field(default_factory=list)


class ParseTimerRequest(BaseModel):
    """Request model for the /timers/parse endpoint."""
    step: str = Field(..., max_length=2000, description="Preparation step text")


class ParseTimerResponse(BaseModel):
    """Response model for the /timers/parse endpoint."""
    step: str
    timer: Optional[StepTimer] = None
    display: Optional[str] = Field(None, description="Timer formatted as MM:SS or H:MM:SS")
