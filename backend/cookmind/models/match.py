"""
Pydantic models for recipe-to-inventory matching.
"""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Dict, List

from cookmind.models.substitution import SubstitutionResult


class MatchLevel(str, Enum):
    """Badge bucket for a match score."""
    FULL = "full"
    HIGH = "high"
    LOW = "low"


class MatchResult(BaseModel):
    """
    Outcome of matching a recipe's ingredients against an inventory.

    Attributes:
        score: Percentage of recipe ingredients found in the inventory (0-100)
        level: Badge bucket for the score
        matched: Recipe ingredients found in the inventory, in recipe order
        missing: Recipe ingredients not found, in recipe order
    """
    score: int = Field(..., ge=0, le=100, description="Match percentage")
    level: MatchLevel = Field(..., description="Match level")
    matched: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing

    model_config = {
        "json_schema_extra": {
            "example": {
                "score": 67,
                "level": "low",
                "matched": ["pasta", "spek"],
                "missing": ["parmezaanse kaas"]
            }
        }
    }


class MatchRequest(BaseModel):
    """Request model for the /match endpoint."""
    recipe_ingredients: List[str] = Field(
        ...,
        description="Ingredient names required by the recipe",
        examples=[["pasta", "spek", "parmezaanse kaas"]]
    )
    inventory: List[str] = Field(
        default_factory=list,
        description="Ingredient names the user has",
        examples=[["Volkoren pasta", "spekblokjes"]]
    )


class MatchResponse(MatchResult):
    """
    Response model for the /match endpoint.

    Adds substitution suggestions for the first few missing ingredients and
    the missing ingredients a basic item in stock can stand in for.
    """
    suggestions: List[SubstitutionResult] = Field(
        default_factory=list,
        description="Substitutes for the first missing ingredients"
    )
    basic_variants: Dict[str, str] = Field(
        default_factory=dict,
        description="Missing ingredient -> basic inventory item that covers it"
    )
