"""
Pydantic models for ingredient substitutions.

This module defines data models for the substitution workflow: lookup
results, accepted substitutions and the request/response schemas of the
substitution and explanation endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class SubstitutionResult(BaseModel):
    """
    Result of looking up substitutes for one ingredient.

    Absence is explicit: ``found`` is False and ``substitutes`` is empty
    when the table has no entry. Display text for that case is chosen by
    the caller through ``display_options``.

    Attributes:
        ingredient: The ingredient as requested
        substitutes: Substitute names, most preferred first
        found: Whether the table had an entry for the ingredient
    """
    ingredient: str = Field(..., description="Requested ingredient")
    substitutes: List[str] = Field(default_factory=list, description="Substitutes")
    found: bool = Field(..., description="Whether substitutes exist")

    def display_options(self, fallback: str) -> List[str]:
        """
        Substitutes to show, or a single fallback text when none exist.

        Args:
            fallback: Text shown when nothing was found

        Returns:
            List[str]: Never empty
        """
        if self.substitutes:
            return list(self.substitutes)
        return [fallback]

    model_config = {
        "json_schema_extra": {
            "example": {
                "ingredient": "kipfilet",
                "substitutes": ["varkenshaas", "tofu", "kalkoenfilet"],
                "found": True
            }
        }
    }


class Substitution(BaseModel):
    """
    An accepted (or proposed) replacement of one ingredient by another.

    Attributes:
        original: Ingredient being replaced
        substitute: Replacement ingredient
        reason: Why the substitute works
        adjustments: Optional cooking time/temperature changes
    """
    original: str = Field(..., min_length=1, description="Original ingredient")
    substitute: str = Field(..., min_length=1, description="Substitute ingredient")
    reason: str = Field("", description="Substitution rationale")
    adjustments: Optional[str] = Field(None, description="Cooking adjustments")

    model_config = {
        "json_schema_extra": {
            "example": {
                "original": "room",
                "substitute": "kokosmelk",
                "reason": "De smaak zal voor 85% overeenkomen.",
                "adjustments": "Pas de kooktijd aan: bak 2 minuten korter."
            }
        }
    }


class SubstitutionRequest(BaseModel):
    """Request model for the /substitutions endpoint."""
    ingredient: str = Field(
        ...,
        max_length=200,
        description="Missing ingredient",
        examples=["kipfilet"]
    )
    inventory: Optional[List[str]] = Field(
        None,
        description="If given, only substitutes present in this inventory are returned"
    )


class SubstitutionResponse(SubstitutionResult):
    """Response model for the /substitutions endpoint."""
    options: List[str] = Field(
        ...,
        description="Substitutes, or the fallback text when none exist"
    )


class ExplanationRequest(BaseModel):
    """Request model for the /explanation endpoint."""
    original: str = Field(..., max_length=200, examples=["room"])
    substitute: str = Field(..., max_length=200, examples=["kokosmelk"])


class ExplanationResponse(BaseModel):
    """Response model for the /explanation endpoint."""
    original: str
    substitute: str
    explanation: str
    confidence: int = Field(..., ge=0, le=100, description="Flavor match percentage")
    time_adjustment_minutes: int = Field(..., description="Minutes to shorten cooking by")
