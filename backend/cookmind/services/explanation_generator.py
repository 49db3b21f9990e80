"""
Template-based substitution explanations.

This module produces the short rationale shown next to a suggested
substitution. The text is static: the flavor confidence and the cooking
time adjustment are fixed placeholder values, identical for every pair of
ingredients. They live in named constants so a future per-ingredient
quality model can replace them without touching call sites.
"""

import logging

from cookmind.models.substitution import Substitution
from cookmind.utils.constants import (
    COOKING_TIME_ADJUSTMENT_MINUTES,
    EXPLANATION_FLAVOR_TEMPLATE,
    EXPLANATION_INSTRUCTION_TEMPLATE,
    EXPLANATION_TIME_TEMPLATE,
    FLAVOR_MATCH_CONFIDENCE,
)

# Configure logging
logger = logging.getLogger(__name__)


class ExplanationGenerator:
    """
    Service for generating substitution explanations.

    Attributes:
        confidence: Flavor match percentage stated in every explanation
        time_adjustment_minutes: Minutes to shorten cooking by
    """

    def __init__(
        self,
        confidence: int = FLAVOR_MATCH_CONFIDENCE,
        time_adjustment_minutes: int = COOKING_TIME_ADJUSTMENT_MINUTES
    ):
        if not 0 <= confidence <= 100:
            raise ValueError(f"confidence must be between 0 and 100, got {confidence}")
        if time_adjustment_minutes < 0:
            raise ValueError(
                f"time_adjustment_minutes cannot be negative, got {time_adjustment_minutes}"
            )

        self.confidence = confidence
        self.time_adjustment_minutes = time_adjustment_minutes

    def flavor_sentence(self) -> str:
        return EXPLANATION_FLAVOR_TEMPLATE.format(confidence=self.confidence)

    def time_sentence(self) -> str:
        return EXPLANATION_TIME_TEMPLATE.format(minutes=self.time_adjustment_minutes)

    def generate_explanation(self, original: str, substitute: str) -> str:
        """
        Explain a substitution in one short paragraph.

        Args:
            original: Ingredient being replaced
            substitute: Replacement ingredient

        Returns:
            str: Instruction, flavor confidence and cooking time hint

        Example:
            >>> ExplanationGenerator().generate_explanation("room", "kokosmelk")
            'Gebruik kokosmelk in plaats van room. De smaak zal voor 85% overeenkomen. Pas de kooktijd aan: bak 2 minuten korter.'
        """
        logger.debug(f"Generating explanation for {original} -> {substitute}")

        instruction = EXPLANATION_INSTRUCTION_TEMPLATE.format(
            substitute=substitute,
            original=original,
        )
        return f"{instruction} {self.flavor_sentence()} {self.time_sentence()}"

    def build_substitution(self, original: str, substitute: str) -> Substitution:
        """
        Build a Substitution whose reason and adjustments come from the template.

        Args:
            original: Ingredient being replaced
            substitute: Replacement ingredient

        Returns:
            Substitution: Ready to apply to a recipe
        """
        return Substitution(
            original=original,
            substitute=substitute,
            reason=self.flavor_sentence(),
            adjustments=self.time_sentence(),
        )


_default_generator = ExplanationGenerator()


def generate_explanation(original: str, substitute: str) -> str:
    """Explain a substitution using the default confidence and time hint."""
    return _default_generator.generate_explanation(original, substitute)


def build_substitution(original: str, substitute: str) -> Substitution:
    """Build a Substitution using the default confidence and time hint."""
    return _default_generator.build_substitution(original, substitute)
