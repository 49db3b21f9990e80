"""
Ingredient substitution lookup.

This module resolves a missing ingredient to a ranked list of substitutes
from a fixed knowledge table. Lookup is case-insensitive and exact: unlike
match scoring, no substring matching is done here.

The table is an explicit, immutable object injected into the resolver, so
tests and deployments can supply their own (for example from a JSON file)
without changing callers. The reference table is used by default.

Absence is a regular result, never an exception. ``lookup`` reports it
through ``SubstitutionResult.found``; ``suggest_substitutions`` keeps the
original list contract and renders it as a single fallback entry.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from cookmind.models.substitution import SubstitutionResult
from cookmind.utils.constants import FALLBACK_SUGGESTION, REFERENCE_SUBSTITUTIONS
from cookmind.utils.helpers import find_matching_entry
from cookmind.utils.validators import validate_substitution_mapping

# Configure logging
logger = logging.getLogger(__name__)


class SubstitutionTableError(ValueError):
    """Raised when a substitution table file cannot be loaded."""


class SubstitutionTable(Mapping[str, Tuple[str, ...]]):
    """
    Immutable mapping of lower-cased ingredient names to ranked substitutes.

    Keys are lower-cased on construction; values are stored as tuples in
    the given order (most preferred first). Lookups through ``get_substitutes``
    are case-insensitive.

    Attributes:
        source: Where the table came from ("reference" or a file path)
    """

    def __init__(self, mapping: Mapping[str, Sequence[str]], source: str = "custom"):
        """
        Build a table from a raw mapping.

        Args:
            mapping: Ingredient name to substitute names
            source: Label used in logs

        Raises:
            ValueError: If the mapping has empty or non-string entries
        """
        validate_substitution_mapping(mapping)

        entries: Dict[str, Tuple[str, ...]] = {}
        for ingredient, substitutes in mapping.items():
            key = ingredient.lower()
            if key in entries:
                logger.warning(
                    f"Duplicate substitution entry for '{key}' in {source}; "
                    f"keeping the last one"
                )
            entries[key] = tuple(substitutes)

        self._entries = MappingProxyType(entries)
        self.source = source

    @classmethod
    def default(cls) -> "SubstitutionTable":
        """Return the built-in reference table."""
        return cls(REFERENCE_SUBSTITUTIONS, source="reference")

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "SubstitutionTable":
        """
        Load a table from a JSON object of ``{ingredient: [substitutes]}``.

        Args:
            path: JSON file location

        Returns:
            SubstitutionTable: The loaded table

        Raises:
            SubstitutionTableError: If the file is missing, not JSON, or malformed
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as e:
            raise SubstitutionTableError(f"Cannot read substitution table {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SubstitutionTableError(f"Invalid JSON in substitution table {path}: {e}") from e

        try:
            table = cls(raw, source=str(path))
        except ValueError as e:
            raise SubstitutionTableError(f"Invalid substitution table {path}: {e}") from e

        logger.info(f"Loaded {len(table)} substitution entries from {path}")
        return table

    def get_substitutes(self, ingredient: str) -> Tuple[str, ...]:
        """Substitutes for an ingredient (any case), or an empty tuple."""
        return self._entries.get(ingredient.lower(), ())

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SubstitutionTable(source={self.source!r}, entries={len(self)})"


class SubstitutionResolver:
    """
    Service for looking up substitutes for missing ingredients.

    Attributes:
        table: Substitution table used for lookups
        fallback: Display text returned when nothing is found
    """

    def __init__(
        self,
        table: Optional[SubstitutionTable] = None,
        fallback: str = FALLBACK_SUGGESTION
    ):
        """
        Initialize the resolver.

        Args:
            table: Substitution table (reference table if omitted)
            fallback: Display text for ingredients without substitutes
        """
        self.table = table if table is not None else SubstitutionTable.default()
        self.fallback = fallback

        logger.info(
            f"SubstitutionResolver initialized with {len(self.table)} entries "
            f"(source={self.table.source})"
        )

    def lookup(self, ingredient: str) -> SubstitutionResult:
        """
        Look up substitutes for an ingredient.

        Args:
            ingredient: Missing ingredient name (any case)

        Returns:
            SubstitutionResult: Ranked substitutes, or found=False when unknown
        """
        substitutes = self.table.get_substitutes(ingredient)
        if not substitutes:
            logger.debug(f"No substitutes known for '{ingredient}'")

        return SubstitutionResult(
            ingredient=ingredient,
            substitutes=list(substitutes),
            found=bool(substitutes),
        )

    def suggest_substitutions(self, ingredient: str) -> List[str]:
        """
        Substitutes for an ingredient, or ``[fallback]`` when none exist.

        Args:
            ingredient: Missing ingredient name (any case)

        Returns:
            List[str]: Never empty
        """
        return self.lookup(ingredient).display_options(self.fallback)

    def suggest_from_inventory(self, ingredient: str, inventory: Sequence[str]) -> List[str]:
        """
        Substitutes for an ingredient that the user actually has.

        A substitute is kept when an inventory entry matches it the same
        way match scoring does (case-insensitive containment either way).

        Args:
            ingredient: Missing ingredient name
            inventory: Ingredient names the user has

        Returns:
            List[str]: Available substitutes, most preferred first (may be empty)
        """
        available = [
            substitute
            for substitute in self.table.get_substitutes(ingredient)
            if find_matching_entry(substitute, inventory) is not None
        ]

        logger.debug(
            f"{len(available)} substitute(s) for '{ingredient}' available in inventory"
        )
        return available


_default_table = SubstitutionTable.default()


def suggest_substitutions(
    missing_ingredient: str,
    table: Optional[SubstitutionTable] = None
) -> List[str]:
    """
    Substitutes for a missing ingredient, or the single fallback entry.

    Args:
        missing_ingredient: Ingredient name (any case)
        table: Substitution table (reference table if omitted)

    Returns:
        List[str]: Ranked substitutes or ``[FALLBACK_SUGGESTION]``

    Example:
        >>> suggest_substitutions("KIPFILET")
        ['varkenshaas', 'tofu', 'kalkoenfilet']
    """
    if table is None:
        table = _default_table
    substitutes = table.get_substitutes(missing_ingredient)
    return list(substitutes) if substitutes else [FALLBACK_SUGGESTION]
