"""
Product name to ingredient tagging.

Scanned or searched supermarket products carry names like
"AH Biologisch Rode Paprika". Matching only works on plain ingredient
names, so each product is tagged with one of the standard ingredient tags
(``ALL_INGREDIENTS``) when it is added to the inventory.

A tag is chosen from, in order:
1. The Open Food Facts categories, when given
2. The trailing words of the product name, brand names removed, matched
   exactly, by containment, or by edit-distance similarity

Names are compared lower-cased with accents stripped ("maïs" == "mais").
"""

import logging
import re
import unicodedata
from typing import List, Optional, Sequence

from cookmind.utils.constants import (
    ALL_INGREDIENTS,
    BRAND_NAMES,
    CATEGORY_MAPPINGS,
    TAG_CONTAINMENT_SIMILARITY,
    TAG_SIMILARITY_THRESHOLD,
)

# Configure logging
logger = logging.getLogger(__name__)

_BRAND_PATTERNS = [
    re.compile(rf"\b{re.escape(brand)}\b", re.IGNORECASE) for brand in BRAND_NAMES
]


def normalize_name(name: str) -> str:
    """Lower-case, strip accents and surrounding whitespace."""
    decomposed = unicodedata.normalize("NFD", name.lower())
    return "".join(c for c in decomposed if not unicodedata.combining(c)).strip()


def remove_brand_names(product_name: str) -> str:
    """
    Normalize a product name and remove known store and label names.

    Example:
        >>> remove_brand_names("AH Biologisch Rode Paprika")
        'rode paprika'
    """
    cleaned = normalize_name(product_name)
    for pattern in _BRAND_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return cleaned.strip()


def extract_candidates(product_name: str) -> List[str]:
    """
    Candidate ingredient names from the end of a product name.

    Words of two characters or fewer are dropped. The product itself is
    usually named last, so the candidates are the last word, then the last
    two and three words when the name has more words than that
    ("verse rode punt paprika" gives "paprika", "punt paprika",
    "rode punt paprika"). A single word is its own candidate.

    Args:
        product_name: Product name as sold

    Returns:
        List[str]: Candidates, shortest first (empty if no usable words)
    """
    words = [w for w in remove_brand_names(product_name).split() if len(w) > 2]
    if len(words) == 1:
        return words
    # a phrase as long as the whole name is never a candidate
    return [" ".join(words[-size:]) for size in (1, 2, 3) if len(words) > size]


def levenshtein_distance(first: str, second: str) -> int:
    """Minimum number of single-character edits turning one string into the other."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, start=1):
        current = [i]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]


def similarity(first: str, second: str) -> float:
    """
    Name similarity between 0 and 1.

    Equal names score 1.0 and names containing one another score 0.8.
    Otherwise the score is the share of the longer name that survives the
    edit distance.

    Example:
        >>> similarity("paprika", "rode paprika")
        0.8
        >>> round(similarity("banaan", "bananen"), 2)
        0.71
    """
    a = normalize_name(first)
    b = normalize_name(second)

    if a == b:
        return 1.0
    if a in b or b in a:
        return TAG_CONTAINMENT_SIMILARITY

    longer, shorter = (a, b) if len(a) > len(b) else (b, a)
    return (len(longer) - levenshtein_distance(longer, shorter)) / len(longer)


def find_best_match(
    candidates: Sequence[str],
    threshold: float = TAG_SIMILARITY_THRESHOLD
) -> Optional[str]:
    """
    Best standard ingredient tag for a list of candidate names.

    Candidates are tried in order. An exact tag match wins immediately.
    A containment match (0.8) ends the search after the current candidate.
    Otherwise the most similar tag at or above the threshold is kept.

    Args:
        candidates: Candidate names, in order of preference
        threshold: Minimum similarity for a fuzzy match (default: 0.7)

    Returns:
        Optional[str]: A tag from ALL_INGREDIENTS, or None
    """
    tags = [(tag, normalize_name(tag)) for tag in ALL_INGREDIENTS]
    best_match: Optional[str] = None
    best_score = 0.0

    for candidate in (normalize_name(c) for c in candidates):
        for tag, normalized in tags:
            if candidate == normalized:
                return tag

        for tag, normalized in tags:
            if candidate in normalized or normalized in candidate:
                if best_score < TAG_CONTAINMENT_SIMILARITY:
                    best_score = TAG_CONTAINMENT_SIMILARITY
                    best_match = tag
                continue

            if best_score < TAG_CONTAINMENT_SIMILARITY:
                score = similarity(candidate, tag)
                if score > best_score and score >= threshold:
                    best_score = score
                    best_match = tag

        if best_score >= TAG_CONTAINMENT_SIMILARITY:
            return best_match

    return best_match


def map_categories_to_ingredient(categories: Sequence[str]) -> Optional[str]:
    """
    Tag implied by Open Food Facts categories.

    The first category naming a known group (vegetables, fish, dairy, ...)
    decides. Within it, a comma-separated part naming a specific tag picks
    that tag; otherwise the group's first tag is used.

    Args:
        categories: Category strings such as "en:vegetables"

    Returns:
        Optional[str]: A tag, or None if no category is recognized
    """
    for category in categories:
        normalized = normalize_name(category)

        for key, tags in CATEGORY_MAPPINGS.items():
            if key.replace("en:", "") not in normalized:
                continue

            for part in normalized.split(","):
                part = part.strip()
                for tag in tags:
                    if part in tag or tag in part:
                        return tag

            if tags:
                return tags[0]

    return None


def suggest_ingredient_tag(
    product_name: str,
    categories: Optional[Sequence[str]] = None
) -> Optional[str]:
    """
    Suggest a standard ingredient tag for a product.

    Args:
        product_name: Product name as sold
        categories: Open Food Facts categories, if known

    Returns:
        Optional[str]: Suggested tag, or None for an empty name or no match

    Example:
        >>> suggest_ingredient_tag("Jumbo Verse Spinazie")
        'spinazie'
    """
    if not product_name:
        return None

    if categories:
        tag = map_categories_to_ingredient(categories)
        if tag:
            logger.debug(f"Tagged '{product_name}' as '{tag}' from categories")
            return tag

    tag = find_best_match(extract_candidates(product_name))
    logger.debug(f"Tagged '{product_name}' as {tag!r} from name")
    return tag
