"""
Centralized constants and reference data.

This module contains the hardcoded lookup tables and fixed values used by
the match and substitution engine. Centralizing these values makes them
easy to modify and maintain.

Categories:
- Reference substitution table
- Explanation template values
- Match level thresholds
- Recipe filter tags
- Step timer units
- Basic inventory items and their variants
- Standard ingredient tags and product tagging lists
"""

from typing import Dict, List, Tuple

# ==============================================================================
# SUBSTITUTION DATABASE
# ==============================================================================

# Ordered by preference: most suitable substitute first
REFERENCE_SUBSTITUTIONS: Dict[str, List[str]] = {
    "kipfilet": ["varkenshaas", "tofu", "kalkoenfilet"],
    "room": ["kokosmelk", "Griekse yoghurt", "zure room"],
    "tomatenpuree": ["verse tomaten (meer)", "paprikapuree"],
    "pasta": ["rijst", "quinoa", "aardappelen"],
    "kokosmelk": ["room", "zure room", "Griekse yoghurt"],
    "spek": ["ham", "chorizo", "pancetta"],
    "risottorijst": ["gewone rijst", "pasta", "quinoa"],
    "witte wijn": ["citroensap", "appelciderazijn"],
    "parmezaanse kaas": ["pecorino", "cheddar", "mozzarella"],
}

FALLBACK_SUGGESTION: str = "Geen suggestie beschikbaar"


# ==============================================================================
# EXPLANATION TEMPLATE
# ==============================================================================

# Placeholders until substitution quality is modelled per ingredient
FLAVOR_MATCH_CONFIDENCE: int = 85
COOKING_TIME_ADJUSTMENT_MINUTES: int = 2

EXPLANATION_INSTRUCTION_TEMPLATE: str = "Gebruik {substitute} in plaats van {original}."
EXPLANATION_FLAVOR_TEMPLATE: str = "De smaak zal voor {confidence}% overeenkomen."
EXPLANATION_TIME_TEMPLATE: str = "Pas de kooktijd aan: bak {minutes} minuten korter."


# ==============================================================================
# MATCH LEVELS
# ==============================================================================

FULL_MATCH_SCORE: int = 100
HIGH_MATCH_THRESHOLD: int = 80


# ==============================================================================
# RECIPE FILTERS
# ==============================================================================

QUICK_RECIPE_MAX_MINUTES: int = 30
VEGETARIAN_TAG: str = "vegetarisch"

DIET_TAGS: Tuple[str, ...] = ("vegetarisch", "vegan", "glutenvrij", "lactosevrij")


# ==============================================================================
# STEP TIMERS
# ==============================================================================

# (unit alternatives, seconds per unit); hours first so "u" is not read as minutes
TIMER_UNITS: List[Tuple[str, int]] = [
    (r"uur|u|hours?|h", 3600),
    (r"minuten|min|minutes?|m", 60),
    (r"seconden|sec|seconds?|s", 1),
]


# ==============================================================================
# BASIC INVENTORY
# ==============================================================================

# (name, category, quantity, unit) of the pantry staples every user starts with
BASIC_INVENTORY_ITEMS: List[Tuple[str, str, float, str]] = [
    ("Zout", "Kruiden", 1, "pak"),
    ("Peper", "Kruiden", 1, "potje"),
    ("Boter", "Zuivel", 250, "g"),
    ("Olijfolie", "Oliën", 1, "fles"),
]

# Interchangeable variants of each basic item
VARIANT_MAPPINGS: Dict[str, List[str]] = {
    "Olijfolie": ["Zonnebloemolie", "Arachideolie", "Koolzaadolie", "Plantaardige olie"],
    "Boter": ["Margarine", "Roomboter", "Geklaarde boter"],
    "Zout": ["Zeezout", "Tafelzout", "Kosher zout"],
    "Peper": ["Zwarte peper", "Witte peper", "Pepermengsel"],
}


# ==============================================================================
# STANDARD INGREDIENT TAGS
# ==============================================================================

STANDARD_INGREDIENTS: Dict[str, List[str]] = {
    "vegetables": [
        "paprika", "ui", "knoflook", "tomaat", "wortel", "broccoli", "bloemkool",
        "spinazie", "sla", "komkommer", "courgette", "aubergine", "prei",
        "selderij", "champignons", "asperges", "spruitjes", "rode biet", "radijs",
        "maïs", "erwten", "sperziebonen", "witlof", "andijvie", "rucola",
    ],
    "fruits": [
        "appel", "banaan", "sinaasappel", "citroen", "limoen", "aardbei", "druiven",
        "meloen", "watermeloen", "perzik", "peer", "kiwi", "mango", "ananas",
        "avocado",
    ],
    "meats": [
        "kip", "kipfilet", "kippendij", "rundvlees", "varkensvlees", "varkenshaas",
        "gehakt", "spek", "worst", "ham", "zalm", "tonijn", "kabeljauw", "garnalen",
        "mosselen", "eieren",
    ],
    "dairy": [
        "melk", "kaas", "yoghurt", "boter", "room", "zure room", "mozzarella",
        "parmezaan", "cheddar", "kwark",
    ],
    "grains": [
        "rijst", "pasta", "spaghetti", "penne", "brood", "volkorenbrood", "meel",
        "bloem", "quinoa", "couscous", "bulgur",
    ],
    "herbs": [
        "zout", "peper", "basilicum", "oregano", "tijm", "rozemarijn", "peterselie",
        "koriander", "dille", "bieslook", "laurier", "paprikapoeder", "kerrie",
        "komijn", "kaneel", "nootmuskaat",
    ],
    "other": [
        "olijfolie", "zonnebloemolie", "azijn", "sojasaus", "bouillon",
        "bouillonblokjes", "tomatenpuree", "gember", "kappertjes", "olijven",
        "noten", "amandelen", "walnoten",
    ],
}

# All tags in category order, without duplicates
ALL_INGREDIENTS: List[str] = list(dict.fromkeys(
    tag for tags in STANDARD_INGREDIENTS.values() for tag in tags
))


# ==============================================================================
# PRODUCT TAGGING
# ==============================================================================

# Store and label names stripped from product names before matching
BRAND_NAMES: List[str] = [
    "jumbo", "ah", "albert heijn", "plus", "coop", "lidl", "aldi", "ekoplaza",
    "marqt", "vomar", "hoogvliet", "deka", "spar", "appie", "bio", "biologisch",
    "organic",
]

# Open Food Facts category -> candidate tags, checked in this order
CATEGORY_MAPPINGS: Dict[str, List[str]] = {
    "en:vegetables": STANDARD_INGREDIENTS["vegetables"],
    "en:fruits": STANDARD_INGREDIENTS["fruits"],
    "en:meats": STANDARD_INGREDIENTS["meats"],
    "en:fish": ["zalm", "tonijn", "kabeljauw", "garnalen", "mosselen"],
    "en:dairy": STANDARD_INGREDIENTS["dairy"],
    "en:grains": STANDARD_INGREDIENTS["grains"],
    "en:spices": STANDARD_INGREDIENTS["herbs"],
    "en:herbs": STANDARD_INGREDIENTS["herbs"],
}

# Minimum name similarity (0-1) for a fuzzy tag match
TAG_SIMILARITY_THRESHOLD: float = 0.7
# Similarity assigned when one name contains the other
TAG_CONTAINMENT_SIMILARITY: float = 0.8
