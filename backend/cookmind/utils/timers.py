"""
Cooking timer extraction from preparation steps.

Detects durations such as "15 minuten", "30 min", "2 uur" or "1,5 uur" in
a step and sums them into a single timer for cooking mode.
"""

import re
import logging
from typing import List, Optional

from cookmind.models.recipe import StepTimer
from cookmind.utils.constants import TIMER_UNITS

# Configure logging
logger = logging.getLogger(__name__)

_TIMER_PATTERNS = [
    (re.compile(r'(\d+(?:[.,]\d+)?)\s*(?:' + units + r')\b', re.IGNORECASE), multiplier)
    for units, multiplier in TIMER_UNITS
]


def parse_step_timer(text: str) -> Optional[StepTimer]:
    """
    Parse the total cooking time mentioned in a preparation step.

    Every hour, minute and second expression in the text is added up.
    Decimal points and decimal commas are both accepted.

    Args:
        text: Preparation step

    Returns:
        Optional[StepTimer]: The timer, or None when no positive duration is found

    Example:
        >>> parse_step_timer("Laat 1,5 uur sudderen en roer 10 min door").seconds
        6000
    """
    if not text:
        return None

    total = 0.0
    found: List[str] = []

    for pattern, multiplier in _TIMER_PATTERNS:
        for match in pattern.finditer(text):
            value = float(match.group(1).replace(',', '.'))
            if value > 0:
                total += value * multiplier
                found.append(match.group(0))

    seconds = int(total)
    if seconds == 0:
        return None

    logger.debug(f"Parsed timer of {seconds}s from step: {text[:50]}")

    return StepTimer(
        seconds=seconds,
        hours=seconds // 3600,
        minutes=(seconds % 3600) // 60,
        original_text=", ".join(found),
    )


def format_timer(seconds: int) -> str:
    """
    Format a duration as MM:SS, or H:MM:SS from one hour up.

    Args:
        seconds: Duration in seconds

    Returns:
        str: Formatted duration (e.g., "05:30", "1:05:30")
    """
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
