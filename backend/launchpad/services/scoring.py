"""
Shared score arithmetic for the role matcher and opportunity fit scorer.

Scores round half-up (22.5 -> 23), matching how fit points are displayed,
rather than Python's round-half-to-even.
"""

import math
from typing import List, Tuple

# Match tiers, evaluated top-down (first threshold met wins)
MATCH_TIERS: List[Tuple[str, int]] = [
    ("excellent", 80),
    ("good", 60),
    ("fair", 40),
    ("needs-development", 0),
]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round and clamp a raw score into [low, high]."""
    return max(low, min(high, round_half_up(value)))


def tier_of(score: float) -> str:
    """Classify a 0-100 score into its match tier."""
    for tier, minimum in MATCH_TIERS:
        if score >= minimum:
            return tier
    return "needs-development"
