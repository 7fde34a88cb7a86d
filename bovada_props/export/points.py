"""Odds-to-points scoring for the props game."""

from __future__ import annotations

import math

MIN_PROBABILITY = 1
MAX_PROBABILITY = 99


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def implied_probability(odds: float) -> int:
    """Implied win probability of decimal odds, as a whole percentage."""
    if not math.isfinite(odds) or odds < 1.0:
        raise ValueError(f"decimal odds must be a number >= 1.0, got {odds!r}")
    return _round_half_up(100 / odds)


def odds_to_points(odds: float) -> int:
    """Score an outcome from 1 to 99, inversely to its implied probability.

    No margin (vig) adjustment is made across an outcome set.
    """
    probability = implied_probability(odds)
    return 100 - min(MAX_PROBABILITY, max(probability, MIN_PROBABILITY))
