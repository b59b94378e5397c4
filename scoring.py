"""
scoring.py
==========
Deterministic, side-effect-free scoring logic.

Extracted from the game engine so it can be unit-tested independently and
adjusted by changing ScoringConfig values in config.py without touching
any game logic or UI code.
"""

from __future__ import annotations

from config import SCORING_CONFIG
from models import Outcome


def score(outcome: Outcome) -> int:
    """
    Experience delta for the verdict of an accusation.

        WIN  → +win_xp  (default: +100)
        LOSE → -lose_xp (default: -20)

    The delta is not floored here; apply it with apply_experience().

    Examples:
        >>> score(Outcome.WIN)
        100
        >>> score(Outcome.LOSE)
        -20
    """
    cfg = SCORING_CONFIG
    if outcome == Outcome.WIN:
        return cfg.win_xp
    return -cfg.lose_xp


def apply_experience(experience: int, delta: int) -> int:
    """Add `delta` to `experience`, never dropping below zero."""
    return max(0, experience + delta)


def detective_level(experience: int) -> int:
    """
    Level derived from experience: one level per xp_per_level points,
    starting at level 1.

    Examples:
        >>> detective_level(0)
        1
        >>> detective_level(149)
        3
    """
    return max(0, experience) // SCORING_CONFIG.xp_per_level + 1
