"""
config.py
=========
Central configuration module for Noir Detective Archive.

All tunable constants, model identifiers and game-balance parameters live
here so they can be adjusted without touching business logic.

Usage:
    from config import MODEL_CONFIG, GAME_CONFIG, SCORING_CONFIG
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# ---------------------------------------------------------------------------
# Model selection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ModelConfig:
    """
    Groq model identifiers used across the system.

    Attributes:
        case_model:    Large model that writes a whole case file as JSON.
                       Needs to keep three suspects, one killer and the clue
                       list consistent with each other.
        suspect_model: Model used for in-character interrogation replies.
    """
    case_model:    str = "llama-3.3-70b-versatile"
    suspect_model: str = "llama-3.3-70b-versatile"


# ---------------------------------------------------------------------------
# Game-balance parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Game-balance settings.

    Attributes:
        max_energy:       Coffee cups available; one is spent per question.
        suspect_count:    Number of suspects every generated case must have.
        history_window:   Number of prior exchanges replayed to the suspect
                          agent on every question.
        default_language: Language of a fresh session.
    """
    max_energy:       int = 10
    suspect_count:    int = 3
    history_window:   int = 6
    default_language: str = "en"


# ---------------------------------------------------------------------------
# Scoring parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoringConfig:
    """
    Experience rewards and penalties.

    Attributes:
        win_xp:       Experience granted for accusing the real killer.
        lose_xp:      Experience removed for accusing an innocent suspect.
        question_xp:  Experience granted per answered question.
        xp_per_level: Experience needed to climb one detective level.
    """
    win_xp:       int = 100
    lose_xp:      int = 20
    question_xp:  int = 5
    xp_per_level: int = 50


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

MODEL_CONFIG   = ModelConfig()
GAME_CONFIG    = GameConfig()
SCORING_CONFIG = ScoringConfig()


SUPPORTED_LANGUAGES: Tuple[str, ...] = ("en", "ru")
"""Languages the case writer and the suspects can speak."""

LANGUAGE_NAMES = {"en": "English", "ru": "Russian"}

AVATAR_URL_TEMPLATE = (
    "https://api.dicebear.com/7.x/notionists/svg?seed={seed}&backgroundColor=transparent"
)
"""
Deterministic avatar renderer. The same seed always yields the same face,
so a suspect keeps their portrait for the lifetime of a case.
"""
