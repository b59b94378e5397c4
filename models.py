"""
models.py
=========
Shared data models for Noir Detective Archive.

Contains:
  - GameView / Outcome / Sender : enumerations used by the view controller.
  - SuspectPayload / CasePayload: Pydantic schemas for the case writer's JSON.
  - Suspect / Case              : immutable case file handed to the UI.
  - DialogueMessage             : one line of an interrogation transcript.
  - Session                     : immutable snapshot of the player's progress.

Keeping these in one module guarantees a single source of truth for data
shapes used across case_generator.py, dialogue.py, game_engine.py and the UI.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, List, Literal, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    field_validator,
    model_validator,
)

from config import GAME_CONFIG, SCORING_CONFIG


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class GameView(str, Enum):
    """Screens of the game. OFFICE is where every session starts."""

    OFFICE = "OFFICE"
    CASE_FILE = "CASE_FILE"
    INTERROGATION = "INTERROGATION"
    ACCUSATION = "ACCUSATION"
    RESULT = "RESULT"
    SHOP = "SHOP"


class Outcome(str, Enum):
    WIN = "WIN"
    LOSE = "LOSE"


class Sender(str, Enum):
    DETECTIVE = "Detective"
    SUSPECT = "Suspect"


# ---------------------------------------------------------------------------
# Pydantic structured output schema
# ---------------------------------------------------------------------------

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class SuspectPayload(BaseModel):
    """One suspect exactly as the case writer returns it."""

    model_config = ConfigDict(populate_by_name=True)

    name:      NonEmptyStr
    role:      NonEmptyStr
    bio:       NonEmptyStr
    motive:    NonEmptyStr
    alibi:     NonEmptyStr
    is_killer: StrictBool = Field(alias="isKiller")


class CasePayload(BaseModel):
    """
    Validated output schema for the case-writer agent.

    The provider's JSON is never trusted structurally: every required field
    must be present and non-empty, there must be exactly
    GAME_CONFIG.suspect_count suspects, and exactly one of them must be
    flagged as the killer. Any violation raises pydantic.ValidationError,
    which the case generator turns into a GenerationFailure.

    Field names follow the provider's camelCase keys through aliases so the
    raw dict can be passed straight to model_validate().
    """

    model_config = ConfigDict(populate_by_name=True)

    title:         NonEmptyStr
    description:   NonEmptyStr
    location:      NonEmptyStr
    victim:        NonEmptyStr
    time_of_death: NonEmptyStr = Field(alias="timeOfDeath")
    clues:         List[NonEmptyStr]
    suspects:      List[SuspectPayload] = Field(
        min_length=GAME_CONFIG.suspect_count,
        max_length=GAME_CONFIG.suspect_count,
    )
    difficulty:    Literal["Easy", "Medium", "Hard"] = "Medium"

    @field_validator("difficulty", mode="before")
    @classmethod
    def _normalise_difficulty(cls, value):
        # Optional in the request; an unknown label is not worth losing a case over.
        if isinstance(value, str) and value.strip().capitalize() in ("Easy", "Medium", "Hard"):
            return value.strip().capitalize()
        return "Medium"

    @model_validator(mode="after")
    def _exactly_one_killer(self) -> "CasePayload":
        killers = sum(1 for s in self.suspects if s.is_killer)
        if killers != 1:
            raise ValueError(f"expected exactly one killer, got {killers}")
        return self


# ---------------------------------------------------------------------------
# Case file
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Suspect:
    """
    A suspect in the active case.

    Attributes:
        id:          Unique within the case; used by select/accuse events.
        name:        Display name.
        role:        Short label, e.g. "The Butler".
        bio:         Background that shapes how the suspect talks.
        motive:      Why they might have wanted the victim dead.
        alibi:       The story they tell about the time of death.
        is_killer:   Private ground truth; never shown before the verdict.
        avatar_seed: Opaque seed for the deterministic avatar renderer.
    """

    id:          str
    name:        str
    role:        str
    bio:         str
    motive:      str
    alibi:       str
    is_killer:   bool
    avatar_seed: str


@dataclass(frozen=True)
class Case:
    """A generated murder case. Replaced wholesale, never edited."""

    id:            str
    title:         str
    description:   str
    location:      str
    victim:        str
    time_of_death: str
    clues:         Tuple[str, ...]
    suspects:      Tuple[Suspect, ...]
    difficulty:    str = "Medium"

    def find_suspect(self, suspect_id: Optional[str]) -> Optional[Suspect]:
        """Return the suspect with `suspect_id`, or None if not in this case."""
        for suspect in self.suspects:
            if suspect.id == suspect_id:
                return suspect
        return None

    @property
    def killer(self) -> Suspect:
        return next(s for s in self.suspects if s.is_killer)


# ---------------------------------------------------------------------------
# Dialogue
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DialogueMessage:
    id:        str
    sender:    Sender
    text:      str
    timestamp: float


def new_message(sender: Sender, text: str) -> DialogueMessage:
    """Stamp a fresh transcript line with a unique id and the current time."""
    return DialogueMessage(
        id=uuid.uuid4().hex,
        sender=sender,
        text=text,
        timestamp=time.time(),
    )


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Session:
    """
    Immutable snapshot of everything the player sees.

    The view controller never mutates a Session; it returns a new one via
    dataclasses.replace(). The Streamlit app keeps the latest snapshot in
    st.session_state and renders from it.

    Attributes:
        view:                Current screen.
        case:                Active case, None until the first generation.
        selected_suspect_id: Suspect being interrogated (INTERROGATION only).
        energy:              Coffee left, 0..GAME_CONFIG.max_energy.
        experience:          Detective XP, never negative.
        outcome:             Verdict of the last accusation (RESULT only).
        language:            "en" or "ru".
        dialogue:            Transcript of the current interrogation.
        notice:              User-visible error from the last failed call.
    """

    view:                GameView = GameView.OFFICE
    case:                Optional[Case] = None
    selected_suspect_id: Optional[str] = None
    energy:              int = GAME_CONFIG.max_energy
    experience:          int = 0
    outcome:             Optional[Outcome] = None
    language:            str = GAME_CONFIG.default_language
    dialogue:            Tuple[DialogueMessage, ...] = field(default_factory=tuple)
    notice:              Optional[str] = None

    @property
    def level(self) -> int:
        return self.experience // SCORING_CONFIG.xp_per_level + 1

    @property
    def selected_suspect(self) -> Optional[Suspect]:
        if self.case is None:
            return None
        return self.case.find_suspect(self.selected_suspect_id)
