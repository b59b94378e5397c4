"""
game_engine.py
==============
View controller for Noir Detective Archive.

Contains:
  Events        — small frozen dataclasses describing what the player did
                  (RequestNewCase, SelectSuspect, Accuse, ...) or what a
                  provider call produced (CaseGenerated, DialogueFailed, ...).
  reduce()      — pure transition function: (Session, event) → Session.
  DetectiveGame — the single coordinating class that owns the current
                  Session, runs the provider calls for the two side-effecting
                  events, and feeds their results back through reduce().
                  Consumed by both the Streamlit UI (app.py) and the CLI
                  runner (cli.py).

Public API summary:
    game = DetectiveGame()
    game.session                     → Session
    game.dispatch(event)             → Session
    game.request_new_case()          → Session
    game.send_message(text)          → Session

Transition table (anything else leaves the session unchanged):

    OFFICE         RequestNewCase   → CASE_FILE   (via CaseGenerated)
    OFFICE         OpenShop         → SHOP
    OFFICE         ToggleLanguage   → OFFICE
    CASE_FILE      SelectSuspect    → INTERROGATION
    CASE_FILE      RequestAccusation→ ACCUSATION
    INTERROGATION  SendMessage      → INTERROGATION (via MessageExchanged)
    INTERROGATION  Back             → CASE_FILE
    ACCUSATION     Accuse           → RESULT
    ACCUSATION     Defer            → CASE_FILE
    SHOP           Restock          → OFFICE
    SHOP           Back             → OFFICE
    RESULT         Acknowledge      → OFFICE

Logging
-------
The logger name for this module is ``noir_detective.game_engine``. Configure
level and destination once at your entry point (app.py / cli.py).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple, Union

import case_generator
import dialogue
from config import GAME_CONFIG, SCORING_CONFIG, SUPPORTED_LANGUAGES
from errors import DialogueFailure, GenerationFailure
from models import Case, DialogueMessage, GameView, Outcome, Sender, Session, new_message
from scoring import apply_experience, score
from translations import text

logger = logging.getLogger("noir_detective.game_engine")


# ---------------------------------------------------------------------------
# Player events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RequestNewCase:
    pass


@dataclass(frozen=True)
class OpenShop:
    pass


@dataclass(frozen=True)
class ToggleLanguage:
    pass


@dataclass(frozen=True)
class SelectSuspect:
    suspect_id: str


@dataclass(frozen=True)
class RequestAccusation:
    pass


@dataclass(frozen=True)
class SendMessage:
    text: str


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Accuse:
    suspect_id: str


@dataclass(frozen=True)
class Defer:
    pass


@dataclass(frozen=True)
class Restock:
    pass


@dataclass(frozen=True)
class Acknowledge:
    pass


# ---------------------------------------------------------------------------
# Provider result events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CaseGenerated:
    case: Case


@dataclass(frozen=True)
class CaseGenerationFailed:
    reason: str


@dataclass(frozen=True)
class MessageExchanged:
    question: str
    reply:    str


@dataclass(frozen=True)
class DialogueFailed:
    reason: str


Event = Union[
    RequestNewCase, OpenShop, ToggleLanguage, SelectSuspect, RequestAccusation,
    SendMessage, Back, Accuse, Defer, Restock, Acknowledge,
    CaseGenerated, CaseGenerationFailed, MessageExchanged, DialogueFailed,
]

# ---------------------------------------------------------------------------
# Transition handlers
#
# Each handler returns the next Session, or None when its guard fails.
# ---------------------------------------------------------------------------

def _case_generated(s: Session, e: CaseGenerated) -> Session:
    return replace(
        s,
        view=GameView.CASE_FILE,
        case=e.case,
        selected_suspect_id=None,
        outcome=None,
        dialogue=(),
    )


def _case_generation_failed(s: Session, e: CaseGenerationFailed) -> Session:
    return replace(s, notice=text(s.language, "connection_lost"))


def _open_shop(s: Session, e: OpenShop) -> Session:
    return replace(s, view=GameView.SHOP)


def _toggle_language(s: Session, e: ToggleLanguage) -> Session:
    idx = SUPPORTED_LANGUAGES.index(s.language) if s.language in SUPPORTED_LANGUAGES else -1
    return replace(s, language=SUPPORTED_LANGUAGES[(idx + 1) % len(SUPPORTED_LANGUAGES)])


def _select_suspect(s: Session, e: SelectSuspect) -> Optional[Session]:
    suspect = s.case.find_suspect(e.suspect_id) if s.case else None
    if suspect is None:
        return None
    greeting = new_message(Sender.SUSPECT, text(s.language, "greeting", name=suspect.name))
    return replace(
        s,
        view=GameView.INTERROGATION,
        selected_suspect_id=suspect.id,
        dialogue=(greeting,),
    )


def _request_accusation(s: Session, e: RequestAccusation) -> Session:
    return replace(s, view=GameView.ACCUSATION)


def _message_exchanged(s: Session, e: MessageExchanged) -> Optional[Session]:
    if s.energy <= 0 or s.selected_suspect is None:
        return None
    return replace(
        s,
        dialogue=s.dialogue + (
            new_message(Sender.DETECTIVE, e.question),
            new_message(Sender.SUSPECT, e.reply),
        ),
        energy=max(0, s.energy - 1),
        experience=apply_experience(s.experience, SCORING_CONFIG.question_xp),
    )


def _dialogue_failed(s: Session, e: DialogueFailed) -> Session:
    return replace(s, notice=text(s.language, "connection_lost"))


def _leave_interrogation(s: Session, e: Back) -> Session:
    return replace(s, view=GameView.CASE_FILE, selected_suspect_id=None, dialogue=())


def _accuse(s: Session, e: Accuse) -> Optional[Session]:
    suspect = s.case.find_suspect(e.suspect_id) if s.case else None
    if suspect is None:
        return None
    outcome = Outcome.WIN if suspect.is_killer else Outcome.LOSE
    return replace(
        s,
        view=GameView.RESULT,
        outcome=outcome,
        experience=apply_experience(s.experience, score(outcome)),
    )


def _to_case_file(s: Session, e: Defer) -> Session:
    return replace(s, view=GameView.CASE_FILE)


def _restock(s: Session, e: Restock) -> Session:
    return replace(s, view=GameView.OFFICE, energy=GAME_CONFIG.max_energy)


def _to_office(s: Session, e: Back) -> Session:
    return replace(s, view=GameView.OFFICE)


def _acknowledge(s: Session, e: Acknowledge) -> Session:
    return replace(s, view=GameView.OFFICE, outcome=None)


def _sent_history(s: Session) -> Tuple[DialogueMessage, ...]:
    """Transcript replayed to the Dialogue Client, without the greeting."""
    if s.dialogue and s.dialogue[0].sender == Sender.SUSPECT:
        return s.dialogue[1:]
    return s.dialogue


TRANSITIONS: Dict[Tuple[GameView, type], Callable[[Session, object], Optional[Session]]] = {
    (GameView.OFFICE,        CaseGenerated):        _case_generated,
    (GameView.OFFICE,        CaseGenerationFailed): _case_generation_failed,
    (GameView.OFFICE,        OpenShop):             _open_shop,
    (GameView.OFFICE,        ToggleLanguage):       _toggle_language,
    (GameView.CASE_FILE,     SelectSuspect):        _select_suspect,
    (GameView.CASE_FILE,     RequestAccusation):    _request_accusation,
    (GameView.INTERROGATION, MessageExchanged):     _message_exchanged,
    (GameView.INTERROGATION, DialogueFailed):       _dialogue_failed,
    (GameView.INTERROGATION, Back):                 _leave_interrogation,
    (GameView.ACCUSATION,    Accuse):               _accuse,
    (GameView.ACCUSATION,    Defer):                _to_case_file,
    (GameView.SHOP,          Restock):              _restock,
    (GameView.SHOP,          Back):                 _to_office,
    (GameView.RESULT,        Acknowledge):          _acknowledge,
}


def reduce(session: Session, event: Event) -> Session:
    """
    Compute the session that follows `event`.

    Pure: never calls a provider and never mutates `session`. An event that is
    not valid in the current view, or whose guard fails (unknown suspect,
    no energy), returns `session` itself. A handled player event clears any
    pending notice; failure events set one.
    """
    handler = TRANSITIONS.get((session.view, type(event)))
    if handler is None:
        logger.warning(
            "Ignored %s in view %s", type(event).__name__, session.view.value
        )
        return session

    nxt = handler(session, event)
    if nxt is None:
        logger.warning(
            "Guard rejected %s in view %s", event, session.view.value
        )
        return session

    if not isinstance(event, (CaseGenerationFailed, DialogueFailed)):
        nxt = replace(nxt, notice=None)

    logger.info(
        "Transition %s --%s--> %s",
        session.view.value,
        type(event).__name__,
        nxt.view.value,
    )
    return nxt


# ---------------------------------------------------------------------------
# Coordinator
# ---------------------------------------------------------------------------

class DetectiveGame:
    """
    Owns the current Session and the two provider clients.

    The Streamlit UI and the CLI interact with this class exclusively; they
    have no direct awareness of Agno agents or Groq model calls. Both clients
    are injectable so tests can run without a network.

    Attributes:
        session: The latest Session snapshot. Replaced, never mutated.
    """

    def __init__(
        self,
        session: Optional[Session] = None,
        generate_case: Optional[Callable[..., Case]] = None,
        ask_suspect: Optional[Callable[..., str]] = None,
    ) -> None:
        self.session = session or Session()
        self._generate_case = generate_case or case_generator.generate_case
        self._ask_suspect = ask_suspect or dialogue.send_message
        logger.info(
            "DetectiveGame initialised — energy=%d, experience=%d, language=%s",
            self.session.energy,
            self.session.experience,
            self.session.language,
        )

    def dispatch(self, event: Event) -> Session:
        """Apply `event`, running a provider call first when it needs one."""
        if isinstance(event, RequestNewCase):
            return self.request_new_case()
        if isinstance(event, SendMessage):
            return self.send_message(event.text)
        self.session = reduce(self.session, event)
        return self.session

    # ------------------------------------------------------------------
    # Side-effecting events
    # ------------------------------------------------------------------

    def request_new_case(self) -> Session:
        """
        Generate a new case and open its file.

        Only valid from OFFICE. On GenerationFailure the view stays at OFFICE
        and a notice is set; the player retries explicitly.
        """
        if self.session.view != GameView.OFFICE:
            logger.warning("request_new_case ignored in view %s", self.session.view.value)
            return self.session

        try:
            case = self._generate_case(self.session.language)
        except GenerationFailure as exc:
            logger.error("Case generation failed: %s", exc)
            self.session = reduce(self.session, CaseGenerationFailed(str(exc)))
            return self.session

        self.session = reduce(self.session, CaseGenerated(case))
        return self.session

    def send_message(self, user_text: str) -> Session:
        """
        Ask the selected suspect a question.

        Rejected without a provider call when not interrogating, when the
        text is blank, or when energy is 0. On success the question and the
        reply are appended and one unit of energy is spent. On
        DialogueFailure nothing is appended and no energy is spent. The
        opening greeting is shown to the player but never sent to the client.
        """
        s = self.session
        question = (user_text or "").strip()
        suspect = s.selected_suspect

        if s.view != GameView.INTERROGATION or suspect is None or not question:
            logger.warning("send_message ignored in view %s", s.view.value)
            return s

        if s.energy <= 0:
            logger.info("send_message rejected — out of energy")
            self.session = replace(s, notice=text(s.language, "no_energy"))
            return self.session

        try:
            reply = self._ask_suspect(
                suspect, _sent_history(s), question, s.language, case=s.case
            )
        except DialogueFailure as exc:
            logger.error("Dialogue with %s failed: %s", suspect.name, exc)
            self.session = reduce(s, DialogueFailed(str(exc)))
            return self.session

        self.session = reduce(s, MessageExchanged(question, reply))
        return self.session
