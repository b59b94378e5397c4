"""
cli.py
======
Command-line interface for Noir Detective Archive.

Provides a text-based game loop for development, testing, and playing
without Streamlit. All game logic is delegated to DetectiveGame; this module
only handles I/O.

Usage:
    python cli.py

Commands:
    new              — request a new case              (office)
    shop / restock   — open the shop / brew coffee     (office / shop)
    lang             — switch English ↔ Russian        (office)
    open <n>         — interrogate suspect number n    (case file)
    ask <question>   — question the current suspect    (interrogation)
    accuse           — go to the accusation screen     (case file)
    accuse <n>       — accuse suspect number n         (accusation)
    defer            — back to the case file           (accusation)
    back             — leave the current screen
    ok               — acknowledge the verdict         (result)
    status           — show view, energy and experience
    quit             — exit the game
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from game_engine import (
    Accuse,
    Acknowledge,
    Back,
    Defer,
    DetectiveGame,
    OpenShop,
    RequestAccusation,
    Restock,
    SelectSuspect,
    ToggleLanguage,
)
from models import GameView, Outcome, Sender, Session, Suspect
from translations import text
from ui_helpers import energy_badge, xp_badge


def _suspect_by_number(session: Session, arg: str) -> Optional[Suspect]:
    if session.case is None or not arg.isdigit():
        return None
    idx = int(arg) - 1
    if 0 <= idx < len(session.case.suspects):
        return session.case.suspects[idx]
    return None


def print_view(session: Session) -> None:
    """Print whatever the current view shows. Absent data prints nothing."""
    lang = session.language
    print(f"\n[{session.view.value}]  {xp_badge(lang, session.experience)}  "
          f"☕ {text(lang, 'energy')}: {energy_badge(session.energy)}")
    if session.notice:
        print(f"!! {session.notice}")

    case = session.case
    if session.view == GameView.OFFICE:
        print(f"{text(lang, 'title')} — {text(lang, 'subtitle')}")
    elif session.view == GameView.SHOP:
        print(f"{text(lang, 'buy_coffee')}: {text(lang, 'restock_energy')}")
    elif session.view == GameView.CASE_FILE and case is not None:
        print("=" * 60)
        print(f"{case.title} ({case.difficulty})")
        print("=" * 60)
        print(case.description)
        print(f"{text(lang, 'victim'):<14}: {case.victim}")
        print(f"{text(lang, 'location'):<14}: {case.location}")
        print(f"{text(lang, 'time_of_death'):<14}: {case.time_of_death}")
        print(f"\n{text(lang, 'clues')}:")
        for clue in case.clues:
            print(f"  - {clue}")
        print(f"\n{text(lang, 'suspects')}:")
        for i, s in enumerate(case.suspects, 1):
            print(f"  {i}. {s.name} ({s.role}) — {s.bio}")
    elif session.view == GameView.INTERROGATION:
        suspect = session.selected_suspect
        if suspect is None:
            return
        for msg in session.dialogue[-2:]:
            speaker = suspect.name if msg.sender == Sender.SUSPECT else "You"
            print(f"[{speaker}]: {msg.text}")
    elif session.view == GameView.ACCUSATION and case is not None:
        print(text(lang, "who_is_killer"))
        for i, s in enumerate(case.suspects, 1):
            print(f"  {i}. {s.name} ({s.role})")
    elif session.view == GameView.RESULT and case is not None and session.outcome:
        if session.outcome == Outcome.WIN:
            print(text(lang, "case_closed"))
            print(text(lang, "success_msg", name=case.killer.name))
        else:
            print(text(lang, "case_cold"))
            print(text(lang, "fail_msg", name=case.killer.name))


def run_cli() -> None:
    """
    Main CLI game loop.

    Validates the GROQ_API_KEY environment variable, creates the game, then
    processes commands until the player quits.
    """
    if not os.environ.get("GROQ_API_KEY"):
        print("Error: GROQ_API_KEY environment variable is not set.")
        print("  export GROQ_API_KEY='your-key-here'")
        return

    game = DetectiveGame()
    print_view(game.session)

    while True:
        user_input = input("\n> ").strip()
        if not user_input:
            continue

        command, _, arg = user_input.partition(" ")
        command = command.lower()
        arg = arg.strip()
        session = game.session

        if command in {"quit", "exit"}:
            print("Thanks for playing!")
            break

        if command == "status":
            print_view(session)
            continue

        if command == "new":
            print(text(session.language, "loading"))
            game.request_new_case()
        elif command == "shop":
            game.dispatch(OpenShop())
        elif command == "restock":
            game.dispatch(Restock())
        elif command == "lang":
            game.dispatch(ToggleLanguage())
        elif command == "open":
            suspect = _suspect_by_number(session, arg)
            game.dispatch(SelectSuspect(suspect.id if suspect else arg))
        elif command == "ask":
            game.send_message(arg)
        elif command == "accuse" and not arg:
            game.dispatch(RequestAccusation())
        elif command == "accuse":
            suspect = _suspect_by_number(session, arg)
            game.dispatch(Accuse(suspect.id if suspect else arg))
        elif command == "defer":
            game.dispatch(Defer())
        elif command == "back":
            game.dispatch(Back())
        elif command == "ok":
            game.dispatch(Acknowledge())
        else:
            print(__doc__.split("Commands:")[1])
            continue

        if game.session is session:
            print("(nothing happens)")
        print_view(game.session)


if __name__ == "__main__":
    # Configure logging at the entry point so all noir_detective.* loggers
    # emit at WARNING; the prompt stays readable while rejected events and
    # provider failures still show up.
    load_dotenv()
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    run_cli()
