"""
dialogue.py
===========
Dialogue Client: one outbound call per detective question, returning the
suspect's in-character reply.

Public API:
    send_message(suspect, history, user_text, language) → str

The client is stateless. Each call builds a fresh suspect agent and replays
the most recent part of the interrogation transcript in the prompt, so the
suspect stays consistent with what they already said. The client never
touches energy or the transcript; the view controller owns both.

The logger name for this module is ``noir_detective.dialogue``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from agents import build_suspect_agent, response_text
from config import GAME_CONFIG
from errors import DialogueFailure
from models import Case, DialogueMessage, Sender, Suspect

logger = logging.getLogger("noir_detective.dialogue")


def send_message(
    suspect: Suspect,
    history: Sequence[DialogueMessage],
    user_text: str,
    language: str,
    case: Optional[Case] = None,
    agent: Optional[Any] = None,
) -> str:
    """
    Ask `suspect` the detective's question and return their reply.

    Args:
        suspect:   The suspect being interrogated.
        history:   Transcript so far, oldest first. Not modified.
        user_text: The detective's latest question.
        language:  "en" or "ru".
        case:      Active case, used to ground the suspect in the scene.
        agent:     Anything with a run(prompt) method; defaults to a freshly
                   built suspect agent. Tests pass a stub here.

    Returns:
        The stripped reply text.

    Raises:
        DialogueFailure: provider error or an empty reply.
    """
    agent = agent or build_suspect_agent(suspect, language, case)
    prompt = (
        f"{build_history_text(suspect, history)}"
        f"Detective's latest question:\n{user_text}\n\n"
        "Respond in character."
    )

    logger.info(
        "Interrogating %s (prior messages: %d)", suspect.name, len(history)
    )
    try:
        resp = agent.run(prompt)
    except Exception as exc:
        logger.error("Suspect agent call failed for %s: %s", suspect.name, exc, exc_info=True)
        raise DialogueFailure("suspect agent call failed") from exc

    reply = response_text(resp).strip()
    if not reply:
        logger.error("Suspect agent returned an empty reply for %s", suspect.name)
        raise DialogueFailure("empty reply from suspect agent")

    logger.debug("Reply from %s: %d chars", suspect.name, len(reply))
    return reply


def build_history_text(suspect: Suspect, history: Sequence[DialogueMessage]) -> str:
    """
    Format the last GAME_CONFIG.history_window exchanges for the prompt.

    Returns an empty string when there is nothing to replay.
    """
    if not history:
        return ""

    recent = list(history)[-GAME_CONFIG.history_window * 2:]
    lines = []
    for msg in recent:
        if msg.sender == Sender.DETECTIVE:
            lines.append(f"Detective: {msg.text}")
        else:
            lines.append(f"You ({suspect.name}): {msg.text}")
    return (
        "PREVIOUS EXCHANGES IN THIS INTERROGATION:\n"
        + "\n".join(lines)
        + "\n\n"
    )
