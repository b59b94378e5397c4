"""
agents.py
=========
Factory functions that construct every Agno Agent used by the game.

Keeping builders here rather than inline in the clients means:
  - Each agent's system prompt is easy to find and edit in isolation.
  - Unit tests can replace a single agent with a stub without touching
    the view controller.
  - Model swaps or prompt experiments require changes in exactly one file.

Agents built here:
  build_case_writer_agent()  — noir novelist that returns a case file as JSON
  build_suspect_agent()      — in-character role-player for one suspect
"""

from __future__ import annotations

from typing import Any, Optional

from agno.agent import Agent
from agno.models.groq import Groq

from config import GAME_CONFIG, LANGUAGE_NAMES, MODEL_CONFIG
from models import Case, Suspect


def language_name(language: str) -> str:
    return LANGUAGE_NAMES.get(language, LANGUAGE_NAMES[GAME_CONFIG.default_language])


def response_text(resp: Any) -> str:
    """Return the text of an agent run, whatever agno version produced it."""
    content = resp.content if hasattr(resp, "content") else resp
    return "" if content is None else str(content)


# ---------------------------------------------------------------------------
# Case writer agent
# ---------------------------------------------------------------------------

def build_case_writer_agent(language: str) -> Agent:
    """
    Build the case-writer agent for `language`.

    Instead of relying on the Agent's structured-output parameter (its name
    and support differ between agno versions), the agent is instructed to
    return a strict ```json ... ``` block. The case generator then extracts,
    parses, and validates that block against the CasePayload schema.

    Args:
        language: "en" or "ru"; every string in the case is written in it.

    Returns:
        An Agent whose output is a JSON block parseable into CasePayload.
    """
    lang = language_name(language)
    count = GAME_CONFIG.suspect_count

    instructions = f"""
You are a Crime Novelist AI. Generate a unique, noir-style murder mystery case in {lang}.

RULES:
1. Create a victim and a crime scene.
2. Create exactly {count} suspects.
3. EXACTLY ONE suspect must be the killer ("isKiller": true). All others are false.
4. The others must have suspicious motives but alibis that hold up (or lies that can be checked).
5. Give the killer a subtle slip-up in their alibi or motive.
6. Write 3 to 6 short clues a careful detective could use to find the killer.
7. Every string value must be written in {lang}. JSON keys stay in English.

OUTPUT FORMAT — return ONLY this JSON block, nothing else before or after it:
```json
{{
  "title":       "<case title>",
  "description": "<two or three sentences setting the scene>",
  "location":    "<where the body was found>",
  "victim":      "<victim's full name>",
  "timeOfDeath": "<approximate time of death>",
  "difficulty":  "<Easy | Medium | Hard>",
  "clues":       ["<clue>", "..."],
  "suspects": [
    {{
      "name":     "<full name>",
      "role":     "<short label, e.g. The Butler>",
      "bio":      "<one or two sentences>",
      "motive":   "<why they might have done it>",
      "alibi":    "<where they claim they were>",
      "isKiller": false
    }}
  ]
}}
```
Do not add any text outside the ```json ... ``` fences.
"""

    return Agent(
        name="Case Writer Agent",
        role="Write a self-consistent murder mystery case file as strict JSON.",
        model=Groq(id=MODEL_CONFIG.case_model),
        instructions=[instructions],
        markdown=False,
    )


# ---------------------------------------------------------------------------
# Suspect agent
# ---------------------------------------------------------------------------

def build_suspect_agent(
    suspect: Suspect,
    language: str,
    case: Optional[Case] = None,
) -> Agent:
    """
    Create an in-character agent for `suspect`.

    The agent is given the suspect's persona, motive, alibi and whether they
    are the killer, plus the public facts of the case when available. Killers
    lie about the crime but may slip when pressed; innocents tell the truth
    while possibly hiding some smaller sin.

    Args:
        suspect:  The suspect to play.
        language: Language of the conversation.
        case:     Active case, used to ground answers in the scene.

    Returns:
        An Agent instance ready to receive interrogation prompts.
    """
    case_block = ""
    if case is not None:
        case_block = (
            "\nCASE FACTS (known to everyone):\n"
            f"  Victim       : {case.victim}\n"
            f"  Location     : {case.location}\n"
            f"  Time of death: {case.time_of_death}\n"
            f"  Summary      : {case.description}\n"
        )

    instructions = f"""
You are roleplaying a character in a murder mystery. The language of conversation is {language_name(language)}.

Name     : {suspect.name}
Role     : {suspect.role}
Bio      : {suspect.bio}
Is Killer: {"YES" if suspect.is_killer else "NO"}
Motive   : {suspect.motive}
Alibi    : {suspect.alibi}
{case_block}
The user is the Detective. They are asking you questions.
- Answer in character. Be defensive, nervous, or arrogant depending on the bio.
- If you are the killer, LIE about your crime, but leave subtle hints if pressed hard.
- If you are innocent, tell the truth, but you might be hiding something else (like an affair or theft).
- Stay consistent with anything you said earlier in the interrogation.
- Do NOT acknowledge being an AI, a model, or a game character.
- Keep responses short: 2–3 sentences.
"""

    return Agent(
        name=f"{suspect.name} Agent",
        role=f"Play the role of {suspect.name}, a murder suspect under interrogation.",
        model=Groq(id=MODEL_CONFIG.suspect_model),
        instructions=[instructions],
        markdown=False,
    )
