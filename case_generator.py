"""
case_generator.py
=================
Case Generator Client: asks the case-writer agent for a new murder case and
turns its raw output into a validated, immutable Case.

Public API:
    generate_case(language)  → Case       (raises GenerationFailure)
    parse_case(raw_text)     → Case       (raises GenerationFailure)

The provider's output is never trusted structurally. Every generation goes
through the same parse-and-validate step:
  1. Find the first "{" (inside the first ```json fence when there is one).
  2. Decode one JSON value from there with JSONDecoder.raw_decode(); any
     trailing prose, fences or braces are ignored.
  3. Validate it through the CasePayload Pydantic schema, which enforces the
     required fields, the suspect count and exactly one killer.
  4. Assign a fresh case id, fresh suspect ids and random avatar seeds.

A case with zero or several killers is rejected outright; there is no
corrective fallback that picks a killer on the provider's behalf.

The logger name for this module is ``noir_detective.case_generator``.
"""

from __future__ import annotations

import json
import logging
import re
import uuid
from typing import Any, Optional

from pydantic import ValidationError

from agents import build_case_writer_agent, response_text
from errors import GenerationFailure
from models import Case, CasePayload, Suspect

logger = logging.getLogger("noir_detective.case_generator")

_FENCE_OPEN = re.compile(r"```(?:json)?")
_DECODER    = json.JSONDecoder()


def generate_case(language: str, agent: Optional[Any] = None) -> Case:
    """
    Request a brand-new case from the case-writer agent.

    Args:
        language: "en" or "ru".
        agent:    Anything with a run(prompt) method; defaults to a freshly
                  built case-writer agent. Tests pass a stub here.

    Returns:
        A validated Case with fresh identifiers.

    Raises:
        GenerationFailure: provider error, empty or malformed output, or a
                           document that fails validation.
    """
    agent = agent or build_case_writer_agent(language)
    prompt = "Generate a new murder mystery case now. Return only the JSON block."

    logger.info("Requesting new case — language=%s", language)
    try:
        resp = agent.run(prompt)
    except Exception as exc:
        logger.error("Case writer call failed: %s", exc, exc_info=True)
        raise GenerationFailure("case writer call failed") from exc

    case = parse_case(response_text(resp))
    logger.info(
        "Case generated — id=%s, title=%r, suspects=%d, difficulty=%s",
        case.id,
        case.title,
        len(case.suspects),
        case.difficulty,
    )
    return case


def parse_case(raw_text: str) -> Case:
    """
    Parse and validate the case writer's raw output.

    Raises:
        GenerationFailure: if no JSON can be found, it does not decode, or it
                           violates the CasePayload schema.
    """
    if not raw_text or not raw_text.strip():
        raise GenerationFailure("empty response from case writer")

    start = _json_start(raw_text)
    if start < 0:
        logger.error("No JSON object in case writer output: %r", raw_text[:300])
        raise GenerationFailure("case writer returned no JSON object")

    try:
        data, _ = _DECODER.raw_decode(raw_text, start)
    except json.JSONDecodeError as exc:
        logger.error(
            "Case JSON does not decode: %s. Raw (first 300 chars): %r",
            exc,
            raw_text[start:start + 300],
        )
        raise GenerationFailure("case writer returned malformed JSON") from exc

    try:
        payload = CasePayload.model_validate(data)
    except ValidationError as exc:
        logger.error("Case failed validation: %s", exc)
        raise GenerationFailure(f"case failed validation: {exc.error_count()} error(s)") from exc

    return _build_case(payload)


def _json_start(raw_text: str) -> int:
    """Index of the first "{" inside the first code fence, else in the text; -1 if none."""
    fence = _FENCE_OPEN.search(raw_text)
    if fence:
        start = raw_text.find("{", fence.end())
        if start >= 0:
            return start
    return raw_text.find("{")


def _build_case(payload: CasePayload) -> Case:
    """Attach identifiers and avatar seeds to a validated payload."""
    suspects = tuple(
        Suspect(
            id=f"suspect-{uuid.uuid4().hex[:12]}",
            name=s.name,
            role=s.role,
            bio=s.bio,
            motive=s.motive,
            alibi=s.alibi,
            is_killer=s.is_killer,
            avatar_seed=uuid.uuid4().hex,
        )
        for s in payload.suspects
    )
    return Case(
        id=uuid.uuid4().hex,
        title=payload.title,
        description=payload.description,
        location=payload.location,
        victim=payload.victim,
        time_of_death=payload.time_of_death,
        clues=tuple(payload.clues),
        suspects=suspects,
        difficulty=payload.difficulty,
    )
