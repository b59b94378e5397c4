"""Exceptions raised by the provider-facing clients."""

from __future__ import annotations


class GameServiceError(RuntimeError):
    """A call to the generative-AI provider did not produce usable output."""


class GenerationFailure(GameServiceError):
    """The case writer errored or returned a case that failed validation."""


class DialogueFailure(GameServiceError):
    """The suspect agent errored or returned an empty reply."""
