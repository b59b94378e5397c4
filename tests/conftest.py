from __future__ import annotations

import copy
import json
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from case_generator import parse_case


CASE_PAYLOAD = {
    "title": "Death at the Blue Lantern",
    "description": "A jazz club owner is found dead in his office after closing time.",
    "location": "Blue Lantern Club, back office",
    "victim": "Sal Moretti",
    "timeOfDeath": "02:15",
    "difficulty": "Medium",
    "clues": [
        "A lipstick-stained glass on the desk.",
        "The safe is open but nothing is missing.",
        "Wet footprints lead to the alley door.",
    ],
    "suspects": [
        {
            "name": "Vera Lane",
            "role": "The Singer",
            "bio": "Headliner with debts she never mentions.",
            "motive": "Sal refused to release her from her contract.",
            "alibi": "Claims she left at 01:30 with the band.",
            "isKiller": True,
        },
        {
            "name": "Eddie Cole",
            "role": "The Bartender",
            "bio": "Quiet, sees everything, says nothing.",
            "motive": "Sal caught him skimming the till.",
            "alibi": "Was stocking the cellar until 03:00.",
            "isKiller": False,
        },
        {
            "name": "Frank Doyle",
            "role": "The Partner",
            "bio": "Co-owner who wanted to sell the club.",
            "motive": "Sal blocked the sale.",
            "alibi": "Playing cards across town all night.",
            "isKiller": False,
        },
    ],
}


@pytest.fixture
def case_payload():
    """A fresh, valid provider payload that tests may edit freely."""
    return copy.deepcopy(CASE_PAYLOAD)


@pytest.fixture
def sample_case(case_payload):
    return parse_case(json.dumps(case_payload))


def stub_agent(content=None, side_effect=None):
    """Stand-in for an agno Agent: run() returns an object with .content."""
    run = Mock(return_value=SimpleNamespace(content=content), side_effect=side_effect)
    return SimpleNamespace(run=run)


@pytest.fixture
def make_agent():
    return stub_agent
