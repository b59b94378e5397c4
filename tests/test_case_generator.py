import json

import pytest

import case_generator
from case_generator import generate_case, parse_case
from errors import GenerationFailure


def fenced(payload):
    return f"Here is your case:\n```json\n{json.dumps(payload)}\n```\nEnjoy."


def test_generate_case_success(make_agent, case_payload):
    agent = make_agent(fenced(case_payload))

    case = generate_case("en", agent=agent)

    assert case.title == "Death at the Blue Lantern"
    assert case.time_of_death == "02:15"
    assert len(case.suspects) == 3
    assert sum(s.is_killer for s in case.suspects) == 1
    assert case.killer.name == "Vera Lane"
    assert case.clues == tuple(case_payload["clues"])
    agent.run.assert_called_once()


def test_generate_case_assigns_fresh_ids_and_seeds(make_agent, case_payload):
    first = generate_case("en", agent=make_agent(fenced(case_payload)))
    second = generate_case("en", agent=make_agent(fenced(case_payload)))

    assert first.id != second.id
    ids = [s.id for s in first.suspects] + [s.id for s in second.suspects]
    assert len(set(ids)) == 6
    seeds = {s.avatar_seed for s in first.suspects}
    assert len(seeds) == 3
    assert all(seeds)


def test_generate_case_builds_default_agent(monkeypatch, make_agent, case_payload):
    built = []

    def fake_builder(language):
        built.append(language)
        return make_agent(json.dumps(case_payload))

    monkeypatch.setattr(case_generator, "build_case_writer_agent", fake_builder)

    case = generate_case("ru")

    assert built == ["ru"]
    assert case.victim == "Sal Moretti"


def test_parse_case_accepts_bare_json_with_chatter(case_payload):
    case = parse_case("Sure! " + json.dumps(case_payload) + " Good luck.")

    assert case.location == "Blue Lantern Club, back office"


@pytest.mark.parametrize("killers", [0, 2, 3])
def test_wrong_killer_count_is_rejected(make_agent, case_payload, killers):
    for i, suspect in enumerate(case_payload["suspects"]):
        suspect["isKiller"] = i < killers

    with pytest.raises(GenerationFailure):
        generate_case("en", agent=make_agent(fenced(case_payload)))


@pytest.mark.parametrize("count", [2, 4])
def test_wrong_suspect_count_is_rejected(case_payload, count):
    suspects = case_payload["suspects"]
    if count < len(suspects):
        case_payload["suspects"] = suspects[:count]
    else:
        extra = dict(suspects[1], name="Extra Person")
        case_payload["suspects"] = suspects + [extra]

    with pytest.raises(GenerationFailure):
        parse_case(json.dumps(case_payload))


@pytest.mark.parametrize("field", ["title", "victim", "timeOfDeath", "clues", "suspects"])
def test_missing_required_field_is_rejected(case_payload, field):
    del case_payload[field]

    with pytest.raises(GenerationFailure):
        parse_case(json.dumps(case_payload))


def test_missing_suspect_field_is_rejected(case_payload):
    del case_payload["suspects"][1]["alibi"]

    with pytest.raises(GenerationFailure):
        parse_case(json.dumps(case_payload))


def test_blank_string_is_rejected(case_payload):
    case_payload["suspects"][0]["name"] = "   "

    with pytest.raises(GenerationFailure):
        parse_case(json.dumps(case_payload))


def test_killer_flag_must_be_boolean(case_payload):
    case_payload["suspects"][0]["isKiller"] = "maybe"

    with pytest.raises(GenerationFailure):
        parse_case(json.dumps(case_payload))


def test_parse_case_takes_first_of_two_fenced_blocks(case_payload):
    other = dict(case_payload, title="A Second Draft")
    raw = fenced(case_payload) + "\nOr maybe:\n" + fenced(other)

    case = parse_case(raw)

    assert case.title == "Death at the Blue Lantern"


def test_parse_case_ignores_braces_after_the_object(case_payload):
    raw = json.dumps(case_payload) + "\nNote: keep {suspects} hidden until {act 2}."

    case = parse_case(raw)

    assert case.victim == "Sal Moretti"


def test_parse_case_skips_braces_in_preamble_before_fence(case_payload):
    raw = "Template {title}:\n" + fenced(case_payload)

    assert parse_case(raw).title == "Death at the Blue Lantern"


@pytest.mark.parametrize("raw", ["", "   ", "no json here", "{not: valid json}"])
def test_unusable_output_is_rejected(raw):
    with pytest.raises(GenerationFailure):
        parse_case(raw)


def test_none_content_is_rejected(make_agent):
    with pytest.raises(GenerationFailure):
        generate_case("en", agent=make_agent(None))


def test_provider_error_is_wrapped(make_agent):
    agent = make_agent(side_effect=ConnectionError("socket closed"))

    with pytest.raises(GenerationFailure) as excinfo:
        generate_case("en", agent=agent)

    assert isinstance(excinfo.value.__cause__, ConnectionError)


@pytest.mark.parametrize(
    "label,expected",
    [("hard", "Hard"), ("EASY", "Easy"), ("impossible", "Medium"), (None, "Medium")],
)
def test_difficulty_is_normalised(case_payload, label, expected):
    case_payload["difficulty"] = label

    assert parse_case(json.dumps(case_payload)).difficulty == expected


def test_missing_difficulty_defaults_to_medium(case_payload):
    del case_payload["difficulty"]

    assert parse_case(json.dumps(case_payload)).difficulty == "Medium"
