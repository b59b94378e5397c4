import pytest

import dialogue
from config import GameConfig
from dialogue import build_history_text, send_message
from errors import DialogueFailure
from models import Sender, new_message


def test_send_message_returns_stripped_reply(make_agent, sample_case):
    suspect = sample_case.suspects[1]
    agent = make_agent("  I was in the cellar, detective. Ask anyone.  \n")

    reply = send_message(suspect, [], "Where were you at two?", "en", agent=agent)

    assert reply == "I was in the cellar, detective. Ask anyone."
    prompt = agent.run.call_args.args[0]
    assert "Where were you at two?" in prompt
    assert "PREVIOUS EXCHANGES" not in prompt


def test_send_message_replays_history(make_agent, sample_case):
    suspect = sample_case.suspects[0]
    history = [
        new_message(Sender.SUSPECT, "I'm Vera. Make it quick."),
        new_message(Sender.DETECTIVE, "When did you leave?"),
        new_message(Sender.SUSPECT, "Half past one, with the band."),
    ]
    agent = make_agent("The drummer can vouch for me.")

    send_message(suspect, history, "Who saw you?", "en", agent=agent)

    prompt = agent.run.call_args.args[0]
    assert "Detective: When did you leave?" in prompt
    assert "You (Vera Lane): Half past one, with the band." in prompt
    assert prompt.index("Half past one") < prompt.index("Who saw you?")


def test_send_message_does_not_modify_history(make_agent, sample_case):
    history = [new_message(Sender.DETECTIVE, "Hello?")]

    send_message(sample_case.suspects[0], history, "Again?", "en", agent=make_agent("No."))

    assert len(history) == 1


def test_send_message_builds_default_agent(monkeypatch, make_agent, sample_case):
    calls = []

    def fake_builder(suspect, language, case=None):
        calls.append((suspect.name, language, case))
        return make_agent("Nyet.")

    monkeypatch.setattr(dialogue, "build_suspect_agent", fake_builder)

    reply = send_message(sample_case.suspects[2], [], "Da?", "ru", case=sample_case)

    assert reply == "Nyet."
    assert calls == [("Frank Doyle", "ru", sample_case)]


@pytest.mark.parametrize("content", ["", "   ", None])
def test_empty_reply_raises(make_agent, sample_case, content):
    with pytest.raises(DialogueFailure):
        send_message(sample_case.suspects[0], [], "Well?", "en", agent=make_agent(content))


def test_provider_error_is_wrapped(make_agent, sample_case):
    agent = make_agent(side_effect=TimeoutError("read timed out"))

    with pytest.raises(DialogueFailure) as excinfo:
        send_message(sample_case.suspects[0], [], "Well?", "en", agent=agent)

    assert isinstance(excinfo.value.__cause__, TimeoutError)


def test_history_text_keeps_only_recent_window(monkeypatch, sample_case):
    monkeypatch.setattr(dialogue, "GAME_CONFIG", GameConfig(history_window=1))
    history = [new_message(Sender.DETECTIVE, f"question {i}") for i in range(5)]

    text = build_history_text(sample_case.suspects[0], history)

    assert "question 4" in text
    assert "question 3" in text
    assert "question 2" not in text


def test_history_text_empty():
    assert build_history_text(None, []) == ""
