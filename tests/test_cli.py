import pytest

from cli import print_view
from models import GameView, Outcome, Session


def body_lines(out):
    """Printed lines after the status header."""
    return [line for line in out.strip().splitlines()[1:] if line.strip()]


@pytest.mark.parametrize(
    "view",
    [GameView.CASE_FILE, GameView.INTERROGATION, GameView.ACCUSATION, GameView.RESULT],
)
def test_views_without_a_case_print_only_the_status(capsys, view):
    print_view(Session(view=view, outcome=Outcome.WIN, selected_suspect_id="suspect-x"))

    out = capsys.readouterr().out
    assert f"[{view.value}]" in out
    assert body_lines(out) == []


def test_interrogation_with_unknown_suspect_prints_nothing(capsys, sample_case):
    print_view(
        Session(
            view=GameView.INTERROGATION,
            case=sample_case,
            selected_suspect_id="suspect-nobody",
        )
    )

    out = capsys.readouterr().out
    assert body_lines(out) == []
    assert "Vera Lane" not in out


def test_result_without_outcome_prints_nothing(capsys, sample_case):
    print_view(Session(view=GameView.RESULT, case=sample_case))

    out = capsys.readouterr().out
    assert body_lines(out) == []
    assert "Vera Lane" not in out


def test_case_file_lists_suspects(capsys, sample_case):
    print_view(Session(view=GameView.CASE_FILE, case=sample_case))

    out = capsys.readouterr().out
    assert "Death at the Blue Lantern (Medium)" in out
    assert "1. Vera Lane (The Singer)" in out
    assert "3. Frank Doyle" in out


def test_status_line_shows_coffee_and_experience(capsys):
    print_view(Session(energy=4, experience=120))

    out = capsys.readouterr().out
    assert "XP: 120 · Lvl 3" in out
    assert "Coffee: 4/10" in out
