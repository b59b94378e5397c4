from models import Sender
from translations import TRANSLATIONS, text
from ui_helpers import avatar_url, build_css, chat_role, energy_badge, xp_badge


def test_avatar_url_is_deterministic():
    assert avatar_url("abc123") == avatar_url("abc123")
    assert avatar_url("abc123") != avatar_url("def456")
    assert "seed=abc123" in avatar_url("abc123")


def test_avatar_url_escapes_seed():
    assert "seed=a%20b%26c" in avatar_url("a b&c")


def test_badges():
    assert energy_badge(4) == "4/10"
    assert xp_badge("en", 120) == "XP: 120 · Lvl 3"
    assert xp_badge("ru", 0) == "Опыт: 0 · Ур. 1"


def test_chat_role():
    assert chat_role(Sender.DETECTIVE) == "user"
    assert chat_role(Sender.SUSPECT) == "assistant"


def test_translations_cover_the_same_keys():
    assert set(TRANSLATIONS["ru"]) == set(TRANSLATIONS["en"])


def test_text_formats_and_falls_back():
    assert text("en", "greeting", name="Eddie").startswith("I'm Eddie.")
    assert text("de", "new_case") == "NEW CASE"


def test_css_has_no_style_tags():
    css = build_css()
    assert ".suspect-card" in css
    assert "<style>" not in css
