"""
ui_helpers.py
=============
Stateless UI utility functions for the Streamlit interface.

These functions produce display values but carry no game state of their own;
they receive everything as arguments. Keeping them separate from app.py means
they can be imported and tested without a live Streamlit session.

Contains:
  - avatar_url()   : deterministic portrait URL for a suspect
  - energy_badge() : "7/10" style coffee counter
  - xp_badge()     : "XP: 120 · Lvl 3" status line
  - chat_role()    : DialogueMessage sender → st.chat_message role
  - build_css()    : returns the full dark-noir CSS string
"""

from __future__ import annotations

from urllib.parse import quote

from config import AVATAR_URL_TEMPLATE, GAME_CONFIG
from models import Sender
from scoring import detective_level
from translations import text


def avatar_url(seed: str) -> str:
    """Return the avatar image URL for `seed`. Same seed, same face."""
    return AVATAR_URL_TEMPLATE.format(seed=quote(seed or "", safe=""))


def energy_badge(energy: int) -> str:
    """Format the coffee counter shown in the status bar."""
    return f"{energy}/{GAME_CONFIG.max_energy}"


def xp_badge(language: str, experience: int) -> str:
    """
    Format the experience/level status line.

    The level is derived here from experience on every call, never cached.
    """
    return (
        f"{text(language, 'xp')}: {experience} · "
        f"{text(language, 'level')} {detective_level(experience)}"
    )


def chat_role(sender: Sender) -> str:
    return "user" if sender == Sender.DETECTIVE else "assistant"


# ---------------------------------------------------------------------------
# Dark-noir CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the dark-noir CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags — the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    /* ── Global dark background ── */
    html, body, .stApp, .main, .block-container {
        background: #050505 !important;
        color: #cbd5e1 !important;
    }
    .block-container { max-width: 32rem !important; }

    /* ── Typography ── */
    .archive-title {
        text-align: center; color: #f1f5f9;
        font-family: 'Special Elite', cursive; font-size: 42px;
        letter-spacing: 3px; margin-bottom: 0;
    }
    .archive-subtitle {
        text-align: center; color: #64748b; text-transform: uppercase;
        font-family: 'Courier Prime', monospace; letter-spacing: 0.2em; font-size: 13px;
    }
    .intro-quote {
        text-align: center; color: #94a3b8; font-style: italic;
        font-family: Georgia, serif; font-size: 14px; padding: 12px 0;
    }

    /* ── Status bar ── */
    .status-bar {
        display: flex; justify-content: space-between; align-items: center;
        font-family: 'Courier Prime', monospace; font-size: 12px; color: #64748b;
        padding: 4px 8px; border-bottom: 1px solid #1e293b; margin-bottom: 12px;
    }
    .status-bar .energy { color: #f59e0b; font-weight: bold; }
    .status-bar .energy.empty { color: #e11d48; }

    /* ── Case file ── */
    .case-file {
        background: #171717; padding: 20px; border-radius: 10px;
        border: 1px solid #1e293b; border-left: 4px solid #e11d48;
        font-family: 'Courier Prime', monospace;
    }
    .case-file h3 { color: #f1f5f9; font-family: 'Special Elite', cursive; }
    .clue { color: #94a3b8; font-size: 14px; margin: 4px 0; }

    /* ── Suspect cards ── */
    .suspect-card {
        display: flex; gap: 12px; align-items: center;
        background: #0a0a0a; border: 1px solid #334155; border-radius: 10px;
        padding: 10px 12px; margin: 8px 0;
    }
    .suspect-card img { width: 48px; height: 48px; border-radius: 50%; background: #1e293b; }
    .suspect-role { color: #64748b; font-size: 11px; text-transform: uppercase; letter-spacing: 0.1em; }

    /* ── Chat messages ── */
    .stChatMessage {
        background-color: #171717 !important;
        border: 1px solid #334155; border-radius: 14px;
        font-family: 'Courier Prime', monospace;
    }

    /* ── Verdict ── */
    .verdict { text-align: center; font-family: 'Special Elite', cursive; font-size: 34px; }
    .verdict.win  { color: #22c55e; }
    .verdict.lose { color: #ef4444; }

    /* ── Buttons ── */
    .stButton > button {
        background: #0f172a; color: #e2e8f0; border: 1px solid #334155;
        border-radius: 999px; font-family: 'Courier Prime', monospace;
    }
    .stButton > button:hover { border-color: #94a3b8; color: #ffffff; }
    .stButton > button[kind="primary"] { background: #f1f5f9; color: #000000; border: none; }
"""
