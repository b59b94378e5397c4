"""
app.py
======
Streamlit web UI for Noir Detective Archive.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Keep one DetectiveGame per browser session in st.session_state.
  - Render exactly one view per rerun, chosen by session.view.
  - Translate button clicks into view-controller events.

This file contains only UI logic. All game logic lives in game_engine.py,
all agents in agents.py, and all shared display helpers in ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

# Load .env before any game code runs so GROQ_API_KEY is available.
load_dotenv()

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called at the Streamlit entry point so it runs once
# per process regardless of how many times Streamlit reruns the script.
# All modules under "noir_detective.*" emit to this handler automatically.
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("noir_detective.app")

from config import SCORING_CONFIG
from game_engine import (
    Accuse,
    Acknowledge,
    Back,
    Defer,
    DetectiveGame,
    OpenShop,
    RequestAccusation,
    Restock,
    SelectSuspect,
    ToggleLanguage,
)
from models import GameView, Outcome
from translations import text
from ui_helpers import avatar_url, build_css, chat_role, energy_badge, xp_badge


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Noir Archive",
    page_icon="🕵️",
    layout="centered",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def init_session_state() -> None:
    """Create the DetectiveGame on the first run of this browser session."""
    if "game" not in st.session_state:
        st.session_state.game = DetectiveGame()


def _dispatch(event) -> None:
    st.session_state.game.dispatch(event)
    st.rerun()


def _t(key: str, **kwargs: str) -> str:
    return text(st.session_state.game.session.language, key, **kwargs)


# ============================================================
# SHARED COMPONENTS
# ============================================================

def render_status_bar() -> None:
    """Energy counter and experience line shown above every view."""
    session = st.session_state.game.session
    empty = " empty" if session.energy <= 0 else ""
    st.markdown(
        f"<div class='status-bar'>"
        f"<span>{xp_badge(session.language, session.experience)}</span>"
        f"<span class='energy{empty}'>☕ {_t('energy')}: {energy_badge(session.energy)}</span>"
        f"</div>",
        unsafe_allow_html=True,
    )
    if session.notice:
        st.error(session.notice)


# ============================================================
# VIEWS
# ============================================================

def render_office() -> None:
    session = st.session_state.game.session
    st.markdown(f"<h1 class='archive-title'>{_t('title')}</h1>", unsafe_allow_html=True)
    st.markdown(f"<p class='archive-subtitle'>{_t('subtitle')}</p>", unsafe_allow_html=True)
    st.markdown(f"<p class='intro-quote'>“{_t('intro_quote')}”</p>", unsafe_allow_html=True)

    if st.button(_t("new_case"), type="primary", use_container_width=True):
        with st.spinner(_t("loading")):
            st.session_state.game.request_new_case()
        st.rerun()

    col1, col2 = st.columns(2)
    with col1:
        if st.button(f"🛍️ {_t('shop')}", use_container_width=True):
            _dispatch(OpenShop())
    with col2:
        other = "ru" if session.language == "en" else "en"
        if st.button(f"🌐 {text(other, 'language')}", use_container_width=True):
            _dispatch(ToggleLanguage())


def render_shop() -> None:
    if st.button(f"← {_t('back')}"):
        _dispatch(Back())

    st.markdown(f"### {_t('shop')}")
    col1, col2 = st.columns([3, 1])
    with col1:
        st.markdown(f"**☕ {_t('buy_coffee')}**")
        st.caption(_t("restock_energy"))
    with col2:
        if st.button(_t("restock"), type="primary", use_container_width=True):
            _dispatch(Restock())


def render_case_file() -> None:
    case = st.session_state.game.session.case
    if case is None:
        return

    st.markdown(
        f"<div class='case-file'><h3>📁 {case.title}</h3>"
        f"<p>{case.description}</p></div>",
        unsafe_allow_html=True,
    )
    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**{_t('victim')}:** {case.victim}")
        st.markdown(f"**{_t('time_of_death')}:** {case.time_of_death}")
    with col2:
        st.markdown(f"**{_t('location')}:** {case.location}")
        st.markdown(f"**{_t('difficulty')}:** {case.difficulty}")

    st.markdown(f"#### {_t('clues')}")
    for clue in case.clues:
        st.markdown(f"<p class='clue'>• {clue}</p>", unsafe_allow_html=True)

    st.markdown(f"#### {_t('suspects')}")
    for suspect in case.suspects:
        st.markdown(
            f"<div class='suspect-card'>"
            f"<img src='{avatar_url(suspect.avatar_seed)}' alt='avatar'/>"
            f"<div><b>{suspect.name}</b><br>"
            f"<span class='suspect-role'>{suspect.role}</span><br>"
            f"<small>{suspect.bio}</small></div>"
            f"</div>",
            unsafe_allow_html=True,
        )
        if st.button(
            f"{_t('interrogate')} {suspect.name}",
            key=f"interrogate_{suspect.id}",
            use_container_width=True,
        ):
            _dispatch(SelectSuspect(suspect.id))

    st.markdown("---")
    if st.button(f"⚖️ {_t('solve')}", type="primary", use_container_width=True):
        _dispatch(RequestAccusation())


def render_interrogation() -> None:
    session = st.session_state.game.session
    suspect = session.selected_suspect
    if suspect is None:
        return

    if st.button(f"← {_t('back')}"):
        _dispatch(Back())

    col1, col2 = st.columns([1, 4])
    with col1:
        st.image(avatar_url(suspect.avatar_seed), width=56)
    with col2:
        st.markdown(f"**{suspect.name}**  \n{suspect.role}")

    chat = st.container(height=400)
    with chat:
        for msg in session.dialogue:
            avatar = "🕵️" if chat_role(msg.sender) == "user" else "🎭"
            st.chat_message(chat_role(msg.sender), avatar=avatar).markdown(msg.text)

    if session.energy <= 0:
        st.warning(_t("no_energy"))

    question = st.chat_input(
        placeholder=_t("ask_placeholder", name=suspect.name),
        disabled=session.energy <= 0,
    )
    if question:
        with st.spinner(f"{suspect.name} {_t('typing')}"):
            st.session_state.game.send_message(question)
        st.rerun()


def render_accusation() -> None:
    case = st.session_state.game.session.case
    if case is None:
        return

    st.markdown(f"### {_t('who_is_killer')}")
    for suspect in case.suspects:
        if st.button(
            f"{suspect.name} — {suspect.role}",
            key=f"accuse_{suspect.id}",
            use_container_width=True,
        ):
            _dispatch(Accuse(suspect.id))

    if st.button(_t("wait")):
        _dispatch(Defer())


def render_result() -> None:
    session = st.session_state.game.session
    case = session.case
    if case is None or session.outcome is None:
        return

    won = session.outcome == Outcome.WIN
    killer = case.killer.name
    if won:
        st.balloons()
        st.markdown(f"<div class='verdict win'>🔎 {_t('case_closed')}</div>", unsafe_allow_html=True)
        st.markdown(_t("success_msg", name=killer))
    else:
        st.markdown(f"<div class='verdict lose'>❄️ {_t('case_cold')}</div>", unsafe_allow_html=True)
        st.markdown(_t("fail_msg", name=killer))

    delta = f"+{SCORING_CONFIG.win_xp}" if won else f"-{SCORING_CONFIG.lose_xp}"
    st.metric(_t("xp_reward"), f"{delta} XP")

    if st.button(_t("back_to_office"), type="primary", use_container_width=True):
        _dispatch(Acknowledge())


VIEW_RENDERERS = {
    GameView.OFFICE:        render_office,
    GameView.SHOP:          render_shop,
    GameView.CASE_FILE:     render_case_file,
    GameView.INTERROGATION: render_interrogation,
    GameView.ACCUSATION:    render_accusation,
    GameView.RESULT:        render_result,
}


# ============================================================
# MAIN
# ============================================================

def main() -> None:
    init_session_state()
    render_status_bar()
    VIEW_RENDERERS[st.session_state.game.session.view]()
    st.caption(f"{_t('title')} · {_t('subtitle')}")


if __name__ == "__main__":
    main()
