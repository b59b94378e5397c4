"""
translations.py
===============
Every player-facing string, in each supported language.

Centralising the text here means the UI, the CLI and the view controller
never hard-code prose, and a new language only needs one more dict.

Usage:
    from translations import text
    text("ru", "new_case")
    text("en", "greeting", name="Mr. Gray")
"""

from __future__ import annotations

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "title":            "NOIR ARCHIVE",
        "subtitle":         "Homicide Division",
        "intro_quote":      "The city never sleeps, and neither do its killers.",
        "new_case":         "NEW CASE",
        "shop":             "Supplies",
        "xp":               "XP",
        "level":            "Lvl",
        "energy":           "Coffee",
        "loading":          "Pulling a file from the archive…",
        "typing":           "thinking…",
        "victim":           "Victim",
        "location":         "Location",
        "time_of_death":    "Time of death",
        "difficulty":       "Difficulty",
        "clues":            "Evidence",
        "suspects":         "Suspects",
        "interrogate":      "Interrogate",
        "solve":            "Name the killer",
        "who_is_killer":    "Who is the killer?",
        "wait":             "Wait, I need more evidence",
        "back":             "Back",
        "ask_placeholder":  "Ask {name} a question…",
        "greeting":         "I'm {name}. Make it quick, detective. I have nothing to hide.",
        "no_energy":        "Out of coffee. Restock at the supplies counter.",
        "buy_coffee":       "Pot of black coffee",
        "restock_energy":   "Refills your energy to the brim",
        "restock":          "Brew",
        "case_closed":      "CASE CLOSED",
        "case_cold":        "CASE GONE COLD",
        "success_msg":      "{name} is behind bars. Good work, detective.",
        "fail_msg":         "You accused the wrong person. The killer was {name}.",
        "xp_reward":        "XP reward",
        "back_to_office":   "Back to the office",
        "connection_lost":  "Archive connection lost. Try again.",
        "language":         "English",
    },
    "ru": {
        "title":            "АРХИВ НУАР",
        "subtitle":         "Отдел убийств",
        "intro_quote":      "Город никогда не спит, как и его убийцы.",
        "new_case":         "НОВОЕ ДЕЛО",
        "shop":             "Снабжение",
        "xp":               "Опыт",
        "level":            "Ур.",
        "energy":           "Кофе",
        "loading":          "Достаём дело из архива…",
        "typing":           "думает…",
        "victim":           "Жертва",
        "location":         "Место",
        "time_of_death":    "Время смерти",
        "difficulty":       "Сложность",
        "clues":            "Улики",
        "suspects":         "Подозреваемые",
        "interrogate":      "Допросить",
        "solve":            "Назвать убийцу",
        "who_is_killer":    "Кто убийца?",
        "wait":             "Подождите, нужно больше улик",
        "back":             "Назад",
        "ask_placeholder":  "Спросите {name}…",
        "greeting":         "Я {name}. Давайте быстрее, детектив. Мне нечего скрывать.",
        "no_energy":        "Кофе закончился. Загляните в снабжение.",
        "buy_coffee":       "Кофейник чёрного кофе",
        "restock_energy":   "Полностью восстанавливает энергию",
        "restock":          "Заварить",
        "case_closed":      "ДЕЛО ЗАКРЫТО",
        "case_cold":        "ДЕЛО ЗАШЛО В ТУПИК",
        "success_msg":      "{name} за решёткой. Отличная работа, детектив.",
        "fail_msg":         "Вы обвинили не того. Убийцей был(а) {name}.",
        "xp_reward":        "Награда опытом",
        "back_to_office":   "Вернуться в офис",
        "connection_lost":  "Связь с архивом потеряна. Повторите попытку.",
        "language":         "Русский",
    },
}


def text(language: str, key: str, **kwargs: str) -> str:
    """
    Look up `key` in `language`, falling back to English for unknown
    languages, then fill any {placeholders} from kwargs.
    """
    table = TRANSLATIONS.get(language, TRANSLATIONS["en"])
    template = table.get(key, TRANSLATIONS["en"][key])
    return template.format(**kwargs) if kwargs else template
