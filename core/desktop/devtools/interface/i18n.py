"""Language selection and message lookup for the CLI and the board."""

import os
from typing import Dict, List, Optional

from config import get_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK

BASE_LANG = "en"
LANG_ENV = "TODO_LANG"

# Partial packs inherit every missing message from the base pack.
for _lang, _messages in LANG_PACK.items():
    if _lang != BASE_LANG:
        for _key, _text in LANG_PACK[BASE_LANG].items():
            _messages.setdefault(_key, _text)


def available_languages() -> List[str]:
    return list(LANG_PACK)


def effective_lang(preferred: Optional[str] = None) -> str:
    """TODO_LANG wins; test runs are pinned to English; then preference, then config."""
    forced = os.getenv(LANG_ENV)
    if forced in LANG_PACK:
        return forced
    if os.getenv("PYTEST_CURRENT_TEST"):
        return BASE_LANG
    for candidate in (preferred, get_user_lang()):
        if candidate in LANG_PACK:
            return candidate
    return BASE_LANG


def _messages(lang: str) -> Dict[str, str]:
    return LANG_PACK.get(lang, LANG_PACK[BASE_LANG])


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    """Formatted message for ``key``; unknown keys come back unchanged."""
    template = _messages(effective_lang(lang)).get(key) or LANG_PACK[BASE_LANG].get(key, key)
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template


__all__ = ["available_languages", "effective_lang", "translate", "BASE_LANG"]
