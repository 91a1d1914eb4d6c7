#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style

from core import CATEGORIES


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",  # без принудительной подложки
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "status.ok": "#9ad974 bold",
        "status.warn": "#e5c07b bold",
        "filter": "#97a0a9",
        "filter.active": "bg:#3b3b3b #ffb347 bold",
        "card.border": "#4b525a",
        "card.selected": "#ffb347",
        "card.dragging": "#e06c75 bold",
        "card.handle": "#6d717a",
        "card.title": "#d7dfe6 bold",
        "card.title.done": "#7a7f85 strike",
        "card.due": "#97a0a9",
        "card.desc": "#97a0a9",
        "card.check": "#9ad974 bold",
        "card.action": "bg:#3b3b3b #d7dfe6",
        "card.action.delete": "bg:#3b3b3b #e06c75",
        "category.work": "#61afef bold",
        "category.personal": "#c678dd bold",
        "category.home": "#9ad974 bold",
        "category.shopping": "#e5c07b bold",
        "category.other": "#97a0a9 bold",
        "message": "#e5c07b",
    },
    "dark-contrast": {
        "": "#e8eaec",  # без черной подложки
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "status.ok": "#b8f171 bold",
        "status.warn": "#f0c674 bold",
        "filter": "#a7b0ba",
        "filter.active": "bg:#3d4047 #ffb347 bold",
        "card.border": "#5a6169",
        "card.selected": "#f0c674 bold",
        "card.dragging": "#ff6b6b bold",
        "card.handle": "#6f757d",
        "card.title": "#e8eaec bold",
        "card.title.done": "#8a9097 strike",
        "card.due": "#a7b0ba",
        "card.desc": "#a7b0ba",
        "card.check": "#b8f171 bold",
        "card.action": "bg:#3d4047 #e8eaec",
        "card.action.delete": "bg:#3d4047 #ff6b6b",
        "category.work": "#74b9ff bold",
        "category.personal": "#e09cff bold",
        "category.home": "#b8f171 bold",
        "category.shopping": "#f0c674 bold",
        "category.other": "#a7b0ba bold",
        "message": "#f0c674",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def category_style(category: str) -> str:
    token = (category or "").strip().lower()
    return f"class:category.{token}" if token in CATEGORIES else "class:category.other"


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    return Style.from_dict(get_theme_palette(theme))
