"""Header bar builder for TodoBoardTUI: filter tabs, category and counts."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import ALL_CATEGORIES, StatusFilter
from core.desktop.devtools.interface.tui_mouse import filter_mouse_handler

FILTER_LABEL_KEYS = {
    StatusFilter.ALL: "FILTER_ALL",
    StatusFilter.ACTIVE: "FILTER_ACTIVE",
    StatusFilter.COMPLETED: "FILTER_COMPLETED",
}


def build_status_text(tui) -> FormattedText:
    state = tui.controller.state
    counts = tui.controller.counts()
    parts: List[Tuple] = [
        ("class:header", f" {tui._t('APP_TITLE')} "),
        ("class:border", "│ "),
    ]

    for idx, status in enumerate(StatusFilter):
        style = "class:filter.active" if status is state.status_filter else "class:filter"
        label = f" {idx + 1}:{tui._t(FILTER_LABEL_KEYS[status])} "
        parts.append((style, label, filter_mouse_handler(tui, lambda s=status: tui.set_status_filter(s))))
        parts.append(("class:text", " "))

    category = state.category_filter
    category_text = tui._t("CATEGORY_ALL") if category == ALL_CATEGORIES else category
    parts.append(("class:border", "│ "))
    parts.append((
        "class:filter.active" if category != ALL_CATEGORIES else "class:filter",
        f"{tui._t('CATEGORY_LABEL')}: {category_text}",
        filter_mouse_handler(tui, tui.cycle_category_filter),
    ))
    parts.append(("class:border", " │ "))
    parts.append((
        "class:text.dim",
        tui._t("COUNTS", active=counts["active"], completed=counts["completed"], total=counts["all"]),
    ))
    return FormattedText(parts)


__all__ = ["build_status_text", "FILTER_LABEL_KEYS"]
