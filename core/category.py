from typing import Final, List, Sequence

ALL_CATEGORIES: Final[str] = "all"
DEFAULT_CATEGORY: Final[str] = "work"
CATEGORIES: Final[tuple[str, ...]] = ("work", "personal", "home", "shopping", "other")


def normalize_category(value: str, *, default: str = DEFAULT_CATEGORY) -> str:
    """Lower-case category token; empty input falls back to ``default``."""
    token = (value or "").strip().lower()
    return token or default


def normalize_category_filter(value: str) -> str:
    return normalize_category(value, default=ALL_CATEGORIES)


def category_choices(extra: Sequence[str] = ()) -> List[str]:
    """Known categories followed by any extra ones found in stored records."""
    choices = list(CATEGORIES)
    for raw in extra:
        token = normalize_category(raw)
        if token not in choices:
            choices.append(token)
    return choices


def next_category_filter(current: str, extra: Sequence[str] = ()) -> str:
    order = [ALL_CATEGORIES, *category_choices(extra)]
    try:
        idx = order.index(current)
    except ValueError:
        idx = 0
    return order[(idx + 1) % len(order)]
