"""Status/category filtering for todo lists."""

from typing import Dict, Iterable, List

from core import ALL_CATEGORIES, StatusFilter, Todo, normalize_category_filter


def apply_filter(
    todos: Iterable[Todo],
    status_filter: "StatusFilter | str" = StatusFilter.ALL,
    category_filter: str = ALL_CATEGORIES,
) -> List[Todo]:
    """Return the order-preserving subsequence matching both filters."""
    status = StatusFilter.from_string(status_filter)
    category = normalize_category_filter(category_filter)

    result = list(todos)
    if status is StatusFilter.ACTIVE:
        result = [t for t in result if not t.completed]
    elif status is StatusFilter.COMPLETED:
        result = [t for t in result if t.completed]

    if category != ALL_CATEGORIES:
        result = [t for t in result if t.category.strip().lower() == category]
    return result


def count_by_status(todos: Iterable[Todo]) -> Dict[str, int]:
    items = list(todos)
    done = sum(1 for t in items if t.completed)
    return {
        StatusFilter.ALL.code: len(items),
        StatusFilter.ACTIVE.code: len(items) - done,
        StatusFilter.COMPLETED.code: done,
    }


__all__ = ["apply_filter", "count_by_status"]
