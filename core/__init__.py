from .status import StatusFilter, normalize_status_filter, next_status_filter, status_mark
from .category import (
    ALL_CATEGORIES,
    CATEGORIES,
    DEFAULT_CATEGORY,
    category_choices,
    next_category_filter,
    normalize_category,
    normalize_category_filter,
)
from .todo import Todo, generate_todo_id, coerce_todo_id, is_iso_date, todo_changes

__all__ = [
    "StatusFilter",
    "normalize_status_filter",
    "next_status_filter",
    "status_mark",
    # Categories
    "ALL_CATEGORIES",
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "category_choices",
    "next_category_filter",
    "normalize_category",
    "normalize_category_filter",
    # Records
    "Todo",
    "generate_todo_id",
    "coerce_todo_id",
    "is_iso_date",
    "todo_changes",
]
