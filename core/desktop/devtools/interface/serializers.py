"""JSON contract for todos and view state shared by the CLI and the TUI."""

from typing import Any, Dict, Sequence

from core import Todo, status_mark
from core.desktop.devtools.application.controller import AppState
from core.desktop.devtools.application.filters import count_by_status


def todo_to_dict(todo: Todo, *, position: int | None = None) -> Dict[str, Any]:
    """Wire form of a todo plus optional presentation hints."""
    data = todo.to_dict()
    if position is not None:
        data["position"] = position
        data["mark"] = status_mark(todo.completed)
    return data


def filters_to_dict(state: AppState) -> Dict[str, str]:
    return {
        "status": state.status_filter.code,
        "category": state.category_filter,
    }


def state_to_dict(state: AppState, visible: Sequence[Todo]) -> Dict[str, Any]:
    return {
        "filters": filters_to_dict(state),
        "counts": count_by_status(state.todos),
        "total": len(visible),
        "todos": [todo_to_dict(t, position=idx) for idx, t in enumerate(visible)],
    }


__all__ = ["todo_to_dict", "filters_to_dict", "state_to_dict"]
