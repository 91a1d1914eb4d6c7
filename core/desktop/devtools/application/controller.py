"""Application state and the controller tying storage, filter, editor and renderer together.

State is an immutable ``AppState`` value; the reducers below return new
values and never touch storage. ``TodoController`` is the only place that
performs side effects: it writes through the storage port, swaps in the next
state and asks the renderer to project the visible todos.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from core import (
    ALL_CATEGORIES,
    DEFAULT_CATEGORY,
    StatusFilter,
    Todo,
    category_choices,
    next_category_filter,
    next_status_filter,
    normalize_category_filter,
)
from application.ports import TodoRenderer, TodoStorage
from core.desktop.devtools.application import reorder
from core.desktop.devtools.application.editor import EditorForm, TodoEditor
from core.desktop.devtools.application.filters import apply_filter, count_by_status

logger = logging.getLogger("todo.controller")


@dataclass(frozen=True)
class AppState:
    todos: Tuple[Todo, ...] = ()
    status_filter: StatusFilter = StatusFilter.ALL
    category_filter: str = ALL_CATEGORIES


def with_todos(state: AppState, todos: Iterable[Todo]) -> AppState:
    return replace(state, todos=tuple(todos))


def with_status_filter(state: AppState, value: "StatusFilter | str") -> AppState:
    return replace(state, status_filter=StatusFilter.from_string(value))


def with_category_filter(state: AppState, value: str) -> AppState:
    return replace(state, category_filter=normalize_category_filter(value))


def visible_todos(state: AppState) -> List[Todo]:
    return apply_filter(state.todos, state.status_filter, state.category_filter)


class TodoController:
    def __init__(
        self,
        storage: TodoStorage,
        renderer: Optional[TodoRenderer] = None,
        *,
        state: Optional[AppState] = None,
        default_category: str = DEFAULT_CATEGORY,
    ):
        self.storage = storage
        self.renderer = renderer
        self.state = with_todos(state or AppState(), storage.get())
        self.editor = TodoEditor(self.create_todo, self.update_todo, default_category=default_category)
        self.views: List[Any] = []

    # ------------------------------------------------------------------ views
    def visible(self) -> List[Todo]:
        return visible_todos(self.state)

    def counts(self) -> Dict[str, int]:
        return count_by_status(self.state.todos)

    def categories(self) -> List[str]:
        return category_choices([t.category for t in self.state.todos])

    def render(self) -> List[Any]:
        """Re-read the store, filter and hand the visible todos to the renderer."""
        self.state = with_todos(self.state, self.storage.get())
        visible = self.visible()
        if self.renderer is None:
            self.views = list(visible)
        else:
            self.views = list(self.renderer.render_todos(visible, self.edit, self.delete_todo))
        return self.views

    # -------------------------------------------------------------- mutations
    def create_todo(self, fields: Mapping[str, Any]) -> Todo:
        todo = self.storage.create(fields)
        self.render()
        return todo

    def update_todo(self, fields: "Todo | Mapping[str, Any]") -> Optional[Todo]:
        todo = self.storage.update(fields)
        self.render()
        return todo

    def delete_todo(self, todo: "Todo | int") -> Optional[Todo]:
        todo_id = todo.id if isinstance(todo, Todo) else todo
        removed = self.storage.delete(todo_id)
        self.render()
        return removed

    def delete_all(self) -> None:
        self.storage.delete_all()
        self.render()

    def _apply_order(self, new_order: Sequence[Todo]) -> bool:
        if [t.id for t in new_order] == [t.id for t in self.state.todos]:
            return False
        self.storage.reorder(new_order)
        self.render()
        return True

    def move_before(self, dragged_id: int, target_id: int) -> bool:
        """Drop handler: place the dragged card before the target card."""
        visible_ids = [t.id for t in self.visible()]
        new_order = reorder.move_before(self.state.todos, dragged_id, target_id, visible_ids)
        moved = self._apply_order(new_order)
        if moved:
            logger.debug("Moved todo %s before %s", dragged_id, target_id)
        return moved

    def move_by(self, todo_id: int, delta: int) -> bool:
        visible_ids = [t.id for t in self.visible()]
        return self._apply_order(reorder.move_by(self.state.todos, todo_id, delta, visible_ids))

    # ---------------------------------------------------------------- filters
    def set_status_filter(self, value: "StatusFilter | str") -> List[Any]:
        self.state = with_status_filter(self.state, value)
        return self.render()

    def set_category_filter(self, value: str) -> List[Any]:
        self.state = with_category_filter(self.state, value)
        return self.render()

    def cycle_status_filter(self) -> StatusFilter:
        self.set_status_filter(next_status_filter(self.state.status_filter))
        return self.state.status_filter

    def cycle_category_filter(self) -> str:
        extra = [t.category for t in self.state.todos]
        self.set_category_filter(next_category_filter(self.state.category_filter, extra))
        return self.state.category_filter

    # ----------------------------------------------------------------- editor
    def open_create(self) -> EditorForm:
        self.editor.close()
        return self.editor.open()

    def edit(self, todo: Todo) -> EditorForm:
        return self.editor.open(todo)


__all__ = [
    "AppState",
    "TodoController",
    "visible_todos",
    "with_category_filter",
    "with_status_filter",
    "with_todos",
]
