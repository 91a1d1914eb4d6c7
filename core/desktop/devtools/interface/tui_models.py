#!/usr/bin/env python3
"""TUI view handles."""

from dataclasses import dataclass

from core import Todo
from application.ports import TodoCallback


@dataclass
class TodoCard:
    """One rendered todo with its edit/delete affordances."""
    todo: Todo
    index: int
    on_edit: TodoCallback
    on_delete: TodoCallback

    @property
    def id(self) -> int:
        return self.todo.id

    @property
    def element_id(self) -> str:
        return f"todo-{self.todo.id}"

    def edit(self):
        return self.on_edit(self.todo)

    def delete(self):
        return self.on_delete(self.todo)


# Border + title row + description row + meta row + border.
CARD_HEIGHT = 5
