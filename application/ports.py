from typing import Any, Callable, List, Mapping, Optional, Protocol, Sequence

from core import Todo


class KeyValueStore(Protocol):
    """String values under string keys."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...

    def has_item(self, key: str) -> bool:
        ...


class TodoStorage(Protocol):
    key: str

    def create(self, fields: Mapping[str, Any]) -> Todo:
        ...

    def get(self) -> List[Todo]:
        ...

    def find(self, todo_id: int) -> Optional[Todo]:
        ...

    def update(self, record: "Todo | Mapping[str, Any]") -> Optional[Todo]:
        ...

    def delete(self, todo_id: int) -> Optional[Todo]:
        ...

    def reorder(self, new_sequence: Sequence[Todo]) -> None:
        ...

    def delete_all(self) -> None:
        ...


TodoCallback = Callable[[Todo], Any]


class TodoRenderer(Protocol):
    """Projects a task list into view handles wired to edit/delete callbacks."""

    def render_todos(self, todos: Sequence[Todo], on_edit: TodoCallback, on_delete: TodoCallback) -> Sequence[Any]:
        ...
