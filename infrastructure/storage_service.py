import json
import logging
from typing import Any, List, Mapping, Optional, Sequence

from core import Todo, coerce_todo_id, generate_todo_id, todo_changes
from application.ports import KeyValueStore, TodoStorage
from infrastructure.local_storage import MemoryKeyValueStore

logger = logging.getLogger("todo.storage")

DEFAULT_STORAGE_KEY = "todos"


def decode_todos(raw: Optional[str]) -> List[Todo]:
    """Parse a persisted array; absent or corrupt data yields an empty list."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Ignoring corrupt todo data: %s", exc)
        return []
    if not isinstance(data, list):
        logger.debug("Ignoring todo data of type %s", type(data).__name__)
        return []
    todos: List[Todo] = []
    seen: set[int] = set()
    for entry in data:
        if not isinstance(entry, dict):
            continue
        todo = Todo.from_dict(entry)
        if todo is None or todo.id in seen:
            continue
        seen.add(todo.id)
        todos.append(todo)
    return todos


def encode_todos(todos: Sequence[Todo]) -> str:
    return json.dumps([t.to_dict() for t in todos], ensure_ascii=False)


class StorageService(TodoStorage):
    """Ordered todo list persisted as a whole under a single key."""

    def __init__(self, key: str = DEFAULT_STORAGE_KEY, backend: Optional[KeyValueStore] = None):
        self.key = key
        self.backend = backend if backend is not None else MemoryKeyValueStore()
        self.items: List[Todo] = self._get_stored_items()

    def _get_stored_items(self) -> List[Todo]:
        return decode_todos(self.backend.get_item(self.key))

    def _set_stored_items(self, items: Sequence[Todo]) -> None:
        self.backend.set_item(self.key, encode_todos(items))

    def _index_of(self, todo_id: Any) -> int:
        wanted = coerce_todo_id(todo_id)
        if wanted is None:
            return -1
        for idx, item in enumerate(self.items):
            if item.id == wanted:
                return idx
        return -1

    def _next_id(self, requested: Any = None) -> int:
        existing = {t.id for t in self.items}
        candidate = coerce_todo_id(requested)
        if candidate is not None and candidate not in existing:
            return candidate
        highest = max(existing, default=0)
        return max(generate_todo_id(), highest + 1)

    def reload(self) -> List[Todo]:
        self.items = self._get_stored_items()
        return self.get()

    def create(self, fields: Mapping[str, Any]) -> Todo:
        data = todo_changes(fields)
        base = Todo(id=self._next_id(data.get("id")), title="")
        new_item = base.merged(data)
        self.items.append(new_item)
        self._set_stored_items(self.items)
        return new_item

    def get(self) -> List[Todo]:
        return list(self.items)

    def find(self, todo_id: Any) -> Optional[Todo]:
        index = self._index_of(todo_id)
        return self.items[index] if index != -1 else None

    def update(self, record: "Todo | Mapping[str, Any]") -> Optional[Todo]:
        changes = todo_changes(record)
        index = self._index_of(changes.get("id"))
        if index != -1:
            merged = self.items[index].merged(changes)
            self.items[index] = merged
            self._set_stored_items(self.items)
            return merged
        logger.warning("Todo %s does not exist", changes.get("id"))
        return None

    def reorder(self, new_sequence: Sequence[Todo]) -> None:
        self.items = list(new_sequence)
        self._set_stored_items(self.items)

    def delete(self, todo_id: Any) -> Optional[Todo]:
        index = self._index_of(todo_id)
        if index != -1:
            deleted = self.items.pop(index)
            self._set_stored_items(self.items)
            return deleted
        logger.warning("Todo %s does not exist", todo_id)
        return None

    def delete_all(self) -> None:
        self.items = []
        self.backend.remove_item(self.key)
        logger.info("All items deleted from %s", self.key)


__all__ = ["StorageService", "DEFAULT_STORAGE_KEY", "decode_todos", "encode_todos"]
