import time
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Mapping, Optional

from .category import DEFAULT_CATEGORY

# Wire (persisted) spelling -> attribute name.
WIRE_FIELDS: Dict[str, str] = {
    "id": "id",
    "title": "title",
    "description": "description",
    "category": "category",
    "dueDate": "due_date",
    "completed": "completed",
}


def generate_todo_id() -> int:
    """Time-based id: milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def coerce_todo_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdecimal():
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def is_iso_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except (TypeError, ValueError):
        return False
    return True


def field_name(key: str) -> Optional[str]:
    """Resolve a wire or attribute key to the Todo attribute name."""
    if key in WIRE_FIELDS:
        return WIRE_FIELDS[key]
    if key in WIRE_FIELDS.values():
        return key
    return None


@dataclass(frozen=True)
class Todo:
    id: int
    title: str
    description: str = ""
    category: str = DEFAULT_CATEGORY
    due_date: str = ""
    completed: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["Todo"]:
        """Build a Todo from its wire form; records without a usable id yield None."""
        todo_id = coerce_todo_id(data.get("id"))
        if todo_id is None:
            return None
        due = data.get("dueDate", data.get("due_date", "")) or ""
        return cls(
            id=todo_id,
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            category=str(data.get("category") or DEFAULT_CATEGORY),
            due_date=str(due),
            completed=bool(data.get("completed", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "dueDate": self.due_date,
            "completed": self.completed,
        }

    def merged(self, changes: Mapping[str, Any]) -> "Todo":
        """Shallow overwrite of the fields present in ``changes`` (id is kept)."""
        updates: Dict[str, Any] = {}
        for key, value in changes.items():
            name = field_name(key)
            if not name or name == "id":
                continue
            if name == "completed":
                value = bool(value)
            elif value is None:
                value = ""
            else:
                value = str(value)
            updates[name] = value
        return replace(self, **updates) if updates else self


def todo_changes(record: "Todo | Mapping[str, Any]") -> Dict[str, Any]:
    """Normalise an update payload (Todo or mapping) into a wire-keyed dict."""
    if isinstance(record, Todo):
        return record.to_dict()
    return dict(record)


