"""Single-todo editor: form state, validation and create/update routing."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from core import DEFAULT_CATEGORY, Todo, generate_todo_id, is_iso_date, normalize_category

SaveCallback = Callable[[Dict[str, Any]], Any]

ERR_TITLE_REQUIRED = "ERR_TITLE_REQUIRED"
ERR_DUE_DATE_INVALID = "ERR_DUE_DATE_INVALID"


@dataclass
class EditorForm:
    """Field values as the user sees them in the editor dialog."""
    title: str = ""
    description: str = ""
    category: str = DEFAULT_CATEGORY
    due_date: str = ""
    completed: bool = False


class TodoEditor:
    def __init__(
        self,
        create_callback: SaveCallback,
        update_callback: SaveCallback,
        *,
        default_category: str = DEFAULT_CATEGORY,
        id_factory: Callable[[], int] = generate_todo_id,
    ):
        self.create_callback = create_callback
        self.update_callback = update_callback
        self.default_category = default_category
        self.id_factory = id_factory
        self.item: Dict[str, Any] = {}
        self.is_open = False
        self.error: Optional[str] = None

    @property
    def editing(self) -> bool:
        return self.item.get("id") is not None

    def open(self, item: "Todo | Dict[str, Any] | None" = None) -> EditorForm:
        """Open the editor; an item with an id switches to edit mode."""
        if item is not None:
            self.item = item.to_dict() if isinstance(item, Todo) else dict(item)
        self.is_open = True
        self.error = None
        return EditorForm(
            title=self.item.get("title") or "",
            description=self.item.get("description") or "",
            category=self.item.get("category") or self.default_category,
            due_date=self.item.get("dueDate") or "",
            completed=bool(self.item.get("completed") or False),
        )

    def save(self, form: EditorForm) -> bool:
        """Validate and dispatch; returns False (editor stays open) on rejection."""
        title = (form.title or "").strip()
        due_date = (form.due_date or "").strip()
        if not title:
            self.error = ERR_TITLE_REQUIRED
            return False
        if due_date and not is_iso_date(due_date):
            self.error = ERR_DUE_DATE_INVALID
            return False

        editing = self.editing
        record = {
            "id": self.item["id"] if editing else self.id_factory(),
            "title": title,
            "description": (form.description or "").strip(),
            "category": normalize_category(form.category, default=self.default_category),
            "dueDate": due_date,
            "completed": bool(form.completed),
        }
        if editing:
            self.update_callback(record)
        else:
            self.create_callback(record)
        self.close()
        return True

    def close(self) -> None:
        self.item = {}
        self.is_open = False
        self.error = None


__all__ = ["EditorForm", "TodoEditor", "ERR_TITLE_REQUIRED", "ERR_DUE_DATE_INVALID"]
