import pytest

from core import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    StatusFilter,
    Todo,
    category_choices,
    coerce_todo_id,
    is_iso_date,
    next_category_filter,
    next_status_filter,
    normalize_category,
    normalize_category_filter,
    normalize_status_filter,
    status_mark,
    todo_changes,
)
from core.todo import field_name


def test_from_dict_reads_wire_keys():
    todo = Todo.from_dict({
        "id": 7,
        "title": "Buy milk",
        "description": "2 liters",
        "category": "home",
        "dueDate": "2024-05-01",
        "completed": True,
    })
    assert todo == Todo(7, "Buy milk", "2 liters", "home", "2024-05-01", True)


def test_from_dict_defaults_and_string_id():
    todo = Todo.from_dict({"id": "42", "title": "x"})
    assert todo.id == 42
    assert todo.category == DEFAULT_CATEGORY
    assert todo.due_date == ""
    assert todo.completed is False


@pytest.mark.parametrize("raw", [None, "abc", True, 1.5, ""])
def test_from_dict_without_usable_id(raw):
    assert Todo.from_dict({"id": raw, "title": "x"}) is None


def test_to_dict_uses_camel_case_due_date():
    data = Todo(1, "t", due_date="2024-01-02").to_dict()
    assert data["dueDate"] == "2024-01-02"
    assert "due_date" not in data
    assert list(data) == ["id", "title", "description", "category", "dueDate", "completed"]


def test_merged_overwrites_only_present_fields():
    todo = Todo(1, "old", "keep", "home")
    merged = todo.merged({"title": "new", "dueDate": "2024-02-03", "id": 99, "unknown": "x"})
    assert merged.id == 1
    assert merged.title == "new"
    assert merged.description == "keep"
    assert merged.due_date == "2024-02-03"
    assert todo.title == "old"


def test_merged_coerces_values():
    merged = Todo(1, "t").merged({"completed": 1, "description": None, "due_date": "2024-01-01"})
    assert merged.completed is True
    assert merged.description == ""
    assert merged.due_date == "2024-01-01"


def test_merged_without_changes_returns_same_instance():
    todo = Todo(1, "t")
    assert todo.merged({}) is todo


def test_todo_changes_accepts_todo_and_mapping():
    assert todo_changes(Todo(3, "x"))["id"] == 3
    payload = {"id": 4}
    copy = todo_changes(payload)
    assert copy == payload and copy is not payload


def test_helpers():
    assert coerce_todo_id(" 12 ") == 12
    assert coerce_todo_id(False) is None
    assert field_name("dueDate") == "due_date"
    assert field_name("due_date") == "due_date"
    assert field_name("nope") is None
    assert is_iso_date("2024-02-29")
    assert not is_iso_date("2023-02-29")
    assert not is_iso_date("tomorrow")


def test_coerce_todo_id_rejects_unparseable_strings():
    assert coerce_todo_id("-7") == -7
    assert coerce_todo_id("²") is None
    assert coerce_todo_id("1" * 5000) is None
    assert coerce_todo_id("12a") is None


def test_status_filter_parsing():
    assert StatusFilter.from_string("Active") is StatusFilter.ACTIVE
    assert StatusFilter.from_string(StatusFilter.COMPLETED) is StatusFilter.COMPLETED
    assert normalize_status_filter("done") == "completed"
    assert normalize_status_filter("") == "all"
    with pytest.raises(ValueError):
        normalize_status_filter("archived")


def test_status_filter_cycle_and_marks():
    assert next_status_filter(StatusFilter.ALL) is StatusFilter.ACTIVE
    assert next_status_filter(StatusFilter.COMPLETED) is StatusFilter.ALL
    assert status_mark(True) == "✓"
    assert status_mark(False) == "○"


def test_categories():
    assert normalize_category("  Home ") == "home"
    assert normalize_category("") == DEFAULT_CATEGORY
    assert normalize_category_filter("") == "all"
    assert category_choices(["Garden", "home"]) == [*CATEGORIES, "garden"]
    assert next_category_filter("all") == "work"
    assert next_category_filter(CATEGORIES[-1]) == "all"
    assert next_category_filter("unknown") == "work"
