from core import Todo
from core.desktop.devtools.application.controller import AppState, with_category_filter, with_status_filter
from core.desktop.devtools.interface.serializers import filters_to_dict, state_to_dict, todo_to_dict


def test_todo_to_dict_plain_and_positioned():
    todo = Todo(1, "a", completed=True)
    assert todo_to_dict(todo) == todo.to_dict()
    data = todo_to_dict(todo, position=3)
    assert data["position"] == 3
    assert data["mark"] == "✓"


def test_state_to_dict_counts_whole_list():
    todos = (Todo(1, "a"), Todo(2, "b", completed=True))
    state = with_status_filter(AppState(todos=todos), "active")
    state = with_category_filter(state, "work")
    data = state_to_dict(state, [todos[0]])
    assert filters_to_dict(state) == {"status": "active", "category": "work"}
    assert data["counts"] == {"all": 2, "active": 1, "completed": 1}
    assert data["total"] == 1
    assert data["todos"][0]["mark"] == "○"
