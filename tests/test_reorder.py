import pytest

from core import Todo
from core.desktop.devtools.application.reorder import merge_visible_order, move_before, move_by


def _todos(*ids, done=()):
    return [Todo(i, f"t{i}", completed=i in done) for i in ids]


def _ids(todos):
    return [t.id for t in todos]


def test_move_before_in_full_list():
    todos = _todos(1, 2, 3, 4)
    assert _ids(move_before(todos, 4, 2)) == [1, 4, 2, 3]
    assert _ids(move_before(todos, 1, 3)) == [2, 1, 3, 4]


def test_move_before_noops():
    todos = _todos(1, 2, 3)
    assert _ids(move_before(todos, 2, 2)) == [1, 2, 3]
    assert _ids(move_before(todos, 9, 2)) == [1, 2, 3]
    assert _ids(move_before(todos, 2, 9)) == [1, 2, 3]


def test_filtered_drag_keeps_hidden_slots():
    todos = _todos(1, 2, 3, 4, 5, done=(2, 4))
    visible = [1, 3, 5]
    result = move_before(todos, 5, 1, visible)
    assert _ids(result) == [5, 2, 1, 4, 3]
    assert sorted(_ids(result)) == sorted(_ids(todos))


def test_drag_onto_hidden_target_is_ignored():
    todos = _todos(1, 2, 3, done=(2,))
    assert _ids(move_before(todos, 3, 2, [1, 3])) == [1, 2, 3]


def test_move_by_clamps():
    todos = _todos(1, 2, 3)
    assert _ids(move_by(todos, 3, -1)) == [1, 3, 2]
    assert _ids(move_by(todos, 3, -10)) == [3, 1, 2]
    assert _ids(move_by(todos, 3, 1)) == [1, 2, 3]
    assert _ids(move_by(todos, 2, 0)) == [1, 2, 3]


def test_move_by_within_filtered_view():
    todos = _todos(1, 2, 3, 4, done=(2, 3))
    assert _ids(move_by(todos, 4, -1, [1, 4])) == [4, 2, 3, 1]


def test_merge_visible_order_rejects_bad_input():
    todos = _todos(1, 2)
    with pytest.raises(ValueError):
        merge_visible_order(todos, [1, 1])
    with pytest.raises(ValueError):
        merge_visible_order(todos, [1, 7])


def test_reorder_preserves_multiset():
    todos = _todos(10, 20, 30, 40, 50, done=(20, 50))
    for dragged in _ids(todos):
        for target in _ids(todos):
            assert sorted(_ids(move_before(todos, dragged, target))) == sorted(_ids(todos))
