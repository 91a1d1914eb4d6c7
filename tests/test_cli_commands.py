import json
from types import SimpleNamespace

import pytest

from infrastructure.local_storage import MemoryKeyValueStore
from infrastructure.storage_service import StorageService
from core.desktop.devtools.interface import cli_commands as cmds
from core.desktop.devtools.interface.serializers import state_to_dict, todo_to_dict


@pytest.fixture
def storage():
    return StorageService("todos", MemoryKeyValueStore())


@pytest.fixture
def deps(storage):
    return cmds.CliDeps(
        storage_factory=lambda args: storage,
        translate=lambda key, **kw: f"{key}:{kw}" if kw else key,
        todo_to_dict=todo_to_dict,
        state_to_dict=state_to_dict,
    )


def _args(command, **kwargs):
    base = dict(command=command, status=None, category=None, title=None, description=None, due=None, completed=None)
    base.update(kwargs)
    return SimpleNamespace(**base)


def _out(capsys):
    return json.loads(capsys.readouterr().out)


def test_add_then_list(storage, deps, capsys):
    assert cmds.cmd_add(_args("add", title="Buy milk", category="Home", due="2024-05-01"), deps) == 0
    added = _out(capsys)
    assert added["status"] == "OK"
    assert added["payload"]["todo"]["category"] == "home"
    assert added["payload"]["todo"]["dueDate"] == "2024-05-01"

    assert cmds.cmd_list(_args("list"), deps) == 0
    listed = _out(capsys)
    assert listed["payload"]["total"] == 1
    assert listed["payload"]["todos"][0]["title"] == "Buy milk"
    assert listed["payload"]["todos"][0]["position"] == 0
    assert listed["payload"]["counts"] == {"all": 1, "active": 1, "completed": 0}


def test_add_rejects_blank_title_and_bad_date(storage, deps, capsys):
    assert cmds.cmd_add(_args("add", title="  "), deps) == 1
    assert _out(capsys)["message"] == "ERR_TITLE_REQUIRED"
    assert cmds.cmd_add(_args("add", title="x", due="05/01/2024"), deps) == 1
    assert _out(capsys)["message"] == "ERR_DUE_DATE_INVALID"
    assert storage.get() == []


def test_list_applies_filters(storage, deps, capsys):
    storage.create({"title": "a", "category": "home"})
    storage.create({"title": "b", "category": "home", "completed": True})
    storage.create({"title": "c", "category": "work"})
    cmds.cmd_list(_args("list", status="active", category="home"), deps)
    payload = _out(capsys)["payload"]
    assert [t["title"] for t in payload["todos"]] == ["a"]
    assert payload["filters"] == {"status": "active", "category": "home"}
    assert payload["counts"]["all"] == 3


def test_edit_updates_fields(storage, deps, capsys):
    todo = storage.create({"title": "a"})
    rc = cmds.cmd_edit(_args("edit", todo_id=str(todo.id), title="renamed", description="more", completed=True), deps)
    assert rc == 0
    body = _out(capsys)
    assert body["payload"]["todo"]["title"] == "renamed"
    assert storage.find(todo.id).completed is True


def test_edit_missing_todo(deps, capsys):
    assert cmds.cmd_edit(_args("edit", todo_id="404", title="x"), deps) == 1
    body = _out(capsys)
    assert body["status"] == "ERROR"
    assert "ERR_TODO_NOT_FOUND" in body["message"]


def test_edit_rejects_non_numeric_id(deps, capsys):
    assert cmds.cmd_edit(_args("edit", todo_id="abc", title="x"), deps) == 1
    assert "ERR_TODO_NOT_FOUND" in _out(capsys)["message"]


def test_done_and_undo(storage, deps, capsys):
    todo = storage.create({"title": "a"})
    assert cmds.cmd_done(_args("done", todo_id=str(todo.id), undo=False), deps) == 0
    assert storage.find(todo.id).completed is True
    assert cmds.cmd_done(_args("done", todo_id=str(todo.id), undo=True), deps) == 0
    assert storage.find(todo.id).completed is False
    capsys.readouterr()


def test_delete(storage, deps, capsys):
    todo = storage.create({"title": "a"})
    assert cmds.cmd_delete(_args("delete", todo_id=str(todo.id)), deps) == 0
    assert _out(capsys)["payload"]["todo"]["id"] == todo.id
    assert cmds.cmd_delete(_args("delete", todo_id=str(todo.id)), deps) == 1


def test_move_before_and_by(storage, deps, capsys):
    a = storage.create({"id": 1, "title": "a"})
    b = storage.create({"id": 2, "title": "b"})
    c = storage.create({"id": 3, "title": "c"})
    rc = cmds.cmd_move(_args("move", todo_id="3", before="1", up=False, down=False, steps=1), deps)
    assert rc == 0
    body = _out(capsys)
    assert body["payload"] == {"moved": True, "order": [3, 1, 2]}

    cmds.cmd_move(_args("move", todo_id="3", before=None, up=False, down=True, steps=5), deps)
    assert _out(capsys)["payload"]["order"] == [1, 2, 3]

    cmds.cmd_move(_args("move", todo_id="1", before=None, up=True, down=False, steps=1), deps)
    body = _out(capsys)
    assert body["payload"]["moved"] is False
    assert body["message"] == "MSG_ORDER_UNCHANGED"
    assert [t.id for t in storage.get()] == [a.id, b.id, c.id]


def test_move_errors(storage, deps, capsys):
    storage.create({"id": 1, "title": "a"})
    assert cmds.cmd_move(_args("move", todo_id="1", before=None, up=False, down=False, steps=1), deps) == 1
    assert _out(capsys)["message"] == "ERR_MOVE_TARGET"
    assert cmds.cmd_move(_args("move", todo_id="1", before="99", up=False, down=False, steps=1), deps) == 1
    assert "ERR_TODO_NOT_FOUND" in _out(capsys)["message"]
    assert cmds.cmd_move(_args("move", todo_id="99", before="1", up=False, down=False, steps=1), deps) == 1


def test_move_in_filtered_view_keeps_hidden(storage, deps, capsys):
    storage.create({"id": 1, "title": "a"})
    storage.create({"id": 2, "title": "b", "completed": True})
    storage.create({"id": 3, "title": "c"})
    cmds.cmd_move(_args("move", todo_id="3", before=None, up=True, down=False, steps=1, status="active"), deps)
    assert _out(capsys)["payload"]["order"] == [3, 2, 1]


def test_clear_requires_yes(storage, deps, capsys):
    storage.create({"title": "a"})
    assert cmds.cmd_clear(_args("clear", yes=False), deps) == 1
    assert storage.get()
    assert _out(capsys)["message"] == "ERR_CLEAR_CONFIRM"
    assert cmds.cmd_clear(_args("clear", yes=True), deps) == 0
    assert _out(capsys)["payload"] == {"removed": 1}
    assert not storage.backend.has_item("todos")
