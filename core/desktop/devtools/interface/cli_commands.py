from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from core import Todo, coerce_todo_id, is_iso_date
from application.ports import TodoStorage
from core.desktop.devtools.application.controller import TodoController, with_category_filter, with_status_filter
from core.desktop.devtools.interface.cli_io import structured_error, structured_response


StorageFactory = Callable[[Any], TodoStorage]
Translate = Callable[..., str]


@dataclass
class CliDeps:
    storage_factory: StorageFactory
    translate: Translate
    todo_to_dict: Callable[..., Dict[str, Any]]
    state_to_dict: Callable[..., Dict[str, Any]]


def _controller(args, deps: CliDeps) -> TodoController:
    controller = TodoController(deps.storage_factory(args))
    state = controller.state
    if getattr(args, "status", None):
        state = with_status_filter(state, args.status)
    if getattr(args, "category", None) and getattr(args, "command", "") in {"list", "move"}:
        state = with_category_filter(state, args.category)
    controller.state = state
    return controller


def _todo_id(args, deps: CliDeps, command: str, attr: str = "todo_id") -> Optional[int]:
    todo_id = coerce_todo_id(getattr(args, attr, None))
    if todo_id is None:
        structured_error(command, deps.translate("ERR_TODO_NOT_FOUND", todo_id=getattr(args, attr, None)))
    return todo_id


def _collect_fields(args) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    if getattr(args, "title", None) is not None:
        fields["title"] = args.title.strip()
    if getattr(args, "description", None) is not None:
        fields["description"] = args.description.strip()
    if getattr(args, "category", None):
        fields["category"] = args.category.strip().lower()
    if getattr(args, "due", None) is not None:
        fields["dueDate"] = args.due.strip()
    if getattr(args, "completed", None) is not None:
        fields["completed"] = bool(args.completed)
    return fields


def _validate_fields(fields: Dict[str, Any], deps: CliDeps) -> Optional[str]:
    if "title" in fields and not fields["title"]:
        return deps.translate("ERR_TITLE_REQUIRED")
    due = fields.get("dueDate", "")
    if due and not is_iso_date(due):
        return deps.translate("ERR_DUE_DATE_INVALID")
    return None


def cmd_list(args, deps: CliDeps) -> int:
    controller = _controller(args, deps)
    visible: List[Todo] = controller.visible()
    return structured_response(
        "list",
        status="OK",
        message=deps.translate("MSG_LIST_BUILT"),
        payload=deps.state_to_dict(controller.state, visible),
        summary=deps.translate("SUMMARY_TODOS", count=len(visible)),
    )


def cmd_add(args, deps: CliDeps) -> int:
    fields = _collect_fields(args)
    fields.setdefault("title", "")
    error = _validate_fields(fields, deps)
    if error:
        return structured_error("add", error)
    controller = _controller(args, deps)
    todo = controller.create_todo(fields)
    return structured_response(
        "add",
        message=deps.translate("MSG_TODO_CREATED", todo_id=todo.id),
        payload={"todo": deps.todo_to_dict(todo)},
        summary=f"{todo.id}: {todo.title}",
    )


def _update(args, deps: CliDeps, command: str, fields: Dict[str, Any]) -> int:
    todo_id = _todo_id(args, deps, command)
    if todo_id is None:
        return 1
    error = _validate_fields(fields, deps)
    if error:
        return structured_error(command, error)
    controller = _controller(args, deps)
    todo = controller.update_todo({"id": todo_id, **fields})
    if todo is None:
        return structured_error(command, deps.translate("ERR_TODO_NOT_FOUND", todo_id=todo_id))
    return structured_response(
        command,
        message=deps.translate("MSG_TODO_UPDATED", todo_id=todo.id),
        payload={"todo": deps.todo_to_dict(todo)},
        summary=f"{todo.id}: {todo.title}",
    )


def cmd_edit(args, deps: CliDeps) -> int:
    return _update(args, deps, "edit", _collect_fields(args))


def cmd_done(args, deps: CliDeps) -> int:
    return _update(args, deps, "done", {"completed": not getattr(args, "undo", False)})


def cmd_delete(args, deps: CliDeps) -> int:
    todo_id = _todo_id(args, deps, "delete")
    if todo_id is None:
        return 1
    controller = _controller(args, deps)
    removed = controller.delete_todo(todo_id)
    if removed is None:
        return structured_error("delete", deps.translate("ERR_TODO_NOT_FOUND", todo_id=todo_id))
    return structured_response(
        "delete",
        message=deps.translate("MSG_TODO_DELETED", todo_id=removed.id),
        payload={"todo": deps.todo_to_dict(removed)},
    )


def cmd_move(args, deps: CliDeps) -> int:
    todo_id = _todo_id(args, deps, "move")
    if todo_id is None:
        return 1
    controller = _controller(args, deps)
    if controller.storage.find(todo_id) is None:
        return structured_error("move", deps.translate("ERR_TODO_NOT_FOUND", todo_id=todo_id))

    before = getattr(args, "before", None)
    if before is not None:
        target_id = _todo_id(args, deps, "move", attr="before")
        if target_id is None:
            return 1
        if controller.storage.find(target_id) is None:
            return structured_error("move", deps.translate("ERR_TODO_NOT_FOUND", todo_id=target_id))
        moved = controller.move_before(todo_id, target_id)
    elif getattr(args, "up", False) or getattr(args, "down", False):
        delta = -1 if args.up else 1
        moved = controller.move_by(todo_id, delta * max(1, int(getattr(args, "steps", 1) or 1)))
    else:
        return structured_error("move", deps.translate("ERR_MOVE_TARGET"))

    message = deps.translate("MSG_TODO_MOVED", todo_id=todo_id) if moved else deps.translate("MSG_ORDER_UNCHANGED")
    return structured_response(
        "move",
        message=message,
        payload={"moved": moved, "order": [t.id for t in controller.state.todos]},
    )


def cmd_clear(args, deps: CliDeps) -> int:
    if not getattr(args, "yes", False):
        return structured_error("clear", deps.translate("ERR_CLEAR_CONFIRM"))
    controller = _controller(args, deps)
    removed = len(controller.state.todos)
    controller.delete_all()
    return structured_response(
        "clear",
        message=deps.translate("MSG_ALL_DELETED"),
        payload={"removed": removed},
    )


__all__ = ["CliDeps", "cmd_list", "cmd_add", "cmd_edit", "cmd_done", "cmd_delete", "cmd_move", "cmd_clear"]
