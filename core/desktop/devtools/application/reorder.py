"""Map changes of the visible card order back onto the full todo order.

Only the slots occupied by visible todos are rewritten; todos hidden by the
current filter keep their positions, so a drag in a filtered view can
neither drop nor duplicate them.
"""

from typing import Dict, List, Optional, Sequence

from core import Todo


def merge_visible_order(todos: Sequence[Todo], visible_ids: Sequence[int]) -> List[Todo]:
    by_id: Dict[int, Todo] = {t.id: t for t in todos}
    wanted = list(visible_ids)
    if len(set(wanted)) != len(wanted):
        raise ValueError("Visible order contains duplicate ids")
    unknown = [tid for tid in wanted if tid not in by_id]
    if unknown:
        raise ValueError(f"Visible order references unknown ids: {unknown}")

    visible = set(wanted)
    slots = [idx for idx, todo in enumerate(todos) if todo.id in visible]
    result = list(todos)
    for slot, todo_id in zip(slots, wanted):
        result[slot] = by_id[todo_id]
    return result


def _visible(todos: Sequence[Todo], visible_ids: Optional[Sequence[int]]) -> List[int]:
    if visible_ids is None:
        return [t.id for t in todos]
    return list(visible_ids)


def move_before(
    todos: Sequence[Todo],
    dragged_id: int,
    target_id: int,
    visible_ids: Optional[Sequence[int]] = None,
) -> List[Todo]:
    """Drop ``dragged_id`` onto ``target_id``: it lands right before the target."""
    order = _visible(todos, visible_ids)
    if dragged_id == target_id or dragged_id not in order or target_id not in order:
        return list(todos)
    order.remove(dragged_id)
    order.insert(order.index(target_id), dragged_id)
    return merge_visible_order(todos, order)


def move_by(
    todos: Sequence[Todo],
    todo_id: int,
    delta: int,
    visible_ids: Optional[Sequence[int]] = None,
) -> List[Todo]:
    """Shift a todo ``delta`` visible positions, clamped to the ends."""
    order = _visible(todos, visible_ids)
    if todo_id not in order or not delta:
        return list(todos)
    current = order.index(todo_id)
    target = max(0, min(current + delta, len(order) - 1))
    if target == current:
        return list(todos)
    order.pop(current)
    order.insert(target, todo_id)
    return merge_visible_order(todos, order)


__all__ = ["merge_visible_order", "move_before", "move_by"]
