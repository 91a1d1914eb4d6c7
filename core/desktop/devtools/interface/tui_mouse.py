"""Mouse event handling helpers for TodoBoardTUI."""

from prompt_toolkit.mouse_events import MouseButton, MouseEventType

from core.desktop.devtools.interface.tui_models import TodoCard


def _is_left(mouse_event) -> bool:
    button = getattr(mouse_event, "button", MouseButton.LEFT)
    return button in (MouseButton.LEFT, MouseButton.NONE)


def _handle_scroll(tui, mouse_event):
    if mouse_event.event_type == MouseEventType.SCROLL_DOWN:
        tui.move_vertical_selection(1)
        return True
    if mouse_event.event_type == MouseEventType.SCROLL_UP:
        tui.move_vertical_selection(-1)
        return True
    return False


def _blocked(tui) -> bool:
    return tui.editor_open or tui.confirm_clear


def handle_card_event(tui, card: TodoCard, mouse_event):
    """Press starts a drag, release on another card drops before it.

    Releasing on the card that was already selected opens the editor.
    """
    if _blocked(tui):
        return NotImplemented
    if _handle_scroll(tui, mouse_event):
        return None
    if not _is_left(mouse_event):
        return NotImplemented
    if mouse_event.event_type == MouseEventType.MOUSE_DOWN:
        tui.press_selected = tui.selected_index == card.index
        tui.selected_index = card.index
        tui.begin_drag(card)
        return None
    if mouse_event.event_type == MouseEventType.MOUSE_UP:
        source_id = tui.drag_source_id
        tui.clear_drag()
        if source_id is not None and source_id != card.id:
            tui.drop_before(source_id, card)
            return None
        if tui.press_selected:
            tui.edit_card(card)
        else:
            tui.selected_index = card.index
            tui.ensure_selection_visible()
        tui.press_selected = False
        return None
    return NotImplemented


def handle_action_event(tui, card: TodoCard, action: str, mouse_event):
    if _blocked(tui):
        return NotImplemented
    if _handle_scroll(tui, mouse_event):
        return None
    if mouse_event.event_type == MouseEventType.MOUSE_DOWN:
        return None
    if mouse_event.event_type != MouseEventType.MOUSE_UP or not _is_left(mouse_event):
        return NotImplemented
    tui.clear_drag()
    tui.selected_index = card.index
    if action == "edit":
        tui.edit_card(card)
    elif action == "delete":
        tui.delete_card(card)
    return None


def card_mouse_handler(tui, card: TodoCard):
    return lambda mouse_event: handle_card_event(tui, card, mouse_event)


def action_mouse_handler(tui, card: TodoCard, action: str):
    return lambda mouse_event: handle_action_event(tui, card, action, mouse_event)


def filter_mouse_handler(tui, apply):
    """Click handler for a header tab; `apply` receives no arguments."""

    def handler(mouse_event):
        if _blocked(tui):
            return NotImplemented
        if mouse_event.event_type == MouseEventType.MOUSE_UP and _is_left(mouse_event):
            apply()
            return None
        return NotImplemented

    return handler


__all__ = [
    "handle_card_event",
    "handle_action_event",
    "card_mouse_handler",
    "action_mouse_handler",
    "filter_mouse_handler",
]
