from types import SimpleNamespace

from prompt_toolkit.mouse_events import MouseButton, MouseEventType

from core import Todo
from core.desktop.devtools.interface import tui_mouse
from core.desktop.devtools.interface.tui_models import TodoCard


def _mouse(event_type, button=MouseButton.LEFT):
    return SimpleNamespace(event_type=event_type, button=button, position=SimpleNamespace(x=0, y=0), modifiers=())


class FakeTUI:
    def __init__(self):
        self.editor_open = False
        self.confirm_clear = False
        self.selected_index = 0
        self.press_selected = False
        self.drag_source_id = None
        self.actions = []

    def begin_drag(self, card):
        self.drag_source_id = card.id
        self.actions.append(("drag", card.id))

    def clear_drag(self):
        self.drag_source_id = None

    def drop_before(self, source_id, card):
        self.actions.append(("drop", source_id, card.id))

    def edit_card(self, card):
        self.actions.append(("edit", card.id))

    def delete_card(self, card):
        self.actions.append(("delete", card.id))

    def ensure_selection_visible(self):
        pass

    def move_vertical_selection(self, delta):
        self.actions.append(("scroll", delta))


def _card(todo_id, index):
    return TodoCard(Todo(todo_id, f"t{todo_id}"), index, on_edit=lambda t: None, on_delete=lambda t: None)


def test_press_then_release_on_other_card_drops_before_it():
    tui = FakeTUI()
    first, third = _card(1, 0), _card(3, 2)
    tui_mouse.handle_card_event(tui, third, _mouse(MouseEventType.MOUSE_DOWN))
    assert tui.selected_index == 2
    assert tui.drag_source_id == 3
    tui_mouse.handle_card_event(tui, first, _mouse(MouseEventType.MOUSE_UP))
    assert tui.actions == [("drag", 3), ("drop", 3, 1)]
    assert tui.drag_source_id is None


def test_click_selects_then_second_click_edits():
    tui = FakeTUI()
    card = _card(5, 1)
    tui_mouse.handle_card_event(tui, card, _mouse(MouseEventType.MOUSE_DOWN))
    tui_mouse.handle_card_event(tui, card, _mouse(MouseEventType.MOUSE_UP))
    assert ("edit", 5) not in tui.actions
    tui_mouse.handle_card_event(tui, card, _mouse(MouseEventType.MOUSE_DOWN))
    tui_mouse.handle_card_event(tui, card, _mouse(MouseEventType.MOUSE_UP))
    assert tui.actions[-1] == ("edit", 5)


def test_scroll_moves_selection():
    tui = FakeTUI()
    tui_mouse.handle_card_event(tui, _card(1, 0), _mouse(MouseEventType.SCROLL_DOWN))
    tui_mouse.handle_action_event(tui, _card(1, 0), "edit", _mouse(MouseEventType.SCROLL_UP))
    assert tui.actions == [("scroll", 1), ("scroll", -1)]


def test_action_buttons():
    tui = FakeTUI()
    card = _card(9, 4)
    assert tui_mouse.handle_action_event(tui, card, "delete", _mouse(MouseEventType.MOUSE_DOWN)) is None
    tui_mouse.handle_action_event(tui, card, "delete", _mouse(MouseEventType.MOUSE_UP))
    tui_mouse.handle_action_event(tui, card, "edit", _mouse(MouseEventType.MOUSE_UP))
    assert tui.actions == [("delete", 9), ("edit", 9)]
    assert tui.selected_index == 4


def test_events_ignored_while_modal():
    tui = FakeTUI()
    tui.editor_open = True
    result = tui_mouse.handle_card_event(tui, _card(1, 0), _mouse(MouseEventType.MOUSE_DOWN))
    assert result is NotImplemented
    tui.editor_open = False
    tui.confirm_clear = True
    assert tui_mouse.handle_action_event(tui, _card(1, 0), "delete", _mouse(MouseEventType.MOUSE_UP)) is NotImplemented
    assert tui.actions == []


def test_right_button_is_not_handled():
    tui = FakeTUI()
    result = tui_mouse.handle_card_event(tui, _card(1, 0), _mouse(MouseEventType.MOUSE_DOWN, MouseButton.RIGHT))
    assert result is NotImplemented


def test_filter_handler_fires_on_release():
    tui = FakeTUI()
    hits = []
    handler = tui_mouse.filter_mouse_handler(tui, lambda: hits.append(1))
    assert handler(_mouse(MouseEventType.MOUSE_DOWN)) is NotImplemented
    assert handler(_mouse(MouseEventType.MOUSE_UP)) is None
    assert hits == [1]
