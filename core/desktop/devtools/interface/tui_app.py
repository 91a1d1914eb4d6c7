#!/usr/bin/env python3
"""TUI application - TodoBoardTUI class and cmd_tui command."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.bindings.focus import focus_next, focus_previous
from prompt_toolkit.layout import ConditionalContainer, Float, FloatContainer, HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style

from config import get_user_theme
from core import StatusFilter
from application.ports import TodoStorage
from infrastructure.storage_service import StorageService
from core.desktop.devtools.application.controller import TodoController
from core.desktop.devtools.interface.constants import TUI_LOG_FILE
from core.desktop.devtools.interface.cli_runtime import configure_logging, open_storage
from core.desktop.devtools.interface.i18n import effective_lang, translate
from core.desktop.devtools.interface.storage_resolver import resolve_storage_dir
from core.desktop.devtools.interface.tui_editing import EditingMixin
from core.desktop.devtools.interface.tui_editor import EditorDialog
from core.desktop.devtools.interface.tui_footer import build_footer_text
from core.desktop.devtools.interface.tui_models import CARD_HEIGHT, TodoCard
from core.desktop.devtools.interface.tui_navigation import ensure_selection_visible, move_vertical_selection
from core.desktop.devtools.interface.tui_render import CardRenderer, render_board_text
from core.desktop.devtools.interface.tui_status import FILTER_LABEL_KEYS, build_status_text
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, THEMES, build_style

logger = logging.getLogger("todo.tui")

# Header row and the two footer rows.
CHROME_HEIGHT = 3


class TodoBoardTUI(EditingMixin):
    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        storage: Optional[TodoStorage] = None,
        theme: str = DEFAULT_THEME,
        *,
        language: Optional[str] = None,
        app_input=None,
        app_output=None,
    ):
        self.language = effective_lang(language)
        self.theme_name = theme if theme in THEMES else DEFAULT_THEME
        self.renderer = CardRenderer()
        self.controller = TodoController(storage if storage is not None else StorageService(), self.renderer)
        self.selected_index = 0
        self.view_offset = 0
        self.drag_source_id: Optional[int] = None
        self.press_selected = False
        self.confirm_clear = False
        self.status_message = ""
        self.app: Optional[Application] = None
        self.refresh()

        self.style = self.build_style(self.theme_name)
        kb = self._build_key_bindings()

        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)
        self.board_control = FormattedTextControl(self.get_board_text, focusable=True, show_cursor=False)
        self.board_window = Window(content=self.board_control, always_hide_cursor=True, wrap_lines=False)
        self.footer = Window(
            content=FormattedTextControl(self.get_footer_text),
            height=Dimension(min=2, max=2),
            always_hide_cursor=True,
        )
        self.editor_dialog = EditorDialog(self)
        root = FloatContainer(
            content=HSplit([self.status_bar, self.board_window, self.footer]),
            floats=[
                Float(content=ConditionalContainer(self.editor_dialog, filter=Condition(lambda: self.editor_open))),
            ],
        )

        self.app = Application(
            layout=Layout(root, focused_element=self.board_window),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            mouse_support=True,
            input=app_input,
            output=app_output,
        )
        # Esc closes dialogs; do not wait for ANSI sequences.
        self.app.ttimeoutlen = 0.05

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        confirm_active = Condition(lambda: self.confirm_clear)
        editor_active = Condition(lambda: self.editor_open)
        board_active = ~editor_active & ~confirm_active

        @kb.add("q", filter=board_active)
        @kb.add("c-c")
        def _(event):
            event.app.exit()

        @kb.add("a", filter=board_active)
        @kb.add("n", filter=board_active)
        def _(event):
            self.open_editor()

        @kb.add("e", filter=board_active)
        @kb.add("enter", filter=board_active)
        def _(event):
            self.edit_selected()

        @kb.add("x", filter=board_active)
        @kb.add("delete", filter=board_active)
        def _(event):
            self.delete_selected()

        @kb.add("down", filter=board_active)
        @kb.add("j", filter=board_active)
        def _(event):
            move_vertical_selection(self, 1)

        @kb.add("up", filter=board_active)
        @kb.add("k", filter=board_active)
        def _(event):
            move_vertical_selection(self, -1)

        @kb.add("pagedown", filter=board_active)
        def _(event):
            move_vertical_selection(self, self.card_capacity())

        @kb.add("pageup", filter=board_active)
        def _(event):
            move_vertical_selection(self, -self.card_capacity())

        @kb.add("J", filter=board_active)
        def _(event):
            self.move_selected(1)

        @kb.add("K", filter=board_active)
        def _(event):
            self.move_selected(-1)

        @kb.add("1", filter=board_active)
        def _(event):
            self.set_status_filter(StatusFilter.ALL)

        @kb.add("2", filter=board_active)
        def _(event):
            self.set_status_filter(StatusFilter.ACTIVE)

        @kb.add("3", filter=board_active)
        def _(event):
            self.set_status_filter(StatusFilter.COMPLETED)

        @kb.add("f", filter=board_active)
        def _(event):
            self.cycle_status_filter()

        @kb.add("c", filter=board_active)
        def _(event):
            self.cycle_category_filter()

        @kb.add("D", filter=board_active)
        def _(event):
            self.request_clear()

        @kb.add("y", filter=confirm_active)
        def _(event):
            self.confirm_clear_all()

        @kb.add("n", filter=confirm_active)
        @kb.add("escape", filter=confirm_active, eager=True)
        def _(event):
            self.cancel_clear()

        @kb.add("escape", filter=editor_active, eager=True)
        def _(event):
            self.cancel_editor()

        @kb.add("c-s", filter=editor_active)
        def _(event):
            self.save_editor()

        kb.add("tab", filter=editor_active)(focus_next)
        kb.add("s-tab", filter=editor_active)(focus_previous)
        return kb

    # ---------------------------------------------------------------- layout
    @staticmethod
    def get_terminal_width() -> int:
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    def card_capacity(self) -> int:
        return max(1, (self.get_terminal_height() - CHROME_HEIGHT) // CARD_HEIGHT)

    def get_status_text(self) -> FormattedText:
        return build_status_text(self)

    def get_board_text(self) -> FormattedText:
        return render_board_text(self)

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self)

    def force_render(self) -> None:
        if self.app is not None:
            self.app.invalidate()

    def _focus(self, target) -> None:
        if self.app is not None:
            self.app.layout.focus(target)
        self.force_render()

    def _t(self, key: str, **kwargs) -> str:
        return translate(key, lang=self.language, **kwargs)

    def set_status_message(self, message: str) -> None:
        self.status_message = message
        self.force_render()

    # ----------------------------------------------------------------- cards
    @property
    def cards(self) -> List[TodoCard]:
        return self.renderer.cards

    def refresh(self, select_id: Optional[int] = None) -> None:
        """Re-render from storage, keeping the selection on `select_id` when given."""
        self.controller.render()
        if select_id is not None:
            for card in self.cards:
                if card.id == select_id:
                    self.selected_index = card.index
                    break
        self.selected_index = max(0, min(self.selected_index, len(self.cards) - 1))
        ensure_selection_visible(self)
        self.force_render()

    def selected_card(self) -> Optional[TodoCard]:
        if not self.cards:
            return None
        return self.cards[max(0, min(self.selected_index, len(self.cards) - 1))]

    def ensure_selection_visible(self) -> None:
        ensure_selection_visible(self)

    def move_vertical_selection(self, delta: int) -> None:
        move_vertical_selection(self, delta)

    # ----------------------------------------------------------- drag & drop
    def begin_drag(self, card: TodoCard) -> None:
        self.drag_source_id = card.id
        self.set_status_message(self._t("STATUS_DRAG", title=card.todo.title))

    def clear_drag(self) -> None:
        if self.drag_source_id is not None:
            self.status_message = ""
        self.drag_source_id = None
        self.force_render()

    def drop_before(self, source_id: int, target: TodoCard) -> bool:
        moved = self.controller.move_before(source_id, target.id)
        self.refresh(select_id=source_id)
        if moved:
            self.set_status_message(self._t("STATUS_MOVED"))
        return moved

    def move_selected(self, delta: int) -> bool:
        card = self.selected_card()
        if card is None:
            return False
        moved = self.controller.move_by(card.id, delta)
        self.refresh(select_id=card.id)
        if moved:
            self.set_status_message(self._t("STATUS_MOVED"))
        return moved

    # --------------------------------------------------------------- filters
    def set_status_filter(self, value: "StatusFilter | str") -> None:
        self.controller.set_status_filter(value)
        self.selected_index = 0
        self.refresh()
        label = self._t(FILTER_LABEL_KEYS[self.controller.state.status_filter])
        self.set_status_message(self._t("STATUS_FILTER_SET", value=label))

    def cycle_status_filter(self) -> None:
        self.set_status_filter(self.controller.cycle_status_filter())

    def cycle_category_filter(self) -> None:
        value = self.controller.cycle_category_filter()
        self.selected_index = 0
        self.refresh()
        self.set_status_message(self._t("STATUS_CATEGORY_SET", value=value))

    def run(self) -> None:
        self.app.run()


def cmd_tui(args) -> int:
    log_dir = resolve_storage_dir(getattr(args, "storage_dir", None))
    configure_logging(getattr(args, "verbose", False), log_file=Path(log_dir) / TUI_LOG_FILE)
    storage = open_storage(args)
    theme = getattr(args, "theme", None) or get_user_theme() or DEFAULT_THEME
    logger.debug("Starting board for key %s", storage.key)
    tui = TodoBoardTUI(storage, theme=theme)
    tui.run()
    return 0


__all__ = ["TodoBoardTUI", "cmd_tui"]
