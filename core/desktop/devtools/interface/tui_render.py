"""Card rendering for TodoBoardTUI."""

from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import Todo
from application.ports import TodoCallback, TodoRenderer
from util.responsive import card_content_width
from core.desktop.devtools.interface.tui_display import display_width, pad_display, single_line, trim_display
from core.desktop.devtools.interface.tui_models import TodoCard
from core.desktop.devtools.interface.tui_mouse import action_mouse_handler, card_mouse_handler
from core.desktop.devtools.interface.tui_themes import category_style

DRAG_HANDLE = "☰"


class CardRenderer(TodoRenderer):
    """Turns the visible todos into TodoCard handles kept for the next paint."""

    def __init__(self) -> None:
        self.cards: List[TodoCard] = []

    def render_todos(self, todos: Sequence[Todo], on_edit: TodoCallback, on_delete: TodoCallback) -> List[TodoCard]:
        self.cards = [
            TodoCard(todo=todo, index=idx, on_edit=on_edit, on_delete=on_delete)
            for idx, todo in enumerate(todos)
        ]
        return self.cards


def card_inner_width(term_width: int) -> int:
    return max(12, card_content_width(term_width) - 4)


def _border_style(selected: bool, dragging: bool) -> str:
    if dragging:
        return "class:card.dragging"
    if selected:
        return "class:card.selected"
    return "class:card.border"


def render_card_fragments(tui, card: TodoCard, inner: int, *, selected: bool = False, dragging: bool = False) -> List[Tuple]:
    """Five rows: border, title + due date, description, meta + actions, border."""
    todo = card.todo
    border = _border_style(selected, dragging)
    on_card = card_mouse_handler(tui, card)
    frags: List[Tuple] = []

    def add(style: str, text: str, handler=on_card) -> None:
        frags.append((style, text, handler))

    # top border
    add(border, "╭" + "─" * (inner + 2) + "╮\n")

    # title row
    due_text = f"{tui._t('DUE_LABEL')}: {todo.due_date or '-'}"
    title_width = max(1, inner - 2 - display_width(due_text) - 1)
    title_style = "class:card.title.done" if todo.completed else "class:card.title"
    add(border, "│ ")
    add("class:card.handle", DRAG_HANDLE + " ")
    add(title_style, pad_display(single_line(todo.title), title_width))
    add("class:card.due", " " + due_text)
    add(border, " │\n")

    # description row
    add(border, "│ ")
    add("class:card.desc", pad_display(single_line(todo.description), inner))
    add(border, " │\n")

    # meta row: read-only completion mark, category tag, actions
    check = f"[{'✓' if todo.completed else ' '}] {tui._t('DONE_LABEL')}"
    edit_label = f" ✎ {tui._t('ACTION_EDIT')} "
    delete_label = f" ✕ {tui._t('ACTION_DELETE')} "
    actions_width = display_width(edit_label) + 1 + display_width(delete_label)
    tag_width = max(0, inner - display_width(check) - 2 - actions_width - 1)
    tag = trim_display(f"#{todo.category}", tag_width)
    fill = inner - display_width(check) - 2 - display_width(tag) - actions_width
    add(border, "│ ")
    add("class:card.check", check + "  ")
    add(category_style(todo.category), tag)
    add("class:text", " " * max(1, fill))
    add("class:card.action", edit_label, action_mouse_handler(tui, card, "edit"))
    add("class:text", " ")
    add("class:card.action.delete", delete_label, action_mouse_handler(tui, card, "delete"))
    add(border, " │\n")

    # bottom border
    add(border, "╰" + "─" * (inner + 2) + "╯\n")
    return frags


def render_empty_board(tui, inner: int) -> FormattedText:
    has_hidden = bool(getattr(tui.controller.state, "todos", ()))
    message = tui._t("LIST_EMPTY_FILTERED" if has_hidden else "LIST_EMPTY")
    return FormattedText([
        ("class:border", "╭" + "─" * (inner + 2) + "╮\n"),
        ("class:border", "│ "),
        ("class:text.dim", pad_display(message, inner)),
        ("class:border", " │\n"),
        ("class:border", "│ "),
        ("class:text", pad_display(tui._t("CTA_ADD"), inner)),
        ("class:border", " │\n"),
        ("class:border", "╰" + "─" * (inner + 2) + "╯"),
    ])


def render_board_text(tui) -> FormattedText:
    inner = card_inner_width(tui.get_terminal_width())
    cards: List[TodoCard] = tui.cards
    if not cards:
        return render_empty_board(tui, inner)

    capacity = tui.card_capacity()
    start = max(0, min(tui.view_offset, max(0, len(cards) - capacity)))
    drag_id: Optional[int] = getattr(tui, "drag_source_id", None)
    result: List[Tuple] = []
    for card in cards[start:start + capacity]:
        result.extend(
            render_card_fragments(
                tui,
                card,
                inner,
                selected=card.index == tui.selected_index,
                dragging=card.id == drag_id,
            )
        )
    return FormattedText(result)


__all__ = ["CardRenderer", "card_inner_width", "render_card_fragments", "render_empty_board", "render_board_text"]
