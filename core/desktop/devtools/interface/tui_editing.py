"""Editor and delete flows for TodoBoardTUI."""

from typing import Optional

from core import Todo
from core.desktop.devtools.application.editor import EditorForm
from core.desktop.devtools.interface.tui_models import TodoCard


class EditingMixin:
    """Bridges the editor dialog widgets and the controller's TodoEditor."""

    @property
    def editor_open(self) -> bool:
        return self.controller.editor.is_open

    def open_editor(self, todo: Optional[Todo] = None) -> None:
        form = self.controller.edit(todo) if todo is not None else self.controller.open_create()
        self.show_editor(form)

    def edit_card(self, card: TodoCard) -> None:
        self.show_editor(card.edit())

    def edit_selected(self) -> None:
        card = self.selected_card()
        if card is not None:
            self.edit_card(card)

    def show_editor(self, form: EditorForm) -> None:
        self.clear_drag()
        self.editor_dialog.load(form, self.controller.categories())
        self._focus(self.editor_dialog.title_field)
        self.force_render()

    def save_editor(self) -> bool:
        editing_id = self.controller.editor.item.get("id")
        saved = self.controller.editor.save(self.editor_dialog.read())
        if not saved:
            self.force_render()
            return False
        self.refresh(select_id=editing_id)
        self.set_status_message(self._t("STATUS_SAVED"))
        self._focus(self.board_window)
        return True

    def cancel_editor(self) -> None:
        self.controller.editor.close()
        self.set_status_message(self._t("STATUS_CANCELLED"))
        self._focus(self.board_window)

    def delete_card(self, card: TodoCard) -> Optional[Todo]:
        removed = card.delete()
        self.refresh()
        if removed is None:
            self.set_status_message(self._t("STATUS_NOT_FOUND"))
        else:
            self.set_status_message(self._t("STATUS_DELETED", title=removed.title))
        return removed

    def delete_selected(self) -> Optional[Todo]:
        card = self.selected_card()
        if card is None:
            return None
        return self.delete_card(card)

    # ------------------------------------------------------------ delete all
    def request_clear(self) -> None:
        if not self.controller.state.todos:
            return
        self.confirm_clear = True
        self.set_status_message(self._t("STATUS_CLEAR_CONFIRM"))

    def confirm_clear_all(self) -> None:
        self.confirm_clear = False
        self.controller.delete_all()
        self.refresh()
        self.set_status_message(self._t("STATUS_ALL_DELETED"))

    def cancel_clear(self) -> None:
        self.confirm_clear = False
        self.set_status_message(self._t("STATUS_CANCELLED"))


__all__ = ["EditingMixin"]
