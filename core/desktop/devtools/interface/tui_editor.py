"""Modal editor dialog for a single todo."""

from typing import Iterable, List, Tuple

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.layout import HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import Button, Checkbox, Dialog, Label, RadioList, TextArea

from core import CATEGORIES
from core.desktop.devtools.application.editor import EditorForm


class EditorDialog:
    """Title, description, category, due date and completion in one dialog.

    The dialog only holds widget state; validation and persistence belong to
    the controller's ``TodoEditor``.
    """

    def __init__(self, tui):
        self.tui = tui
        self.title_field = TextArea(multiline=False, height=1, prompt=" ")
        self.description_field = TextArea(multiline=True, height=3, prompt=" ", wrap_lines=True)
        self.due_field = TextArea(multiline=False, height=1, prompt=" ")
        self.category_list = RadioList(self._category_values(CATEGORIES))
        self.completed_box = Checkbox(text=tui._t("FIELD_COMPLETED"))
        self.save_button = Button(text=tui._t("BUTTON_SAVE"), handler=tui.save_editor)
        self.cancel_button = Button(text=tui._t("BUTTON_CANCEL"), handler=tui.cancel_editor)
        body = HSplit(
            [
                Label(text=tui._t("FIELD_TITLE"), style="class:text.dim"),
                self.title_field,
                Label(text=tui._t("FIELD_DESCRIPTION"), style="class:text.dim"),
                self.description_field,
                Label(text=tui._t("FIELD_CATEGORY"), style="class:text.dim"),
                self.category_list,
                Label(text=tui._t("FIELD_DUE_DATE"), style="class:text.dim"),
                self.due_field,
                self.completed_box,
                Window(FormattedTextControl(self.get_error_text), height=1),
            ],
            padding=0,
        )
        self.dialog = Dialog(
            title=self.get_title_text,
            body=body,
            buttons=[self.save_button, self.cancel_button],
            width=Dimension(preferred=64),
            with_background=False,
        )

    @staticmethod
    def _category_values(categories: Iterable[str]) -> List[Tuple[str, str]]:
        return [(name, name) for name in categories]

    def get_title_text(self) -> str:
        key = "EDITOR_TITLE_EDIT" if self.tui.controller.editor.editing else "EDITOR_TITLE_CREATE"
        return self.tui._t(key)

    def get_error_text(self) -> FormattedText:
        error = self.tui.controller.editor.error
        if not error:
            return FormattedText([])
        return FormattedText([("class:card.action.delete", self.tui._t(error))])

    def load(self, form: EditorForm, categories: Iterable[str] = CATEGORIES) -> None:
        names = list(categories)
        if form.category not in names:
            names.append(form.category)
        self.title_field.text = form.title
        self.description_field.text = form.description
        self.due_field.text = form.due_date
        self.category_list.values = self._category_values(names)
        self.category_list.current_value = form.category
        self.category_list._selected_index = names.index(form.category)
        self.completed_box.checked = bool(form.completed)

    def read(self) -> EditorForm:
        return EditorForm(
            title=self.title_field.text,
            description=self.description_field.text,
            category=self.category_list.current_value,
            due_date=self.due_field.text,
            completed=bool(self.completed_box.checked),
        )

    def __pt_container__(self):
        return self.dialog


__all__ = ["EditorDialog"]
