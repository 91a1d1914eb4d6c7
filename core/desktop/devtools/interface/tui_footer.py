"""Footer renderer for TodoBoardTUI."""

from prompt_toolkit.formatted_text import FormattedText

from core.desktop.devtools.interface.tui_display import trim_display


def build_footer_text(tui) -> FormattedText:
    width = max(20, tui.get_terminal_width() - 2)
    message = tui.status_message
    if tui.editor_open and tui.controller.editor.error:
        message = tui._t(tui.controller.editor.error)
    hints = tui._t("FOOTER_EDITOR_KEYS" if tui.editor_open else "FOOTER_KEYS")
    return FormattedText([
        ("class:message", " " + trim_display(message, width) + "\n"),
        ("class:text.dim", " " + trim_display(hints, width)),
    ])


__all__ = ["build_footer_text"]
