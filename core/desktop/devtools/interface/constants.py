"""Interface-level constants for the todo CLI/TUI."""

from core.desktop.devtools.interface.constants_i18n import LANG_PACK  # noqa: F401

DATE_FORMAT = "%Y-%m-%d"
TUI_LOG_FILE = "todo.log"

USAGE_HELP = """todo — local to-do list

Todos live under one key (default "todos") in the storage directory
(~/.todo, or TODO_STORAGE_DIR / --storage-dir). Every command prints a JSON
response; `todo tui` opens the interactive board.

  todo add "Buy milk" --category home --due 2024-05-01
  todo list --status active --category home
  todo done <id>
  todo move <id> --before <other-id>
  todo clear --yes
"""
