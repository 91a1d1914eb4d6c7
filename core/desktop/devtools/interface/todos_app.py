#!/usr/bin/env python3
"""
todos.py — local to-do list (CLI + interactive board).

Todos live as one JSON list under a single storage key. This module only
wires the parser to the command implementations.
"""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import List, Optional

from core.desktop.devtools.interface.cli_io import structured_error
from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser
from core.desktop.devtools.interface.cli_runtime import configure_logging
from core.desktop.devtools.interface.constants import USAGE_HELP
from core.desktop.devtools.interface.i18n import translate

from .cli_commands_core import (
    CLI_DEPS,
    cmd_add,
    cmd_clear,
    cmd_delete,
    cmd_done,
    cmd_edit,
    cmd_list,
    cmd_move,
)
from .tui_app import TodoBoardTUI, cmd_tui
from .tui_themes import DEFAULT_THEME, THEMES

logger = logging.getLogger("todo.cli")

__all__ = [
    "CLI_DEPS",
    "cmd_add",
    "cmd_clear",
    "cmd_delete",
    "cmd_done",
    "cmd_edit",
    "cmd_list",
    "cmd_move",
    "cmd_tui",
    "TodoBoardTUI",
    "THEMES",
    "DEFAULT_THEME",
    "build_parser",
    "main",
]


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = build_cli_parser(commands=sys.modules[__name__], themes=THEMES, default_theme=DEFAULT_THEME, usage_help=USAGE_HELP)
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("todo-board"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    if args.command == "help":
        parser.print_help()
        return 0
    configure_logging(getattr(args, "verbose", False))
    try:
        return args.func(args)
    except ValueError as exc:
        logger.debug("Command %s rejected: %s", args.command, exc)
        return structured_error(args.command, translate("ERR_INVALID_ARGUMENT", error=exc))


if __name__ == "__main__":
    sys.exit(main())
