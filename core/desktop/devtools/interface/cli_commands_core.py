#!/usr/bin/env python3
"""CLI command entry points bound to the default dependencies."""

import argparse

from core.desktop.devtools.interface.cli_commands import (
    CliDeps,
    cmd_add as _cmd_add,
    cmd_clear as _cmd_clear,
    cmd_delete as _cmd_delete,
    cmd_done as _cmd_done,
    cmd_edit as _cmd_edit,
    cmd_list as _cmd_list,
    cmd_move as _cmd_move,
)
from core.desktop.devtools.interface.cli_runtime import open_storage
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.serializers import state_to_dict, todo_to_dict


CLI_DEPS = CliDeps(
    storage_factory=open_storage,
    translate=translate,
    todo_to_dict=todo_to_dict,
    state_to_dict=state_to_dict,
)


def cmd_list(args: argparse.Namespace) -> int:
    """List todos (delegates to cli_commands)."""
    return _cmd_list(args, CLI_DEPS)


def cmd_add(args: argparse.Namespace) -> int:
    return _cmd_add(args, CLI_DEPS)


def cmd_edit(args: argparse.Namespace) -> int:
    return _cmd_edit(args, CLI_DEPS)


def cmd_done(args: argparse.Namespace) -> int:
    return _cmd_done(args, CLI_DEPS)


def cmd_delete(args: argparse.Namespace) -> int:
    return _cmd_delete(args, CLI_DEPS)


def cmd_move(args: argparse.Namespace) -> int:
    """Reorder one todo within the (optionally filtered) view."""
    return _cmd_move(args, CLI_DEPS)


def cmd_clear(args: argparse.Namespace) -> int:
    return _cmd_clear(args, CLI_DEPS)


__all__ = ["CLI_DEPS", "cmd_list", "cmd_add", "cmd_edit", "cmd_done", "cmd_delete", "cmd_move", "cmd_clear"]
