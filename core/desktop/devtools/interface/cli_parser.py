"""CLI parser construction for the todo CLI/TUI."""

import argparse
from typing import Any, Mapping

from core import CATEGORIES

STATUS_CHOICES = ["all", "active", "completed"]


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str, usage_help: str = "") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="todo — local to-do list",
        epilog=usage_help,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--storage-dir", dest="storage_dir", help="directory holding the todo store (default ~/.todo)")
    parser.add_argument("--key", help="storage key of the todo list (default: todos)")
    parser.add_argument("--ephemeral", action="store_true", help="keep todos in memory only")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")

    def add_filter_args(sp):
        sp.add_argument("--status", choices=STATUS_CHOICES, help="status filter")
        sp.add_argument("--category", help="category filter (all or a category name)")
        return sp

    def add_field_args(sp, *, with_title: bool):
        if with_title:
            sp.add_argument("--title", help="new title")
        sp.add_argument("--description", "-d", help="free-form description")
        sp.add_argument("--category", "-c", help=f"category ({', '.join(CATEGORIES)} or any other)")
        sp.add_argument("--due", help="due date YYYY-MM-DD (empty string clears it)")
        return sp

    sub = parser.add_subparsers(dest="command", help="Commands")

    # tui
    tui_p = sub.add_parser("tui", help="Open the interactive board")
    tui_p.add_argument("--theme", choices=list(themes.keys()), default=None, help=f"colour palette (default: config theme or {default_theme})")
    tui_p.set_defaults(func=commands.cmd_tui)

    # list
    lp = sub.add_parser("list", help="List todos")
    add_filter_args(lp)
    lp.set_defaults(func=commands.cmd_list)

    # add
    ap = sub.add_parser("add", help="Create a todo")
    ap.add_argument("title")
    add_field_args(ap, with_title=False)
    ap.add_argument("--done", dest="completed", action="store_const", const=True, help="create already completed")
    ap.set_defaults(func=commands.cmd_add)

    # edit
    ep = sub.add_parser("edit", help="Update fields of a todo")
    ep.add_argument("todo_id")
    add_field_args(ep, with_title=True)
    done_group = ep.add_mutually_exclusive_group()
    done_group.add_argument("--done", dest="completed", action="store_const", const=True)
    done_group.add_argument("--undone", dest="completed", action="store_const", const=False)
    ep.set_defaults(func=commands.cmd_edit)

    # done
    dp = sub.add_parser("done", help="Mark a todo completed")
    dp.add_argument("todo_id")
    dp.add_argument("--undo", action="store_true", help="mark it active again")
    dp.set_defaults(func=commands.cmd_done)

    # delete
    rp = sub.add_parser("delete", help="Delete a todo")
    rp.add_argument("todo_id")
    rp.set_defaults(func=commands.cmd_delete)

    # move
    mp = sub.add_parser("move", help="Reorder a todo")
    mp.add_argument("todo_id")
    where = mp.add_mutually_exclusive_group()
    where.add_argument("--before", help="place right before this todo id")
    where.add_argument("--up", action="store_true", help="one visible position up")
    where.add_argument("--down", action="store_true", help="one visible position down")
    mp.add_argument("--steps", type=int, default=1, help="positions to move with --up/--down")
    add_filter_args(mp)
    mp.set_defaults(func=commands.cmd_move)

    # clear
    cp = sub.add_parser("clear", help="Delete every todo and the stored list")
    cp.add_argument("--yes", action="store_true", help="confirm")
    cp.set_defaults(func=commands.cmd_clear)

    # help
    hp = sub.add_parser("help", help="Show usage")
    hp.set_defaults(func=None)

    return parser
