"""Runtime wiring shared by CLI commands and the TUI: storage and logging."""

import logging
from pathlib import Path
from typing import Optional

from infrastructure.local_storage import FileKeyValueStore, MemoryKeyValueStore
from infrastructure.storage_service import StorageService
from core.desktop.devtools.interface.storage_resolver import resolve_storage_dir, resolve_storage_key

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def open_storage(args) -> StorageService:
    """Build the StorageService selected by global CLI options."""
    key = resolve_storage_key(getattr(args, "key", None))
    if getattr(args, "ephemeral", False):
        return StorageService(key, MemoryKeyValueStore())
    storage_dir = resolve_storage_dir(getattr(args, "storage_dir", None))
    return StorageService(key, FileKeyValueStore(storage_dir))


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Handler:
    """stderr logging for commands; a log file for the full-screen TUI.

    Only the handler installed by a previous call is replaced, so handlers
    owned by an embedding process stay attached.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_todo_handler", False):
            root.removeHandler(handler)
            handler.close()
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._todo_handler = True
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler


__all__ = ["open_storage", "configure_logging", "LOG_FORMAT"]
