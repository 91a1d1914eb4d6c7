"""Key-value backends: one JSON file per key, or an in-memory dict.

Values are opaque strings; callers own the serialization. The file backend
keeps one file per key and replaces it atomically on every write.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from application.ports import KeyValueStore

logger = logging.getLogger("todo.storage")

ITEM_SUFFIX = ".json"


def validate_key(key: str) -> str:
    raw = str(key or "").strip()
    if not raw:
        raise ValueError("Storage key must not be empty")
    # SEC: keys become file names
    if ".." in raw or "/" in raw or "\\" in raw or raw.startswith("."):
        raise ValueError(f"Invalid storage key: {key!r}")
    return raw


class FileKeyValueStore(KeyValueStore):
    def __init__(self, root: Path):
        self.root = Path(root).expanduser()

    def _resolve_path(self, key: str) -> Path:
        name = validate_key(key)
        root = self.root.resolve()
        resolved = (root / f"{name}{ITEM_SUFFIX}").resolve()
        if not resolved.is_relative_to(root):
            raise ValueError(f"Path traversal detected: {resolved} is outside {root}")
        return resolved

    def get_item(self, key: str) -> Optional[str]:
        path = self._resolve_path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Unreadable storage item %s: %s", path, exc)
            return None

    def set_item(self, key: str, value: str) -> None:
        target = self._resolve_path(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=str(target.parent),
                prefix=f".{target.stem}.",
                suffix=".tmp",
            ) as tmp:
                tmp.write(value)
                tmp.flush()
                os.fsync(tmp.fileno())
                tmp_path = Path(tmp.name)
            os.replace(str(tmp_path), str(target))
        finally:
            if tmp_path and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    pass

    def remove_item(self, key: str) -> None:
        path = self._resolve_path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return

    def has_item(self, key: str) -> bool:
        return self._resolve_path(key).exists()


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(validate_key(key))

    def set_item(self, key: str, value: str) -> None:
        self.items[validate_key(key)] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(validate_key(key), None)

    def has_item(self, key: str) -> bool:
        return validate_key(key) in self.items


__all__ = ["FileKeyValueStore", "MemoryKeyValueStore", "validate_key", "ITEM_SUFFIX"]
