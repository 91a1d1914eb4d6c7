from pathlib import Path
import os

from config import get_storage_dir, get_storage_key
from infrastructure.storage_service import DEFAULT_STORAGE_KEY

DEFAULT_STORAGE_DIR = Path.home() / ".todo"


def resolve_storage_dir(storage_dir: Path | str | None = None) -> Path:
    """Unified resolver for the storage directory.

    Priority:
    1. TODO_STORAGE_DIR env variable (for tests).
    2. Explicit storage_dir if provided.
    3. ``storage_dir`` from the user config.
    4. ~/.todo
    """
    env_dir = os.environ.get("TODO_STORAGE_DIR")
    if env_dir:
        candidate = Path(env_dir)
    elif storage_dir:
        candidate = Path(storage_dir)
    else:
        configured = get_storage_dir()
        candidate = Path(configured) if configured else DEFAULT_STORAGE_DIR
    resolved = candidate.expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


def resolve_storage_key(key: str | None = None) -> str:
    return (key or "").strip() or get_storage_key() or DEFAULT_STORAGE_KEY


__all__ = ["resolve_storage_dir", "resolve_storage_key", "DEFAULT_STORAGE_DIR"]
