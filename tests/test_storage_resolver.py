from pathlib import Path

import config
from core.desktop.devtools.interface.storage_resolver import resolve_storage_dir, resolve_storage_key


def test_env_wins(isolated_home, tmp_path):
    resolved = resolve_storage_dir(tmp_path / "explicit")
    assert resolved == (isolated_home / "store").resolve()
    assert resolved.is_dir()


def test_explicit_then_config(monkeypatch, tmp_path):
    monkeypatch.delenv("TODO_STORAGE_DIR")
    assert resolve_storage_dir(tmp_path / "explicit") == (tmp_path / "explicit").resolve()
    config.USER_CONFIG_PATH.write_text(f"storage_dir: {tmp_path / 'configured'}\n", encoding="utf-8")
    assert resolve_storage_dir() == (tmp_path / "configured").resolve()


def test_default_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("TODO_STORAGE_DIR")
    monkeypatch.setattr(
        "core.desktop.devtools.interface.storage_resolver.DEFAULT_STORAGE_DIR", tmp_path / "home" / ".todo"
    )
    assert resolve_storage_dir() == (tmp_path / "home" / ".todo").resolve()
    assert Path(tmp_path / "home" / ".todo").is_dir()


def test_storage_key():
    assert resolve_storage_key() == "todos"
    assert resolve_storage_key(" work ") == "work"
    config.USER_CONFIG_PATH.write_text("storage_key: chores\n", encoding="utf-8")
    assert resolve_storage_key() == "chores"
