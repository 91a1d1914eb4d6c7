import logging

import pytest

import config


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep every test away from ~/.todo and ~/.todo_config.yaml."""
    monkeypatch.setenv("TODO_STORAGE_DIR", str(tmp_path / "store"))
    monkeypatch.delenv("TODO_LANG", raising=False)
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "todo_config.yaml")
    return tmp_path


@pytest.fixture(autouse=True)
def detach_cli_log_handlers():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if getattr(handler, "_todo_handler", False):
            root.removeHandler(handler)
            handler.close()
