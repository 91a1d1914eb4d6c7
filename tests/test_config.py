import config


def test_missing_config_reads_empty():
    assert config.get_user_lang() == ""
    assert config.get_storage_dir() == ""


def test_set_and_clear_values():
    config.set_user_lang("ru")
    config.set_user_theme("dark-contrast")
    assert config.get_user_lang() == "ru"
    assert config.get_user_theme() == "dark-contrast"
    assert "lang: ru" in config.USER_CONFIG_PATH.read_text(encoding="utf-8")
    config.set_user_lang("")
    config.set_user_theme("  ")
    assert not config.USER_CONFIG_PATH.exists()


def test_storage_settings(isolated_home):
    config.USER_CONFIG_PATH.write_text("storage_dir: /tmp/elsewhere\nstorage_key: chores\n", encoding="utf-8")
    assert config.get_storage_dir() == "/tmp/elsewhere"
    assert config.get_storage_key() == "chores"


def test_unreadable_config_is_ignored():
    config.USER_CONFIG_PATH.write_text("lang: [unclosed", encoding="utf-8")
    assert config.get_user_lang() == ""
    config.USER_CONFIG_PATH.write_text("- just\n- a list\n", encoding="utf-8")
    assert config.get_user_lang() == ""
