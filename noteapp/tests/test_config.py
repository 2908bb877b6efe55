from pathlib import Path

from noteapp.config import Settings, load_settings


def test_defaults_without_config_file(tmp_path):
    s = load_settings(tmp_path / "missing.yaml", environ={})
    assert s == Settings()
    assert s.app_name == "NoteApp"
    assert s.data_dir is None


def test_yaml_values(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "app_name: Jotter\n"
        f"data_dir: {tmp_path / 'jot'}\n"
        "log_level: debug\n"
        "log_to_file: false\n",
        encoding="utf-8",
    )

    s = load_settings(cfg, environ={})

    assert s.app_name == "Jotter"
    assert s.data_dir == tmp_path / "jot"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False


def test_env_overrides_yaml(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("app_name: Jotter\ndata_dir: /from/yaml\n", encoding="utf-8")

    s = load_settings(cfg, environ={"NOTEAPP_DATA_DIR": "/from/env", "NOTEAPP_APP_NAME": "EnvApp"})

    assert s.data_dir == Path("/from/env")
    assert s.app_name == "EnvApp"


def test_config_path_from_env(tmp_path):
    cfg = tmp_path / "custom.yaml"
    cfg.write_text("app_name: Custom\n", encoding="utf-8")

    assert load_settings(environ={"NOTEAPP_CONFIG": str(cfg)}).app_name == "Custom"


def test_default_config_in_working_directory(tmp_path):
    # conftest chdirs into tmp_path
    (tmp_path / "config.yaml").write_text("app_name: Local\n", encoding="utf-8")

    assert load_settings(environ={}).app_name == "Local"


def test_malformed_yaml_is_ignored(tmp_path, caplog):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("app_name: [unclosed\n", encoding="utf-8")

    s = load_settings(cfg, environ={})

    assert s.app_name == "NoteApp"
    assert "Ignoring unreadable config" in caplog.text


def test_non_mapping_yaml_is_ignored(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("- just\n- a list\n", encoding="utf-8")

    assert load_settings(cfg, environ={}) == Settings()
