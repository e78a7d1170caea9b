from pathlib import Path

import pytest
from pydantic import ValidationError

from emoji_spans.config import Settings, default_config_path, load_settings


def test_defaults():
    settings = Settings()
    assert settings.classifier.table == "builtin"
    assert settings.matching.ignore_whitespace is False
    assert settings.logging.level == "info"
    assert settings.logging.console is True
    assert settings.logging.file is False
    assert settings.logging.log_dir == Path("logs")


def test_missing_default_config_falls_back_to_defaults():
    assert load_settings() == Settings()


def test_explicit_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.toml")


def test_load_from_toml(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        '[classifier]\ntable = "emoji_package"\n\n'
        "[matching]\nignore_whitespace = true\n\n"
        '[logging]\nlevel = "debug"\nlog_dir = "var/log"\n',
        encoding="utf-8",
    )
    settings = load_settings(cfg)
    assert settings.classifier.table == "emoji_package"
    assert settings.matching.ignore_whitespace is True
    assert settings.logging.level == "debug"
    assert settings.logging.log_dir == (tmp_path / "var" / "log").resolve()


def test_partial_config_keeps_other_defaults(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text("[matching]\nignore_whitespace = true\n", encoding="utf-8")
    settings = load_settings(cfg)
    assert settings.matching.ignore_whitespace is True
    assert settings.classifier.table == "builtin"


def test_absolute_log_dir_is_kept(tmp_path):
    log_dir = tmp_path / "abs-logs"
    cfg = tmp_path / "config.toml"
    cfg.write_text(f'[logging]\nlog_dir = "{log_dir.as_posix()}"\n', encoding="utf-8")
    assert load_settings(cfg).logging.log_dir == log_dir


def test_env_var_selects_default_config(tmp_path, monkeypatch):
    cfg = tmp_path / "custom.toml"
    cfg.write_text('[logging]\nlevel = "warning"\n', encoding="utf-8")
    monkeypatch.setenv("EMOJI_SPANS_CONFIG", str(cfg))
    assert default_config_path() == str(cfg)
    assert load_settings().logging.level == "warning"


@pytest.mark.parametrize(
    "content",
    [
        "[classifier]\ntable = \"regex\"\n",
        "[matching]\nignore_case = true\n",
        "[unknown]\nx = 1\n",
        "[logging]\nlevel = \"verbose\"\n",
    ],
)
def test_invalid_config_is_rejected(tmp_path, content):
    cfg = tmp_path / "config.toml"
    cfg.write_text(content, encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(cfg)
