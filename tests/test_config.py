from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from core import config
from core.config import AppSettings, write_user_env_vars
from core.logging_config import resolve_level, setup_logging


def test_defaults():
    settings = AppSettings()

    assert settings.decimals == 2
    assert settings.max_passes == 10
    assert settings.default_gravity == 9.81
    assert settings.tolerance == 0.01


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KINECALC_DECIMALS", "4")
    monkeypatch.setenv("KINECALC_DEFAULT_GRAVITY", "1.62")

    settings = AppSettings()

    assert settings.decimals == 4
    assert settings.default_gravity == 1.62


def test_project_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("KINECALC_FRAME_RATE=24\n", encoding="utf-8")

    assert AppSettings().frame_rate == 24.0


def test_invalid_values_are_rejected(monkeypatch):
    monkeypatch.setenv("KINECALC_DEFAULT_GRAVITY", "0")

    with pytest.raises(ValidationError):
        AppSettings()


def test_write_user_env_vars_merges_existing_values(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "get_user_config_dir", lambda: tmp_path / "user")

    write_user_env_vars({"KINECALC_DECIMALS": "3"})
    path = write_user_env_vars({"KINECALC_DEFAULT_GRAVITY": "9.8"})

    text = path.read_text(encoding="utf-8")
    assert "KINECALC_DECIMALS=3" in text
    assert "KINECALC_DEFAULT_GRAVITY=9.8" in text
    assert path == tmp_path / "user" / ".env"


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("loud")


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "kinecalc.log"

    setup_logging(level="DEBUG", log_file=log_file)
    logging.getLogger("core.solvers.kinematics").debug("hello from the solver")
    for handler in logging.getLogger("core").handlers:
        handler.flush()

    assert "hello from the solver" in log_file.read_text(encoding="utf-8")
    setup_logging(level="WARNING")


def test_read_user_env_vars_skips_comments_and_malformed_lines(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text('# comment\nKINECALC_DECIMALS="5"\nnot a pair\n=orphan\n', encoding="utf-8")

    assert config.read_user_env_vars(env_file) == {"KINECALC_DECIMALS": "5"}
    assert config.read_user_env_vars(tmp_path / "missing.env") == {}


def test_user_config_dir_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert config.get_user_config_dir() == tmp_path / "xdg" / "kinecalc"
    assert config.get_user_env_file() == tmp_path / "xdg" / "kinecalc" / ".env"


def test_user_config_dir_falls_back_to_dot_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert config.get_user_config_dir() == tmp_path / ".config" / "kinecalc"
