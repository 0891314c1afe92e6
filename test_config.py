#!/usr/bin/env python3
"""Tests for environment-driven server settings"""
import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from hello_server.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ConfigError,
    ServerSettings,
    load_env_file,
    load_settings,
)


def test_defaults_when_environment_is_empty():
    settings = load_settings({})
    assert settings == ServerSettings()
    assert settings.host == DEFAULT_HOST == "0.0.0.0"
    assert settings.port == DEFAULT_PORT == 8080
    assert settings.debug is False
    assert settings.log_level == "INFO"


def test_values_are_read_from_environment():
    settings = load_settings(
        {"HOST": "127.0.0.1", "PORT": "5001", "DEBUG": "TRUE", "LOG_LEVEL": "debug"}
    )
    assert settings == ServerSettings(
        host="127.0.0.1", port=5001, debug=True, log_level="DEBUG"
    )


@pytest.mark.parametrize("value", ["abc", "", "80.5"])
def test_non_integer_port_is_rejected(value):
    with pytest.raises(ConfigError, match="PORT must be an integer"):
        load_settings({"PORT": value})


@pytest.mark.parametrize("value", ["0", "65536", "-1"])
def test_out_of_range_port_is_rejected(value):
    with pytest.raises(ConfigError, match="between 1 and 65535"):
        load_settings({"PORT": value})


def test_unknown_log_level_is_rejected():
    with pytest.raises(ConfigError, match="LOG_LEVEL"):
        load_settings({"LOG_LEVEL": "LOUD"})


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)


def test_settings_are_immutable():
    settings = load_settings({})
    with pytest.raises(AttributeError):
        settings.port = 1


def test_env_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.delenv("HELLO_SERVER_TEST_VAR", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("HELLO_SERVER_TEST_VAR=from-file\n")

    assert load_env_file(env_file) is True
    assert os.environ["HELLO_SERVER_TEST_VAR"] == "from-file"
    monkeypatch.delenv("HELLO_SERVER_TEST_VAR")


def test_missing_env_file_is_skipped(tmp_path):
    assert load_env_file(tmp_path / "absent.env") is False


def test_env_file_is_found_from_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("HELLO_SERVER_CWD_VAR", raising=False)
    (tmp_path / ".env").write_text("HELLO_SERVER_CWD_VAR=from-cwd\n")
    nested = tmp_path / "nested"
    nested.mkdir()
    monkeypatch.chdir(nested)

    assert load_env_file() is True
    assert os.environ["HELLO_SERVER_CWD_VAR"] == "from-cwd"
    monkeypatch.delenv("HELLO_SERVER_CWD_VAR")
