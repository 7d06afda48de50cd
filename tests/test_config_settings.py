"""
Tests for primkit/config/settings.py
"""

import logging
from pathlib import Path

import pytest

from primkit.config.settings import Settings, get_settings, reset_settings


def test_settings_defaults(monkeypatch):
    """Test an empty environment yields the documented defaults."""
    for name in ("PRIMKIT_LOG_LEVEL", "PRIMKIT_LOG_FILE", "PRIMKIT_FLAG_STORE_PATH", "PRIMKIT_DISPATCH_WORKERS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.log_level == "INFO"
    assert settings.log_level_value == logging.INFO
    assert settings.log_file is None
    assert settings.flag_store_path is None
    assert settings.dispatch_workers == 4


def test_settings_from_env_values(monkeypatch, tmp_path):
    """Test every variable is read and normalised."""
    monkeypatch.setenv("PRIMKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("PRIMKIT_LOG_FILE", str(tmp_path / "primkit.log"))
    monkeypatch.setenv("PRIMKIT_FLAG_STORE_PATH", str(tmp_path / "flags.json"))
    monkeypatch.setenv("PRIMKIT_DISPATCH_WORKERS", "2")

    settings = Settings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.log_file == tmp_path / "primkit.log"
    assert settings.flag_store_path == tmp_path / "flags.json"
    assert settings.dispatch_workers == 2


def test_settings_expands_home(monkeypatch):
    """Test ~ in paths is expanded."""
    monkeypatch.setenv("PRIMKIT_FLAG_STORE_PATH", "~/flags.json")
    assert Settings.from_env().flag_store_path == Path("~/flags.json").expanduser()


def test_settings_rejects_non_integer_workers(monkeypatch):
    """Test a non-numeric worker count fails with the variable name."""
    monkeypatch.setenv("PRIMKIT_DISPATCH_WORKERS", "many")
    with pytest.raises(ValueError, match="PRIMKIT_DISPATCH_WORKERS"):
        Settings.from_env()


def test_settings_rejects_non_positive_workers():
    """Test zero workers is invalid."""
    with pytest.raises(ValueError, match="PRIMKIT_DISPATCH_WORKERS"):
        Settings(dispatch_workers=0)


def test_settings_rejects_unknown_log_level():
    """Test only standard level names are accepted."""
    with pytest.raises(ValueError, match="PRIMKIT_LOG_LEVEL"):
        Settings(log_level="LOUD")


def test_get_settings_caches_until_reset(monkeypatch):
    """Test get_settings returns one instance until reset_settings is called."""
    monkeypatch.setenv("PRIMKIT_DISPATCH_WORKERS", "3")
    first = get_settings()
    monkeypatch.setenv("PRIMKIT_DISPATCH_WORKERS", "5")
    assert get_settings() is first
    assert get_settings().dispatch_workers == 3

    reset_settings()
    assert get_settings().dispatch_workers == 5
