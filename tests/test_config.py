"""
Configuration tests - data directory resolution.
"""

from pathlib import Path

from pocket_coffer.core import config


def test_override_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("POCKET_COFFER_DATA_DIR", str(tmp_path / "vault"))
    assert config.get_data_dir() == tmp_path / "vault"


def test_default_ends_with_app_identifier(monkeypatch):
    monkeypatch.delenv("POCKET_COFFER_DATA_DIR", raising=False)
    assert config.get_data_dir().name == config.APP_IDENTIFIER


def test_xdg_data_home_on_linux(monkeypatch, tmp_path):
    monkeypatch.delenv("POCKET_COFFER_DATA_DIR", raising=False)
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert config.get_data_dir() == tmp_path / config.APP_IDENTIFIER


def test_linux_fallback_without_xdg(monkeypatch):
    monkeypatch.delenv("POCKET_COFFER_DATA_DIR", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(config.sys, "platform", "linux")
    assert config.get_data_dir() == Path.home() / ".local" / "share" / config.APP_IDENTIFIER


def test_windows_uses_appdata(monkeypatch, tmp_path):
    monkeypatch.delenv("POCKET_COFFER_DATA_DIR", raising=False)
    monkeypatch.setattr(config.sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert config.get_data_dir() == tmp_path / config.APP_IDENTIFIER


def test_db_path(monkeypatch, tmp_path):
    monkeypatch.delenv("POCKET_COFFER_DB_NAME", raising=False)
    assert config.get_db_path(tmp_path) == tmp_path / "pocket_coffer.db"


def test_debug_flag(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    assert config.debug_enabled() is True
    monkeypatch.setenv("DEBUG", "false")
    assert config.debug_enabled() is False
