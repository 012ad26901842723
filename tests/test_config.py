"""Tests para la configuración."""

import json
import os

import pytest

from userforms.config import (
    LOCAL_API_URL,
    ConfigError,
    Settings,
    StorageMode,
    ThemeName,
    load_settings,
    read_config_file,
    save_theme,
    toggle_theme,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Sin overrides de entorno salvo que el test los defina."""
    for var in list(os.environ):
        if var.upper().startswith("USERFORMS_"):
            monkeypatch.delenv(var, raising=False)


class TestLoadSettings:
    """Tests para load_settings."""

    def test_defaults_when_missing(self, tmp_path):
        settings = load_settings(tmp_path / "missing.json")
        assert settings.storage == StorageMode.API
        assert settings.api_url == LOCAL_API_URL
        assert settings.theme == ThemeName.LIGHT

    def test_file_values(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"storage": "demo", "theme": "dark"}))
        settings = load_settings(path)
        assert settings.storage == StorageMode.DEMO
        assert settings.theme == ThemeName.DARK

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"api_url": "http://file/users"}))
        monkeypatch.setenv("USERFORMS_API_URL", "http://env/users")
        assert load_settings(path).api_url == "http://env/users"

    def test_env_override_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("USERFORMS_STORAGE", "demo")
        monkeypatch.setenv("USERFORMS_DB_PATH", str(tmp_path / "demo.db"))
        settings = load_settings(tmp_path / "missing.json")
        assert settings.storage == StorageMode.DEMO
        assert settings.db_path == tmp_path / "demo.db"

    def test_empty_env_ignored(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"api_url": "http://file/users"}))
        monkeypatch.setenv("USERFORMS_API_URL", "")
        assert load_settings(path).api_url == "http://file/users"

    def test_invalid_env_value(self, tmp_path, monkeypatch):
        monkeypatch.setenv("USERFORMS_STORAGE", "floppy")
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "missing.json")

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"legacy": True}))
        assert load_settings(path).storage == StorageMode.API

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"timeout_s": -1}))
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[]")
        with pytest.raises(ConfigError):
            load_settings(path)


class TestThemePreference:
    """Tests para la preferencia de tema persistida."""

    def test_toggle(self):
        assert toggle_theme(Settings()).theme == ThemeName.DARK
        assert toggle_theme(Settings(theme=ThemeName.DARK)).theme == ThemeName.LIGHT

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "sub" / "config.json"
        save_theme(ThemeName.DARK, path)
        assert read_config_file(path) == {"theme": "dark"}
        assert load_settings(path).theme == ThemeName.DARK

    def test_save_keeps_other_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"storage": "demo", "theme": "dark"}))
        save_theme(ThemeName.LIGHT, path)
        assert read_config_file(path) == {"storage": "demo", "theme": "light"}

    def test_env_override_not_persisted(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        monkeypatch.setenv("USERFORMS_API_URL", "http://temporary:9999/users")
        save_theme(toggle_theme(load_settings(path)).theme, path)
        monkeypatch.delenv("USERFORMS_API_URL")

        settings = load_settings(path)
        assert settings.api_url == LOCAL_API_URL
        assert settings.theme == ThemeName.DARK
