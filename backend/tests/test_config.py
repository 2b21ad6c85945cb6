from __future__ import annotations

from pathlib import Path

from app.core.config import Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("KANTIN_DEBUG", raising=False)
    monkeypatch.delenv("KANTIN_AREA_TABLE_PATH", raising=False)
    monkeypatch.delenv("KANTIN_CORS_ORIGINS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.debug is False
    assert settings.area_table_path is None
    assert settings.cors_origins == ["*"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("KANTIN_DEBUG", "true")
    monkeypatch.setenv("KANTIN_AREA_TABLE_PATH", "~/areas.json")
    monkeypatch.setenv("KANTIN_CORS_ORIGINS", "http://localhost:3000, https://kantin.example ")

    settings = Settings(_env_file=None)

    assert settings.debug is True
    assert settings.area_table_path == Path("~/areas.json").expanduser()
    assert settings.cors_origins == ["http://localhost:3000", "https://kantin.example"]


def test_blank_area_table_path_is_unset(monkeypatch):
    monkeypatch.setenv("KANTIN_AREA_TABLE_PATH", "  ")

    settings = Settings(_env_file=None)

    assert settings.area_table_path is None


def test_plain_field_names_are_not_read_from_environment(monkeypatch):
    monkeypatch.delenv("KANTIN_DEBUG", raising=False)
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("CORS_ORIGINS", "http://evil.example")

    settings = Settings(_env_file=None)

    assert settings.debug is False
    assert settings.cors_origins == ["*"]
