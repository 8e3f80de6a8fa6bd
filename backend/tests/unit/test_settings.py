"""Tests for environment-driven settings."""

import pytest

from app.core.config import DEFAULT_CORS_ORIGINS, DEFAULT_DATABASE_URL, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("DATABASE_URL", "CORS_ORIGINS", "API_PREFIX", "LIST_INCLUDE_INACTIVE"):
        monkeypatch.delenv(name, raising=False)


def _settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


def test_defaults():
    settings = _settings()

    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.api_prefix == "/api"
    assert settings.list_include_inactive is True
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS


def test_heroku_style_database_url_is_rewritten(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db:5432/products")

    assert _settings().database_url == "postgresql+psycopg://u:p@db:5432/products"


def test_cors_origins_are_split_and_trimmed(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://shop.example.com/, http://localhost:8080 ,")

    assert _settings().cors_origins == [
        "https://shop.example.com",
        "http://localhost:8080",
    ]


def test_blank_cors_origins_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", " , ")

    assert _settings().cors_origins == DEFAULT_CORS_ORIGINS


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("api", "/api"), ("/api/v1/", "/api/v1"), ("/", ""), ("", "")],
)
def test_api_prefix_normalized(raw, expected):
    assert _settings(api_prefix=raw).api_prefix == expected


def test_visibility_flag_from_env(monkeypatch):
    monkeypatch.setenv("LIST_INCLUDE_INACTIVE", "false")

    assert _settings().list_include_inactive is False
