"""Tests for config settings and the health route."""

import logging
from datetime import datetime

from fastapi.testclient import TestClient

import config
from config import Settings
from main import create_app


def test_defaults(monkeypatch):
    for var in ("APP_TITLE", "APP_VERSION", "ALLOWED_ORIGINS", "LOG_LEVEL", "HOST", "PORT"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings()
    assert settings.APP_TITLE == "Catalog API"
    assert settings.ALLOWED_ORIGINS == ["http://localhost:3000"]
    assert settings.log_level == logging.INFO
    assert settings.PORT == 8000


def test_origins_split_and_stripped(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", " http://a.test , ,http://b.test")
    assert Settings().ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]


def test_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().log_level == logging.DEBUG

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert Settings().LOG_LEVEL == "INFO"


def test_bad_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    assert Settings().PORT == 8000


def test_health(client):
    client.post("/items", json={"name": "Widget"})

    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["records"] == {"items": 1, "users": 0}
    assert body["version"] == config.get_settings().APP_VERSION
    assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None


def test_version_defaults_to_package_version(monkeypatch):
    monkeypatch.delenv("APP_VERSION", raising=False)
    monkeypatch.setattr(config, "package_version", lambda: "2.3.4")

    assert Settings().APP_VERSION == "2.3.4"


def test_version_from_env(monkeypatch):
    monkeypatch.setenv("APP_VERSION", "9.9.9")
    assert Settings().APP_VERSION == "9.9.9"


def test_create_app_uses_given_settings(monkeypatch):
    monkeypatch.setenv("APP_TITLE", "Inventory API")
    monkeypatch.setenv("APP_VERSION", "4.5.6")

    app = create_app(settings=Settings())
    assert (app.title, app.version) == ("Inventory API", "4.5.6")

    with TestClient(app) as client:
        assert client.get("/health").json()["version"] == "4.5.6"
