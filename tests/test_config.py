"""
Settings defaults and environment overrides.
"""

import os

import pytest
from pydantic import ValidationError

from doctorlisting.core.config import Settings, _load_env_file_if_available


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for var in ["PORT", "DEBUG", "MONGO_URI", "MONGO_DB_NAME", "APP_ENV", "LOG_LEVEL", "LOG_FORMAT",
                "LOG_SLOW_REQUEST_MS", "PAGINATION_DEFAULT_LIMIT", "PAGINATION_MAX_LIMIT"]:
        monkeypatch.delenv(var, raising=False)
    # Keep any developer .env out of the way
    monkeypatch.chdir(tmp_path)


def test_defaults(clean_env):
    settings = Settings()
    assert settings.port == 5000
    assert settings.database.uri == "mongodb://localhost:27017/doctors"
    assert settings.database.db_name == "doctors"
    assert settings.pagination.default_limit == 10
    assert settings.pagination.max_limit == 100
    assert settings.app_env == "development"
    assert settings.debug is False
    assert settings.logging.slow_request_ms == 1000.0


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("MONGO_URI", "mongodb+srv://cluster.example.net/registry")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("APP_ENV", "Testing")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings()
    assert settings.port == 8081
    assert settings.database.uri == "mongodb+srv://cluster.example.net/registry"
    assert settings.logging.level == "DEBUG"
    assert settings.app_env == "testing"
    assert settings.debug is True


def test_invalid_mongo_uri_is_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("MONGO_URI", "postgres://localhost/doctors")
    with pytest.raises(ValidationError):
        Settings()


def test_invalid_port_is_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(ValidationError):
        Settings()


def test_env_file_does_not_override_existing_vars(clean_env, monkeypatch, tmp_path):
    (tmp_path / ".env").write_text(
        "MONGO_URI=mongodb://from-env-file:27017/test\nDOCTORLISTING_ENV_MARKER=loaded\n"
    )
    monkeypatch.setenv("MONGO_URI", "mongodb://already-set:27017/test")
    # Registered with monkeypatch so the value load_dotenv sets is removed afterwards
    monkeypatch.setenv("DOCTORLISTING_ENV_MARKER", "")
    monkeypatch.delenv("DOCTORLISTING_ENV_MARKER")

    _load_env_file_if_available()

    assert os.getenv("MONGO_URI") == "mongodb://already-set:27017/test"
    assert os.getenv("DOCTORLISTING_ENV_MARKER") == "loaded"


def test_no_env_file_no_crash(clean_env):
    _load_env_file_if_available()
