import pytest
from pydantic import ValidationError

import db_core
from db_core import MongoSettings, configure, get_settings, set_settings
from db_core.settings import redact_uri


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("MONGO_URI", "MONGO_DB_NAME", "MONGO_SERVER_SELECTION_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)
    set_settings(None)
    yield
    set_settings(None)


def test_defaults_point_at_local_instance():
    settings = MongoSettings()
    assert settings.uri == "mongodb://localhost:27017"
    assert settings.db_name == "test"
    assert settings.server_selection_timeout_ms == 30000


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb+srv://cluster.example.net")
    monkeypatch.setenv("MONGO_DB_NAME", "shop")
    monkeypatch.setenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "1500")

    settings = get_settings()

    assert settings.uri == "mongodb+srv://cluster.example.net"
    assert settings.db_name == "shop"
    assert settings.server_selection_timeout_ms == 1500


@pytest.mark.parametrize(
    "env",
    [
        {"MONGO_URI": "http://localhost:27017"},
        {"MONGO_DB_NAME": "   "},
        {"MONGO_SERVER_SELECTION_TIMEOUT_MS": "soon"},
        {"MONGO_SERVER_SELECTION_TIMEOUT_MS": "0"},
    ],
)
def test_malformed_environment_is_rejected(monkeypatch, env):
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        MongoSettings()


def test_configure_replaces_only_given_values():
    configured = configure(uri="mongodb://db.internal:27018", db_name=None)

    assert configured.uri == "mongodb://db.internal:27018"
    assert configured.db_name == "test"
    assert db_core.get_settings() is configured


def test_configure_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        configure(hostname="localhost")


def test_redact_uri_hides_password_only():
    assert redact_uri("mongodb://app:s3cret@db:27017/x") == "mongodb://app:***@db:27017/x"
    assert redact_uri("mongodb://localhost:27017") == "mongodb://localhost:27017"
