import pytest
from pymongo.errors import ServerSelectionTimeoutError

from accessing_data_mongodb import main as app_main
from db_core import get_settings, set_settings


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    # keep the test log sinks in place
    monkeypatch.setattr(app_main, "_configure_logging", lambda level: None)
    for name in ("MONGO_URI", "MONGO_DB_NAME", "LOG_LEVEL", "LOGURU_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture()
def patched_app(monkeypatch, repository):
    calls = []

    async def fake_ping():
        calls.append("ping")
        return {"ok": True}

    monkeypatch.setattr(app_main, "ping", fake_ping)
    monkeypatch.setattr(app_main, "CustomerRepository", lambda: repository)
    return calls


def test_main_returns_zero_on_success(patched_app, repository, log_messages):
    assert app_main.main([]) == 0
    assert patched_app == ["ping"]
    assert "Customers found with findAll():" in log_messages


def test_main_applies_command_line_overrides(patched_app):
    assert app_main.main(["--uri", "mongodb://db.internal:27017", "--db", "crm"]) == 0

    settings = get_settings()
    assert settings.uri == "mongodb://db.internal:27017"
    assert settings.db_name == "crm"


def test_main_fails_on_unreachable_server(monkeypatch, repository):
    async def unreachable():
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    monkeypatch.setattr(app_main, "ping", unreachable)
    monkeypatch.setattr(app_main, "CustomerRepository", lambda: repository)

    assert app_main.main([]) == 1


def test_main_fails_on_malformed_uri(patched_app):
    assert app_main.main(["--uri", "localhost:27017"]) == 1
    assert patched_app == []


def test_main_fails_on_unknown_log_level(patched_app):
    assert app_main.main(["--log-level", "LOUD"]) == 1


def test_cli_exits_with_status(monkeypatch):
    monkeypatch.setattr(app_main, "main", lambda: 1)

    with pytest.raises(SystemExit) as excinfo:
        app_main.cli()
    assert excinfo.value.code == 1
