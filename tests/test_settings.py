import pytest
from pydantic import ValidationError

from settings import ConnectionSettings

ENV_NAMES = ("DISPLAY_DB_PORT", "DISPLAY_DB_SSL_DISABLED",
             "DISPLAY_DB_CONNECT_TIMEOUT", "DISPLAY_DB_INIT_SCHEMA")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_lab_servers():
    settings = ConnectionSettings()
    assert settings.port == 3306
    assert settings.ssl_disabled is True
    assert settings.connect_timeout == 10
    assert settings.init_schema is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DISPLAY_DB_PORT", "3307")
    monkeypatch.setenv("DISPLAY_DB_SSL_DISABLED", "no")
    monkeypatch.setenv("DISPLAY_DB_INIT_SCHEMA", "Yes")

    settings = ConnectionSettings()
    assert settings.port == 3307
    assert settings.ssl_disabled is False
    assert settings.init_schema is True
    assert settings.driver_options() == {
        'port': 3307,
        'ssl_disabled': False,
        'connection_timeout': 10,
    }


def test_bad_port_is_rejected(monkeypatch):
    monkeypatch.setenv("DISPLAY_DB_PORT", "mysql")
    with pytest.raises(ValidationError):
        ConnectionSettings()


def test_keyword_arguments_win_over_environment(monkeypatch):
    monkeypatch.setenv("DISPLAY_DB_PORT", "3307")
    assert ConnectionSettings(port=3310).port == 3310
