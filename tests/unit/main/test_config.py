from __future__ import annotations

from src.main.config import AppSettings, get_settings
from src.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    for key in ("DATASTORE_URL", "HDS_URL", "DATASTORE_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.datastore.url.startswith("http://")
    assert settings.datastore.timeout is None
    assert settings.datastore.verify_tls is True
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("HDS_URL", "https://hds.example.org")
    monkeypatch.setenv("DATASTORE_VERIFY_TLS", "false")
    monkeypatch.setenv("GE_PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.datastore.url == "https://hds.example.org"
    assert settings.datastore.verify_tls is False
    assert settings.ge.port == 9000
    assert settings.logging.level.value == "DEBUG"
