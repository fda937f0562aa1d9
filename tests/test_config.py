import pytest
from pydantic import ValidationError

from api.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PROJECT_NAME", "HOST", "PORT", "RELOAD", "LOG_LEVEL", "LOG_FILE", "METRICS_ENABLED", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PROJECT_NAME == "PostgreSQL KR API"
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8080
    assert settings.RELOAD is False
    assert settings.LOG_FILE == ""
    assert settings.METRICS_ENABLED is False
    assert settings.CORS_ORIGINS == []


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("METRICS_ENABLED", "true")
    monkeypatch.setenv("CORS_ORIGINS", '["https://postgresql.co.kr"]')

    settings = Settings(_env_file=None)

    assert settings.PORT == 9090
    assert settings.METRICS_ENABLED is True
    assert settings.CORS_ORIGINS == ["https://postgresql.co.kr"]


@pytest.mark.parametrize("port", ["not-a-port", "0", "70000"])
def test_invalid_port_is_rejected(monkeypatch, port):
    monkeypatch.setenv("PORT", port)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
