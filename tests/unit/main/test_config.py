from __future__ import annotations

import pytest
from pydantic import ValidationError

from pulsecheck.main.config import AppSettings, get_settings
from pulsecheck.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("HEALTH_DATABASE_MONGO_URI", raising=False)
    monkeypatch.delenv("HEALTH_REDIS_ENABLED", raising=False)

    settings = get_settings()

    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.health.enabled is True
    assert settings.health.cache_ttl == 1.0
    assert settings.health.readiness_group == "readiness"
    assert settings.health.database.enabled is True
    assert settings.health.database.critical is True
    assert settings.health.database.mongo_uri.startswith("mongodb://")
    assert settings.health.redis.enabled is False
    assert settings.health.redis.timeout == 3.0
    assert settings.health.object_store.enabled is False
    assert settings.health.http_checks == []


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("HEALTH_REDIS_ENABLED", "true")
    monkeypatch.setenv("HEALTH_REDIS_URL", "redis://cache:6379/1")
    monkeypatch.setenv("HEALTH_DATABASE_ENABLED", "false")
    monkeypatch.setenv("HEALTH_CACHE_TTL", "0")
    monkeypatch.setenv(
        "HEALTH_HTTP_CHECKS",
        '[{"url": "http://api.local/ping", "name": "api", "critical": true}]',
    )
    monkeypatch.setenv("SERVICE_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.health.redis.enabled is True
    assert settings.health.redis.url == "redis://cache:6379/1"
    assert settings.health.database.enabled is False
    assert settings.health.cache_ttl == 0.0
    assert settings.health.http_checks[0].name == "api"
    assert settings.health.http_checks[0].critical is True
    assert settings.health.http_checks[0].expected_status_codes == [200, 201, 204]
    assert settings.service.title == "Testing"
    assert settings.logging.level.value == "DEBUG"


def test_negative_cache_ttl_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("HEALTH_CACHE_TTL", "-1")

    with pytest.raises(ValidationError):
        AppSettings()
