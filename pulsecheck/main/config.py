"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Values come from environment variables, a .env file and defaults. The
``health`` section decides which built-in probes are registered before the
health check service is built.
"""

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pulsecheck.shared import EnumEnvironment, EnumLogLevel


class ServiceSettings(BaseSettings):
    """HTTP service metadata and bind options."""

    title: str = Field(default="pulsecheck", description="Service title")
    description: str = Field(
        default="Health check aggregation for service dependencies",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class DatabaseCheckSettings(BaseSettings):
    """MongoDB probe, registered by default."""

    enabled: bool = Field(default=True, description="Register the database check")
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI",
    )
    connection_name: str = Field(
        default="default",
        description="Connection label, non-default labels yield database_<label>",
    )
    critical: bool = Field(default=True)
    timeout: float = Field(default=5.0, gt=0, description="Seconds")
    groups: List[str] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_DATABASE_", case_sensitive=False, extra="ignore"
    )


class RedisCheckSettings(BaseSettings):
    """Redis probe, disabled unless explicitly enabled."""

    enabled: bool = Field(default=False, description="Register the Redis check")
    url: str = Field(default="redis://localhost:6379/0", description="Redis URL")
    critical: bool = Field(default=False)
    timeout: float = Field(default=3.0, gt=0, description="Seconds")
    groups: List[str] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_REDIS_", case_sensitive=False, extra="ignore"
    )


class ObjectStoreCheckSettings(BaseSettings):
    """Azure Blob Storage probe, disabled unless explicitly enabled."""

    enabled: bool = Field(default=False, description="Register the storage check")
    connection_string: str = Field(default="", description="Storage connection string")
    container: str = Field(default="", description="Container to list")
    name: str = Field(default="object_store", description="Check name")
    critical: bool = Field(default=False)
    timeout: float = Field(default=5.0, gt=0, description="Seconds")
    groups: List[str] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_OBJECT_STORE_", case_sensitive=False, extra="ignore"
    )


class HttpCheckSettings(BaseModel):
    """One external HTTP endpoint to probe."""

    url: str
    name: str = "http_endpoint"
    timeout: float = Field(default=5.0, gt=0)
    critical: bool = False
    expected_status_codes: List[int] = Field(default_factory=lambda: [200, 201, 204])
    groups: List[str] = Field(default_factory=list)


class HealthSettings(BaseSettings):
    """Health check engine configuration."""

    enabled: bool = Field(default=True, description="Expose the health endpoints")
    cache_ttl: float = Field(
        default=1.0, ge=0, description="Seconds unfiltered results are reused"
    )
    readiness_group: str = Field(
        default="readiness", description="Group run by the /ready endpoint"
    )
    http_checks: List[HttpCheckSettings] = Field(
        default_factory=list,
        description="JSON list of HTTP endpoints, e.g. "
        '[{"url": "https://api.example.com/ping", "name": "api"}]',
    )
    database: DatabaseCheckSettings = Field(default_factory=DatabaseCheckSettings)
    redis: RedisCheckSettings = Field(default_factory=RedisCheckSettings)
    object_store: ObjectStoreCheckSettings = Field(
        default_factory=ObjectStoreCheckSettings
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Kept as a function so tests can patch it with different settings.
    """
    return AppSettings()
