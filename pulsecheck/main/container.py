"""
Dependency container injection module - Main Layer

Composition root: builds the clients and probes from settings, decides which
built-in probes get registered, and wires the health check service into the
use cases consumed by the controllers.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Iterable, List

from dependency_injector import containers, providers
from pymongo import MongoClient

from pulsecheck.application.use_cases.health_use_cases import (
    GetHealthReportUseCase,
    GetHealthStatusUseCase,
    GetReadinessUseCase,
    PingUseCase,
    RunProbeUseCase,
)
from pulsecheck.domain.ports.probe import Probe
from pulsecheck.infrastructure.probes import (
    AzureBlobObjectStore,
    CacheProbe,
    DatabaseProbe,
    HttpProbe,
    ObjectStoreProbe,
)
from pulsecheck.infrastructure.services.health_check_service import HealthCheckService
from pulsecheck.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def to_milliseconds(seconds: float) -> int:
    return int(seconds * 1000)


def build_http_probes(checks: Iterable[Dict[str, Any]]) -> List[HttpProbe]:
    """Instantiate one HttpProbe per configured endpoint."""
    return [
        HttpProbe(
            check["url"],
            name=check.get("name", "http_endpoint"),
            timeout=check.get("timeout", 5.0),
            critical=check.get("critical", False),
            expected_status_codes=check.get("expected_status_codes", (200, 201, 204)),
            groups=check.get("groups", ()),
        )
        for check in checks or ()
    ]


def collect_enabled_probes(
    *,
    database_enabled: bool,
    database_probe: providers.Provider,
    redis_enabled: bool,
    redis_probe: providers.Provider,
    object_store_enabled: bool,
    object_store_probe: providers.Provider,
    http_probes: Iterable[Probe],
) -> List[Probe]:
    """Registration order: database, redis, object store, HTTP endpoints.

    Disabled probes are never instantiated, so their clients are not built.
    """
    probes: List[Probe] = []
    if database_enabled:
        probes.append(database_probe())
    if redis_enabled:
        probes.append(redis_probe())
    if object_store_enabled:
        probes.append(object_store_probe())
    probes.extend(http_probes)
    return probes


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure clients
    # Every socket operation is bounded so a hung ping frees its worker thread.
    mongo_timeout_ms = providers.Callable(to_milliseconds, config.health.database.timeout)

    mongo_client = providers.Singleton(
        MongoClient,
        config.health.database.mongo_uri,
        connect=False,
        serverSelectionTimeoutMS=mongo_timeout_ms,
        connectTimeoutMS=mongo_timeout_ms,
        socketTimeoutMS=mongo_timeout_ms,
    )

    object_store = providers.Singleton(
        AzureBlobObjectStore.from_connection_string,
        connection_string=config.health.object_store.connection_string,
        container=config.health.object_store.container,
    )

    # Probes
    database_probe = providers.Singleton(
        DatabaseProbe,
        client=mongo_client,
        connection_name=config.health.database.connection_name,
        timeout=config.health.database.timeout,
        critical=config.health.database.critical,
        groups=config.health.database.groups,
    )

    redis_probe = providers.Singleton(
        CacheProbe,
        url=config.health.redis.url,
        timeout=config.health.redis.timeout,
        critical=config.health.redis.critical,
        groups=config.health.redis.groups,
    )

    object_store_probe = providers.Singleton(
        ObjectStoreProbe,
        store=object_store,
        name=config.health.object_store.name,
        timeout=config.health.object_store.timeout,
        critical=config.health.object_store.critical,
        groups=config.health.object_store.groups,
    )

    http_probes = providers.Singleton(build_http_probes, config.health.http_checks)

    probes = providers.Singleton(
        collect_enabled_probes,
        database_enabled=config.health.database.enabled,
        database_probe=database_probe.provider,
        redis_enabled=config.health.redis.enabled,
        redis_probe=redis_probe.provider,
        object_store_enabled=config.health.object_store.enabled,
        object_store_probe=object_store_probe.provider,
        http_probes=http_probes,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        probes=probes,
        cache_ttl=config.health.cache_ttl,
    )

    # Application (use cases)
    get_health_report_use_case = providers.Factory(
        GetHealthReportUseCase,
        health_check_service=health_check_service,
    )

    get_readiness_use_case = providers.Factory(
        GetReadinessUseCase,
        health_check_service=health_check_service,
        readiness_group=config.health.readiness_group,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    run_probe_use_case = providers.Factory(
        RunProbeUseCase,
        health_check_service=health_check_service,
    )

    ping_use_case = providers.Factory(PingUseCase)


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of the probe resources.

    On startup the health check service is built, which instantiates every
    enabled probe and validates the registration. On shutdown each probe
    releases its connections.
    """
    container = get_container()

    if not container.config.health.enabled():
        yield container
        return

    service = container.health_check_service()
    logger.info(
        "container.health.probes_registered",
        probes=[probe.name for probe in service.probes],
    )
    try:
        yield container
    finally:
        await service.aclose()
        logger.info("container.resources.shutdown")
