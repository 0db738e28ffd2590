"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.query_use_cases import QueryTimeSeriesUseCase
from src.application.use_cases.templating_use_cases import (
    CheckConnectionUseCase,
    MetricFindQueryUseCase,
    MetricFindSourcesUseCase,
)
from src.infrastructure.gateways.historical_datastore_gateway import (
    HistoricalDatastoreGateway,
)
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Gateways
    datastore_gateway = providers.Singleton(
        HistoricalDatastoreGateway,
        base_url=config.datastore.url,
        timeout=config.datastore.timeout,
        verify_tls=config.datastore.verify_tls,
    )

    # Application (use cases)
    query_time_series_use_case = providers.Factory(
        QueryTimeSeriesUseCase,
        datastore_gateway=datastore_gateway,
    )

    check_connection_use_case = providers.Factory(
        CheckConnectionUseCase,
        datastore_gateway=datastore_gateway,
    )

    metric_find_query_use_case = providers.Factory(
        MetricFindQueryUseCase,
        datastore_gateway=datastore_gateway,
    )

    metric_find_sources_use_case = providers.Factory(
        MetricFindSourcesUseCase,
        datastore_gateway=datastore_gateway,
    )


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
    Lifecycle hook for the datastore gateway.

    Gateways open one HTTP client per request, so there is nothing to
    connect on startup; the hook logs the configured datastore and yields
    the container.
    """
    container = get_container()
    datastore_gateway = container.datastore_gateway()

    logger.info("container.datastore.configured", url=datastore_gateway.base_url)
    try:
        yield container
    finally:
        logger.info("container.resources.shutdown")
