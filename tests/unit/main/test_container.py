from __future__ import annotations

import pytest
from dependency_injector import providers

from src.application.use_cases.query_use_cases import QueryTimeSeriesUseCase
from src.infrastructure.gateways.historical_datastore_gateway import (
    HistoricalDatastoreGateway,
)
from src.main.config import AppSettings
from src.main.container import app_lifespan, get_container, init_container


def test_container_builds_gateway_from_settings(monkeypatch) -> None:
    monkeypatch.setenv("DATASTORE_URL", "http://hds:8085/")
    monkeypatch.setenv("DATASTORE_TIMEOUT", "12.5")

    container = init_container(AppSettings())
    gateway = container.datastore_gateway()

    assert isinstance(gateway, HistoricalDatastoreGateway)
    assert gateway.base_url == "http://hds:8085"
    assert gateway.timeout == 12.5
    assert container.datastore_gateway() is gateway
    assert isinstance(container.query_time_series_use_case(), QueryTimeSeriesUseCase)


@pytest.mark.asyncio
async def test_app_lifespan_yields_container() -> None:
    container = init_container(AppSettings())

    class _Gateway:
        base_url = "http://stub"

    container.datastore_gateway.override(providers.Object(_Gateway()))

    async with app_lifespan() as yielded:
        assert yielded is container
        assert get_container() is container


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
