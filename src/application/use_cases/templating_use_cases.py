"""
Templating Use Cases - Application Layer

Registry lookups backing the metric and source selectors, and the
connectivity check of the data source configuration page.
"""

from typing import Any, Dict, List, Optional

from src.application.dtos.templating_dto import DatasourceStatusDTO
from src.domain.entities.errors import DatastoreError, SelectionError
from src.domain.entities.query import METRIC_PLACEHOLDER, TargetSpec
from src.domain.entities.registry import SelectOption
from src.domain.gateways.historical_datastore_gateway import (
    IHistoricalDatastoreGateway,
)
from src.domain.services.translator import (
    convert_metrics_registry,
    convert_source_options,
)
from src.shared import get_logger

logger = get_logger(__name__)


class CheckConnectionUseCase:
    """Report whether the datastore root answers with HTTP 200."""

    def __init__(self, datastore_gateway: IHistoricalDatastoreGateway) -> None:
        self._gateway = datastore_gateway

    async def execute(self) -> DatasourceStatusDTO:
        try:
            status_code = await self._gateway.check_connection()
        except DatastoreError as e:
            logger.warning("datasource.test.unreachable", error=e.message)
            return DatasourceStatusDTO(
                status="error", message=e.message, title="Error"
            )

        if status_code == 200:
            return DatasourceStatusDTO(
                status="success", message="Data source is working", title="Success"
            )

        logger.warning("datasource.test.unexpected_status", status_code=status_code)
        return DatasourceStatusDTO(
            status="error",
            message=f"Data source answered with HTTP {status_code}",
            title="Error",
        )


class MetricFindQueryUseCase:
    """List registry metrics as templating options."""

    def __init__(self, datastore_gateway: IHistoricalDatastoreGateway) -> None:
        self._gateway = datastore_gateway

    async def execute(
        self, payload: Optional[Dict[str, Any]] = None
    ) -> List[SelectOption]:
        entries = await self._gateway.get_registry(payload)
        options = convert_metrics_registry(entries)
        logger.debug("templating.metrics.listed", count=len(options))
        return options


class MetricFindSourcesUseCase:
    """List the raw value and aggregate sources of one metric."""

    def __init__(self, datastore_gateway: IHistoricalDatastoreGateway) -> None:
        self._gateway = datastore_gateway

    async def execute(self, metric: Optional[str]) -> List[SelectOption]:
        """
        Raises:
            SelectionError: If no metric is selected
            DatastoreError: If the registry entry cannot be read
        """
        if not metric or metric == METRIC_PLACEHOLDER:
            raise SelectionError(
                "No metric selected: choose a metric before listing its sources",
                details={"metric": metric},
            )

        metric_id = TargetSpec(metric=metric).metric_id
        detail = await self._gateway.get_registry_entry(metric_id)
        options = convert_source_options(detail)
        logger.debug(
            "templating.sources.listed", metric_id=metric_id, count=len(options)
        )
        return options
