"""
Domain Gateway - Historical Datastore

This module defines the gateway interface for reading SenML time series and
registry metadata from the historical datastore.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from src.domain.entities.query import PageResult, TimeRange
from src.domain.entities.registry import RegistryDetail, RegistryEntry


class IHistoricalDatastoreGateway(ABC):
    """Interface for the historical datastore gateway."""

    @abstractmethod
    async def check_connection(self) -> int:
        """
        Request the datastore root.

        Returns:
            HTTP status code of the response

        Raises:
            DatastoreError: When the datastore cannot be reached
        """
        pass

    @abstractmethod
    async def fetch_page(
        self,
        endpoint: str,
        metric_id: str,
        time_range: TimeRange,
        page: int,
        payload: Optional[Dict[str, Any]] = None,
    ) -> PageResult:
        """
        Fetch one page of SenML records for a metric.

        Args:
            endpoint: Collection path, "data" or "aggr/<groupID>"
            metric_id: Registry ID of the metric
            time_range: Window sent as ISO-8601 start/end parameters
            page: 1-based page number
            payload: Normalized panel query forwarded as request body

        Returns:
            Declared total and the records of this page

        Raises:
            DatastoreError: When the request fails or the payload is malformed
        """
        pass

    @abstractmethod
    async def get_registry(
        self, payload: Optional[Dict[str, Any]] = None
    ) -> List[RegistryEntry]:
        """
        List the metrics known to the registry.

        Raises:
            DatastoreError: When the registry cannot be read
        """
        pass

    @abstractmethod
    async def get_registry_entry(self, metric_id: str) -> RegistryDetail:
        """
        Read retention and aggregation settings of a metric.

        Raises:
            DatastoreError: When the registry entry cannot be read
        """
        pass
