"""
Infrastructure Gateway - Historical Datastore Implementation

This module implements the gateway for the SenML historical datastore:
paged Data and Aggregation API reads and Registry API lookups.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from src.domain.entities.errors import DatastoreError, DatastoreResponseError
from src.domain.entities.query import PageResult, TimeRange
from src.domain.entities.registry import (
    AggregateDescriptor,
    RegistryDetail,
    RegistryEntry,
)
from src.domain.gateways.historical_datastore_gateway import (
    IHistoricalDatastoreGateway,
)
from src.shared import get_logger

logger = get_logger(__name__)


class HistoricalDatastoreGateway(IHistoricalDatastoreGateway):
    """Implementation of the historical datastore gateway using HTTP client."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        verify_tls: bool = True,
    ):
        """
        Initialize the datastore gateway.

        Args:
            base_url: Base URL of the datastore (e.g., "http://hds:8085")
            timeout: Request timeout in seconds, None waits indefinitely
            verify_tls: Verify server certificates on https URLs
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_tls = verify_tls

    def _client(self) -> httpx.AsyncClient:
        if self.verify_tls:
            return httpx.AsyncClient(timeout=self.timeout)
        return httpx.AsyncClient(timeout=self.timeout, verify=False)

    async def check_connection(self) -> int:
        url = f"{self.base_url}/"
        logger.info("datastore.connection.check", url=url)

        try:
            async with self._client() as client:
                response = await client.get(url)
                logger.info(
                    "datastore.connection.response",
                    url=url,
                    status_code=response.status_code,
                )
                return response.status_code

        except httpx.RequestError as e:
            logger.error("datastore.connection.request_error", error=str(e), url=url)
            raise DatastoreError(
                f"Datastore request failed: {str(e)}", url=url
            ) from e

    async def fetch_page(
        self,
        endpoint: str,
        metric_id: str,
        time_range: TimeRange,
        page: int,
        payload: Optional[Dict[str, Any]] = None,
    ) -> PageResult:
        """Fetch one page of SenML records from the Data or Aggregation API."""

        url = f"{self.base_url}/{endpoint}/{quote(metric_id, safe='')}"
        params = {
            "start": time_range.start_iso(),
            "end": time_range.end_iso(),
            "page": str(page),
        }

        logger.info(
            "datastore.page.request",
            url=url,
            params=params,
            metric_id=metric_id,
            page=page,
        )

        data = await self._get_json(url, params=params, payload=payload)
        result = self._parse_page(data, url)

        logger.info(
            "datastore.page.response",
            url=url,
            page=page,
            total=result.total,
            count=len(result.samples),
        )
        return result

    async def get_registry(
        self, payload: Optional[Dict[str, Any]] = None
    ) -> List[RegistryEntry]:
        url = f"{self.base_url}/registry"
        logger.info("datastore.registry.request", url=url)

        data = await self._get_json(url, payload=payload)
        try:
            entries = [
                RegistryEntry(id=str(entry["id"]), resource=str(entry["resource"]))
                for entry in data.get("entries") or []
            ]
        except (KeyError, TypeError, AttributeError) as e:
            logger.error("datastore.registry.parse_failed", error=str(e), url=url)
            raise DatastoreResponseError(
                f"Failed to parse registry listing: {e}", url=url
            ) from e

        logger.info("datastore.registry.response", url=url, count=len(entries))
        return entries

    async def get_registry_entry(self, metric_id: str) -> RegistryDetail:
        url = f"{self.base_url}/registry/{quote(metric_id, safe='')}"
        logger.info("datastore.registry_entry.request", url=url, metric_id=metric_id)

        data = await self._get_json(url)
        try:
            detail = RegistryDetail(
                retention=data.get("retention") or "",
                aggregation=[
                    AggregateDescriptor(
                        id=str(group["id"]),
                        interval=str(group["interval"]),
                        retention=group.get("retention") or "",
                        aggregates=list(group.get("aggregates") or []),
                    )
                    for group in data.get("aggregation") or []
                ],
            )
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(
                "datastore.registry_entry.parse_failed",
                error=str(e),
                url=url,
                metric_id=metric_id,
            )
            raise DatastoreResponseError(
                f"Failed to parse registry entry {metric_id}: {e}", url=url
            ) from e

        logger.info(
            "datastore.registry_entry.response",
            url=url,
            aggregation_groups=len(detail.aggregation),
        )
        return detail

    async def _get_json(
        self,
        url: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        try:
            async with self._client() as client:
                response = await client.request(
                    "GET", url, params=params, json=payload
                )
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "datastore.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise DatastoreError(
                f"Datastore HTTP error {e.response.status_code}: {e.response.text}",
                url=url,
                status_code=e.response.status_code,
            ) from e

        except httpx.RequestError as e:
            logger.error("datastore.request_error", error=str(e), url=url)
            raise DatastoreError(
                f"Datastore request failed: {str(e)}", url=url
            ) from e

        except ValueError as e:
            logger.error("datastore.invalid_json", error=str(e), url=url)
            raise DatastoreResponseError(
                f"Datastore returned invalid JSON: {str(e)}", url=url
            ) from e

        if not isinstance(data, dict):
            raise DatastoreResponseError(
                "Datastore returned a non-object JSON document", url=url
            )
        return data

    def _parse_page(self, data: Dict[str, Any], url: str) -> PageResult:
        """Read ``{total, data: {e: [...]}}`` into a page result."""

        try:
            total = int(data["total"])
            samples = (data.get("data") or {}).get("e") or []
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(
                "datastore.page.parse_failed",
                error=str(e),
                response_data=data,
                url=url,
            )
            raise DatastoreResponseError(
                f"Failed to parse datastore page: {e}", url=url
            ) from e

        if not isinstance(samples, list):
            raise DatastoreResponseError(
                "Datastore page records are not a list", url=url
            )
        return PageResult(total=total, samples=samples)
