from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.errors import DatastoreError  # noqa: E402
from src.domain.entities.query import (  # noqa: E402
    PageResult,
    PanelQuery,
    TargetSpec,
    TimeRange,
)
from src.domain.entities.registry import RegistryDetail, RegistryEntry  # noqa: E402
from src.domain.gateways.historical_datastore_gateway import (  # noqa: E402
    IHistoricalDatastoreGateway,
)


def senml(values: Sequence[float], start: int = 1500000000, field="v", time="t"):
    return [{field: value, time: start + offset} for offset, value in enumerate(values)]


class FakeDatastoreGateway(IHistoricalDatastoreGateway):
    """Serves scripted pages and records every request in order."""

    def __init__(
        self,
        series: Optional[Dict[Tuple[str, str], List[Dict[str, Any]]]] = None,
        page_size: int = 2,
        registry: Optional[List[RegistryEntry]] = None,
        details: Optional[Dict[str, RegistryDetail]] = None,
        status_code: int = 200,
    ) -> None:
        self.series = series or {}
        self.page_size = page_size
        self.registry = registry or []
        self.details = details or {}
        self.status_code = status_code
        self.requests: List[Tuple[str, str, int]] = []
        self.payloads: List[Optional[Dict[str, Any]]] = []
        self.fail_on: Optional[Tuple[str, str, int]] = None

    async def check_connection(self) -> int:
        return self.status_code

    async def fetch_page(
        self,
        endpoint: str,
        metric_id: str,
        time_range: TimeRange,
        page: int,
        payload: Optional[Dict[str, Any]] = None,
    ) -> PageResult:
        self.requests.append((endpoint, metric_id, page))
        self.payloads.append(payload)
        if self.fail_on == (endpoint, metric_id, page):
            raise DatastoreError("boom", status_code=500)
        records = self.series.get((endpoint, metric_id), [])
        offset = (page - 1) * self.page_size
        return PageResult(
            total=len(records), samples=records[offset : offset + self.page_size]
        )

    async def get_registry(
        self, payload: Optional[Dict[str, Any]] = None
    ) -> List[RegistryEntry]:
        self.payloads.append(payload)
        return self.registry

    async def get_registry_entry(self, metric_id: str) -> RegistryDetail:
        self.requests.append(("registry", metric_id, 0))
        return self.details[metric_id]


@pytest.fixture()
def time_range() -> TimeRange:
    return TimeRange(
        start=datetime(2017, 7, 14, 0, 0, tzinfo=timezone.utc),
        end=datetime(2017, 7, 14, 6, 0, tzinfo=timezone.utc),
    )


@pytest.fixture()
def make_query(time_range: TimeRange):
    def _make(*targets: TargetSpec) -> PanelQuery:
        return PanelQuery(range=time_range, targets=list(targets), payload={"q": 1})

    return _make


@pytest.fixture()
def fake_gateway():
    return FakeDatastoreGateway


@pytest.fixture()
def records():
    return senml
