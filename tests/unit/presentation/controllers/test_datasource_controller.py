from __future__ import annotations

import pytest
from fastapi import HTTPException

from src.application.dtos.query_dto import QueryRequestDTO
from src.application.dtos.templating_dto import (
    DatasourceStatusDTO,
    MetricFindRequestDTO,
)
from src.application.use_cases.query_use_cases import QueryTimeSeriesUseCase
from src.application.use_cases.templating_use_cases import (
    CheckConnectionUseCase,
    MetricFindQueryUseCase,
    MetricFindSourcesUseCase,
)
from src.domain.entities.errors import (
    DatastoreError,
    SelectionError,
    SourcePatternError,
)
from src.domain.entities.query import SeriesEntry
from src.domain.entities.registry import SelectOption
from src.presentation.controllers.datasource_controller import (
    check_datasource,
    metric_find_query,
    metric_find_sources,
    query,
)


def _query_request() -> QueryRequestDTO:
    return QueryRequestDTO.model_validate(
        {
            "range": {
                "from": "2017-07-14T00:00:00.000Z",
                "to": "2017-07-14T06:00:00.000Z",
            },
            "targets": [{"metric": "m1", "source": "value"}],
        }
    )


class _StubQuery(QueryTimeSeriesUseCase):
    def __init__(self, result=None, error: Exception | None = None):
        self.result = result or []
        self.error = error
        self.received = None

    async def execute(self, panel_query):
        self.received = panel_query
        if self.error:
            raise self.error
        return self.result


@pytest.mark.asyncio
async def test_query_returns_series() -> None:
    use_case = _StubQuery([SeriesEntry("m1", [(1.0, 1000)])])

    response = await query(_query_request(), query_time_series_use_case=use_case)

    assert response.data[0].target == "m1"
    assert response.data[0].datapoints == [[1.0, 1000]]
    assert use_case.received.targets[0].metric == "m1"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, status_code",
    [
        (SourcePatternError("avg every minute"), 422),
        (DatastoreError("down", status_code=500), 502),
        (RuntimeError("unexpected"), 500),
    ],
)
async def test_query_maps_errors(error, status_code) -> None:
    with pytest.raises(HTTPException) as exc:
        await query(
            _query_request(), query_time_series_use_case=_StubQuery(error=error)
        )
    assert exc.value.status_code == status_code


@pytest.mark.asyncio
async def test_check_datasource_returns_status() -> None:
    class _Stub(CheckConnectionUseCase):
        def __init__(self) -> None:
            pass

        async def execute(self) -> DatasourceStatusDTO:
            return DatasourceStatusDTO(status="success", message="ok", title="Success")

    result = await check_datasource(check_connection_use_case=_Stub())
    assert result.status == "success"


@pytest.mark.asyncio
async def test_metric_find_query_returns_options() -> None:
    class _Stub(MetricFindQueryUseCase):
        def __init__(self) -> None:
            self.payload = None

        async def execute(self, payload=None):
            self.payload = payload
            return [SelectOption("a1: kitchen/temp", 0)]

    use_case = _Stub()
    options = await metric_find_query(
        MetricFindRequestDTO(target="x"), metric_find_query_use_case=use_case
    )

    assert options[0].text == "a1: kitchen/temp"
    assert use_case.payload == {"target": "x"}


@pytest.mark.asyncio
async def test_metric_find_sources_rejects_unselected_metric() -> None:
    class _Stub(MetricFindSourcesUseCase):
        def __init__(self) -> None:
            pass

        async def execute(self, metric):
            raise SelectionError("No metric selected")

    with pytest.raises(HTTPException) as exc:
        await metric_find_sources(
            MetricFindRequestDTO(), metric_find_sources_use_case=_Stub()
        )
    assert exc.value.status_code == 400
    assert exc.value.detail == "No metric selected"


@pytest.mark.asyncio
async def test_metric_find_sources_returns_options() -> None:
    class _Stub(MetricFindSourcesUseCase):
        def __init__(self) -> None:
            pass

        async def execute(self, metric):
            return [
                SelectOption("value, no retention", 0),
                SelectOption("avg, every 1m, no retention (Aggr: g1)", 1, "g1"),
            ]

    options = await metric_find_sources(
        MetricFindRequestDTO(target="a1: kitchen/temp"),
        metric_find_sources_use_case=_Stub(),
    )

    assert [o.group_id for o in options] == [None, "g1"]
