"""
Data Source Router - Presentation Layer

This module defines the FastAPI router the dashboard host calls: the
connectivity check, panel queries and templating lookups.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.dtos.query_dto import QueryRequestDTO, QueryResponseDTO
from src.application.dtos.templating_dto import (
    DatasourceStatusDTO,
    MetricFindRequestDTO,
    OptionDTO,
)
from src.application.use_cases.query_use_cases import QueryTimeSeriesUseCase
from src.application.use_cases.templating_use_cases import (
    CheckConnectionUseCase,
    MetricFindQueryUseCase,
    MetricFindSourcesUseCase,
)
from src.domain.entities.errors import (
    DatastoreError,
    DomainError,
    SelectionError,
    SourcePatternError,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Datasource"])


def _to_http_exception(error: Exception) -> HTTPException:
    if isinstance(error, SelectionError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=error.message
        )
    if isinstance(error, SourcePatternError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=error.message
        )
    if isinstance(error, DatastoreError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Historical datastore error: {error.message}",
        )
    message = error.message if isinstance(error, DomainError) else str(error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Data source failure: {message}",
    )


@router.get("/", response_model=DatasourceStatusDTO)
@inject
async def check_datasource(
    check_connection_use_case: CheckConnectionUseCase = Depends(
        Provide["check_connection_use_case"]
    ),
) -> DatasourceStatusDTO:
    """Report whether the configured datastore is reachable."""
    result = await check_connection_use_case.execute()
    logger.info("datasource.test.completed", status=result.status)
    return result


@router.post("/query", response_model=QueryResponseDTO)
@inject
async def query(
    request: QueryRequestDTO,
    query_time_series_use_case: QueryTimeSeriesUseCase = Depends(
        Provide["query_time_series_use_case"]
    ),
) -> QueryResponseDTO:
    """
    Run a panel query.

    Every page of every selected target is fetched before answering; a
    failing request fails the whole query.

    Raises:
        HTTPException: 422 for malformed sources, 502 for datastore failures
    """
    logger.info("query.requested", targets=len(request.targets))

    try:
        entries = await query_time_series_use_case.execute(request.to_domain())
    except Exception as e:
        logger.error("query.failed", error=str(e), exc_info=e)
        raise _to_http_exception(e) from e

    return QueryResponseDTO.from_domain(entries)


@router.post("/search", response_model=List[OptionDTO])
@inject
async def metric_find_query(
    request: MetricFindRequestDTO,
    metric_find_query_use_case: MetricFindQueryUseCase = Depends(
        Provide["metric_find_query_use_case"]
    ),
) -> List[OptionDTO]:
    """List the registry metrics for the metric selector."""
    try:
        options = await metric_find_query_use_case.execute(
            request.model_dump(mode="json")
        )
    except Exception as e:
        logger.error("templating.metrics.failed", error=str(e), exc_info=e)
        raise _to_http_exception(e) from e

    return [OptionDTO.from_domain(option) for option in options]


@router.post(
    "/sources", response_model=List[OptionDTO], response_model_by_alias=True
)
@inject
async def metric_find_sources(
    request: MetricFindRequestDTO,
    metric_find_sources_use_case: MetricFindSourcesUseCase = Depends(
        Provide["metric_find_sources_use_case"]
    ),
) -> List[OptionDTO]:
    """List the raw value and aggregate sources of the selected metric."""
    try:
        options = await metric_find_sources_use_case.execute(request.target)
    except Exception as e:
        logger.error(
            "templating.sources.failed",
            target=request.target,
            error=str(e),
            exc_info=e,
        )
        raise _to_http_exception(e) from e

    return [OptionDTO.from_domain(option) for option in options]
