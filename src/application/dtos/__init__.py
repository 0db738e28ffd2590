"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .query_dto import (
    QueryRequestDTO,
    QueryResponseDTO,
    SeriesDTO,
    TargetDTO,
    TimeRangeDTO,
)
from .templating_dto import DatasourceStatusDTO, MetricFindRequestDTO, OptionDTO

__all__ = [
    "TimeRangeDTO",
    "TargetDTO",
    "QueryRequestDTO",
    "SeriesDTO",
    "QueryResponseDTO",
    "OptionDTO",
    "MetricFindRequestDTO",
    "DatasourceStatusDTO",
]
