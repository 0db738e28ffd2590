"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .query_use_cases import PaginationState, QueryTimeSeriesUseCase
from .templating_use_cases import (
    MetricFindQueryUseCase,
    MetricFindSourcesUseCase,
    CheckConnectionUseCase,
)

__all__ = [
    "PaginationState",
    "QueryTimeSeriesUseCase",
    "CheckConnectionUseCase",
    "MetricFindQueryUseCase",
    "MetricFindSourcesUseCase",
]
