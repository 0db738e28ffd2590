"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    DatastoreError,
    DatastoreResponseError,
    DomainError,
    SelectionError,
    SourcePatternError,
)
from .query import (
    METRIC_PLACEHOLDER,
    RAW_VALUE_SOURCE,
    SOURCE_PLACEHOLDER,
    PageResult,
    PanelQuery,
    SeriesEntry,
    SourceSelection,
    TargetSpec,
    TimeRange,
)
from .registry import AggregateDescriptor, RegistryDetail, RegistryEntry, SelectOption

__all__ = [
    "METRIC_PLACEHOLDER",
    "SOURCE_PLACEHOLDER",
    "RAW_VALUE_SOURCE",
    "TimeRange",
    "TargetSpec",
    "PanelQuery",
    "PageResult",
    "SeriesEntry",
    "SourceSelection",
    "RegistryEntry",
    "AggregateDescriptor",
    "RegistryDetail",
    "SelectOption",
    "DomainError",
    "SelectionError",
    "SourcePatternError",
    "DatastoreError",
    "DatastoreResponseError",
]
