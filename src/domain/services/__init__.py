"""Domain services package."""

from .query_normalizer import is_dispatchable, normalize_query
from .source_parser import parse_source
from .translator import (
    convert_metrics_registry,
    convert_points,
    convert_source_options,
)

__all__ = [
    "normalize_query",
    "is_dispatchable",
    "parse_source",
    "convert_points",
    "convert_metrics_registry",
    "convert_source_options",
]
