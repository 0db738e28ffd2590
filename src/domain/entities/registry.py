"""Domain entities for the metric registry and templating options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class RegistryEntry:
    """A metric known to the registry."""

    id: str
    resource: str


@dataclass(slots=True)
class AggregateDescriptor:
    """An aggregation group computed by the datastore for a metric."""

    id: str
    interval: str
    retention: str = ""
    aggregates: List[str] = field(default_factory=list)


@dataclass(slots=True)
class RegistryDetail:
    """Retention and aggregation settings of a single metric."""

    retention: str = ""
    aggregation: List[AggregateDescriptor] = field(default_factory=list)


@dataclass(slots=True)
class SelectOption:
    """Label/value pair offered to templating UIs."""

    text: str
    value: int
    group_id: Optional[str] = None
