"""Domain entities for panel queries and the series assembled from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

METRIC_PLACEHOLDER = "select metric"
SOURCE_PLACEHOLDER = "select source"
RAW_VALUE_SOURCE = "value"

Datapoint = Tuple[float, int]


def to_iso_instant(moment: datetime) -> str:
    """Render an instant as UTC ISO-8601 with milliseconds and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class TimeRange:
    """Requested time window of a panel render."""

    start: datetime
    end: datetime

    def start_iso(self) -> str:
        return to_iso_instant(self.start)

    def end_iso(self) -> str:
        return to_iso_instant(self.end)


@dataclass(slots=True)
class TargetSpec:
    """One series requested by the user in a panel."""

    metric: Optional[str] = None
    source: Optional[str] = None
    source_ids: Dict[str, str] = field(default_factory=dict)
    hide: bool = False
    ref_id: Optional[str] = None

    @property
    def metric_id(self) -> str:
        """Registry ID of the metric; option labels read ``"<id>: <resource>"``."""
        return (self.metric or "").split(":")[0]

    def is_placeholder(self) -> bool:
        return self.metric == METRIC_PLACEHOLDER or self.source == SOURCE_PLACEHOLDER


@dataclass(slots=True)
class PanelQuery:
    """The host's request for one panel render."""

    range: TimeRange
    targets: List[TargetSpec] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SourceSelection:
    """Endpoint and SenML field names resolved from a target's source."""

    endpoint: str
    value_field: str
    time_field: str
    aggregate: Optional[str] = None
    interval: Optional[str] = None
    group_id: Optional[str] = None

    @property
    def is_aggregate(self) -> bool:
        return self.aggregate is not None

    def label_for(self, metric: str) -> str:
        if self.is_aggregate:
            return f"{metric}.{self.value_field}"
        return metric


@dataclass(slots=True)
class PageResult:
    """One page of SenML records returned for a target."""

    total: int
    samples: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(slots=True)
class SeriesEntry:
    """Accumulated output of one target."""

    label: str = ""
    points: List[Datapoint] = field(default_factory=list)
