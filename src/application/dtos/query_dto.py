"""
Query DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for the panel query
exchanged with the dashboard host and for the series returned to it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.query import PanelQuery, SeriesEntry, TargetSpec, TimeRange


class TimeRangeDTO(BaseModel):
    """Time window of a panel render."""

    from_: datetime = Field(alias="from", description="Start instant")
    to: datetime = Field(description="End instant")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_domain(self) -> TimeRange:
        return TimeRange(start=self.from_, end=self.to)


class TargetDTO(BaseModel):
    """One series configured in a panel."""

    ref_id: Optional[str] = Field(default=None, alias="refId")
    metric: Optional[str] = Field(
        default=None, description="Registry option label, '<id>: <resource>'"
    )
    source: Optional[str] = Field(
        default=None, description="Raw value or aggregate option label"
    )
    source_ids: Dict[str, str] = Field(
        default_factory=dict,
        alias="sourceIDs",
        description="Aggregation group ID per source label",
    )
    hide: bool = Field(default=False, description="Exclude the target from queries")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_domain(self) -> TargetSpec:
        return TargetSpec(
            metric=self.metric,
            source=self.source,
            source_ids=dict(self.source_ids),
            hide=self.hide,
            ref_id=self.ref_id,
        )


class QueryRequestDTO(BaseModel):
    """Panel query sent by the dashboard host."""

    range: TimeRangeDTO
    targets: List[TargetDTO] = Field(default_factory=list)

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "range": {
                    "from": "2017-07-14T00:00:00.000Z",
                    "to": "2017-07-14T06:00:00.000Z",
                },
                "targets": [
                    {
                        "refId": "A",
                        "metric": "a8d9-4c1e: bedroom/temperature",
                        "source": "mean, every 1h, retention 1w (Aggr: 9a1f)",
                        "sourceIDs": {
                            "mean, every 1h, retention 1w (Aggr: 9a1f)": "9a1f"
                        },
                        "hide": False,
                    }
                ],
            }
        },
    )

    def to_domain(self) -> PanelQuery:
        return PanelQuery(
            range=self.range.to_domain(),
            targets=[target.to_domain() for target in self.targets],
            payload=self.model_dump(mode="json", by_alias=True),
        )


class SeriesDTO(BaseModel):
    """One target's datapoints, ``[value, epoch_ms]`` pairs."""

    target: str
    datapoints: List[List[Union[float, int, None]]] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, entry: SeriesEntry) -> "SeriesDTO":
        return cls(
            target=entry.label,
            datapoints=[[value, timestamp] for value, timestamp in entry.points],
        )


class QueryResponseDTO(BaseModel):
    """Result of a panel query."""

    data: List[SeriesDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, entries: List[SeriesEntry]) -> "QueryResponseDTO":
        return cls(data=[SeriesDTO.from_domain(entry) for entry in entries])

    model_config = {
        "json_schema_extra": {
            "example": {
                "data": [
                    {
                        "target": "a8d9-4c1e: bedroom/temperature.mean",
                        "datapoints": [[21.5, 1500000000000]],
                    }
                ]
            }
        }
    }

