"""
Domain Service - Response Translator

Converts datastore payloads into the shapes the dashboard host consumes:
flat ``(value, timestamp_ms)`` datapoints for panels and label/value
options for templating variables.
"""

from functools import reduce
from typing import Any, Dict, List, Sequence, Tuple

from src.domain.entities.errors import DatastoreResponseError
from src.domain.entities.query import Datapoint, SourceSelection
from src.domain.entities.registry import (
    AggregateDescriptor,
    RegistryDetail,
    RegistryEntry,
    SelectOption,
)


def convert_points(
    samples: Sequence[Dict[str, Any]], selection: SourceSelection
) -> List[Datapoint]:
    """Translate SenML records into datapoints, keeping their order.

    Times are seconds on the wire and milliseconds for the host.

    Raises:
        DatastoreResponseError: If a record lacks the selected fields or
            carries a non-numeric time.
    """

    details = {
        "value_field": selection.value_field,
        "time_field": selection.time_field,
    }
    datapoints: List[Datapoint] = []
    for position, sample in enumerate(samples):
        try:
            value = sample[selection.value_field]
            seconds = sample[selection.time_field]
        except (KeyError, TypeError) as e:
            raise DatastoreResponseError(
                f"SenML record #{position} lacks field {e}", details=details
            ) from e
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise DatastoreResponseError(
                f"SenML record #{position} has non-numeric time {seconds!r}",
                details=details,
            )
        datapoints.append((value, int(round(seconds * 1000))))
    return datapoints


def convert_metrics_registry(entries: Sequence[RegistryEntry]) -> List[SelectOption]:
    """One option per registry entry, valued by its position."""

    return [
        SelectOption(text=f"{entry.id}: {entry.resource}", value=index)
        for index, entry in enumerate(entries)
    ]


def format_retention(retention: str) -> str:
    if retention == "":
        return ", no retention"
    return f", retention {retention}"


def _flatten_group(
    acc: Tuple[List[SelectOption], int], group: AggregateDescriptor
) -> Tuple[List[SelectOption], int]:
    options, index = acc
    for aggregate in group.aggregates:
        options.append(
            SelectOption(
                text=(
                    f"{aggregate}, every {group.interval}"
                    f"{format_retention(group.retention)} (Aggr: {group.id})"
                ),
                value=index,
                group_id=group.id,
            )
        )
        index += 1
    return options, index


def convert_source_options(detail: RegistryDetail) -> List[SelectOption]:
    """Build the selectable sources of a metric.

    The raw value option always comes first; aggregates follow sorted by label.
    """

    raw = SelectOption(text=f"value{format_retention(detail.retention)}", value=0)
    aggregates, _ = reduce(_flatten_group, detail.aggregation, ([], 1))
    return [raw] + sorted(aggregates, key=lambda option: option.text)
