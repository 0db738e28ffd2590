"""Resolve a target's source label into an endpoint and SenML field names."""

import re
from typing import Mapping, Optional
from urllib.parse import quote

from src.domain.entities.errors import SourcePatternError
from src.domain.entities.query import RAW_VALUE_SOURCE, SourceSelection

# "<aggregate>, every <n><unit>[, <retention>] (Aggr: <group>)"
AGGREGATE_SOURCE_PATTERN = re.compile(
    r"^(?P<aggregate>[a-z]+), every (?P<interval>[0-9]+[smhw])"
    r"(?:,[^(]*)?\s*\(Aggr:\s*(?P<group>[^)]+)\)$"
)

RAW_SELECTION = SourceSelection(endpoint="data", value_field="v", time_field="t")


def parse_source(
    source: Optional[str], source_ids: Optional[Mapping[str, str]] = None
) -> SourceSelection:
    """Map a source label to the datastore collection and field names to read.

    Raises:
        SourcePatternError: If a non raw-value label is not a valid aggregate.
    """

    if source is None or source.startswith(RAW_VALUE_SOURCE):
        return RAW_SELECTION

    match = AGGREGATE_SOURCE_PATTERN.match(source)
    if match is None:
        raise SourcePatternError(source)

    group_id = (source_ids or {}).get(source) or match.group("group").strip()
    aggregate = match.group("aggregate")
    return SourceSelection(
        endpoint=f"aggr/{quote(group_id, safe='')}",
        value_field=aggregate,
        time_field="ts",
        aggregate=aggregate,
        interval=match.group("interval"),
        group_id=group_id,
    )
