"""Domain service helpers for dropping targets that cannot be dispatched."""

from dataclasses import replace
from typing import Any, Dict, List

from src.domain.entities.query import PanelQuery


def _filter_payload(
    payload: Dict[str, Any], kept: List[int], count: int
) -> Dict[str, Any]:
    raw_targets = payload.get("targets")
    if not isinstance(raw_targets, list) or len(raw_targets) != count:
        return dict(payload)
    return {**payload, "targets": [raw_targets[index] for index in kept]}


def normalize_query(query: PanelQuery, drop_hidden: bool = True) -> PanelQuery:
    """Return a copy of ``query`` without placeholder (and hidden) targets.

    The forwarded payload loses the same targets, in the same order; the
    time range and the remaining target fields are carried over untouched.
    """

    kept = [
        index
        for index, target in enumerate(query.targets)
        if not target.is_placeholder() and not (drop_hidden and target.hide)
    ]
    return replace(
        query,
        targets=[query.targets[index] for index in kept],
        payload=_filter_payload(query.payload, kept, len(query.targets)),
    )


def is_dispatchable(query: PanelQuery) -> bool:
    """Whether a normalized query has anything worth requesting."""

    if not query.targets:
        return False
    return bool(query.targets[0].metric)
