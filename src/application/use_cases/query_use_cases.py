"""
Query Use Cases - Application Layer

This module drives panel queries against the historical datastore: targets
are fetched one after another and each target is paged through until the
datastore's declared total is reached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from src.domain.entities.query import PanelQuery, SeriesEntry, TargetSpec
from src.domain.gateways.historical_datastore_gateway import (
    IHistoricalDatastoreGateway,
)
from src.domain.services.query_normalizer import is_dispatchable, normalize_query
from src.domain.services.source_parser import parse_source
from src.domain.services.translator import convert_points
from src.shared import get_logger

logger = get_logger(__name__)


@dataclass
class PaginationState:
    """Cursor of one query: which target and page is being fetched."""

    target_index: int = 0
    page: int = 1
    entries: List[SeriesEntry] = field(default_factory=list)
    requests: int = 0

    @property
    def current(self) -> SeriesEntry:
        return self.entries[self.target_index]

    def next_page(self) -> None:
        self.page += 1

    def next_target(self) -> None:
        self.target_index += 1
        self.page = 1


class QueryTimeSeriesUseCase:
    """Fetch and merge every page of every target of a panel query."""

    def __init__(self, datastore_gateway: IHistoricalDatastoreGateway) -> None:
        self._gateway = datastore_gateway

    async def execute(self, query: PanelQuery) -> List[SeriesEntry]:
        """
        Run a panel query.

        Requests are strictly sequential: page N+1 is requested only after
        page N was merged, and target i+1 only after target i is complete.

        Returns:
            One series per dispatched target, in target order. Empty when
            nothing is selected.

        Raises:
            SourcePatternError: If an aggregate source label is malformed
            DatastoreError: If any page request fails
        """
        query = normalize_query(query)
        if not is_dispatchable(query):
            logger.debug("query.skipped", reason="no_selected_targets")
            return []

        logger.info(
            "query.started",
            targets=len(query.targets),
            start=query.range.start_iso(),
            end=query.range.end_iso(),
        )

        state = PaginationState(entries=[SeriesEntry() for _ in query.targets])
        while state.target_index < len(query.targets):
            await self._fetch_target(query, query.targets[state.target_index], state)
            state.next_target()

        logger.info(
            "query.completed",
            targets=len(state.entries),
            requests=state.requests,
            points=sum(len(entry.points) for entry in state.entries),
        )
        return state.entries

    async def _fetch_target(
        self, query: PanelQuery, target: TargetSpec, state: PaginationState
    ) -> None:
        selection = parse_source(target.source, target.source_ids)
        entry = state.current
        entry.label = selection.label_for(target.metric or "")

        while True:
            page = await self._gateway.fetch_page(
                endpoint=selection.endpoint,
                metric_id=target.metric_id,
                time_range=query.range,
                page=state.page,
                payload=query.payload,
            )
            state.requests += 1
            entry.points.extend(convert_points(page.samples, selection))

            if page.total <= len(entry.points):
                break
            if not page.samples:
                logger.warning(
                    "query.page.empty_before_total",
                    target=entry.label,
                    page=state.page,
                    total=page.total,
                    collected=len(entry.points),
                )
                break
            state.next_page()

        logger.debug(
            "query.target.completed",
            target=entry.label,
            pages=state.page,
            points=len(entry.points),
        )
