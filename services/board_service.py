"""
Pipeline board: optimistic stage changes with persistence and reconciliation.

Every user move (drag end, next stage, mark lost) is planned by the pure
transition rules in `domain.board` and then:
1. applied to the local card collection,
2. reflected in freshly recomputed stats,
3. persisted through the pipeline service.

If persistence reports failure the card's previous stage is restored and the
stats are recomputed again. There is no retry and no re-fetch. A no-op plan
touches nothing: no mutation, no stats change, no persistence call.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence

from domain.board import (
    DragEndEvent,
    StageChange,
    apply_stage_change,
    find_client,
    group_by_column,
    plan_advance,
    plan_drag,
    plan_mark_lost,
    revert_stage_change,
)
from domain.pipeline import PipelineClient, PipelineStage
from domain.stats import PipelineStats, pipeline_stats
from services.pipeline_service import PipelineService

logger = logging.getLogger(__name__)


class MoveOutcome(str, Enum):
    NOOP = "noop"
    MOVED = "moved"
    REVERTED = "reverted"


class PipelineBoard:
    """Board state for one view: the cards and the stats derived from them."""

    def __init__(self, service: PipelineService, clients: Sequence[PipelineClient]) -> None:
        self._service = service
        self._clients: List[PipelineClient] = list(clients)
        self._stats: PipelineStats = pipeline_stats(self._clients)

    @classmethod
    def load(cls, service: PipelineService) -> "PipelineBoard":
        return cls(service, service.fetch_pipeline_clients())

    @property
    def clients(self) -> List[PipelineClient]:
        return list(self._clients)

    @property
    def stats(self) -> PipelineStats:
        return self._stats

    def columns(self) -> Dict[PipelineStage, List[PipelineClient]]:
        return group_by_column(self._clients)

    def get(self, client_id: str) -> Optional[PipelineClient]:
        return find_client(self._clients, client_id)

    def handle_drag_end(self, event: DragEndEvent) -> MoveOutcome:
        return self._commit(plan_drag(event, self._clients))

    def advance(self, client_id: str) -> MoveOutcome:
        client = self.get(client_id)
        if client is None:
            return MoveOutcome.NOOP
        return self._commit(plan_advance(client))

    def mark_lost(self, client_id: str) -> MoveOutcome:
        client = self.get(client_id)
        if client is None:
            return MoveOutcome.NOOP
        return self._commit(plan_mark_lost(client))

    def _set_clients(self, clients: List[PipelineClient]) -> None:
        self._clients = clients
        self._stats = pipeline_stats(clients)

    def _commit(self, change: Optional[StageChange]) -> MoveOutcome:
        if change is None:
            return MoveOutcome.NOOP

        client = self.get(change.client_id)
        profile_id = client.profile_id if client is not None else None

        self._set_clients(apply_stage_change(self._clients, change))

        if self._service.update_stage(change.client_id, change.new_stage, client_id=profile_id):
            return MoveOutcome.MOVED

        self._set_clients(revert_stage_change(self._clients, change))
        logger.error(
            f"Reverted stage change for {change.client_id}: persistence failed",
            extra={
                "client_id": change.client_id,
                "previous_stage": change.previous_stage.value,
                "new_stage": change.new_stage.value,
            },
        )
        return MoveOutcome.REVERTED


__all__ = ["MoveOutcome", "PipelineBoard"]
