"""
Tests for `services/board_service.py`.

Covers contract rules:
- A no-op move touches nothing: no state change, no stats change, no write.
- A move is applied locally, stats are recomputed, and the stage is persisted.
- A failed write restores the previous stage and stats.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from conftest import make_client
from domain.board import DragEndEvent
from domain.pipeline import PipelineStage
from repositories.fixture_store import FixtureStore
from services.board_service import MoveOutcome, PipelineBoard
from services.pipeline_service import PipelineService


class RecordingService(PipelineService):
    """Pipeline service that records stage writes and answers with a fixed result."""

    def __init__(self, succeed: bool = True) -> None:
        super().__init__(FixtureStore(tables={}))
        self.succeed = succeed
        self.calls: List[Tuple[str, PipelineStage, Optional[str]]] = []

    def update_stage(self, pipeline_id, new_stage, client_id=None, now=None) -> bool:
        self.calls.append((pipeline_id, new_stage, client_id))
        return self.succeed


def _board(service: RecordingService) -> PipelineBoard:
    return PipelineBoard(
        service,
        [
            make_client("a", PipelineStage.SUBMITTED, selection_value="1000"),
            make_client("b", PipelineStage.QUOTED, selection_value="5000", quote_value="4500"),
            make_client("c", PipelineStage.COMPLETED, selection_value="2000"),
        ],
    )


def test_drop_on_same_column_is_a_noop() -> None:
    service = RecordingService()
    board = _board(service)
    stats_before = board.stats

    outcome = board.handle_drag_end(DragEndEvent(active_id="a", over_id="submitted"))

    assert outcome is MoveOutcome.NOOP
    assert service.calls == []
    assert board.stats is stats_before
    assert board.get("a").stage is PipelineStage.SUBMITTED


def test_drop_on_column_moves_and_persists() -> None:
    service = RecordingService()
    board = _board(service)

    outcome = board.handle_drag_end(DragEndEvent(active_id="a", over_id="in_production"))

    assert outcome is MoveOutcome.MOVED
    assert board.get("a").stage is PipelineStage.IN_PRODUCTION
    assert service.calls == [("a", PipelineStage.IN_PRODUCTION, "p-a")]
    assert board.stats.by_stage[PipelineStage.SUBMITTED] == 0
    assert board.stats.by_stage[PipelineStage.IN_PRODUCTION] == 1
    assert board.stats.new_submissions == 0


def test_failed_write_reverts_stage_and_stats(caplog) -> None:
    service = RecordingService(succeed=False)
    board = _board(service)
    stats_before = board.stats

    with caplog.at_level(logging.ERROR):
        outcome = board.handle_drag_end(DragEndEvent(active_id="b", over_id="a"))

    assert outcome is MoveOutcome.REVERTED
    assert len(service.calls) == 1
    assert board.get("b").stage is PipelineStage.QUOTED
    assert board.stats == stats_before
    assert "Reverted stage change for b" in caplog.text


def test_advance_moves_one_stage() -> None:
    service = RecordingService()
    board = _board(service)

    assert board.advance("b") is MoveOutcome.MOVED
    assert board.get("b").stage is PipelineStage.DEPOSIT_PAID
    assert board.advance("c") is MoveOutcome.NOOP
    assert board.advance("missing") is MoveOutcome.NOOP
    assert len(service.calls) == 1


def test_mark_lost_removes_value_from_pipeline() -> None:
    service = RecordingService()
    board = _board(service)
    assert board.stats.total_pipeline_value == Decimal("5500")

    assert board.mark_lost("b") is MoveOutcome.MOVED

    assert board.get("b").stage is PipelineStage.LOST
    assert board.stats.total_pipeline_value == Decimal("1000")
    assert board.stats.active_deals == 1
    assert all(card.id != "b" for cards in board.columns().values() for card in cards)


def test_mark_lost_on_terminal_card_is_noop() -> None:
    service = RecordingService()
    board = _board(service)

    assert board.mark_lost("c") is MoveOutcome.NOOP
    assert service.calls == []


def test_board_over_development_dataset_persists_moves() -> None:
    store = FixtureStore()
    board = PipelineBoard.load(PipelineService(store))

    assert board.handle_drag_end(DragEndEvent(active_id="sub-mitchell", over_id="quoted")) is MoveOutcome.MOVED

    reloaded = PipelineBoard.load(PipelineService(store))
    mitchell = next(c for c in reloaded.clients if c.profile_id == "p-mitchell")
    assert mitchell.stage is PipelineStage.QUOTED
    assert reloaded.stats == board.stats
