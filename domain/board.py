"""
Domain: Pipeline board transitions (pure).

Rules implemented here:
- Board columns are the linear stages (submitted ... completed). `lost` is not
  a column and can only be reached through the explicit mark-lost action.
- A drag ends over either a column (target = that column's stage) or another
  card (target = that card's stage).
- A lost card is off the board and cannot be dragged.
- No target, an unknown card, or a target equal to the card's current stage is
  a no-op.
- Drag-and-drop may move a card to any column; there is no forward-only check.
- "Move to next stage" offers only the next stage in the linear order and is
  unavailable once the card is completed or lost.
- Mark lost is allowed from any non-terminal stage.

Planning functions return a StageChange (or None for a no-op); applying and
reverting a change produce new collections and never mutate their input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .pipeline import STAGE_ORDER, PipelineClient, PipelineStage

BOARD_COLUMNS: List[PipelineStage] = list(STAGE_ORDER)


@dataclass(frozen=True, slots=True)
class DragEndEvent:
    """Completion of a drag: the dragged card and whatever it was dropped over."""

    active_id: str
    over_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class StageChange:
    client_id: str
    previous_stage: PipelineStage
    new_stage: PipelineStage


def find_client(clients: Sequence[PipelineClient], client_id: str) -> Optional[PipelineClient]:
    for client in clients:
        if client.id == client_id:
            return client
    return None


def column_for_id(droppable_id: str) -> Optional[PipelineStage]:
    for column in BOARD_COLUMNS:
        if column.value == droppable_id:
            return column
    return None


def resolve_drop_target(event: DragEndEvent, clients: Sequence[PipelineClient]) -> Optional[PipelineStage]:
    if not event.over_id:
        return None

    column = column_for_id(event.over_id)
    if column is not None:
        return column

    over_client = find_client(clients, event.over_id)
    if over_client is None or over_client.stage not in BOARD_COLUMNS:
        return None
    return over_client.stage


def plan_drag(event: DragEndEvent, clients: Sequence[PipelineClient]) -> Optional[StageChange]:
    active = find_client(clients, event.active_id)
    if active is None or active.stage not in BOARD_COLUMNS:
        return None

    target = resolve_drop_target(event, clients)
    if target is None or target is active.stage:
        return None

    return StageChange(client_id=active.id, previous_stage=active.stage, new_stage=target)


def plan_advance(client: PipelineClient) -> Optional[StageChange]:
    target = client.stage.next_stage()
    if target is None:
        return None
    return StageChange(client_id=client.id, previous_stage=client.stage, new_stage=target)


def plan_mark_lost(client: PipelineClient) -> Optional[StageChange]:
    if not client.stage.can_mark_lost():
        return None
    return StageChange(client_id=client.id, previous_stage=client.stage, new_stage=PipelineStage.LOST)


def apply_stage_change(clients: Sequence[PipelineClient], change: StageChange) -> List[PipelineClient]:
    return [
        client.with_stage(change.new_stage) if client.id == change.client_id else client
        for client in clients
    ]


def revert_stage_change(clients: Sequence[PipelineClient], change: StageChange) -> List[PipelineClient]:
    return [
        client.with_stage(change.previous_stage) if client.id == change.client_id else client
        for client in clients
    ]


def group_by_column(clients: Sequence[PipelineClient]) -> dict[PipelineStage, List[PipelineClient]]:
    """Cards per board column, in input order; lost cards are left off the board."""

    columns: dict[PipelineStage, List[PipelineClient]] = {column: [] for column in BOARD_COLUMNS}
    for client in clients:
        if client.stage in columns:
            columns[client.stage].append(client)
    return columns


__all__ = [
    "BOARD_COLUMNS",
    "DragEndEvent",
    "StageChange",
    "apply_stage_change",
    "column_for_id",
    "find_client",
    "group_by_column",
    "plan_advance",
    "plan_drag",
    "plan_mark_lost",
    "resolve_drop_target",
    "revert_stage_change",
]
