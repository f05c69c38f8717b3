"""
Pipeline API Endpoints.

Endpoints for the client pipeline board: listing, stats, stage moves,
priority changes, payments and CSV export.

Stage moves are applied optimistically to a board loaded for the request and
persisted; a failed write comes back as outcome "reverted" with the card in
its previous stage.
"""

from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from api.dependencies import get_now, get_store, require_section
from api.models import (
    DragEndRequest,
    MoveResponse,
    PaymentRequest,
    PipelineClientResponse,
    PipelineListResponse,
    PipelineStatsResponse,
    PriorityRequest,
    WriteResponse,
)
from domain.board import DragEndEvent
from domain.filters import PipelineFilter, filter_pipeline_clients
from domain.payments import payment_percentage
from domain.pipeline import PipelineClient, PipelineStage, Priority
from domain.stats import pipeline_stats
from repositories.store import OperationsStore
from services.board_service import MoveOutcome, PipelineBoard
from services.csv_export_service import export_filename, export_pipeline_csv
from services.pipeline_service import PipelineService

router = APIRouter()


def client_response(client: PipelineClient) -> PipelineClientResponse:
    response = PipelineClientResponse.model_validate(client)
    response.payment_percentage = payment_percentage(
        client.quote_value, client.selection_value, client.total_paid
    )
    return response


def _move_response(board: PipelineBoard, client_id: str, outcome: MoveOutcome) -> MoveResponse:
    client = board.get(client_id)
    return MoveResponse(
        outcome=outcome,
        client=client_response(client) if client is not None else None,
        stats=PipelineStatsResponse.model_validate(board.stats),
    )


def _load_board(store: OperationsStore) -> PipelineBoard:
    return PipelineBoard.load(PipelineService(store))


@router.get(
    "/pipeline",
    response_model=PipelineListResponse,
    summary="List Pipeline Clients",
    description="Clients who submitted a selection, newest submission first."
)
def list_pipeline(
    search: Optional[str] = Query(None, description="Case-insensitive match on name or e-mail"),
    stage: Optional[PipelineStage] = Query(None, description="Filter by pipeline stage"),
    priority: Optional[Priority] = Query(None, description="Filter by priority"),
    _role=Depends(require_section("clients")),
    store: OperationsStore = Depends(get_store),
):
    try:
        clients = filter_pipeline_clients(
            PipelineService(store).fetch_pipeline_clients(),
            PipelineFilter(search=search, stage=stage, priority=priority),
        )
        return PipelineListResponse(
            clients=[client_response(client) for client in clients],
            total_count=len(clients),
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch pipeline: {str(e)}"
        )


@router.get(
    "/pipeline/stats",
    response_model=PipelineStatsResponse,
    summary="Pipeline Stats"
)
def get_pipeline_stats(
    _role=Depends(require_section("clients")),
    store: OperationsStore = Depends(get_store),
):
    clients = PipelineService(store).fetch_pipeline_clients()
    return PipelineStatsResponse.model_validate(pipeline_stats(clients))


@router.get(
    "/pipeline/board",
    response_model=Dict[PipelineStage, List[PipelineClientResponse]],
    summary="Pipeline Board Columns",
    description="Cards grouped by board column. Lost clients are not on the board."
)
def get_board(
    _role=Depends(require_section("clients")),
    store: OperationsStore = Depends(get_store),
):
    board = _load_board(store)
    return {
        stage: [client_response(client) for client in clients]
        for stage, clients in board.columns().items()
    }


@router.post(
    "/pipeline/drag",
    response_model=MoveResponse,
    summary="Finish a Card Drag",
    description="Move the dragged card to the column (or the column of the card) it was dropped over."
)
def drag_card(
    request: DragEndRequest,
    _role=Depends(require_section("clients_edit")),
    store: OperationsStore = Depends(get_store),
):
    board = _load_board(store)
    outcome = board.handle_drag_end(DragEndEvent(active_id=request.active_id, over_id=request.over_id))
    return _move_response(board, request.active_id, outcome)


@router.post(
    "/pipeline/{client_id}/advance",
    response_model=MoveResponse,
    summary="Move to Next Stage"
)
def advance_card(
    client_id: str,
    _role=Depends(require_section("clients_edit")),
    store: OperationsStore = Depends(get_store),
):
    board = _load_board(store)
    client = board.get(client_id)
    if client is None:
        raise HTTPException(status_code=404, detail=f"Pipeline client {client_id} not found")
    if client.stage.next_stage() is None:
        raise HTTPException(
            status_code=409,
            detail=f"Stage '{client.stage.value}' has no next stage"
        )
    return _move_response(board, client_id, board.advance(client_id))


@router.post(
    "/pipeline/{client_id}/lost",
    response_model=MoveResponse,
    summary="Mark Client Lost"
)
def mark_lost(
    client_id: str,
    _role=Depends(require_section("clients_edit")),
    store: OperationsStore = Depends(get_store),
):
    board = _load_board(store)
    client = board.get(client_id)
    if client is None:
        raise HTTPException(status_code=404, detail=f"Pipeline client {client_id} not found")
    if not client.stage.can_mark_lost():
        raise HTTPException(
            status_code=409,
            detail=f"A client in stage '{client.stage.value}' cannot be marked lost"
        )
    return _move_response(board, client_id, board.mark_lost(client_id))


@router.patch(
    "/pipeline/{pipeline_id}/priority",
    response_model=WriteResponse,
    summary="Change Priority"
)
def update_priority(
    pipeline_id: str,
    request: PriorityRequest,
    _role=Depends(require_section("clients_edit")),
    store: OperationsStore = Depends(get_store),
):
    if not PipelineService(store).update_priority(pipeline_id, request.priority):
        raise HTTPException(
            status_code=500,
            detail=f"Failed to update priority for {pipeline_id}"
        )
    return WriteResponse(success=True)


@router.post(
    "/pipeline/{pipeline_id}/payments",
    response_model=WriteResponse,
    status_code=201,
    summary="Record Payment"
)
def record_payment(
    pipeline_id: str,
    request: PaymentRequest,
    _role=Depends(require_section("clients_edit")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    recorded = PipelineService(store).record_payment(
        client_id=request.client_id,
        pipeline_id=pipeline_id,
        payment_type=request.payment_type,
        amount=request.amount,
        reference=request.reference,
        paid_at=now,
    )
    if not recorded:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to record {request.payment_type.value} payment"
        )
    return WriteResponse(success=True)


@router.get(
    "/pipeline/export",
    summary="Export Pipeline CSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}}
)
def export_pipeline(
    search: Optional[str] = Query(None),
    stage: Optional[PipelineStage] = Query(None),
    priority: Optional[Priority] = Query(None),
    _role=Depends(require_section("clients")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    clients = filter_pipeline_clients(
        PipelineService(store).fetch_pipeline_clients(),
        PipelineFilter(search=search, stage=stage, priority=priority),
    )
    filename = export_filename(now.date(), prefix="pipeline-export")
    return Response(
        content=export_pipeline_csv(clients),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
