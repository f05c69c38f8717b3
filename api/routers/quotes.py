"""
Quotes API Endpoints.

Quote list and win/loss statistics. A sent or viewed quote past its
valid-until date is reported as expired.
"""

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_now, get_store, require_section
from api.models import QuoteLineItemResponse, QuoteListResponse, QuoteResponse, QuoteStatsResponse
from domain.quote import Quote, QuoteStatus
from domain.stats import quote_stats
from repositories.store import OperationsStore
from services.operations_service import OperationsService

router = APIRouter()


def quote_response(quote: Quote, today: date) -> QuoteResponse:
    return QuoteResponse(
        id=quote.id,
        quote_number=quote.quote_number,
        client_name=quote.client_name,
        client_email=quote.client_email,
        status=quote.effective_status(today),
        items=[QuoteLineItemResponse.model_validate(item) for item in quote.items],
        subtotal=quote.subtotal,
        discount=quote.discount,
        total=quote.total,
        valid_until=quote.valid_until,
        days_until_expiry=quote.days_until_expiry(today),
        created_at=quote.created_at,
        sent_at=quote.sent_at,
        viewed_at=quote.viewed_at,
        responded_at=quote.responded_at,
        loss_reason=quote.loss_reason,
        notes=quote.notes,
    )


@router.get(
    "/quotes",
    response_model=QuoteListResponse,
    summary="List Quotes",
    description="Quotes newest first, with expiry applied as of today."
)
def list_quotes(
    status: Optional[QuoteStatus] = Query(None, description="Filter by effective status"),
    _role=Depends(require_section("quotes")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    try:
        today = now.date()
        quotes = [quote_response(quote, today) for quote in OperationsService(store).fetch_quotes()]
        if status is not None:
            quotes = [quote for quote in quotes if quote.status is status]
        return QuoteListResponse(quotes=quotes, total_count=len(quotes))
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch quotes: {str(e)}"
        )


@router.get(
    "/quotes/stats",
    response_model=QuoteStatsResponse,
    summary="Quote Stats",
    description="Win rate over decided quotes, loss reasons, and open value awaiting a response."
)
def get_quote_stats(
    _role=Depends(require_section("quotes")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    quotes = OperationsService(store).fetch_quotes()
    return QuoteStatsResponse.model_validate(quote_stats(quotes, now.date()))
