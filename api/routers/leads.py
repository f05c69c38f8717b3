"""
Marketing Leads API Endpoints.

Profiles and newsletter subscribers who have not submitted a selection.
A lead that submits moves to the pipeline and disappears from this list.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from api.dependencies import Settings, get_now, get_settings, get_store, require_section
from api.models import (
    InterestRequest,
    MarketingLeadListResponse,
    MarketingLeadResponse,
    MarketingLeadStatsResponse,
    OutreachRequest,
    WriteResponse,
)
from domain.filters import ActivityFilter, LeadFilter, filter_marketing_leads
from domain.marketing_lead import InterestLevel, MarketingLeadStatus
from domain.source import LeadSource
from domain.stats import marketing_lead_stats
from repositories.store import OperationsStore
from services.csv_export_service import export_filename, export_marketing_leads_csv
from services.marketing_lead_service import MarketingLeadService

router = APIRouter()


def _lead_filter(
    search: Optional[str] = Query(None, description="Case-insensitive match on name or e-mail"),
    source: Optional[LeadSource] = Query(None, description="Filter by lead source"),
    status: Optional[MarketingLeadStatus] = Query(None, description="Filter by lead status"),
    interest: Optional[InterestLevel] = Query(None, description="Filter by interest level"),
    activity: Optional[ActivityFilter] = Query(
        None, description="active: activity in the last 7 days; stale: idle for over 14 days"
    ),
) -> LeadFilter:
    return LeadFilter(search=search, source=source, status=status, interest=interest, activity=activity)


@router.get(
    "/leads",
    response_model=MarketingLeadListResponse,
    summary="List Marketing Leads",
    description="Profiles without a submission, followed by newsletter-only subscribers."
)
def list_leads(
    criteria: LeadFilter = Depends(_lead_filter),
    _role=Depends(require_section("clients")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    try:
        leads = filter_marketing_leads(MarketingLeadService(store).fetch_marketing_leads(now), criteria, now)
        return MarketingLeadListResponse(
            leads=[MarketingLeadResponse.model_validate(lead) for lead in leads],
            total_count=len(leads),
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch leads: {str(e)}"
        )


@router.get(
    "/leads/stats",
    response_model=MarketingLeadStatsResponse,
    summary="Marketing Lead Stats"
)
def get_lead_stats(
    _role=Depends(require_section("clients")),
    store: OperationsStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
    now: datetime = Depends(get_now),
):
    leads = MarketingLeadService(store).fetch_marketing_leads(now)
    stats = marketing_lead_stats(leads, now, settings.follow_up_after_days)
    return MarketingLeadStatsResponse.model_validate(stats)


@router.get(
    "/leads/export",
    summary="Export Leads CSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}}
)
def export_leads(
    criteria: LeadFilter = Depends(_lead_filter),
    _role=Depends(require_section("clients")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    leads = filter_marketing_leads(MarketingLeadService(store).fetch_marketing_leads(now), criteria, now)
    filename = export_filename(now.date())
    return Response(
        content=export_marketing_leads_csv(leads),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.patch(
    "/leads/{lead_id}/interest",
    response_model=WriteResponse,
    summary="Change Interest Level"
)
def update_interest(
    lead_id: str,
    request: InterestRequest,
    _role=Depends(require_section("clients_edit")),
    store: OperationsStore = Depends(get_store),
):
    if not MarketingLeadService(store).update_interest(lead_id, request.interest):
        raise HTTPException(
            status_code=500,
            detail=f"Failed to update interest for lead {lead_id}"
        )
    return WriteResponse(success=True)


@router.post(
    "/leads/{lead_id}/outreach",
    response_model=WriteResponse,
    status_code=201,
    summary="Log Outreach"
)
def log_outreach(
    lead_id: str,
    request: OutreachRequest,
    _role=Depends(require_section("clients_edit")),
    store: OperationsStore = Depends(get_store),
):
    logged = MarketingLeadService(store).log_outreach(
        lead_id,
        request.type,
        request.outcome,
        notes=request.notes,
        follow_up_date=request.follow_up_date,
    )
    if not logged:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to log outreach for lead {lead_id}"
        )
    return WriteResponse(success=True)
