"""
Dashboard API Endpoints.

Navigation for the caller's role and the home-page summary cards.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import Settings, get_now, get_role, get_settings, get_store, get_user_id
from api.models import DashboardResponse, NavigationResponse
from domain.permissions import AdminRole, visible_sections
from repositories.store import OperationsStore
from services.dashboard_service import DashboardService

router = APIRouter()


@router.get(
    "/navigation",
    response_model=NavigationResponse,
    summary="Navigation Sections",
    description="Sections the caller's role may open, in navigation order."
)
def get_navigation(role: AdminRole = Depends(get_role)):
    return NavigationResponse(
        role=role,
        display_name=role.display_name,
        sections=visible_sections(role),
    )


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Dashboard Summary",
    description="Summary cards; cards for sections the role cannot access are null."
)
def get_dashboard(
    role: AdminRole = Depends(get_role),
    user_id: Optional[str] = Depends(get_user_id),
    store: OperationsStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
    now: datetime = Depends(get_now),
):
    summary = DashboardService(store, settings.follow_up_after_days).summary(role, now, user_id)
    return DashboardResponse.model_validate(summary)
