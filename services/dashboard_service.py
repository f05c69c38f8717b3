"""
Dashboard home: the combined summary cards.

Each card is computed only when the viewer's role can access the section it
summarizes; inaccessible cards are None and their data is never read.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.permissions import AdminRole, can_access_section
from domain.stats import (
    FOLLOW_UP_AFTER_DAYS,
    DeliveryStats,
    MarketingLeadStats,
    OrderStats,
    PipelineStats,
    QuoteStats,
    TaskStats,
    delivery_stats,
    marketing_lead_stats,
    order_stats,
    pipeline_stats,
    quote_stats,
    task_stats,
    unread_count,
)
from domain.time import require_utc_timestamp
from repositories.store import OperationsStore
from services.marketing_lead_service import MarketingLeadService
from services.operations_service import OperationsService
from services.pipeline_service import PipelineService


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    pipeline: Optional[PipelineStats]
    leads: Optional[MarketingLeadStats]
    quotes: Optional[QuoteStats]
    orders: Optional[OrderStats]
    deliveries: Optional[DeliveryStats]
    tasks: TaskStats
    unread_notifications: int


class DashboardService:
    def __init__(self, store: OperationsStore, follow_up_after_days: int = FOLLOW_UP_AFTER_DAYS) -> None:
        self._pipeline = PipelineService(store)
        self._leads = MarketingLeadService(store)
        self._operations = OperationsService(store)
        self._follow_up_after_days = follow_up_after_days

    def summary(self, role: AdminRole, now: datetime, user_id: Optional[str] = None) -> DashboardSummary:
        require_utc_timestamp("now", now)
        today = now.date()
        sales = can_access_section(role, "clients")

        return DashboardSummary(
            pipeline=pipeline_stats(self._pipeline.fetch_pipeline_clients()) if sales else None,
            leads=(
                marketing_lead_stats(self._leads.fetch_marketing_leads(now), now, self._follow_up_after_days)
                if sales
                else None
            ),
            quotes=(
                quote_stats(self._operations.fetch_quotes(), today)
                if can_access_section(role, "quotes")
                else None
            ),
            orders=order_stats(self._operations.fetch_orders()) if can_access_section(role, "orders") else None,
            deliveries=(
                delivery_stats(self._operations.fetch_deliveries(), today)
                if can_access_section(role, "deliveries")
                else None
            ),
            tasks=task_stats(self._operations.fetch_tasks(), today),
            unread_notifications=unread_count(self._operations.fetch_notifications(user_id)),
        )


__all__ = ["DashboardService", "DashboardSummary"]
