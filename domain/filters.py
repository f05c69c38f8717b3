"""
Domain: List filters for the leads and pipeline views (pure).

Rules implemented here:
- Search is case-insensitive and matches a substring of the name or e-mail.
- Every other criterion is an exact enum match; None means "all".
- Lead activity: "active" keeps leads with activity within the last 7 days,
  "stale" keeps leads idle for more than 14 days.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from .marketing_lead import InterestLevel, MarketingLead, MarketingLeadStatus
from .pipeline import PipelineClient, PipelineStage, Priority
from .source import LeadSource
from .time import require_utc_timestamp

ACTIVE_WITHIN_DAYS = 7
STALE_AFTER_DAYS = 14


class ActivityFilter(str, Enum):
    ACTIVE = "active"
    STALE = "stale"


def _matches_search(query: Optional[str], *fields: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return any(needle in field.lower() for field in fields)


@dataclass(frozen=True, slots=True)
class LeadFilter:
    search: Optional[str] = None
    source: Optional[LeadSource] = None
    status: Optional[MarketingLeadStatus] = None
    interest: Optional[InterestLevel] = None
    activity: Optional[ActivityFilter] = None

    def matches(self, lead: MarketingLead, now: datetime) -> bool:
        if not _matches_search(self.search, lead.name, lead.email):
            return False
        if self.source is not None and lead.source is not self.source:
            return False
        if self.status is not None and lead.status is not self.status:
            return False
        if self.interest is not None and lead.interest is not self.interest:
            return False
        if self.activity is not None:
            days_since = (now - lead.last_activity_at).days
            if self.activity is ActivityFilter.ACTIVE and days_since > ACTIVE_WITHIN_DAYS:
                return False
            if self.activity is ActivityFilter.STALE and days_since <= STALE_AFTER_DAYS:
                return False
        return True


@dataclass(frozen=True, slots=True)
class PipelineFilter:
    search: Optional[str] = None
    stage: Optional[PipelineStage] = None
    priority: Optional[Priority] = None

    def matches(self, client: PipelineClient) -> bool:
        if not _matches_search(self.search, client.name, client.email):
            return False
        if self.stage is not None and client.stage is not self.stage:
            return False
        if self.priority is not None and client.priority is not self.priority:
            return False
        return True


def filter_marketing_leads(leads: Iterable[MarketingLead], criteria: LeadFilter, now: datetime) -> List[MarketingLead]:
    require_utc_timestamp("now", now)
    return [lead for lead in leads if criteria.matches(lead, now)]


def filter_pipeline_clients(clients: Iterable[PipelineClient], criteria: PipelineFilter) -> List[PipelineClient]:
    return [client for client in clients if criteria.matches(client)]


__all__ = [
    "ActivityFilter",
    "LeadFilter",
    "PipelineFilter",
    "filter_marketing_leads",
    "filter_pipeline_clients",
]
