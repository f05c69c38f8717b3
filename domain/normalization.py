"""
Domain: Normalization of persisted status strings.

The store keeps statuses in free-text columns. This module is the single point
where an untrusted string becomes a member of the closed enums used everywhere
else. Rules:
- A known value (after stripping surrounding whitespace) maps to itself.
- An absent or unknown value degrades to a fixed default; nothing here raises.
- Legacy source "website" maps to website_signup.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Type, TypeVar

from .delivery import DeliveryStatus
from .marketing_lead import InterestLevel, NurturingStatus, OutreachOutcome, OutreachType
from .order import OrderStatus
from .permissions import AdminRole
from .pipeline import PipelineStage, Priority
from .quote import LossReason, QuoteStatus
from .source import LeadSource
from .task import RelatedType, TaskPriority, TaskStatus
from .team import NotificationType

E = TypeVar("E", bound=Enum)

_SOURCE_ALIASES: Mapping[str, LeadSource] = {
    "website": LeadSource.WEBSITE_SIGNUP,
}

# selection_submissions.status -> pipeline stage, used only when no pipeline row exists.
_SUBMISSION_STAGES: Mapping[str, PipelineStage] = {
    "confirmed": PipelineStage.DEPOSIT_PAID,
    "quoted": PipelineStage.QUOTED,
    "reviewed": PipelineStage.CONTACTED,
    "pending": PipelineStage.SUBMITTED,
}


def _lookup(enum_cls: Type[E], raw: Optional[str]) -> Optional[E]:
    if not isinstance(raw, str):
        return None
    try:
        return enum_cls(raw.strip())
    except ValueError:
        return None


def _normalize(enum_cls: Type[E], raw: Optional[str], default: E) -> E:
    member = _lookup(enum_cls, raw)
    return member if member is not None else default


def normalize_stage(raw: Optional[str]) -> PipelineStage:
    return _normalize(PipelineStage, raw, PipelineStage.SUBMITTED)


def normalize_priority(raw: Optional[str]) -> Priority:
    return _normalize(Priority, raw, Priority.NORMAL)


def normalize_interest(raw: Optional[str]) -> InterestLevel:
    return _normalize(InterestLevel, raw, InterestLevel.WARM)


def normalize_source(raw: Optional[str]) -> LeadSource:
    """Absent -> website_signup, legacy alias applied, anything else unknown -> other."""

    if not raw:
        return LeadSource.WEBSITE_SIGNUP
    member = _lookup(LeadSource, raw)
    if member is not None:
        return member
    return _SOURCE_ALIASES.get(raw.strip(), LeadSource.OTHER)


def normalize_task_priority(raw: Optional[str]) -> TaskPriority:
    return _normalize(TaskPriority, raw, TaskPriority.NORMAL)


def normalize_task_status(raw: Optional[str]) -> TaskStatus:
    return _normalize(TaskStatus, raw, TaskStatus.PENDING)


def normalize_quote_status(raw: Optional[str]) -> QuoteStatus:
    return _normalize(QuoteStatus, raw, QuoteStatus.DRAFT)


def normalize_loss_reason(raw: Optional[str]) -> Optional[LossReason]:
    if not raw:
        return None
    return _normalize(LossReason, raw, LossReason.OTHER)


def normalize_order_status(raw: Optional[str]) -> OrderStatus:
    return _normalize(OrderStatus, raw, OrderStatus.PENDING)


def normalize_delivery_status(raw: Optional[str]) -> DeliveryStatus:
    return _normalize(DeliveryStatus, raw, DeliveryStatus.SCHEDULED)


def normalize_outreach_type(raw: Optional[str]) -> OutreachType:
    return _normalize(OutreachType, raw, OutreachType.OTHER)


def normalize_outreach_outcome(raw: Optional[str]) -> OutreachOutcome:
    return _normalize(OutreachOutcome, raw, OutreachOutcome.FOLLOW_UP_NEEDED)


def normalize_nurturing_status(raw: Optional[str]) -> NurturingStatus:
    return _normalize(NurturingStatus, raw, NurturingStatus.ACTIVE)


def normalize_notification_type(raw: Optional[str]) -> NotificationType:
    return _normalize(NotificationType, raw, NotificationType.SYSTEM)


def normalize_related_type(raw: Optional[str]) -> Optional[RelatedType]:
    return _lookup(RelatedType, raw)


def normalize_role(raw: Optional[str]) -> Optional[AdminRole]:
    """Unknown roles normalize to None, which holds no permissions."""

    return _lookup(AdminRole, raw)


def infer_stage_from_submission(submission_status: Optional[str]) -> PipelineStage:
    if not isinstance(submission_status, str):
        return PipelineStage.SUBMITTED
    return _SUBMISSION_STAGES.get(submission_status.strip(), PipelineStage.SUBMITTED)


__all__ = [
    "infer_stage_from_submission",
    "normalize_delivery_status",
    "normalize_interest",
    "normalize_loss_reason",
    "normalize_notification_type",
    "normalize_nurturing_status",
    "normalize_order_status",
    "normalize_outreach_outcome",
    "normalize_outreach_type",
    "normalize_priority",
    "normalize_quote_status",
    "normalize_related_type",
    "normalize_role",
    "normalize_source",
    "normalize_stage",
    "normalize_task_priority",
    "normalize_task_status",
]
