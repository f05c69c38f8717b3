"""
Domain: Sales pipeline stages and pipeline clients.

Rules implemented here:
- Stages follow a fixed total order:
  submitted < contacted < meeting_scheduled < quoted < deposit_paid
  < in_production < ready_delivery < completed
- `lost` is an absorbing state outside the linear order, reachable from any
  non-terminal stage by explicit action only.
- Terminal stages are completed and lost.
- totalPaid = depositPaid + productionPaid + finalPaid
- totalDue = (quoteValue ?? selectionValue) - totalPaid

PipelineClient is immutable; stage and payment changes return a new instance.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Mapping, Optional

from . import payments
from .source import LeadSource
from .time import require_optional_utc_timestamp


class PipelineStage(str, Enum):
    SUBMITTED = "submitted"
    CONTACTED = "contacted"
    MEETING_SCHEDULED = "meeting_scheduled"
    QUOTED = "quoted"
    DEPOSIT_PAID = "deposit_paid"
    IN_PRODUCTION = "in_production"
    READY_DELIVERY = "ready_delivery"
    COMPLETED = "completed"
    LOST = "lost"

    @property
    def label(self) -> str:
        return _STAGE_LABELS[self]

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineStage.COMPLETED, PipelineStage.LOST)

    def next_stage(self) -> Optional["PipelineStage"]:
        """
        The only stage offered by "move to next stage".

        Returns None for completed (end of the order) and lost (outside it).
        """

        if self is PipelineStage.LOST:
            return None
        index = STAGE_ORDER.index(self)
        if index + 1 >= len(STAGE_ORDER):
            return None
        return STAGE_ORDER[index + 1]

    def can_mark_lost(self) -> bool:
        return not self.is_terminal


# Linear order; lost is deliberately absent.
STAGE_ORDER: List[PipelineStage] = [
    PipelineStage.SUBMITTED,
    PipelineStage.CONTACTED,
    PipelineStage.MEETING_SCHEDULED,
    PipelineStage.QUOTED,
    PipelineStage.DEPOSIT_PAID,
    PipelineStage.IN_PRODUCTION,
    PipelineStage.READY_DELIVERY,
    PipelineStage.COMPLETED,
]

_STAGE_LABELS: Mapping[PipelineStage, str] = {
    PipelineStage.SUBMITTED: "Submitted",
    PipelineStage.CONTACTED: "Contacted",
    PipelineStage.MEETING_SCHEDULED: "Meeting Scheduled",
    PipelineStage.QUOTED: "Quoted",
    PipelineStage.DEPOSIT_PAID: "Deposit Paid",
    PipelineStage.IN_PRODUCTION: "In Production",
    PipelineStage.READY_DELIVERY: "Ready for Delivery",
    PipelineStage.COMPLETED: "Completed",
    PipelineStage.LOST: "Lost",
}


class Priority(str, Enum):
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


@dataclass(frozen=True, slots=True)
class PipelineClient:
    """
    A prospect whose selection has been submitted and who is moving through sales.

    `id` is the pipeline row id, or the submission id while no pipeline row
    exists yet. Payment fields are the sums of paid records (0 when none);
    total paid and total due are derived from them and never stored.
    """

    id: str
    profile_id: str
    name: str
    email: str
    stage: PipelineStage
    priority: Priority
    source: LeadSource
    selection_count: int
    selection_value: Decimal
    submitted_at: Optional[datetime]

    phone: Optional[str] = None
    account_number: Optional[str] = None

    last_contacted_at: Optional[datetime] = None
    meeting_date: Optional[datetime] = None

    quote_id: Optional[str] = None
    quote_value: Optional[Decimal] = None
    order_id: Optional[str] = None

    deposit_paid: Decimal = Decimal("0")
    production_paid: Decimal = Decimal("0")
    final_paid: Decimal = Decimal("0")

    assigned_to: Optional[str] = None
    assigned_to_name: Optional[str] = None

    notes: Optional[str] = None
    filename: Optional[str] = None

    def __post_init__(self) -> None:
        require_optional_utc_timestamp("submitted_at", self.submitted_at)
        require_optional_utc_timestamp("last_contacted_at", self.last_contacted_at)
        require_optional_utc_timestamp("meeting_date", self.meeting_date)

    @property
    def total_paid(self) -> Decimal:
        return payments.total_paid(self.deposit_paid, self.production_paid, self.final_paid)

    @property
    def total_due(self) -> Decimal:
        return payments.total_due(self.quote_value, self.selection_value, self.total_paid)

    @property
    def is_active(self) -> bool:
        """Active deals are every stage except completed and lost."""
        return not self.stage.is_terminal

    def with_stage(self, stage: PipelineStage) -> "PipelineClient":
        return replace(self, stage=stage)

    def with_priority(self, priority: Priority) -> "PipelineClient":
        return replace(self, priority=priority)


def display_name(first_name: Optional[str], last_name: Optional[str], email: str) -> str:
    """`first last` with blank parts dropped, else the local part of the e-mail."""

    joined = " ".join(part for part in (first_name, last_name) if part)
    return joined or email.split("@")[0]


__all__ = [
    "PipelineClient",
    "PipelineStage",
    "Priority",
    "STAGE_ORDER",
    "display_name",
]
