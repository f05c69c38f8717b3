"""
Domain: Dashboard statistics (pure folds).

Every aggregator is a deterministic single pass over an already-normalized
collection. Anything time-dependent takes `now` / `today` explicitly, so the
same input always yields the same summary.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List

from .delivery import Delivery, DeliveryStatus
from .marketing_lead import InterestLevel, MarketingLead, MarketingLeadStatus
from .order import Order, OrderStatus
from .payments import ZERO, effective_value, round_half_up
from .permissions import AdminRole
from .pipeline import PipelineClient, PipelineStage
from .quote import LossReason, Quote, QuoteStatus
from .source import LeadSource
from .task import Task, TaskStatus
from .team import Notification, TeamMember
from .time import require_utc_timestamp

FOLLOW_UP_AFTER_DAYS = 14


def _zeroed(enum_cls) -> Dict:
    return {member: 0 for member in enum_cls}


def _percent(part: int, whole: int) -> Decimal:
    if whole == 0:
        return ZERO
    return round_half_up(Decimal(part) / Decimal(whole) * 100)


@dataclass(frozen=True, slots=True)
class PipelineStats:
    by_stage: Dict[PipelineStage, int]
    new_submissions: int
    active_deals: int
    total_pipeline_value: Decimal
    completed_this_month: int


def pipeline_stats(clients: Iterable[PipelineClient]) -> PipelineStats:
    """
    Fold pipeline clients into the board's summary cards.

    completed_this_month counts every completed client: the store keeps no
    completion timestamp to filter on.
    """

    by_stage = _zeroed(PipelineStage)
    new_submissions = 0
    active_deals = 0
    pipeline_value = ZERO
    completed = 0

    for client in clients:
        by_stage[client.stage] += 1
        if client.stage is PipelineStage.SUBMITTED:
            new_submissions += 1
        if client.is_active:
            active_deals += 1
            pipeline_value += effective_value(client.quote_value, client.selection_value)
        if client.stage is PipelineStage.COMPLETED:
            completed += 1

    return PipelineStats(
        by_stage=by_stage,
        new_submissions=new_submissions,
        active_deals=active_deals,
        total_pipeline_value=pipeline_value,
        completed_this_month=completed,
    )


@dataclass(frozen=True, slots=True)
class MarketingLeadStats:
    total: int
    by_interest: Dict[InterestLevel, int]
    by_status: Dict[MarketingLeadStatus, int]
    by_source: Dict[LeadSource, int]
    needs_follow_up: int

    @property
    def hot(self) -> int:
        return self.by_interest[InterestLevel.HOT]

    @property
    def warm(self) -> int:
        return self.by_interest[InterestLevel.WARM]

    @property
    def cold(self) -> int:
        return self.by_interest[InterestLevel.COLD]


def marketing_lead_stats(
    leads: Iterable[MarketingLead],
    now: datetime,
    follow_up_after_days: int = FOLLOW_UP_AFTER_DAYS,
) -> MarketingLeadStats:
    """A lead needs follow-up when its last activity is more than N days before `now`."""

    require_utc_timestamp("now", now)
    threshold = timedelta(days=follow_up_after_days)

    total = 0
    by_interest = _zeroed(InterestLevel)
    by_status = _zeroed(MarketingLeadStatus)
    by_source = _zeroed(LeadSource)
    needs_follow_up = 0

    for lead in leads:
        total += 1
        by_interest[lead.interest] += 1
        by_status[lead.status] += 1
        by_source[lead.source] += 1
        if now - lead.last_activity_at > threshold:
            needs_follow_up += 1

    return MarketingLeadStats(
        total=total,
        by_interest=by_interest,
        by_status=by_status,
        by_source=by_source,
        needs_follow_up=needs_follow_up,
    )


@dataclass(frozen=True, slots=True)
class LossReasonCount:
    reason: LossReason
    count: int
    percentage: Decimal


@dataclass(frozen=True, slots=True)
class QuoteStats:
    by_status: Dict[QuoteStatus, int]
    won: int
    lost: int
    win_rate: Decimal
    average_won_value: Decimal
    loss_reasons: List[LossReasonCount]
    open_value: Decimal
    awaiting_response: int


def quote_stats(quotes: Iterable[Quote], today: date) -> QuoteStats:
    """
    Win/loss summary: won = accepted, lost = rejected.

    winRate = won / (won + lost) * 100, 0 with no decided quotes.
    Loss reasons are sorted by count, descending; ties keep LossReason order.
    A rejected quote without a reason counts under "other".
    """

    by_status = _zeroed(QuoteStatus)
    won = 0
    lost = 0
    won_value = ZERO
    reasons: Counter = Counter()
    open_value = ZERO
    awaiting = 0

    for quote in quotes:
        status = quote.effective_status(today)
        by_status[status] += 1
        if status is QuoteStatus.ACCEPTED:
            won += 1
            won_value += quote.total
        elif status is QuoteStatus.REJECTED:
            lost += 1
            reasons[quote.loss_reason or LossReason.OTHER] += 1
        elif status.is_awaiting_response:
            awaiting += 1
            open_value += quote.total

    reason_order = list(LossReason)
    loss_reasons = [
        LossReasonCount(reason=reason, count=count, percentage=_percent(count, lost))
        for reason, count in sorted(reasons.items(), key=lambda item: (-item[1], reason_order.index(item[0])))
    ]

    return QuoteStats(
        by_status=by_status,
        won=won,
        lost=lost,
        win_rate=_percent(won, won + lost),
        average_won_value=round_half_up(won_value / won) if won else ZERO,
        loss_reasons=loss_reasons,
        open_value=open_value,
        awaiting_response=awaiting,
    )


@dataclass(frozen=True, slots=True)
class TaskStats:
    pending: int
    in_progress: int
    completed: int
    cancelled: int
    overdue: int


def task_stats(tasks: Iterable[Task], today: date) -> TaskStats:
    counts = _zeroed(TaskStatus)
    overdue = 0
    for task in tasks:
        counts[task.status] += 1
        if task.is_overdue(today):
            overdue += 1
    return TaskStats(
        pending=counts[TaskStatus.PENDING],
        in_progress=counts[TaskStatus.IN_PROGRESS],
        completed=counts[TaskStatus.COMPLETED],
        cancelled=counts[TaskStatus.CANCELLED],
        overdue=overdue,
    )


@dataclass(frozen=True, slots=True)
class DeliveryStats:
    by_status: Dict[DeliveryStatus, int]
    today: int


def delivery_stats(deliveries: Iterable[Delivery], today: date) -> DeliveryStats:
    by_status = _zeroed(DeliveryStatus)
    scheduled_today = 0
    for delivery in deliveries:
        by_status[delivery.status] += 1
        if delivery.is_scheduled_for(today):
            scheduled_today += 1
    return DeliveryStats(by_status=by_status, today=scheduled_today)


@dataclass(frozen=True, slots=True)
class OrderStats:
    by_status: Dict[OrderStatus, int]
    total_amount: Decimal
    total_deposits: Decimal
    in_progress: int


def order_stats(orders: Iterable[Order]) -> OrderStats:
    by_status = _zeroed(OrderStatus)
    total_amount = ZERO
    total_deposits = ZERO
    in_progress = 0
    for order in orders:
        by_status[order.status] += 1
        total_amount += order.total_amount
        total_deposits += order.deposit_paid
        if order.status.is_open:
            in_progress += 1
    return OrderStats(
        by_status=by_status,
        total_amount=total_amount,
        total_deposits=total_deposits,
        in_progress=in_progress,
    )


@dataclass(frozen=True, slots=True)
class TeamStats:
    by_role: Dict[AdminRole, int]
    total: int
    active: int


def team_stats(members: Iterable[TeamMember]) -> TeamStats:
    by_role = _zeroed(AdminRole)
    total = 0
    active = 0
    for member in members:
        total += 1
        by_role[member.role] += 1
        if member.is_active:
            active += 1
    return TeamStats(by_role=by_role, total=total, active=active)


def unread_count(notifications: Iterable[Notification]) -> int:
    return sum(1 for notification in notifications if not notification.read)


__all__ = [
    "DeliveryStats",
    "FOLLOW_UP_AFTER_DAYS",
    "LossReasonCount",
    "MarketingLeadStats",
    "OrderStats",
    "PipelineStats",
    "QuoteStats",
    "TaskStats",
    "TeamStats",
    "delivery_stats",
    "marketing_lead_stats",
    "order_stats",
    "pipeline_stats",
    "quote_stats",
    "task_stats",
    "team_stats",
    "unread_count",
]
