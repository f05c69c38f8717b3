"""
Tests for `domain/stats.py`.

Covers contract rules:
- Pipeline counts per stage, active deals, pipeline value over active deals.
- Lead follow-up threshold is strictly more than N days of inactivity.
- Win rate over decided quotes only, 0 with none decided.
- Aggregators are deterministic folds over their input.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from conftest import NOW, make_client
from domain.delivery import Delivery, DeliveryStatus
from domain.marketing_lead import InterestLevel, MarketingLead, MarketingLeadStatus
from domain.order import Order, OrderStatus
from domain.pipeline import PipelineStage
from domain.quote import LossReason, Quote, QuoteStatus
from domain.source import LeadSource
from domain.stats import (
    delivery_stats,
    marketing_lead_stats,
    order_stats,
    pipeline_stats,
    quote_stats,
    task_stats,
)
from domain.task import Task, TaskPriority, TaskStatus

TODAY = date(2024, 12, 23)


def _lead(lead_id: str, days_idle: float, interest=InterestLevel.WARM, source=LeadSource.REFERRAL) -> MarketingLead:
    return MarketingLead(
        id=lead_id,
        name=lead_id,
        email=f"{lead_id}@example.com",
        source=source,
        status=MarketingLeadStatus.REGISTERED,
        interest=interest,
        selection_count=0,
        selection_value=Decimal("0"),
        created_at=NOW - timedelta(days=60),
        last_activity_at=NOW - timedelta(days=days_idle),
    )


def _quote(quote_id: str, status: QuoteStatus, total: str, reason=None, valid_until=date(2025, 1, 31)) -> Quote:
    return Quote(
        id=quote_id,
        quote_number=f"Q-{quote_id}",
        client_name="Client",
        client_email="client@example.com",
        status=status,
        items=(),
        subtotal=Decimal(total),
        discount=Decimal("0"),
        total=Decimal(total),
        valid_until=valid_until,
        created_at=NOW - timedelta(days=10),
        loss_reason=reason,
    )


def test_pipeline_stats_counts_by_stage() -> None:
    clients = [
        make_client("a", PipelineStage.SUBMITTED),
        make_client("b", PipelineStage.SUBMITTED),
        make_client("c", PipelineStage.QUOTED),
        make_client("d", PipelineStage.COMPLETED),
        make_client("e", PipelineStage.LOST),
    ]

    stats = pipeline_stats(clients)

    assert stats.by_stage[PipelineStage.SUBMITTED] == 2
    assert stats.by_stage[PipelineStage.QUOTED] == 1
    assert stats.by_stage[PipelineStage.IN_PRODUCTION] == 0
    assert stats.active_deals == 3
    assert stats.new_submissions == 2
    assert stats.completed_this_month == 1


def test_pipeline_value_prefers_quote_and_skips_closed_deals() -> None:
    clients = [
        make_client("a", PipelineStage.SUBMITTED, selection_value="14900", quote_value="14400"),
        make_client("b", PipelineStage.CONTACTED, selection_value="5000"),
        make_client("c", PipelineStage.COMPLETED, selection_value="99999"),
        make_client("d", PipelineStage.LOST, selection_value="88888"),
    ]

    assert pipeline_stats(clients).total_pipeline_value == Decimal("19400")


def test_pipeline_stats_of_nothing() -> None:
    stats = pipeline_stats([])

    assert stats.active_deals == 0
    assert stats.total_pipeline_value == Decimal("0")
    assert set(stats.by_stage.values()) == {0}


def test_marketing_lead_stats() -> None:
    leads = [
        _lead("hot-fresh", 1, InterestLevel.HOT),
        _lead("warm-exactly-14", 14),
        _lead("cold-idle", 15, InterestLevel.COLD, LeadSource.SOCIAL),
    ]

    stats = marketing_lead_stats(leads, NOW)

    assert stats.total == 3
    assert (stats.hot, stats.warm, stats.cold) == (1, 1, 1)
    assert stats.by_status[MarketingLeadStatus.REGISTERED] == 3
    assert stats.by_source[LeadSource.REFERRAL] == 2
    assert stats.by_source[LeadSource.SOCIAL] == 1
    assert stats.needs_follow_up == 1


def test_follow_up_threshold_is_configurable() -> None:
    leads = [_lead("a", 3), _lead("b", 8)]

    assert marketing_lead_stats(leads, NOW, follow_up_after_days=7).needs_follow_up == 1


def test_marketing_lead_stats_require_utc_now() -> None:
    with pytest.raises(ValueError):
        marketing_lead_stats([], datetime(2024, 12, 23, 10, 0))


def test_win_rate_three_won_one_lost() -> None:
    quotes = [
        _quote("1", QuoteStatus.ACCEPTED, "1000"),
        _quote("2", QuoteStatus.ACCEPTED, "2000"),
        _quote("3", QuoteStatus.ACCEPTED, "3000"),
        _quote("4", QuoteStatus.REJECTED, "500", LossReason.PRICE_TOO_HIGH),
    ]

    stats = quote_stats(quotes, TODAY)

    assert stats.won == 3
    assert stats.lost == 1
    assert stats.win_rate == Decimal("75")
    assert stats.average_won_value == Decimal("2000")


def test_win_rate_is_zero_with_no_decided_quotes() -> None:
    stats = quote_stats([_quote("1", QuoteStatus.SENT, "1000")], TODAY)

    assert stats.win_rate == Decimal("0")
    assert stats.average_won_value == Decimal("0")
    assert stats.loss_reasons == []


def test_loss_reasons_sorted_by_count_with_percentages() -> None:
    quotes = [
        _quote("1", QuoteStatus.REJECTED, "1", LossReason.TIMING),
        _quote("2", QuoteStatus.REJECTED, "1", LossReason.PRICE_TOO_HIGH),
        _quote("3", QuoteStatus.REJECTED, "1", LossReason.PRICE_TOO_HIGH),
        _quote("4", QuoteStatus.REJECTED, "1"),
    ]

    reasons = quote_stats(quotes, TODAY).loss_reasons

    assert [(r.reason, r.count) for r in reasons] == [
        (LossReason.PRICE_TOO_HIGH, 2),
        (LossReason.TIMING, 1),
        (LossReason.OTHER, 1),
    ]
    assert [r.percentage for r in reasons] == [Decimal("50"), Decimal("25"), Decimal("25")]


def test_expired_quotes_are_not_awaiting_response() -> None:
    quotes = [
        _quote("1", QuoteStatus.SENT, "1000"),
        _quote("2", QuoteStatus.VIEWED, "2000"),
        _quote("3", QuoteStatus.SENT, "4000", valid_until=date(2024, 12, 1)),
    ]

    stats = quote_stats(quotes, TODAY)

    assert stats.awaiting_response == 2
    assert stats.open_value == Decimal("3000")
    assert stats.by_status[QuoteStatus.EXPIRED] == 1


def test_task_stats() -> None:
    tasks = [
        Task(id="1", title="a", status=TaskStatus.PENDING, priority=TaskPriority.HIGH, due_date=date(2024, 12, 20)),
        Task(id="2", title="b", status=TaskStatus.COMPLETED, priority=TaskPriority.LOW, due_date=date(2024, 12, 1)),
        Task(id="3", title="c", status=TaskStatus.IN_PROGRESS, priority=TaskPriority.NORMAL, due_date=TODAY),
        Task(id="4", title="d", status=TaskStatus.CANCELLED, priority=TaskPriority.NORMAL, due_date=None),
    ]

    stats = task_stats(tasks, TODAY)

    assert (stats.pending, stats.in_progress, stats.completed, stats.cancelled) == (1, 1, 1, 1)
    assert stats.overdue == 1


def test_delivery_stats_count_today() -> None:
    def delivery(delivery_id: str, day, status=DeliveryStatus.SCHEDULED) -> Delivery:
        return Delivery(
            id=delivery_id,
            delivery_number=f"DEL-{delivery_id}",
            order_number="HOC-1",
            client_name="Client",
            address="1 Street",
            scheduled_date=day,
            time_window="AM",
            status=status,
            item_count=1,
        )

    stats = delivery_stats(
        [delivery("1", TODAY), delivery("2", TODAY, DeliveryStatus.IN_TRANSIT), delivery("3", None)],
        TODAY,
    )

    assert stats.today == 2
    assert stats.by_status[DeliveryStatus.SCHEDULED] == 2


def test_order_stats() -> None:
    def order(order_id: str, status: OrderStatus, total: str, deposit: str) -> Order:
        return Order(
            id=order_id,
            order_number=f"HOC-{order_id}",
            client_name="Client",
            client_email="client@example.com",
            status=status,
            items=(),
            total_amount=Decimal(total),
            deposit_paid=Decimal(deposit),
            created_at=datetime(2024, 12, 1, tzinfo=timezone.utc),
        )

    stats = order_stats(
        [
            order("1", OrderStatus.PROCESSING, "1000", "300"),
            order("2", OrderStatus.DELIVERED, "500", "500"),
            order("3", OrderStatus.CANCELLED, "200", "0"),
        ]
    )

    assert stats.total_amount == Decimal("1700")
    assert stats.total_deposits == Decimal("800")
    assert stats.in_progress == 1


def test_stats_are_deterministic() -> None:
    clients = [make_client("a", PipelineStage.QUOTED, quote_value="100"), make_client("b")]

    assert pipeline_stats(clients) == pipeline_stats(list(clients))
