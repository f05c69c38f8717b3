"""
Tests for `domain/normalization.py`.

Covers contract rules:
- Known values (whitespace stripped) map to themselves.
- Absent or unknown values degrade to a fixed default and never raise.
- Legacy source "website" maps to website_signup.
- Stage inference from the submission status when no pipeline row exists.
"""

from __future__ import annotations

import pytest

from domain.delivery import DeliveryStatus
from domain.marketing_lead import InterestLevel, NurturingStatus, OutreachOutcome, OutreachType
from domain.normalization import (
    infer_stage_from_submission,
    normalize_delivery_status,
    normalize_interest,
    normalize_loss_reason,
    normalize_notification_type,
    normalize_nurturing_status,
    normalize_order_status,
    normalize_outreach_outcome,
    normalize_outreach_type,
    normalize_priority,
    normalize_quote_status,
    normalize_related_type,
    normalize_role,
    normalize_source,
    normalize_stage,
    normalize_task_priority,
    normalize_task_status,
)
from domain.order import OrderStatus
from domain.permissions import AdminRole
from domain.pipeline import PipelineStage, Priority
from domain.quote import LossReason, QuoteStatus
from domain.source import LeadSource
from domain.task import RelatedType, TaskPriority, TaskStatus
from domain.team import NotificationType


def test_known_stage_maps_to_itself() -> None:
    assert normalize_stage("quoted") is PipelineStage.QUOTED
    assert normalize_stage("  in_production ") is PipelineStage.IN_PRODUCTION


@pytest.mark.parametrize("raw", [None, "", "negotiating", "QUOTED", 7])
def test_unknown_stage_defaults_to_submitted(raw) -> None:
    assert normalize_stage(raw) is PipelineStage.SUBMITTED


def test_priority_defaults_to_normal() -> None:
    assert normalize_priority("urgent") is Priority.URGENT
    assert normalize_priority("low") is Priority.NORMAL
    assert normalize_priority(None) is Priority.NORMAL


def test_interest_defaults_to_warm() -> None:
    assert normalize_interest("hot") is InterestLevel.HOT
    assert normalize_interest(None) is InterestLevel.WARM
    assert normalize_interest("lukewarm") is InterestLevel.WARM


def test_source_normalization() -> None:
    assert normalize_source("referral") is LeadSource.REFERRAL
    assert normalize_source(None) is LeadSource.WEBSITE_SIGNUP
    assert normalize_source("") is LeadSource.WEBSITE_SIGNUP
    assert normalize_source("website") is LeadSource.WEBSITE_SIGNUP
    assert normalize_source("instagram") is LeadSource.OTHER


def test_status_defaults() -> None:
    assert normalize_task_status(None) is TaskStatus.PENDING
    assert normalize_task_priority("whenever") is TaskPriority.NORMAL
    assert normalize_quote_status("lost") is QuoteStatus.DRAFT
    assert normalize_order_status(None) is OrderStatus.PENDING
    assert normalize_order_status("partially_received") is OrderStatus.PARTIALLY_RECEIVED
    assert normalize_delivery_status("lost_in_post") is DeliveryStatus.SCHEDULED
    assert normalize_outreach_type("fax") is OutreachType.OTHER
    assert normalize_outreach_outcome(None) is OutreachOutcome.FOLLOW_UP_NEEDED
    assert normalize_notification_type("expiry") is NotificationType.SYSTEM


def test_nurturing_status_defaults_to_active() -> None:
    assert normalize_nurturing_status(None) is NurturingStatus.ACTIVE
    assert normalize_nurturing_status("ghosted") is NurturingStatus.ACTIVE
    assert normalize_nurturing_status(" do_not_contact ") is NurturingStatus.DO_NOT_CONTACT
    assert NurturingStatus.DO_NOT_CONTACT.label == "Do Not Contact"
    assert NurturingStatus.NOT_INTERESTED.label == "Not Interested"


def test_loss_reason_absent_is_none_and_unknown_is_other() -> None:
    assert normalize_loss_reason(None) is None
    assert normalize_loss_reason("") is None
    assert normalize_loss_reason("timing") is LossReason.TIMING
    assert normalize_loss_reason("moved abroad") is LossReason.OTHER


def test_optional_lookups_return_none_for_unknown() -> None:
    assert normalize_role("sales") is AdminRole.SALES
    assert normalize_role("superuser") is None
    assert normalize_role(None) is None
    assert normalize_related_type("order") is RelatedType.ORDER
    assert normalize_related_type("invoice") is None


@pytest.mark.parametrize(
    "status, stage",
    [
        ("confirmed", PipelineStage.DEPOSIT_PAID),
        ("quoted", PipelineStage.QUOTED),
        ("reviewed", PipelineStage.CONTACTED),
        ("pending", PipelineStage.SUBMITTED),
        ("archived", PipelineStage.SUBMITTED),
        (None, PipelineStage.SUBMITTED),
    ],
)
def test_stage_inferred_from_submission_status(status, stage) -> None:
    assert infer_stage_from_submission(status) is stage
