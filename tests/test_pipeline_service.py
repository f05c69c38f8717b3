"""
Tests for `services/pipeline_service.py` over the development dataset.

Covers contract rules:
- One client per submission with an existing profile, newest first.
- Stage from the pipeline row, else inferred from the submission status.
- Quote value overrides the selection value; only paid payments count.
- Stage writes fall back to the client's pipeline row or create one.
- Writes never raise: failures log and return False.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from conftest import NOW
from domain.payments import PaymentType
from domain.pipeline import PipelineStage, Priority
from domain.source import LeadSource
from repositories.fixture_store import FixtureStore
from services.pipeline_service import PipelineService, assemble_pipeline_clients


class FailingStore(FixtureStore):
    """Fixture store whose writes (and optionally reads) raise like the Supabase store."""

    def __init__(self, failing_reads=()) -> None:
        super().__init__()
        self._failing_reads = set(failing_reads)

    def _fail(self, action: str):
        raise RuntimeError(f"Failed to {action}: connection refused")

    def update_pipeline_entry(self, pipeline_id, changes):
        self._fail("update pipeline entry")

    def insert_payment(self, row):
        self._fail("insert payment")

    def list_paid_payments(self, client_ids):
        if "payments" in self._failing_reads:
            self._fail("list payments")
        return super().list_paid_payments(client_ids)

    def list_submissions(self):
        if "submissions" in self._failing_reads:
            self._fail("list submissions")
        return super().list_submissions()


def _by_profile(clients):
    return {client.profile_id: client for client in clients}


def test_fetch_skips_submissions_without_profile(fixture_store: FixtureStore) -> None:
    clients = PipelineService(fixture_store).fetch_pipeline_clients()

    assert [client.profile_id for client in clients] == [
        "p-anderson",
        "p-mitchell",
        "p-richardson",
        "p-wilson",
        "p-thompson",
        "p-brown",
    ]


def test_richardson_derived_fields(fixture_store: FixtureStore) -> None:
    client = _by_profile(PipelineService(fixture_store).fetch_pipeline_clients())["p-richardson"]

    assert client.id == "pl-richardson"
    assert client.name == "James Richardson"
    assert client.stage is PipelineStage.QUOTED
    assert client.priority is Priority.HIGH
    assert client.selection_value == Decimal("14900")
    assert client.selection_count == 3
    assert client.quote_value == Decimal("14400")
    assert client.deposit_paid == Decimal("2880")
    assert client.production_paid == Decimal("0")
    assert client.total_paid == Decimal("2880")
    assert client.total_due == Decimal("11520")
    assert client.assigned_to_name == "Sarah Johnson"
    assert client.submitted_at == datetime(2024, 12, 15, 10, 0, tzinfo=NOW.tzinfo)


def test_client_without_pipeline_row_uses_submission(fixture_store: FixtureStore) -> None:
    client = _by_profile(PipelineService(fixture_store).fetch_pipeline_clients())["p-mitchell"]

    assert client.id == "sub-mitchell"
    assert client.stage is PipelineStage.CONTACTED
    assert client.priority is Priority.NORMAL
    assert client.source is LeadSource.WEBSITE_SIGNUP
    assert client.quote_value is None
    assert client.total_due == Decimal("16100")


def test_irregular_rows_are_normalized(fixture_store: FixtureStore) -> None:
    clients = _by_profile(PipelineService(fixture_store).fetch_pipeline_clients())

    anderson = clients["p-anderson"]
    assert anderson.stage is PipelineStage.SUBMITTED
    assert anderson.priority is Priority.NORMAL
    assert anderson.name == "lisa"
    assert anderson.assigned_to == "admin-9"
    assert anderson.assigned_to_name is None

    wilson = clients["p-wilson"]
    assert wilson.stage is PipelineStage.LOST
    assert wilson.selection_value == Decimal("8400")
    assert wilson.selection_count == 3


def test_fully_paid_client(fixture_store: FixtureStore) -> None:
    brown = _by_profile(PipelineService(fixture_store).fetch_pipeline_clients())["p-brown"]

    assert brown.stage is PipelineStage.COMPLETED
    assert brown.final_paid == Decimal("550")
    assert brown.total_paid == Decimal("5500")
    assert brown.total_due == Decimal("0")


def test_failed_payment_read_blanks_payment_fields_only(caplog) -> None:
    service = PipelineService(FailingStore(failing_reads={"payments"}))

    with caplog.at_level(logging.ERROR):
        clients = _by_profile(service.fetch_pipeline_clients())

    assert len(clients) == 6
    assert clients["p-thompson"].total_paid == Decimal("0")
    assert clients["p-thompson"].total_due == Decimal("15600")
    assert "Error fetching payments" in caplog.text


def test_failed_submission_read_yields_empty_list() -> None:
    assert PipelineService(FailingStore(failing_reads={"submissions"})).fetch_pipeline_clients() == []


def test_assemble_without_rows() -> None:
    assert assemble_pipeline_clients([], [], [], [], [], []) == []


def test_update_stage_updates_existing_row(fixture_store: FixtureStore) -> None:
    service = PipelineService(fixture_store)

    assert service.update_stage("pl-richardson", PipelineStage.DEPOSIT_PAID, now=NOW)

    row = next(r for r in fixture_store.table("client_pipeline") if r["id"] == "pl-richardson")
    assert row["stage"] == "deposit_paid"
    assert row["updated_at"] == NOW.isoformat()


def test_update_stage_creates_row_for_submission_only_client(fixture_store: FixtureStore) -> None:
    service = PipelineService(fixture_store)

    assert service.update_stage("sub-mitchell", PipelineStage.MEETING_SCHEDULED, client_id="p-mitchell")

    rows = [r for r in fixture_store.table("client_pipeline") if r["client_id"] == "p-mitchell"]
    assert len(rows) == 1
    assert rows[0]["stage"] == "meeting_scheduled"
    assert rows[0]["priority"] == "normal"
    assert rows[0]["source"] == "website_signup"

    moved = _by_profile(service.fetch_pipeline_clients())["p-mitchell"]
    assert moved.id == rows[0]["id"]
    assert moved.stage is PipelineStage.MEETING_SCHEDULED


def test_update_stage_with_stale_id_reuses_existing_row(fixture_store: FixtureStore) -> None:
    service = PipelineService(fixture_store)

    assert service.update_stage("sub-richardson", PipelineStage.IN_PRODUCTION, client_id="p-richardson")

    rows = [r for r in fixture_store.table("client_pipeline") if r["client_id"] == "p-richardson"]
    assert len(rows) == 1
    assert rows[0]["stage"] == "in_production"


def test_update_stage_unknown_row_without_client_returns_false(fixture_store: FixtureStore) -> None:
    assert not PipelineService(fixture_store).update_stage("pl-missing", PipelineStage.QUOTED)


def test_update_stage_failure_returns_false(caplog) -> None:
    store = FailingStore()

    with caplog.at_level(logging.ERROR):
        assert not PipelineService(store).update_stage("sub-mitchell", PipelineStage.QUOTED, client_id="p-mitchell")

    assert "Error updating pipeline stage" in caplog.text
    assert not [r for r in store.table("client_pipeline") if r["client_id"] == "p-mitchell"]


def test_update_priority(fixture_store: FixtureStore) -> None:
    service = PipelineService(fixture_store)

    assert service.update_priority("pl-wilson", Priority.URGENT)
    assert not service.update_priority("pl-missing", Priority.URGENT)
    assert not PipelineService(FailingStore()).update_priority("pl-wilson", Priority.URGENT)


def test_record_payment_counts_toward_totals(fixture_store: FixtureStore) -> None:
    service = PipelineService(fixture_store)

    assert service.record_payment(
        "p-richardson", "pl-richardson", PaymentType.PRODUCTION, Decimal("10080"), reference="BACS-10080", paid_at=NOW
    )

    richardson = _by_profile(service.fetch_pipeline_clients())["p-richardson"]
    assert richardson.production_paid == Decimal("10080")
    assert richardson.total_paid == Decimal("12960")
    assert richardson.total_due == Decimal("1440")


def test_record_payment_rejects_non_positive_amount(fixture_store: FixtureStore) -> None:
    service = PipelineService(fixture_store)
    before = len(fixture_store.table("client_payments"))

    assert not service.record_payment("p-brown", "pl-brown", PaymentType.DEPOSIT, Decimal("0"))
    assert not service.record_payment("p-brown", "pl-brown", PaymentType.DEPOSIT, Decimal("-5"))
    assert len(fixture_store.table("client_payments")) == before


def test_record_payment_failure_returns_false() -> None:
    assert not PipelineService(FailingStore()).record_payment(
        "p-brown", "pl-brown", PaymentType.DELIVERY, Decimal("550")
    )
