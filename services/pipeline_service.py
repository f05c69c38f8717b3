"""
Pipeline service: the sales view of submitted clients.

Handles:
- Assembly of PipelineClient entities from submissions, profiles, pipeline
  rows, paid payments, admin users and quote totals
- Stage and priority writes (creating the pipeline row on first stage change)
- Payment recording

Reads degrade: a failed primary read yields an empty list, a failed secondary
read (payments, admin users, quotes) only blanks the fields it feeds.
Writes never raise; they log and return False on failure.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence

from domain.normalization import (
    infer_stage_from_submission,
    normalize_priority,
    normalize_source,
    normalize_stage,
)
from domain.payments import (
    PAID_STATUS,
    ZERO,
    PaymentRecord,
    PaymentType,
    payment_totals,
    selection_count,
    selection_value,
    to_decimal,
)
from domain.pipeline import PipelineClient, PipelineStage, Priority, display_name
from domain.source import LeadSource
from domain.time import parse_utc_datetime, to_iso_utc, utc_now
from repositories.rows import (
    AdminUserRow,
    PaymentRow,
    PipelineRow,
    ProfileRow,
    QuoteTotalRow,
    SubmissionRow,
)
from repositories.store import OperationsStore
from services.reads import read_or_empty
from services.selection import parse_selection_items

logger = logging.getLogger(__name__)


def _payment_record(row: PaymentRow) -> PaymentRecord:
    return PaymentRecord(
        payment_type=str(row.get("payment_type") or ""),
        amount=to_decimal(row.get("amount")) or ZERO,
        status=str(row.get("status") or ""),
    )


def assemble_pipeline_clients(
    submissions: Sequence[SubmissionRow],
    profiles: Sequence[ProfileRow],
    pipeline_rows: Sequence[PipelineRow],
    payments: Sequence[PaymentRow],
    admin_users: Sequence[AdminUserRow],
    quote_totals: Sequence[QuoteTotalRow],
) -> List[PipelineClient]:
    """
    Build one PipelineClient per submission, in submission order.

    Submissions whose profile is missing are skipped. The stage comes from the
    pipeline row when one exists, otherwise it is inferred from the submission
    status.
    """

    profiles_by_id: Dict[str, ProfileRow] = {row["id"]: row for row in profiles}
    pipeline_by_client: Dict[str, PipelineRow] = {row["client_id"]: row for row in pipeline_rows}
    admin_names: Dict[str, str] = {row["id"]: row.get("name", "") for row in admin_users}
    quote_values: Dict[str, Optional[Decimal]] = {
        row["id"]: to_decimal(row.get("total_amount")) for row in quote_totals
    }

    payments_by_client: Dict[str, List[PaymentRecord]] = {}
    for row in payments:
        payments_by_client.setdefault(row.get("client_id", ""), []).append(_payment_record(row))

    clients: List[PipelineClient] = []
    for submission in submissions:
        profile_id = submission.get("user_id", "")
        profile = profiles_by_id.get(profile_id)
        if profile is None:
            continue

        pipeline: Optional[PipelineRow] = pipeline_by_client.get(profile_id)
        items = parse_selection_items(submission.get("items"))
        value = selection_value(items)
        totals = payment_totals(payments_by_client.get(profile_id, []))

        if pipeline is not None and pipeline.get("stage"):
            stage = normalize_stage(pipeline.get("stage"))
        else:
            stage = infer_stage_from_submission(submission.get("status"))

        quote_id = pipeline.get("quote_id") if pipeline else None
        quote_value = quote_values.get(quote_id) if quote_id else None
        assigned_to = pipeline.get("assigned_to") if pipeline else None

        clients.append(
            PipelineClient(
                id=pipeline["id"] if pipeline and pipeline.get("id") else submission["id"],
                profile_id=profile_id,
                name=display_name(profile.get("first_name"), profile.get("last_name"), profile.get("email", "")),
                email=profile.get("email", ""),
                phone=profile.get("phone"),
                stage=stage,
                priority=normalize_priority(pipeline.get("priority") if pipeline else None),
                source=normalize_source(pipeline.get("source") if pipeline else None),
                account_number=profile.get("account_number"),
                selection_count=selection_count(items),
                selection_value=value,
                submitted_at=parse_utc_datetime(submission.get("created_at")),
                last_contacted_at=parse_utc_datetime(pipeline.get("last_contacted_at")) if pipeline else None,
                meeting_date=parse_utc_datetime(pipeline.get("meeting_date")) if pipeline else None,
                quote_id=quote_id,
                quote_value=quote_value,
                order_id=pipeline.get("order_id") if pipeline else None,
                deposit_paid=totals.deposit_paid,
                production_paid=totals.production_paid,
                final_paid=totals.final_paid,
                assigned_to=assigned_to,
                assigned_to_name=admin_names.get(assigned_to) if assigned_to else None,
                notes=pipeline.get("notes") if pipeline else None,
                filename=submission.get("filename"),
            )
        )

    return clients


class PipelineService:
    """Reads and writes for the client pipeline over an OperationsStore."""

    def __init__(self, store: OperationsStore) -> None:
        self._store = store

    def fetch_pipeline_clients(self) -> List[PipelineClient]:
        submissions = read_or_empty("submissions", self._store.list_submissions)
        if not submissions:
            return []

        profile_ids = list(dict.fromkeys(row["user_id"] for row in submissions if row.get("user_id")))
        profiles = read_or_empty("profiles", self._store.list_profiles, profile_ids)
        pipeline_rows = read_or_empty("pipeline entries", self._store.list_pipeline_entries, profile_ids)
        payments = read_or_empty("payments", self._store.list_paid_payments, profile_ids)
        admin_users = read_or_empty("admin users", self._store.list_admin_users)

        quote_ids = [row["quote_id"] for row in pipeline_rows if row.get("quote_id")]
        quote_totals = read_or_empty("quote totals", self._store.list_quote_totals, quote_ids)

        return assemble_pipeline_clients(
            submissions, profiles, pipeline_rows, payments, admin_users, quote_totals
        )

    def update_stage(
        self,
        pipeline_id: str,
        new_stage: PipelineStage,
        client_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> bool:
        """
        Persist a stage change.

        When no pipeline row has `pipeline_id` (the card still carries its
        submission id) and `client_id` is given, the client's existing pipeline
        row is updated instead, or a new row is created with priority normal and
        source website_signup.
        """

        timestamp = to_iso_utc(now or utc_now(), name="now")
        changes = {"stage": new_stage.value, "updated_at": timestamp}

        try:
            updated = self._store.update_pipeline_entry(pipeline_id, changes)
            if updated or not client_id:
                if not updated:
                    logger.warning(
                        f"No pipeline entry {pipeline_id} to move to {new_stage.value}",
                        extra={"pipeline_id": pipeline_id, "stage": new_stage.value},
                    )
                return bool(updated)

            existing = self._store.list_pipeline_entries([client_id])
            if existing:
                return bool(self._store.update_pipeline_entry(existing[0]["id"], changes))

            self._store.insert_pipeline_entry(
                {
                    "client_id": client_id,
                    "stage": new_stage.value,
                    "priority": Priority.NORMAL.value,
                    "source": LeadSource.WEBSITE_SIGNUP.value,
                }
            )
            logger.info(
                f"Created pipeline entry for client {client_id}",
                extra={"client_id": client_id, "stage": new_stage.value},
            )
            return True
        except RuntimeError as e:
            logger.error(
                f"Error updating pipeline stage: {e}",
                extra={"pipeline_id": pipeline_id, "client_id": client_id, "stage": new_stage.value},
            )
            return False

    def update_priority(self, pipeline_id: str, priority: Priority) -> bool:
        try:
            updated = self._store.update_pipeline_entry(pipeline_id, {"priority": priority.value})
        except RuntimeError as e:
            logger.error(
                f"Error updating pipeline priority: {e}",
                extra={"pipeline_id": pipeline_id, "priority": priority.value},
            )
            return False
        return bool(updated)

    def record_payment(
        self,
        client_id: str,
        pipeline_id: str,
        payment_type: PaymentType,
        amount: Decimal,
        reference: Optional[str] = None,
        paid_at: Optional[datetime] = None,
    ) -> bool:
        """Insert a paid payment record. Amounts must be positive."""

        if amount <= 0:
            logger.warning(
                f"Rejected non-positive payment amount {amount}",
                extra={"client_id": client_id, "payment_type": payment_type.value, "amount": str(amount)},
            )
            return False

        row: Mapping[str, Any] = {
            "client_id": client_id,
            "pipeline_id": pipeline_id,
            "payment_type": payment_type.value,
            "amount": str(amount),
            "status": PAID_STATUS,
            "paid_at": to_iso_utc(paid_at or utc_now(), name="paid_at"),
            "reference": reference,
        }
        try:
            self._store.insert_payment(row)
        except RuntimeError as e:
            logger.error(
                f"Error recording payment: {e}",
                extra={"client_id": client_id, "pipeline_id": pipeline_id, "payment_type": payment_type.value},
            )
            return False

        logger.info(
            f"Recorded {payment_type.value} payment of {amount} for client {client_id}",
            extra={"client_id": client_id, "payment_type": payment_type.value, "amount": str(amount)},
        )
        return True


__all__ = ["PipelineService", "assemble_pipeline_clients"]
