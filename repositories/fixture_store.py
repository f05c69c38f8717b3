"""
In-memory operations store over the development dataset.

Reads return copies of the rows with the same filters and ordering as the
Supabase store; writes mutate the in-memory tables so a running development
server reflects them until restart.
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence
from uuid import uuid4

from .fixtures import development_dataset
from .rows import (
    AdminUserRow,
    DeliveryRow,
    NewsletterRow,
    NotificationRow,
    OrderRow,
    OutreachRow,
    PaymentRow,
    PipelineRow,
    ProfileRow,
    QuoteRow,
    QuoteTotalRow,
    SelectionRow,
    SubmissionRow,
    TaskRow,
)

Table = List[Dict[str, Any]]


def _newest_first(rows: Table, column: str) -> Table:
    return sorted(rows, key=lambda row: row.get(column) or "", reverse=True)


def _oldest_first(rows: Table, column: str) -> Table:
    return sorted(rows, key=lambda row: row.get(column) or "")


class FixtureStore:
    """OperationsStore over in-memory tables keyed by Supabase table name."""

    def __init__(self, tables: Optional[Mapping[str, Table]] = None) -> None:
        self._tables: Dict[str, Table] = (
            copy.deepcopy(dict(tables)) if tables is not None else development_dataset()
        )

    def _table(self, name: str) -> Table:
        return self._tables.setdefault(name, [])

    def _select(self, name: str) -> Table:
        return copy.deepcopy(self._table(name))

    def _update(self, name: str, key: str, value: str, changes: Mapping[str, Any]) -> int:
        updated = 0
        for row in self._table(name):
            if row.get(key) == value:
                row.update(changes)
                updated += 1
        return updated

    # Reads

    def list_submissions(self) -> List[SubmissionRow]:
        return _newest_first(self._select("selection_submissions"), "created_at")  # type: ignore[return-value]

    def list_profiles(self, profile_ids: Optional[Sequence[str]] = None) -> List[ProfileRow]:
        rows = self._select("profiles")
        if profile_ids is not None:
            wanted = set(profile_ids)
            rows = [row for row in rows if row.get("id") in wanted]
        return rows  # type: ignore[return-value]

    def list_pipeline_entries(self, client_ids: Sequence[str]) -> List[PipelineRow]:
        wanted = set(client_ids)
        return [row for row in self._select("client_pipeline") if row.get("client_id") in wanted]  # type: ignore[misc]

    def list_paid_payments(self, client_ids: Sequence[str]) -> List[PaymentRow]:
        wanted = set(client_ids)
        return [
            row
            for row in self._select("client_payments")
            if row.get("client_id") in wanted and row.get("status") == "paid"
        ]  # type: ignore[misc]

    def list_admin_users(self) -> List[AdminUserRow]:
        return self._select("admin_users")  # type: ignore[return-value]

    def list_quote_totals(self, quote_ids: Sequence[str]) -> List[QuoteTotalRow]:
        wanted = set(quote_ids)
        return [
            {"id": row["id"], "total_amount": row.get("total_amount")}
            for row in self._select("quotes")
            if row.get("id") in wanted
        ]

    def list_selections(self) -> List[SelectionRow]:
        return self._select("client_selections")  # type: ignore[return-value]

    def list_newsletter_leads(self) -> List[NewsletterRow]:
        return [
            row
            for row in self._select("newsletter_subscribers")
            if row.get("is_active") is True and row.get("converted_to_account") is False
        ]  # type: ignore[misc]

    def list_outreach(self) -> List[OutreachRow]:
        return _newest_first(self._select("lead_outreach"), "created_at")  # type: ignore[return-value]

    def list_quotes(self) -> List[QuoteRow]:
        return _newest_first(self._select("quotes"), "created_at")  # type: ignore[return-value]

    def list_orders(self) -> List[OrderRow]:
        return _newest_first(self._select("orders"), "created_at")  # type: ignore[return-value]

    def list_deliveries(self) -> List[DeliveryRow]:
        return _oldest_first(self._select("deliveries"), "scheduled_date")  # type: ignore[return-value]

    def list_tasks(self) -> List[TaskRow]:
        return _oldest_first(self._select("tasks"), "due_date")  # type: ignore[return-value]

    def list_notifications(self, user_id: Optional[str] = None) -> List[NotificationRow]:
        rows = self._select("team_notifications")
        if user_id is not None:
            rows = [row for row in rows if row.get("user_id") == user_id]
        return _newest_first(rows, "created_at")  # type: ignore[return-value]

    # Writes

    def update_pipeline_entry(self, pipeline_id: str, changes: Mapping[str, Any]) -> int:
        return self._update("client_pipeline", "id", pipeline_id, changes)

    def insert_pipeline_entry(self, row: Mapping[str, Any]) -> None:
        now = datetime.now(timezone.utc).isoformat()
        entry = {"id": f"pl-{uuid4().hex[:12]}", "created_at": now, "updated_at": now}
        entry.update(row)
        self._table("client_pipeline").append(entry)

    def insert_payment(self, row: Mapping[str, Any]) -> None:
        self._table("client_payments").append(dict(row))

    def update_profile_interest(self, profile_id: str, interest_level: str) -> int:
        return self._update("profiles", "id", profile_id, {"interest_level": interest_level})

    def insert_outreach(self, row: Mapping[str, Any]) -> None:
        entry = {"created_at": datetime.now(timezone.utc).isoformat()}
        entry.update(row)
        self._table("lead_outreach").append(entry)

    def update_task_status(self, task_id: str, status: str) -> int:
        return self._update("tasks", "id", task_id, {"status": status})

    def mark_notification_read(self, notification_id: str, read_at: str) -> int:
        return self._update("team_notifications", "id", notification_id, {"read": True, "read_at": read_at})

    def table(self, name: str) -> Table:
        """Copy of a raw table, for inspection by scripts and tests."""

        return self._select(name)


__all__ = ["FixtureStore"]
