"""
Supabase-backed operations store (persistence).

This module provides *only* table reads and single-row writes against the
dashboard's Supabase project. It does not normalize statuses or compute
derived fields; rows are returned exactly as stored.

Tables:
- selection_submissions, profiles, client_selections (shared with the main site)
- client_pipeline, client_payments, lead_outreach, newsletter_subscribers
- admin_users, quotes, orders, deliveries, tasks, team_notifications
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from postgrest.exceptions import APIError  # type: ignore[import-not-found]
from supabase import Client  # type: ignore[import-not-found]

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

# Supabase table names.
# Keep these aligned with your database schema.
_SUBMISSIONS_TABLE: str = "selection_submissions"
_PROFILES_TABLE: str = "profiles"
_SELECTIONS_TABLE: str = "client_selections"
_PIPELINE_TABLE: str = "client_pipeline"
_PAYMENTS_TABLE: str = "client_payments"
_OUTREACH_TABLE: str = "lead_outreach"
_NEWSLETTER_TABLE: str = "newsletter_subscribers"
_ADMIN_USERS_TABLE: str = "admin_users"
_QUOTES_TABLE: str = "quotes"
_ORDERS_TABLE: str = "orders"
_DELIVERIES_TABLE: str = "deliveries"
_TASKS_TABLE: str = "tasks"
_NOTIFICATIONS_TABLE: str = "team_notifications"

_PROFILE_COLUMNS = (
    "id, email, first_name, last_name, phone, account_number, account_type, "
    "lead_source, interest_level, created_at, updated_at"
)


def _execute(query: Any, action: str) -> List[Dict[str, Any]]:
    """
    Run a query builder and return its rows.

    supabase-py reports failures either as an APIError or as an `error`
    attribute on the response; both surface as RuntimeError.
    """

    try:
        response = query.execute()
    except APIError as e:
        raise RuntimeError(f"Failed to {action}: {e}") from e

    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Failed to {action}: {error}")
    return getattr(response, "data", None) or []


class SupabaseStore:
    """OperationsStore over the official supabase-py client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    # Reads

    def list_submissions(self) -> List[SubmissionRow]:
        query = (
            self._client.table(_SUBMISSIONS_TABLE)
            .select("*")
            .order("created_at", desc=True)
        )
        return _execute(query, "list submissions")  # type: ignore[return-value]

    def list_profiles(self, profile_ids: Optional[Sequence[str]] = None) -> List[ProfileRow]:
        if profile_ids is not None and not profile_ids:
            return []

        query = self._client.table(_PROFILES_TABLE).select(_PROFILE_COLUMNS)
        if profile_ids is not None:
            query = query.in_("id", list(profile_ids))
        return _execute(query, "list profiles")  # type: ignore[return-value]

    def list_pipeline_entries(self, client_ids: Sequence[str]) -> List[PipelineRow]:
        if not client_ids:
            return []

        query = (
            self._client.table(_PIPELINE_TABLE)
            .select("*")
            .in_("client_id", list(client_ids))
        )
        return _execute(query, "list pipeline entries")  # type: ignore[return-value]

    def list_paid_payments(self, client_ids: Sequence[str]) -> List[PaymentRow]:
        if not client_ids:
            return []

        query = (
            self._client.table(_PAYMENTS_TABLE)
            .select("client_id, payment_type, amount, status")
            .in_("client_id", list(client_ids))
            .eq("status", "paid")
        )
        return _execute(query, "list payments")  # type: ignore[return-value]

    def list_admin_users(self) -> List[AdminUserRow]:
        query = self._client.table(_ADMIN_USERS_TABLE).select("*")
        return _execute(query, "list admin users")  # type: ignore[return-value]

    def list_quote_totals(self, quote_ids: Sequence[str]) -> List[QuoteTotalRow]:
        if not quote_ids:
            return []

        query = (
            self._client.table(_QUOTES_TABLE)
            .select("id, total_amount")
            .in_("id", list(quote_ids))
        )
        return _execute(query, "list quote totals")  # type: ignore[return-value]

    def list_selections(self) -> List[SelectionRow]:
        query = self._client.table(_SELECTIONS_TABLE).select("user_id, items, updated_at")
        return _execute(query, "list selections")  # type: ignore[return-value]

    def list_newsletter_leads(self) -> List[NewsletterRow]:
        query = (
            self._client.table(_NEWSLETTER_TABLE)
            .select("*")
            .eq("converted_to_account", False)
            .eq("is_active", True)
        )
        return _execute(query, "list newsletter subscribers")  # type: ignore[return-value]

    def list_outreach(self) -> List[OutreachRow]:
        query = (
            self._client.table(_OUTREACH_TABLE)
            .select("client_id, outreach_type, outcome, notes, follow_up_date, created_at")
            .order("created_at", desc=True)
        )
        return _execute(query, "list outreach")  # type: ignore[return-value]

    def list_quotes(self) -> List[QuoteRow]:
        query = self._client.table(_QUOTES_TABLE).select("*").order("created_at", desc=True)
        return _execute(query, "list quotes")  # type: ignore[return-value]

    def list_orders(self) -> List[OrderRow]:
        query = self._client.table(_ORDERS_TABLE).select("*").order("created_at", desc=True)
        return _execute(query, "list orders")  # type: ignore[return-value]

    def list_deliveries(self) -> List[DeliveryRow]:
        query = self._client.table(_DELIVERIES_TABLE).select("*").order("scheduled_date")
        return _execute(query, "list deliveries")  # type: ignore[return-value]

    def list_tasks(self) -> List[TaskRow]:
        query = self._client.table(_TASKS_TABLE).select("*").order("due_date")
        return _execute(query, "list tasks")  # type: ignore[return-value]

    def list_notifications(self, user_id: Optional[str] = None) -> List[NotificationRow]:
        query = self._client.table(_NOTIFICATIONS_TABLE).select("*")
        if user_id is not None:
            query = query.eq("user_id", user_id)
        query = query.order("created_at", desc=True)
        return _execute(query, "list notifications")  # type: ignore[return-value]

    # Writes

    def update_pipeline_entry(self, pipeline_id: str, changes: Mapping[str, Any]) -> int:
        query = (
            self._client.table(_PIPELINE_TABLE)
            .update(dict(changes))
            .eq("id", pipeline_id)
        )
        return len(_execute(query, "update pipeline entry"))

    def insert_pipeline_entry(self, row: Mapping[str, Any]) -> None:
        query = self._client.table(_PIPELINE_TABLE).insert(dict(row))
        _execute(query, "insert pipeline entry")

    def insert_payment(self, row: Mapping[str, Any]) -> None:
        query = self._client.table(_PAYMENTS_TABLE).insert(dict(row))
        _execute(query, "record payment")

    def update_profile_interest(self, profile_id: str, interest_level: str) -> int:
        query = (
            self._client.table(_PROFILES_TABLE)
            .update({"interest_level": interest_level})
            .eq("id", profile_id)
        )
        return len(_execute(query, "update interest level"))

    def insert_outreach(self, row: Mapping[str, Any]) -> None:
        query = self._client.table(_OUTREACH_TABLE).insert(dict(row))
        _execute(query, "log outreach")

    def update_task_status(self, task_id: str, status: str) -> int:
        query = (
            self._client.table(_TASKS_TABLE)
            .update({"status": status})
            .eq("id", task_id)
        )
        return len(_execute(query, "update task status"))

    def mark_notification_read(self, notification_id: str, read_at: str) -> int:
        query = (
            self._client.table(_NOTIFICATIONS_TABLE)
            .update({"read": True, "read_at": read_at})
            .eq("id", notification_id)
        )
        return len(_execute(query, "mark notification read"))


__all__ = ["SupabaseStore"]
