"""
Data-source abstraction for the operations dashboard.

OperationsStore is the seam between the services and persistence. It returns
raw rows (see `repositories.rows`) and performs single-row writes; it applies
no business rules and no normalization.

Implementations:
- SupabaseStore: the live Supabase/Postgres tables.
- FixtureStore: an in-memory development dataset.

Every method raises RuntimeError when the underlying read or write fails.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

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


@runtime_checkable
class OperationsStore(Protocol):
    # Reads

    def list_submissions(self) -> List[SubmissionRow]:
        """All selection submissions, newest first."""
        ...

    def list_profiles(self, profile_ids: Optional[Sequence[str]] = None) -> List[ProfileRow]:
        """Profiles by id, or every profile when `profile_ids` is None."""
        ...

    def list_pipeline_entries(self, client_ids: Sequence[str]) -> List[PipelineRow]:
        ...

    def list_paid_payments(self, client_ids: Sequence[str]) -> List[PaymentRow]:
        ...

    def list_admin_users(self) -> List[AdminUserRow]:
        ...

    def list_quote_totals(self, quote_ids: Sequence[str]) -> List[QuoteTotalRow]:
        ...

    def list_selections(self) -> List[SelectionRow]:
        ...

    def list_newsletter_leads(self) -> List[NewsletterRow]:
        """Active newsletter subscribers that have not converted to an account."""
        ...

    def list_outreach(self) -> List[OutreachRow]:
        """Outreach log, newest first."""
        ...

    def list_quotes(self) -> List[QuoteRow]:
        ...

    def list_orders(self) -> List[OrderRow]:
        ...

    def list_deliveries(self) -> List[DeliveryRow]:
        ...

    def list_tasks(self) -> List[TaskRow]:
        ...

    def list_notifications(self, user_id: Optional[str] = None) -> List[NotificationRow]:
        """Notifications newest first, optionally for a single user."""
        ...

    # Writes

    def update_pipeline_entry(self, pipeline_id: str, changes: Mapping[str, Any]) -> int:
        """Apply `changes` to one pipeline row; returns the number of rows updated."""
        ...

    def insert_pipeline_entry(self, row: Mapping[str, Any]) -> None:
        ...

    def insert_payment(self, row: Mapping[str, Any]) -> None:
        ...

    def update_profile_interest(self, profile_id: str, interest_level: str) -> int:
        ...

    def insert_outreach(self, row: Mapping[str, Any]) -> None:
        ...

    def update_task_status(self, task_id: str, status: str) -> int:
        ...

    def mark_notification_read(self, notification_id: str, read_at: str) -> int:
        ...


__all__ = ["OperationsStore"]
