"""
Raw row shapes per source table.

These describe what the store returns before normalization. Every status-like
column is a free-text `str | None`; conversion to domain enums happens in the
services through `domain.normalization`, never downstream of it.
"""

from __future__ import annotations

from typing import Any, List, Optional, TypedDict


class SelectionItemRow(TypedDict, total=False):
    """One entry of the JSON `items` column on selections and submissions."""

    id: str
    slug: str
    name: str
    price: Optional[float]
    quantity: Optional[int]
    category: str
    colour: str
    notes: str


class ProfileRow(TypedDict, total=False):
    id: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    phone: Optional[str]
    account_number: Optional[str]
    account_type: Optional[str]
    lead_source: Optional[str]
    interest_level: Optional[str]
    created_at: str
    updated_at: str


class SubmissionRow(TypedDict, total=False):
    id: str
    user_id: str
    items: Optional[List[SelectionItemRow]]
    total_items: int
    filename: Optional[str]
    status: Optional[str]
    created_at: str


class SelectionRow(TypedDict, total=False):
    user_id: str
    items: Optional[List[SelectionItemRow]]
    updated_at: str


class PipelineRow(TypedDict, total=False):
    id: str
    client_id: str
    stage: Optional[str]
    priority: Optional[str]
    estimated_value: Optional[float]
    meeting_date: Optional[str]
    last_contacted_at: Optional[str]
    quote_id: Optional[str]
    order_id: Optional[str]
    assigned_to: Optional[str]
    source: Optional[str]
    notes: Optional[str]
    created_at: str
    updated_at: str


class PaymentRow(TypedDict, total=False):
    client_id: str
    pipeline_id: Optional[str]
    payment_type: Optional[str]
    amount: Any
    status: Optional[str]
    paid_at: Optional[str]
    reference: Optional[str]


class AdminUserRow(TypedDict, total=False):
    id: str
    user_id: Optional[str]
    email: str
    name: str
    role: Optional[str]
    avatar_url: Optional[str]
    is_active: Optional[bool]
    created_at: Optional[str]


class QuoteTotalRow(TypedDict):
    id: str
    total_amount: Any


class QuoteItemRow(TypedDict, total=False):
    name: str
    description: Optional[str]
    quantity: Optional[int]
    unit_price: Any


class QuoteRow(TypedDict, total=False):
    id: str
    quote_number: str
    client_name: Optional[str]
    client_email: Optional[str]
    status: Optional[str]
    items: Optional[List[QuoteItemRow]]
    discount: Any
    total_amount: Any
    valid_until: Optional[str]
    created_at: str
    sent_at: Optional[str]
    viewed_at: Optional[str]
    responded_at: Optional[str]
    loss_reason: Optional[str]
    notes: Optional[str]


class NewsletterRow(TypedDict, total=False):
    id: str
    email: str
    source: Optional[str]
    subscribed_at: str
    is_active: bool
    converted_to_account: bool
    profile_id: Optional[str]


class OutreachRow(TypedDict, total=False):
    client_id: str
    outreach_type: Optional[str]
    outcome: Optional[str]
    notes: Optional[str]
    follow_up_date: Optional[str]
    created_at: str


class OrderItemRow(TypedDict, total=False):
    name: str
    quantity: Optional[int]
    price: Any


class OrderRow(TypedDict, total=False):
    id: str
    order_number: str
    client_name: Optional[str]
    client_email: Optional[str]
    status: Optional[str]
    items: Optional[List[OrderItemRow]]
    total_amount: Any
    deposit_paid: Any
    assigned_to: Optional[str]
    created_at: str
    expected_delivery: Optional[str]
    notes: Optional[str]


class DeliveryRow(TypedDict, total=False):
    id: str
    delivery_number: str
    order_number: Optional[str]
    client_name: Optional[str]
    address: Optional[str]
    contact_phone: Optional[str]
    scheduled_date: Optional[str]
    time_window: Optional[str]
    status: Optional[str]
    item_count: Optional[int]
    driver: Optional[str]
    notes: Optional[str]


class TaskRow(TypedDict, total=False):
    id: str
    title: str
    description: Optional[str]
    status: Optional[str]
    priority: Optional[str]
    due_date: Optional[str]
    assigned_to: Optional[str]
    related_type: Optional[str]
    related_id: Optional[str]
    related_name: Optional[str]


class NotificationRow(TypedDict, total=False):
    id: str
    user_id: Optional[str]
    type: Optional[str]
    title: str
    message: Optional[str]
    link: Optional[str]
    read: Optional[bool]
    read_at: Optional[str]
    created_at: str
