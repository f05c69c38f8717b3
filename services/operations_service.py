"""
Operations service: quotes, orders, deliveries, tasks, team and notifications.

Rows are normalized into domain entities here. A row that cannot form a valid
entity (no creation timestamp, or a team member with an unknown role) is
skipped with a warning rather than failing the whole list.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional, Tuple

from domain.delivery import Delivery
from domain.normalization import (
    normalize_delivery_status,
    normalize_loss_reason,
    normalize_notification_type,
    normalize_order_status,
    normalize_quote_status,
    normalize_related_type,
    normalize_role,
    normalize_task_priority,
    normalize_task_status,
)
from domain.order import Order, OrderItem
from domain.payments import ZERO, quote_totals, to_decimal
from domain.quote import Quote, QuoteLineItem
from domain.task import RelatedEntity, Task, TaskStatus
from domain.team import Notification, TeamMember
from domain.time import parse_date, parse_utc_datetime, to_iso_utc, utc_now
from repositories.rows import (
    AdminUserRow,
    DeliveryRow,
    NotificationRow,
    OrderRow,
    QuoteRow,
    TaskRow,
)
from repositories.store import OperationsStore
from services.reads import read_or_empty

logger = logging.getLogger(__name__)


def _int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _money(value: Any) -> Decimal:
    return to_decimal(value) or ZERO


def _skip(kind: str, row_id: Any, reason: str) -> None:
    logger.warning(
        f"Skipping {kind} {row_id}: {reason}",
        extra={"kind": kind, "row_id": row_id, "reason": reason},
    )


def quote_from_row(row: QuoteRow) -> Optional[Quote]:
    """
    Build a Quote from a stored row.

    With line items the totals are recomputed (total = subtotal - discount);
    without them the stored total_amount is taken as the total.
    """

    created_at = parse_utc_datetime(row.get("created_at"))
    if created_at is None:
        _skip("quote", row.get("id"), "missing created_at")
        return None

    items: Tuple[QuoteLineItem, ...] = tuple(
        QuoteLineItem(
            name=str(item.get("name") or ""),
            quantity=_int(item.get("quantity"), 1),
            unit_price=_money(item.get("unit_price")),
            description=str(item.get("description") or ""),
        )
        for item in row.get("items") or []
        if isinstance(item, dict)
    )
    discount = _money(row.get("discount"))
    if items:
        subtotal, total = quote_totals((item.line_total for item in items), discount)
    else:
        total = _money(row.get("total_amount"))
        subtotal = total + discount

    return Quote(
        id=row["id"],
        quote_number=row.get("quote_number", ""),
        client_name=row.get("client_name") or "",
        client_email=row.get("client_email") or "",
        status=normalize_quote_status(row.get("status")),
        items=items,
        subtotal=subtotal,
        discount=discount,
        total=total,
        valid_until=parse_date(row.get("valid_until")),
        created_at=created_at,
        sent_at=parse_utc_datetime(row.get("sent_at")),
        viewed_at=parse_utc_datetime(row.get("viewed_at")),
        responded_at=parse_utc_datetime(row.get("responded_at")),
        loss_reason=normalize_loss_reason(row.get("loss_reason")),
        notes=row.get("notes"),
    )


def order_from_row(row: OrderRow) -> Optional[Order]:
    created_at = parse_utc_datetime(row.get("created_at"))
    if created_at is None:
        _skip("order", row.get("id"), "missing created_at")
        return None

    return Order(
        id=row["id"],
        order_number=row.get("order_number", ""),
        client_name=row.get("client_name") or "",
        client_email=row.get("client_email") or "",
        status=normalize_order_status(row.get("status")),
        items=tuple(
            OrderItem(
                name=str(item.get("name") or ""),
                quantity=_int(item.get("quantity"), 1),
                price=_money(item.get("price")),
            )
            for item in row.get("items") or []
            if isinstance(item, dict)
        ),
        total_amount=_money(row.get("total_amount")),
        deposit_paid=_money(row.get("deposit_paid")),
        created_at=created_at,
        assigned_to=row.get("assigned_to"),
        expected_delivery=parse_date(row.get("expected_delivery")),
        notes=row.get("notes"),
    )


def delivery_from_row(row: DeliveryRow) -> Delivery:
    return Delivery(
        id=row["id"],
        delivery_number=row.get("delivery_number", ""),
        order_number=row.get("order_number") or "",
        client_name=row.get("client_name") or "",
        address=row.get("address") or "",
        scheduled_date=parse_date(row.get("scheduled_date")),
        time_window=row.get("time_window") or "",
        status=normalize_delivery_status(row.get("status")),
        item_count=_int(row.get("item_count"), 0),
        contact_phone=row.get("contact_phone"),
        driver=row.get("driver"),
        notes=row.get("notes"),
    )


def task_from_row(row: TaskRow) -> Task:
    related_type = normalize_related_type(row.get("related_type"))
    related_to = None
    if related_type is not None and row.get("related_id"):
        related_to = RelatedEntity(
            type=related_type,
            id=str(row.get("related_id")),
            name=row.get("related_name") or "",
        )

    return Task(
        id=row["id"],
        title=row.get("title", ""),
        status=normalize_task_status(row.get("status")),
        priority=normalize_task_priority(row.get("priority")),
        due_date=parse_date(row.get("due_date")),
        assigned_to=row.get("assigned_to"),
        description=row.get("description"),
        related_to=related_to,
    )


def team_member_from_row(row: AdminUserRow) -> Optional[TeamMember]:
    role = normalize_role(row.get("role"))
    if role is None:
        _skip("team member", row.get("id"), f"unknown role {row.get('role')!r}")
        return None

    return TeamMember(
        id=row["id"],
        email=row.get("email", ""),
        name=row.get("name", ""),
        role=role,
        is_active=row.get("is_active") is not False,
        user_id=row.get("user_id"),
        avatar_url=row.get("avatar_url"),
        created_at=parse_utc_datetime(row.get("created_at")),
    )


def notification_from_row(row: NotificationRow) -> Optional[Notification]:
    created_at = parse_utc_datetime(row.get("created_at"))
    if created_at is None:
        _skip("notification", row.get("id"), "missing created_at")
        return None

    return Notification(
        id=row["id"],
        user_id=row.get("user_id"),
        type=normalize_notification_type(row.get("type")),
        title=row.get("title", ""),
        created_at=created_at,
        message=row.get("message"),
        link=row.get("link"),
        read=bool(row.get("read")),
        read_at=parse_utc_datetime(row.get("read_at")),
    )


class OperationsService:
    """Reads and writes for the operational sections over an OperationsStore."""

    def __init__(self, store: OperationsStore) -> None:
        self._store = store

    def fetch_quotes(self) -> List[Quote]:
        quotes = (quote_from_row(row) for row in read_or_empty("quotes", self._store.list_quotes))
        return [quote for quote in quotes if quote is not None]

    def fetch_orders(self) -> List[Order]:
        orders = (order_from_row(row) for row in read_or_empty("orders", self._store.list_orders))
        return [order for order in orders if order is not None]

    def fetch_deliveries(self) -> List[Delivery]:
        return [delivery_from_row(row) for row in read_or_empty("deliveries", self._store.list_deliveries)]

    def fetch_tasks(self) -> List[Task]:
        return [task_from_row(row) for row in read_or_empty("tasks", self._store.list_tasks)]

    def fetch_team(self) -> List[TeamMember]:
        members = (team_member_from_row(row) for row in read_or_empty("admin users", self._store.list_admin_users))
        return [member for member in members if member is not None]

    def fetch_notifications(self, user_id: Optional[str] = None) -> List[Notification]:
        rows = read_or_empty("notifications", self._store.list_notifications, user_id)
        notifications = (notification_from_row(row) for row in rows)
        return [notification for notification in notifications if notification is not None]

    def update_task_status(self, task_id: str, status: TaskStatus) -> bool:
        try:
            updated = self._store.update_task_status(task_id, status.value)
        except RuntimeError as e:
            logger.error(
                f"Error updating task status: {e}",
                extra={"task_id": task_id, "status": status.value},
            )
            return False
        return bool(updated)

    def mark_notification_read(self, notification_id: str, now: Optional[datetime] = None) -> bool:
        read_at = to_iso_utc(now or utc_now(), name="now")
        try:
            updated = self._store.mark_notification_read(notification_id, read_at)
        except RuntimeError as e:
            logger.error(
                f"Error marking notification read: {e}",
                extra={"notification_id": notification_id},
            )
            return False
        return bool(updated)


__all__ = [
    "OperationsService",
    "delivery_from_row",
    "notification_from_row",
    "order_from_row",
    "quote_from_row",
    "task_from_row",
    "team_member_from_row",
]
