"""
Domain: Quotes (priced proposals).

Rules implemented here:
- total = subtotal - discount, subtotal = sum(quantity * unit_price).
- Status is strictly forward-or-terminal:
  draft -> sent -> viewed -> {accepted | rejected}
  A sent quote may also be accepted or rejected without a recorded view.
- expired is derived, not stored: an undecided quote whose valid_until has
  passed is reported as expired.
- A rejected quote carries a loss reason drawn from a fixed list.

Quote is immutable; every transition returns a new instance and raises
ValueError when the transition is not allowed from the current status.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import FrozenSet, Mapping, Optional, Tuple

from .time import require_optional_utc_timestamp, require_utc_timestamp


class QuoteStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    VIEWED = "viewed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"

    @property
    def is_decided(self) -> bool:
        return self in (QuoteStatus.ACCEPTED, QuoteStatus.REJECTED)

    @property
    def is_awaiting_response(self) -> bool:
        return self in (QuoteStatus.SENT, QuoteStatus.VIEWED)


_ALLOWED_TRANSITIONS: Mapping[QuoteStatus, FrozenSet[QuoteStatus]] = {
    QuoteStatus.DRAFT: frozenset({QuoteStatus.SENT}),
    QuoteStatus.SENT: frozenset({QuoteStatus.VIEWED, QuoteStatus.ACCEPTED, QuoteStatus.REJECTED}),
    QuoteStatus.VIEWED: frozenset({QuoteStatus.ACCEPTED, QuoteStatus.REJECTED}),
    QuoteStatus.ACCEPTED: frozenset(),
    QuoteStatus.REJECTED: frozenset(),
    QuoteStatus.EXPIRED: frozenset(),
}


class LossReason(str, Enum):
    PRICE_TOO_HIGH = "price_too_high"
    CHOSE_COMPETITOR = "chose_competitor"
    BUDGET_CONSTRAINTS = "budget_constraints"
    TIMING = "timing"
    NO_RESPONSE = "no_response"
    CHANGED_REQUIREMENTS = "changed_requirements"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _LOSS_REASON_LABELS[self]


_LOSS_REASON_LABELS: Mapping[LossReason, str] = {
    LossReason.PRICE_TOO_HIGH: "Price too high",
    LossReason.CHOSE_COMPETITOR: "Went with a competitor",
    LossReason.BUDGET_CONSTRAINTS: "Budget constraints",
    LossReason.TIMING: "Timing not right",
    LossReason.NO_RESPONSE: "No response",
    LossReason.CHANGED_REQUIREMENTS: "Requirements changed",
    LossReason.OTHER: "Other",
}


@dataclass(frozen=True, slots=True)
class QuoteLineItem:
    name: str
    quantity: int
    unit_price: Decimal
    description: str = ""

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True, slots=True)
class Quote:
    id: str
    quote_number: str
    client_name: str
    client_email: str
    status: QuoteStatus
    items: Tuple[QuoteLineItem, ...]
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    valid_until: Optional[date]
    created_at: datetime

    sent_at: Optional[datetime] = None
    viewed_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None
    loss_reason: Optional[LossReason] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        require_utc_timestamp("created_at", self.created_at)
        require_optional_utc_timestamp("sent_at", self.sent_at)
        require_optional_utc_timestamp("viewed_at", self.viewed_at)
        require_optional_utc_timestamp("responded_at", self.responded_at)

    def effective_status(self, today: date) -> QuoteStatus:
        """Stored status, except undecided quotes past valid_until read as expired."""

        if self.status.is_decided or self.status is QuoteStatus.EXPIRED:
            return self.status
        if self.valid_until is not None and self.valid_until < today:
            return QuoteStatus.EXPIRED
        return self.status

    def days_until_expiry(self, today: date) -> Optional[int]:
        if self.valid_until is None:
            return None
        return (self.valid_until - today).days

    def _transition(self, target: QuoteStatus) -> None:
        if target not in _ALLOWED_TRANSITIONS[self.status]:
            raise ValueError(f"Quote {self.quote_number} cannot move from {self.status.value} to {target.value}")

    def send(self, sent_at: datetime) -> "Quote":
        require_utc_timestamp("sent_at", sent_at)
        self._transition(QuoteStatus.SENT)
        return replace(self, status=QuoteStatus.SENT, sent_at=sent_at)

    def mark_viewed(self, viewed_at: datetime) -> "Quote":
        require_utc_timestamp("viewed_at", viewed_at)
        self._transition(QuoteStatus.VIEWED)
        return replace(self, status=QuoteStatus.VIEWED, viewed_at=viewed_at)

    def accept(self, responded_at: datetime) -> "Quote":
        require_utc_timestamp("responded_at", responded_at)
        self._transition(QuoteStatus.ACCEPTED)
        return replace(self, status=QuoteStatus.ACCEPTED, responded_at=responded_at)

    def reject(self, responded_at: datetime, reason: LossReason) -> "Quote":
        require_utc_timestamp("responded_at", responded_at)
        self._transition(QuoteStatus.REJECTED)
        return replace(self, status=QuoteStatus.REJECTED, responded_at=responded_at, loss_reason=reason)


__all__ = [
    "LossReason",
    "Quote",
    "QuoteLineItem",
    "QuoteStatus",
]
