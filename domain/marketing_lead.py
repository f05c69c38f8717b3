"""
Domain: Marketing leads and outreach.

A marketing lead is a prospect who has not submitted a selection: a registered
account, an account that is browsing (has selection items), or a
newsletter-only subscriber. Once a profile has a submission it belongs to the
sales pipeline and must never appear here.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Mapping, Optional, Tuple

from .source import LeadSource
from .time import require_optional_utc_timestamp, require_utc_timestamp


class InterestLevel(str, Enum):
    COLD = "cold"
    WARM = "warm"
    HOT = "hot"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class MarketingLeadStatus(str, Enum):
    REGISTERED = "registered"
    BROWSING = "browsing"
    NEWSLETTER_ONLY = "newsletter_only"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS: Mapping[MarketingLeadStatus, str] = {
    MarketingLeadStatus.REGISTERED: "Registered",
    MarketingLeadStatus.BROWSING: "Browsing",
    MarketingLeadStatus.NEWSLETTER_ONLY: "Newsletter Only",
}


class OutreachType(str, Enum):
    EMAIL = "email"
    CALL = "call"
    SMS = "sms"
    MEETING = "meeting"
    OTHER = "other"


class OutreachOutcome(str, Enum):
    NO_ANSWER = "no_answer"
    VOICEMAIL = "voicemail"
    SPOKE = "spoke"
    EMAIL_SENT = "email_sent"
    MEETING_BOOKED = "meeting_booked"
    NOT_INTERESTED = "not_interested"
    FOLLOW_UP_NEEDED = "follow_up_needed"


class NurturingStatus(str, Enum):
    """Long-term outreach categorization, independent of interest level."""

    ACTIVE = "active"
    NURTURING = "nurturing"
    NOT_INTERESTED = "not_interested"
    DO_NOT_CONTACT = "do_not_contact"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


@dataclass(frozen=True, slots=True)
class OutreachRecord:
    """A logged contact attempt."""

    lead_id: str
    type: OutreachType
    outcome: OutreachOutcome
    notes: Optional[str] = None
    follow_up_date: Optional[date] = None


@dataclass(frozen=True, slots=True)
class MarketingLead:
    id: str
    name: str
    email: str
    source: LeadSource
    status: MarketingLeadStatus
    interest: InterestLevel
    selection_count: int
    selection_value: Decimal
    created_at: datetime
    last_activity_at: datetime

    phone: Optional[str] = None
    last_outreach_at: Optional[datetime] = None
    next_follow_up: Optional[date] = None
    notes: Optional[str] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    account_number: Optional[str] = None
    account_type: Optional[str] = None
    is_newsletter_only: bool = False
    converted_to_account: bool = True

    def __post_init__(self) -> None:
        require_utc_timestamp("created_at", self.created_at)
        require_utc_timestamp("last_activity_at", self.last_activity_at)
        require_optional_utc_timestamp("last_outreach_at", self.last_outreach_at)

    def with_interest(self, interest: InterestLevel) -> "MarketingLead":
        return replace(self, interest=interest)


__all__ = [
    "InterestLevel",
    "MarketingLead",
    "MarketingLeadStatus",
    "NurturingStatus",
    "OutreachOutcome",
    "OutreachRecord",
    "OutreachType",
]
