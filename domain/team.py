"""
Domain: Dashboard staff and their notifications.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from .permissions import AdminRole
from .time import require_optional_utc_timestamp, require_utc_timestamp


@dataclass(frozen=True, slots=True)
class TeamMember:
    """
    Internal staff account.

    The role gates section visibility through the permission table.
    """

    id: str
    email: str
    name: str
    role: AdminRole
    is_active: bool = True
    user_id: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        require_optional_utc_timestamp("created_at", self.created_at)

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split() if part).upper()


class NotificationType(str, Enum):
    LEAD = "lead"
    QUOTE = "quote"
    ORDER = "order"
    DELIVERY = "delivery"
    REMINDER = "reminder"
    SYSTEM = "system"


@dataclass(frozen=True, slots=True)
class Notification:
    id: str
    user_id: Optional[str]
    type: NotificationType
    title: str
    created_at: datetime
    message: Optional[str] = None
    link: Optional[str] = None
    read: bool = False
    read_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        require_utc_timestamp("created_at", self.created_at)
        require_optional_utc_timestamp("read_at", self.read_at)
