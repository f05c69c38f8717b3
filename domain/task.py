"""
Domain: Internal tasks.

Status flow: pending -> in_progress -> {completed | cancelled}
A task is overdue when its due date is before today and it is still open.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_closed(self) -> bool:
        return self in (TaskStatus.COMPLETED, TaskStatus.CANCELLED)


class TaskPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class RelatedType(str, Enum):
    CLIENT = "client"
    ORDER = "order"
    QUOTE = "quote"
    DELIVERY = "delivery"


@dataclass(frozen=True, slots=True)
class RelatedEntity:
    type: RelatedType
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[date]
    assigned_to: Optional[str] = None
    description: Optional[str] = None
    related_to: Optional[RelatedEntity] = None

    def is_overdue(self, today: date) -> bool:
        return self.due_date is not None and self.due_date < today and not self.status.is_closed

    def with_status(self, status: TaskStatus) -> "Task":
        return replace(self, status=status)
