"""
Domain: Scheduled deliveries of orders.

Status flow: scheduled -> in_transit -> {delivered | failed | rescheduled}
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class DeliveryStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    FAILED = "failed"
    RESCHEDULED = "rescheduled"


@dataclass(frozen=True, slots=True)
class Delivery:
    id: str
    delivery_number: str
    order_number: str
    client_name: str
    address: str
    scheduled_date: Optional[date]
    time_window: str
    status: DeliveryStatus
    item_count: int
    contact_phone: Optional[str] = None
    driver: Optional[str] = None
    notes: Optional[str] = None

    def is_scheduled_for(self, day: date) -> bool:
        return self.scheduled_date == day
