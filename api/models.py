"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
Response models read straight from the frozen domain dataclasses
(`from_attributes`); enum fields serialize as their stored values and money
as decimal strings.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.delivery import DeliveryStatus
from domain.marketing_lead import InterestLevel, MarketingLeadStatus, OutreachOutcome, OutreachType
from domain.order import OrderStatus
from domain.payments import PaymentType
from domain.permissions import AdminRole
from domain.pipeline import PipelineStage, Priority
from domain.quote import LossReason, QuoteStatus
from domain.source import LeadSource
from domain.task import RelatedType, TaskPriority, TaskStatus
from domain.team import NotificationType
from services.board_service import MoveOutcome


class DomainModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# Navigation
# ============================================================================

class NavigationResponse(BaseModel):
    """Sections the current role may open, in navigation order."""
    role: AdminRole
    display_name: str
    sections: List[str]


# ============================================================================
# Pipeline Models
# ============================================================================

class PipelineClientResponse(DomainModel):
    id: str
    profile_id: str
    name: str
    email: str
    phone: Optional[str] = None
    stage: PipelineStage
    priority: Priority
    source: LeadSource
    account_number: Optional[str] = None
    selection_count: int
    selection_value: Decimal
    submitted_at: Optional[datetime] = None
    last_contacted_at: Optional[datetime] = None
    meeting_date: Optional[datetime] = None
    quote_id: Optional[str] = None
    quote_value: Optional[Decimal] = None
    order_id: Optional[str] = None
    deposit_paid: Decimal
    production_paid: Decimal
    final_paid: Decimal
    total_paid: Decimal
    total_due: Decimal
    payment_percentage: int = 0
    assigned_to: Optional[str] = None
    assigned_to_name: Optional[str] = None
    notes: Optional[str] = None
    filename: Optional[str] = None


class PipelineListResponse(BaseModel):
    clients: List[PipelineClientResponse]
    total_count: int


class PipelineStatsResponse(DomainModel):
    by_stage: Dict[PipelineStage, int]
    new_submissions: int
    active_deals: int
    total_pipeline_value: Decimal
    completed_this_month: int


class DragEndRequest(BaseModel):
    """A finished drag: the dragged card and the column or card it was dropped over."""
    active_id: str = Field(..., min_length=1)
    over_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "active_id": "pl-richardson",
                "over_id": "deposit_paid"
            }
        }


class MoveResponse(BaseModel):
    outcome: MoveOutcome
    client: Optional[PipelineClientResponse] = None
    stats: PipelineStatsResponse


class PriorityRequest(BaseModel):
    priority: Priority


class PaymentRequest(BaseModel):
    client_id: str = Field(..., min_length=1, description="Profile id of the paying client")
    payment_type: PaymentType
    amount: Decimal = Field(..., gt=0)
    reference: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "p-richardson",
                "payment_type": "deposit",
                "amount": "2880.00",
                "reference": "BACS-2880"
            }
        }


class WriteResponse(BaseModel):
    success: bool


# ============================================================================
# Marketing Lead Models
# ============================================================================

class MarketingLeadResponse(DomainModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    source: LeadSource
    status: MarketingLeadStatus
    interest: InterestLevel
    selection_count: int
    selection_value: Decimal
    created_at: datetime
    last_activity_at: datetime
    last_outreach_at: Optional[datetime] = None
    next_follow_up: Optional[date] = None
    notes: Optional[str] = None
    tags: List[str] = []
    account_number: Optional[str] = None
    account_type: Optional[str] = None
    is_newsletter_only: bool
    converted_to_account: bool


class MarketingLeadListResponse(BaseModel):
    leads: List[MarketingLeadResponse]
    total_count: int


class MarketingLeadStatsResponse(DomainModel):
    total: int
    hot: int
    warm: int
    cold: int
    needs_follow_up: int
    by_interest: Dict[InterestLevel, int]
    by_status: Dict[MarketingLeadStatus, int]
    by_source: Dict[LeadSource, int]


class InterestRequest(BaseModel):
    interest: InterestLevel


class OutreachRequest(BaseModel):
    type: OutreachType
    outcome: OutreachOutcome
    notes: Optional[str] = None
    follow_up_date: Optional[date] = None

    class Config:
        json_schema_extra = {
            "example": {
                "type": "call",
                "outcome": "voicemail",
                "notes": "Left a message about the emerald sofa.",
                "follow_up_date": "2024-12-27"
            }
        }


# ============================================================================
# Quote Models
# ============================================================================

class QuoteLineItemResponse(DomainModel):
    name: str
    description: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class QuoteResponse(BaseModel):
    id: str
    quote_number: str
    client_name: str
    client_email: str
    status: QuoteStatus
    items: List[QuoteLineItemResponse]
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    valid_until: Optional[date] = None
    days_until_expiry: Optional[int] = None
    created_at: datetime
    sent_at: Optional[datetime] = None
    viewed_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None
    loss_reason: Optional[LossReason] = None
    notes: Optional[str] = None


class QuoteListResponse(BaseModel):
    quotes: List[QuoteResponse]
    total_count: int


class LossReasonCountResponse(DomainModel):
    reason: LossReason
    count: int
    percentage: Decimal


class QuoteStatsResponse(DomainModel):
    by_status: Dict[QuoteStatus, int]
    won: int
    lost: int
    win_rate: Decimal
    average_won_value: Decimal
    loss_reasons: List[LossReasonCountResponse]
    open_value: Decimal
    awaiting_response: int


# ============================================================================
# Order / Delivery Models
# ============================================================================

class OrderItemResponse(DomainModel):
    name: str
    quantity: int
    price: Decimal


class OrderResponse(DomainModel):
    id: str
    order_number: str
    client_name: str
    client_email: str
    status: OrderStatus
    items: List[OrderItemResponse]
    total_amount: Decimal
    deposit_paid: Decimal
    created_at: datetime
    assigned_to: Optional[str] = None
    expected_delivery: Optional[date] = None
    notes: Optional[str] = None


class OrderListResponse(BaseModel):
    orders: List[OrderResponse]
    total_count: int


class OrderStatsResponse(DomainModel):
    by_status: Dict[OrderStatus, int]
    total_amount: Decimal
    total_deposits: Decimal
    in_progress: int


class DeliveryResponse(DomainModel):
    id: str
    delivery_number: str
    order_number: str
    client_name: str
    address: str
    scheduled_date: Optional[date] = None
    time_window: str
    status: DeliveryStatus
    item_count: int
    contact_phone: Optional[str] = None
    driver: Optional[str] = None
    notes: Optional[str] = None


class DeliveryListResponse(BaseModel):
    deliveries: List[DeliveryResponse]
    total_count: int


class DeliveryStatsResponse(DomainModel):
    by_status: Dict[DeliveryStatus, int]
    today: int


# ============================================================================
# Task Models
# ============================================================================

class RelatedEntityResponse(DomainModel):
    type: RelatedType
    id: str
    name: str


class TaskResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[date] = None
    assigned_to: Optional[str] = None
    related_to: Optional[RelatedEntityResponse] = None
    is_overdue: bool


class TaskListResponse(BaseModel):
    tasks: List[TaskResponse]
    total_count: int


class TaskStatsResponse(DomainModel):
    pending: int
    in_progress: int
    completed: int
    cancelled: int
    overdue: int


class TaskStatusRequest(BaseModel):
    status: TaskStatus


# ============================================================================
# Team / Notification Models
# ============================================================================

class TeamMemberResponse(DomainModel):
    id: str
    email: str
    name: str
    initials: str
    role: AdminRole
    is_active: bool
    user_id: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None


class TeamStatsResponse(DomainModel):
    by_role: Dict[AdminRole, int]
    total: int
    active: int


class TeamResponse(BaseModel):
    members: List[TeamMemberResponse]
    stats: TeamStatsResponse


class NotificationResponse(DomainModel):
    id: str
    user_id: Optional[str] = None
    type: NotificationType
    title: str
    message: Optional[str] = None
    link: Optional[str] = None
    read: bool
    read_at: Optional[datetime] = None
    created_at: datetime


class NotificationListResponse(BaseModel):
    notifications: List[NotificationResponse]
    unread_count: int


# ============================================================================
# Dashboard Models
# ============================================================================

class DashboardResponse(DomainModel):
    """Summary cards; sections the role cannot access are null."""
    pipeline: Optional[PipelineStatsResponse] = None
    leads: Optional[MarketingLeadStatsResponse] = None
    quotes: Optional[QuoteStatsResponse] = None
    orders: Optional[OrderStatsResponse] = None
    deliveries: Optional[DeliveryStatsResponse] = None
    tasks: TaskStatsResponse
    unread_notifications: int


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Role 'sales' cannot access section 'orders'"
            }
        }
