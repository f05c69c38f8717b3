"""
Operations API Endpoints.

Orders, deliveries, tasks, team and notifications.
"""

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_now, get_store, get_user_id, require_section
from api.models import (
    DeliveryListResponse,
    DeliveryResponse,
    DeliveryStatsResponse,
    NotificationListResponse,
    NotificationResponse,
    OrderListResponse,
    OrderResponse,
    OrderStatsResponse,
    RelatedEntityResponse,
    TaskListResponse,
    TaskResponse,
    TaskStatsResponse,
    TaskStatusRequest,
    TeamMemberResponse,
    TeamResponse,
    TeamStatsResponse,
    WriteResponse,
)
from domain.delivery import DeliveryStatus
from domain.order import OrderStatus
from domain.stats import delivery_stats, order_stats, task_stats, team_stats, unread_count
from domain.task import Task, TaskStatus
from repositories.store import OperationsStore
from services.operations_service import OperationsService

router = APIRouter()


def task_response(task: Task, today: date) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        due_date=task.due_date,
        assigned_to=task.assigned_to,
        related_to=RelatedEntityResponse.model_validate(task.related_to) if task.related_to else None,
        is_overdue=task.is_overdue(today),
    )


# ============================================================================
# Orders
# ============================================================================

@router.get("/orders", response_model=OrderListResponse, summary="List Orders")
def list_orders(
    status: Optional[OrderStatus] = Query(None, description="Filter by order status"),
    _role=Depends(require_section("orders")),
    store: OperationsStore = Depends(get_store),
):
    orders = OperationsService(store).fetch_orders()
    if status is not None:
        orders = [order for order in orders if order.status is status]
    return OrderListResponse(
        orders=[OrderResponse.model_validate(order) for order in orders],
        total_count=len(orders),
    )


@router.get("/orders/stats", response_model=OrderStatsResponse, summary="Order Stats")
def get_order_stats(
    _role=Depends(require_section("orders")),
    store: OperationsStore = Depends(get_store),
):
    return OrderStatsResponse.model_validate(order_stats(OperationsService(store).fetch_orders()))


# ============================================================================
# Deliveries
# ============================================================================

@router.get("/deliveries", response_model=DeliveryListResponse, summary="List Deliveries")
def list_deliveries(
    status: Optional[DeliveryStatus] = Query(None, description="Filter by delivery status"),
    _role=Depends(require_section("deliveries")),
    store: OperationsStore = Depends(get_store),
):
    deliveries = OperationsService(store).fetch_deliveries()
    if status is not None:
        deliveries = [delivery for delivery in deliveries if delivery.status is status]
    return DeliveryListResponse(
        deliveries=[DeliveryResponse.model_validate(delivery) for delivery in deliveries],
        total_count=len(deliveries),
    )


@router.get("/deliveries/stats", response_model=DeliveryStatsResponse, summary="Delivery Stats")
def get_delivery_stats(
    _role=Depends(require_section("deliveries")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    deliveries = OperationsService(store).fetch_deliveries()
    return DeliveryStatsResponse.model_validate(delivery_stats(deliveries, now.date()))


# ============================================================================
# Tasks
# ============================================================================

@router.get("/tasks", response_model=TaskListResponse, summary="List Tasks")
def list_tasks(
    status: Optional[TaskStatus] = Query(None, description="Filter by task status"),
    _role=Depends(require_section("dashboard")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    today = now.date()
    tasks = OperationsService(store).fetch_tasks()
    if status is not None:
        tasks = [task for task in tasks if task.status is status]
    return TaskListResponse(
        tasks=[task_response(task, today) for task in tasks],
        total_count=len(tasks),
    )


@router.get("/tasks/stats", response_model=TaskStatsResponse, summary="Task Stats")
def get_task_stats(
    _role=Depends(require_section("dashboard")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    return TaskStatsResponse.model_validate(task_stats(OperationsService(store).fetch_tasks(), now.date()))


@router.patch("/tasks/{task_id}/status", response_model=WriteResponse, summary="Change Task Status")
def update_task_status(
    task_id: str,
    request: TaskStatusRequest,
    _role=Depends(require_section("dashboard")),
    store: OperationsStore = Depends(get_store),
):
    if not OperationsService(store).update_task_status(task_id, request.status):
        raise HTTPException(
            status_code=500,
            detail=f"Failed to update task {task_id}"
        )
    return WriteResponse(success=True)


# ============================================================================
# Team
# ============================================================================

@router.get("/team", response_model=TeamResponse, summary="List Team Members")
def list_team(
    _role=Depends(require_section("team")),
    store: OperationsStore = Depends(get_store),
):
    members = OperationsService(store).fetch_team()
    return TeamResponse(
        members=[TeamMemberResponse.model_validate(member) for member in members],
        stats=TeamStatsResponse.model_validate(team_stats(members)),
    )


# ============================================================================
# Notifications
# ============================================================================

@router.get("/notifications", response_model=NotificationListResponse, summary="List Notifications")
def list_notifications(
    unread_only: bool = Query(False, description="Only unread notifications"),
    _role=Depends(require_section("notifications")),
    user_id: Optional[str] = Depends(get_user_id),
    store: OperationsStore = Depends(get_store),
):
    notifications = OperationsService(store).fetch_notifications(user_id)
    unread = unread_count(notifications)
    if unread_only:
        notifications = [notification for notification in notifications if not notification.read]
    return NotificationListResponse(
        notifications=[NotificationResponse.model_validate(n) for n in notifications],
        unread_count=unread,
    )


@router.post(
    "/notifications/{notification_id}/read",
    response_model=WriteResponse,
    summary="Mark Notification Read"
)
def mark_notification_read(
    notification_id: str,
    _role=Depends(require_section("notifications")),
    store: OperationsStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    if not OperationsService(store).mark_notification_read(notification_id, now):
        raise HTTPException(
            status_code=404,
            detail=f"Notification {notification_id} not found"
        )
    return WriteResponse(success=True)
