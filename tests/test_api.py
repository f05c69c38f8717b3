"""
Tests for the HTTP API (`api/main.py` and routers).

Covers contract rules:
- A missing or unknown role is 401; a role without the section is 403.
- Board moves report noop / moved / reverted and persist the new stage.
- Exports download as CSV with a dated filename.
- Dashboard cards for inaccessible sections are null.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import Settings, get_now, get_settings, get_store
from api.main import app
from conftest import NOW
from repositories.fixture_store import FixtureStore


@pytest.fixture
def client():
    store = FixtureStore()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_now] = lambda: NOW
    app.dependency_overrides[get_settings] = lambda: Settings(data_source="fixtures")
    yield TestClient(app)
    app.dependency_overrides.clear()


def _as(role: str, **headers) -> dict:
    return {"X-Admin-Role": role, **headers}


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_missing_role_is_unauthorized(client: TestClient) -> None:
    assert client.get("/api/v1/pipeline").status_code == 401
    assert client.get("/api/v1/pipeline", headers=_as("intern")).status_code == 401


def test_section_outside_role_is_forbidden(client: TestClient) -> None:
    response = client.get("/api/v1/orders", headers=_as("sales"))

    assert response.status_code == 403
    assert response.json()["detail"] == "Role 'sales' cannot access section 'orders'"


def test_role_header_is_normalized(client: TestClient) -> None:
    assert client.get("/api/v1/orders", headers=_as(" operations ")).status_code == 200


def test_navigation_for_sales(client: TestClient) -> None:
    body = client.get("/api/v1/navigation", headers=_as("sales")).json()

    assert body["role"] == "sales"
    assert body["display_name"] == "Sales"
    assert body["sections"] == ["dashboard", "clients", "quotes", "notifications"]


def test_pipeline_list(client: TestClient) -> None:
    body = client.get("/api/v1/pipeline", headers=_as("sales")).json()

    assert body["total_count"] == 6
    assert body["clients"][0]["id"] == "pl-anderson"


def test_pipeline_list_filters_by_stage(client: TestClient) -> None:
    body = client.get("/api/v1/pipeline", params={"stage": "quoted"}, headers=_as("sales")).json()

    assert [c["id"] for c in body["clients"]] == ["pl-richardson"]


def test_pipeline_stats(client: TestClient) -> None:
    body = client.get("/api/v1/pipeline/stats", headers=_as("manager")).json()

    assert body["active_deals"] == 4
    assert body["new_submissions"] == 1
    assert body["by_stage"]["lost"] == 1


def test_board_has_no_lost_column(client: TestClient) -> None:
    body = client.get("/api/v1/pipeline/board", headers=_as("admin")).json()

    assert "lost" not in body
    assert [c["id"] for c in body["quoted"]] == ["pl-richardson"]


def test_drag_moves_and_persists(client: TestClient) -> None:
    response = client.post(
        "/api/v1/pipeline/drag",
        json={"active_id": "pl-richardson", "over_id": "deposit_paid"},
        headers=_as("sales"),
    )

    body = response.json()
    assert response.status_code == 200
    assert body["outcome"] == "moved"
    assert body["client"]["stage"] == "deposit_paid"

    listed = client.get("/api/v1/pipeline", params={"stage": "deposit_paid"}, headers=_as("sales")).json()
    assert "pl-richardson" in [c["id"] for c in listed["clients"]]


def test_drag_without_target_is_noop(client: TestClient) -> None:
    body = client.post(
        "/api/v1/pipeline/drag",
        json={"active_id": "pl-richardson", "over_id": None},
        headers=_as("sales"),
    ).json()

    assert body["outcome"] == "noop"
    assert body["client"]["stage"] == "quoted"


def test_drag_of_lost_card_leaves_it_lost(client: TestClient) -> None:
    body = client.post(
        "/api/v1/pipeline/drag",
        json={"active_id": "pl-wilson", "over_id": "submitted"},
        headers=_as("sales"),
    ).json()

    assert body["outcome"] == "noop"
    assert body["client"]["stage"] == "lost"

    listed = client.get("/api/v1/pipeline", params={"stage": "lost"}, headers=_as("sales")).json()
    assert [c["id"] for c in listed["clients"]] == ["pl-wilson"]


def test_drag_requires_edit_access(client: TestClient) -> None:
    response = client.post(
        "/api/v1/pipeline/drag",
        json={"active_id": "pl-richardson", "over_id": "deposit_paid"},
        headers=_as("operations"),
    )

    assert response.status_code == 403


def test_advance_errors(client: TestClient) -> None:
    assert client.post("/api/v1/pipeline/missing/advance", headers=_as("sales")).status_code == 404
    assert client.post("/api/v1/pipeline/pl-brown/advance", headers=_as("sales")).status_code == 409


def test_mark_lost_errors(client: TestClient) -> None:
    assert client.post("/api/v1/pipeline/pl-wilson/lost", headers=_as("sales")).status_code == 409


def test_record_payment(client: TestClient) -> None:
    response = client.post(
        "/api/v1/pipeline/pl-richardson/payments",
        json={"client_id": "p-richardson", "payment_type": "deposit", "amount": "2880.00"},
        headers=_as("sales"),
    )

    assert response.status_code == 201
    assert response.json() == {"success": True}


def test_payment_amount_must_be_positive(client: TestClient) -> None:
    response = client.post(
        "/api/v1/pipeline/pl-richardson/payments",
        json={"client_id": "p-richardson", "payment_type": "deposit", "amount": "0"},
        headers=_as("sales"),
    )

    assert response.status_code == 422


def test_pipeline_export(client: TestClient) -> None:
    response = client.get("/api/v1/pipeline/export", headers=_as("sales"))

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="pipeline-export-2024-12-23.csv"' in response.headers["content-disposition"]


def test_leads_filtered_by_interest(client: TestClient) -> None:
    body = client.get("/api/v1/leads", params={"interest": "hot"}, headers=_as("sales")).json()

    assert [lead["id"] for lead in body["leads"]] == ["p-clark"]


def test_leads_export(client: TestClient) -> None:
    response = client.get("/api/v1/leads/export", headers=_as("sales"))

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="leads-export-2024-12-23.csv"' in response.headers["content-disposition"]
    assert response.text.splitlines()[0] == "Name,Email,Phone,Source,Status,Interest,Selection Value,Last Activity"


def test_dashboard_for_operations(client: TestClient) -> None:
    body = client.get("/api/v1/dashboard", headers=_as("operations")).json()

    assert body["pipeline"] is None
    assert body["leads"] is None
    assert body["quotes"] is None
    assert body["orders"]["in_progress"] == 4
    assert body["deliveries"]["today"] == 2
    assert body["tasks"]["overdue"] == 1


def test_notifications_for_user(client: TestClient) -> None:
    body = client.get("/api/v1/notifications", headers=_as("admin", **{"X-Admin-User": "admin-1"})).json()

    assert len(body["notifications"]) == 7
    assert body["unread_count"] == 3


def test_mark_unknown_notification_read(client: TestClient) -> None:
    assert client.post("/api/v1/notifications/missing/read", headers=_as("admin")).status_code == 404


def test_team_for_manager(client: TestClient) -> None:
    body = client.get("/api/v1/team", headers=_as("manager")).json()

    assert body["stats"]["total"] == 5
    assert body["stats"]["active"] == 4
    assert body["members"][0]["initials"] == "MD"
