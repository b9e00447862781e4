"""Integration tests for the activity API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from activity_fanout.infrastructure.database import get_db
from activity_fanout.interfaces.api.dependencies import get_activity_store


@pytest.fixture()
def client(services, session_factory, wiki):
    """Return a test client whose dependencies point at the per-test database."""

    from main import create_app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_activity_store] = lambda: services.store
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_activity_lifecycle(client: TestClient, services) -> None:
    """Watch a page, record a comment, inspect the notification and remove the activity."""

    watch_response = client.put("/pages/100/watchers/2", json={"status": "WATCH"})
    assert watch_response.status_code == 200
    assert watch_response.json()["status"] == "WATCH"

    payload = {
        "user_id": 1,
        "target_model": "Page",
        "target_id": 100,
        "action": "COMMENT",
        "event_id": 11,
        "event_model": "Comment",
    }
    response = client.post("/activities/", json=payload)
    assert response.status_code == 201
    created = response.json()
    assert {key: created[key] for key in payload} == payload
    assert created["id"]
    assert created["created_at"]

    assert services.coordinator.wait_idle(timeout=10)

    notifications = client.get("/users/2/notifications").json()
    assert len(notifications) == 1
    assert notifications[0]["activity_ids"] == [created["id"]]

    activities = client.get("/users/1/activities").json()
    assert [activity["id"] for activity in activities] == [created["id"]]

    same = client.get("/activities/same", params={"target_id": 100, "action": "COMMENT"}).json()
    assert [activity["id"] for activity in same] == [created["id"]]

    removal = client.delete("/activities/", params={"user_id": 1, "target_id": 100})
    assert removal.status_code == 200
    assert removal.json() == {"removed": 1}
    assert client.get("/users/2/notifications").json() == []


@pytest.mark.filterwarnings("error:.*HTTP_422_UNPROCESSABLE_ENTITY:DeprecationWarning")
def test_unregistered_target_model_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/activities/",
        json={"user_id": 1, "target_model": "Page2", "target_id": 100, "action": "COMMENT"},
    )

    assert response.status_code == 422
    assert "Activity validation failed" in response.json()["detail"]
    assert client.get("/users/1/activities").json() == []


def test_duplicate_activity_returns_conflict(client: TestClient) -> None:
    payload = {
        "user_id": 1,
        "target_model": "Page",
        "target_id": 100,
        "action": "LIKE",
        "created_at": "2024-05-01T12:00:00+00:00",
    }

    assert client.post("/activities/", json=payload).status_code == 201
    assert client.post("/activities/", json=payload).status_code == 409


@pytest.mark.filterwarnings("error:.*HTTP_422_UNPROCESSABLE_ENTITY:DeprecationWarning")
def test_removal_requires_a_filter(client: TestClient) -> None:
    response = client.delete("/activities/")

    assert response.status_code == 422


def test_invalid_watch_status_is_rejected(client: TestClient) -> None:
    response = client.put("/pages/100/watchers/2", json={"status": "MAYBE"})

    assert response.status_code == 422
