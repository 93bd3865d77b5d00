"""Tests for the HTTP API (FastAPI TestClient)."""

import pytest
from fastapi.testclient import TestClient

from review_insights.application.use_cases.process_review import ProcessReview
from review_insights.domain.models import StaffRef
from review_insights.infrastructure.staff.json_staff_directory import InMemoryStaffDirectory
from review_insights.interface.http import api

TEXT = "Sarah was great. The manager handled our complaint."


class BrokenDirectory:
    def active_staff(self, company_id):  # type: ignore[no-untyped-def]
        raise RuntimeError("connection refused")


@pytest.fixture
def client():
    directory = InMemoryStaffDirectory(
        {
            "c1": [
                StaffRef(id="s1", name="Sarah", position="server"),
                StaffRef(id="s2", name="Tom Baker", position="manager"),
            ]
        }
    )
    api.app.dependency_overrides[api.get_process_review_use_case] = lambda: ProcessReview(
        staff_directory=directory
    )
    yield TestClient(api.app)
    api.app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_sentiment(client: TestClient) -> None:
    resp = client.post("/v1/sentiment", json={"text": "very good"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["sentiment"] == "POSITIVE"
    assert body["score"] == pytest.approx(0.75)
    assert body["confidence"] == pytest.approx(0.8)


def test_sentiment_empty_text(client: TestClient) -> None:
    body = client.post("/v1/sentiment", json={"text": ""}).json()
    assert body == {"sentiment": "NEUTRAL", "confidence": 0.6, "score": 0.0}


def test_batch(client: TestClient) -> None:
    resp = client.post("/v1/sentiment/batch", json={"texts": ["great", "terrible"]})
    assert resp.status_code == 200
    assert resp.json()["distribution"] == {"positive": 1, "neutral": 0, "negative": 1}


def test_batch_empty_is_bad_request(client: TestClient) -> None:
    resp = client.post("/v1/sentiment/batch", json={"texts": []})
    assert resp.status_code == 400


def test_mentions(client: TestClient) -> None:
    resp = client.post(
        "/v1/mentions",
        json={
            "text": "Sarah was great.",
            "staff": [{"id": "s1", "name": "Sarah", "position": "Manager"}],
        },
    )
    assert resp.status_code == 200
    mentions = resp.json()["mentions"]
    assert len(mentions) == 1
    assert mentions[0]["staff_id"] == "s1"
    assert mentions[0]["start_index"] == 0
    assert mentions[0]["confidence"] >= 0.8


def test_mentions_threshold_out_of_range(client: TestClient) -> None:
    resp = client.post("/v1/mentions", json={"text": "x", "staff": [], "threshold": 2})
    assert resp.status_code == 422


def test_process_review(client: TestClient) -> None:
    resp = client.post(
        "/v1/reviews/process", json={"review_id": "r1", "company_id": "c1", "text": TEXT}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["sentiment"]["sentiment"] == "POSITIVE"
    assert [m["staff_id"] for m in body["mentions"]] == ["s1", "s2"]


def test_process_review_validation(client: TestClient) -> None:
    resp = client.post(
        "/v1/reviews/process", json={"review_id": "", "company_id": "c1", "text": TEXT}
    )
    assert resp.status_code == 400


def test_process_review_roster_failure(client: TestClient) -> None:
    api.app.dependency_overrides[api.get_process_review_use_case] = lambda: ProcessReview(
        staff_directory=BrokenDirectory()
    )
    resp = client.post(
        "/v1/reviews/process", json={"review_id": "r1", "company_id": "c1", "text": TEXT}
    )
    assert resp.status_code == 502


def test_trends(client: TestClient) -> None:
    resp = client.post(
        "/v1/sentiment/trends",
        json={
            "reviews": [
                {"sentiment": "NEGATIVE", "created_at": "2024-01-01T10:00:00"},
                {"sentiment": "POSITIVE", "created_at": "2024-03-01T10:00:00Z"},
            ]
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"trend": "improving", "change": 200.0, "period": "1 to 1 reviews"}
