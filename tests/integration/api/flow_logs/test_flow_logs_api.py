"""Integration tests: POST /api/flow-logs and GET /api/log-entries."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.infrastructure.database import models as _models  # noqa: F401
from src.infrastructure.database.base import Base
from src.infrastructure.database.engine import get_db_session
from src.infrastructure.database.models import LogEntryModel, LogIssueModel
from src.interfaces.api.main import app


@pytest.fixture(scope="function")
def test_engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def client(test_engine):
    def override_get_db_session():
        TestingSessionLocal = sessionmaker(bind=test_engine)
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db_session] = override_get_db_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def db_session(test_engine) -> Session:
    TestingSessionLocal = sessionmaker(bind=test_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def _count(db: Session, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def test_submit_flow_logs_returns_one_response_per_request(
    client: TestClient, db_session: Session, sample_flow_log_data: dict
):
    payload = [
        {**sample_flow_log_data, "stacktrace": "partial", "fullStacktrace": "full|"},
        {**sample_flow_log_data, "summary": "second", "stacktrace": "only-partial"},
    ]

    resp = client.post("/api/flow-logs", json=payload)

    assert resp.status_code == 200
    body = resp.json()
    assert [item["fullStacktrace"] for item in body] == ["full|partial", "only-partial"]
    assert [item["stacktrace"] for item in body] == ["full|partial", "only-partial"]
    assert body[0]["transactionId"] == body[1]["transactionId"]
    assert _count(db_session, LogEntryModel) == 2


def test_submit_empty_batch(client: TestClient, db_session: Session):
    resp = client.post("/api/flow-logs", json=[])

    assert resp.status_code == 200
    assert resp.json() == []
    assert _count(db_session, LogEntryModel) == 0


def test_submit_requires_area_and_summary(client: TestClient, db_session: Session):
    resp = client.post("/api/flow-logs", json=[{"summary": "missing area"}])

    assert resp.status_code == 422
    assert _count(db_session, LogEntryModel) == 0


def test_fallbacks_are_annotated_in_details(client: TestClient, sample_flow_log_data: dict):
    payload = [
        {
            **sample_flow_log_data,
            "level": "LOUD",
            "category": "Bogus",
            "additionalFields": "not-json",
            "transactionId": "tx-annotated",
        }
    ]

    assert client.post("/api/flow-logs", json=payload).status_code == 200
    resp = client.get("/api/log-entries", params={"transaction_id": "tx-annotated"})

    assert resp.status_code == 200
    (entry,) = resp.json()["entries"]
    assert entry["level"] == "INFO"
    assert entry["category"] == "Flow"
    assert "Unable to locate log level: LOUD." in entry["details"]
    assert "Unable to locate category: Bogus." in entry["details"]
    assert entry["details"].endswith(
        "Additional Information (failed to parse json input to invokable): not-json."
    )


def test_deeply_nested_additional_fields_keep_the_batch(
    client: TestClient, db_session: Session, sample_flow_log_data: dict
):
    payload = [
        {**sample_flow_log_data, "summary": "ok-entry"},
        {**sample_flow_log_data, "summary": "nested", "additionalFields": "[" * 200000},
    ]

    resp = client.post("/api/flow-logs", json=payload)

    assert resp.status_code == 200
    assert len(resp.json()) == 2
    assert _count(db_session, LogEntryModel) == 2


def test_additional_fields_and_workflow_context_are_persisted(
    client: TestClient, sample_flow_log_data: dict
):
    payload = [{**sample_flow_log_data, "additionalFields": '{"x":1,"y":"a"}'}]

    client.post("/api/flow-logs", json=payload)
    resp = client.get("/api/log-entries", params={"interview_id": "interview-0001"})

    (entry,) = resp.json()["entries"]
    assert entry["attributes"] == {"x": 1, "y": "a"}
    assert entry["details"] == sample_flow_log_data["details"]
    assert entry["flow_api_name"] == "Account_Owner_Assignment"
    assert all(entry["post_processing"].values())

    detail = client.get(f"/api/log-entries/{entry['id']}")
    assert detail.status_code == 200
    assert detail.json()["summary"] == sample_flow_log_data["summary"]


def test_error_level_creates_issue(
    client: TestClient, db_session: Session, sample_flow_log_data: dict
):
    payload = [
        {**sample_flow_log_data, "level": "ERROR", "transactionId": "tx-error"},
        {**sample_flow_log_data, "level": "WARNING", "transactionId": "tx-error"},
    ]

    client.post("/api/flow-logs", json=payload)
    resp = client.get("/api/log-entries/issues", params={"transaction_id": "tx-error"})

    assert resp.status_code == 200
    assert len(resp.json()) == 1
    assert _count(db_session, LogIssueModel) == 1


def test_get_missing_log_entry_returns_404(client: TestClient):
    resp = client.get("/api/log-entries/log_missing")

    assert resp.status_code == 404


def test_list_log_entries_requires_filter(client: TestClient):
    resp = client.get("/api/log-entries")

    assert resp.status_code == 400


def test_health_endpoints(client: TestClient):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/api/health/").json()["status"] == "healthy"
    assert "version" in client.get("/api/health/version").json()
