"""Smoke tests focused on startup-critical components."""

from fastapi.testclient import TestClient

from app.main import app


def test_root_handler_returns_expected_message(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Feedback dashboard backend is running"}


def test_health_check(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_all_routers_are_mounted() -> None:
    paths = app.openapi()["paths"]

    for expected in [
        "/api/feedback",
        "/api/feedback/{feedback_id}",
        "/api/analyze-sentiment",
        "/api/templates",
        "/api/templates/{template_id}/preview",
        "/api/forms",
        "/api/brand-settings",
        "/api/stats",
    ]:
        assert expected in paths


def test_startup_event_creates_tables_and_loads_lexicon(db_session) -> None:
    """Entering the client runs the startup event against the test database."""
    with TestClient(app) as client:
        response = client.post("/api/analyze-sentiment", json={"text": "great"})

    assert response.json() == {"sentiment": "positive", "score": 80}


def test_startup_checks_pass() -> None:
    from app.startup import StartupValidator

    passed, errors, _warnings = StartupValidator().validate_all()

    assert passed, errors
