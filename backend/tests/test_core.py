"""Tests for configuration and shared error handling."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.config import Settings
from core.exceptions import NotFoundError, ValidationError, register_exception_handlers
from core.time_utils import to_naive_utc, utcnow


@pytest.fixture
def error_app() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/key-error")
    def raise_key_error():
        raise KeyError("Widget 1 not found")

    @app.get("/value-error")
    def raise_value_error():
        raise ValueError("Bad widget")

    @app.get("/not-found")
    def raise_not_found():
        raise NotFoundError("Widget not found")

    @app.get("/invalid")
    def raise_invalid():
        raise ValidationError("Widget is invalid")

    @app.get("/items/{item_id}")
    def get_item(item_id: int):
        return {"id": item_id}

    return TestClient(app)


class TestSettings:
    """Test cases for environment driven settings"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STATS_RECENT_DAYS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.stats_recent_days == 30
        assert settings.stats_response_rate == 24
        assert settings.sentiment_lexicon_path is None

    def test_cors_origins_from_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

        settings = Settings(_env_file=None)

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_environment_flags(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")

        settings = Settings(_env_file=None)

        assert settings.is_production


class TestExceptionHandlers:
    """Test cases for the registered exception handlers"""

    def test_key_error_is_404(self, error_app: TestClient):
        response = error_app.get("/key-error")

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"
        assert response.json()["path"] == "/key-error"

    def test_value_error_is_400(self, error_app: TestClient):
        response = error_app.get("/value-error")

        assert response.status_code == 400
        assert response.json()["detail"] == "Bad widget"

    def test_api_errors(self, error_app: TestClient):
        assert error_app.get("/not-found").status_code == 404
        invalid = error_app.get("/invalid")
        assert invalid.status_code == 400
        assert invalid.json()["error_code"] == "VALIDATION_ERROR"

    def test_request_validation_is_400(self, error_app: TestClient):
        response = error_app.get("/items/abc")

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Invalid request data"
        assert data["errors"][0]["loc"] == ["path", "item_id"]


class TestTimeUtils:
    def test_utcnow_is_naive(self):
        assert utcnow().tzinfo is None

    def test_to_naive_utc(self):
        from datetime import datetime, timedelta, timezone

        aware = datetime(2024, 1, 1, 12, tzinfo=timezone(timedelta(hours=-5)))

        assert to_naive_utc(aware) == datetime(2024, 1, 1, 17)
        assert to_naive_utc(None) is None
