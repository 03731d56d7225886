"""
Basic application tests.

Validates that the FastAPI app starts, the health endpoint answers
with an envelope, and framework-level errors are enveloped too.
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from slowapi.errors import RateLimitExceeded

from app import main
from app.interfaces.dependencies import get_engine
from app.shared.errors.handlers import collect_field_errors
from app.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self, client) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/api/v1/health").json()
        assert body["success"] is True
        assert body["data"]["status"] == "ok"
        assert "version" in body["data"]


class TestFrameworkErrors:
    """Routing failures still leave as error envelopes."""

    def test_unknown_route(self, client) -> None:
        response = client.get("/api/v1/nothing-here")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Not Found",
            "error": "Not Found",
        }

    def test_wrong_method(self, client) -> None:
        response = client.post("/api/v1/health")
        assert response.status_code == 405
        body = response.json()
        assert body["success"] is False
        assert body["message"] == body["error"]
        assert "GET" in response.headers["allow"]


class TestCollectFieldErrors:
    """Tests for grouping pydantic errors by field."""

    def test_groups_and_strips_location(self) -> None:
        grouped = collect_field_errors(
            [
                {"loc": ("body", "title"), "msg": "Field required"},
                {"loc": ("query", "limit"), "msg": "too big"},
                {"loc": ("body", "title"), "msg": "too short"},
                {"loc": ("body", "tags", 0), "msg": "bad tag"},
                {"loc": ("body",), "msg": "JSON decode error"},
            ]
        )
        assert grouped == {
            "title": ["Field required", "too short"],
            "limit": ["too big"],
            "tags.0": ["bad tag"],
            "body": ["JSON decode error"],
        }


class TestRateLimiting:
    """Tests for the rate limit handler and middleware."""

    def test_rate_limit_returns_429_envelope(self) -> None:
        limit = MagicMock(error_message=None, limit="1 per 1 minute")
        response = rate_limit_exceeded_handler(MagicMock(), RateLimitExceeded(limit))
        assert response.status_code == 429
        assert response.body == (
            b'{"success":false,"message":"Rate limit exceeded","error":"Rate limit exceeded"}'
        )

    def test_second_request_over_limit_gets_429_envelope(
        self, engine, monkeypatch
    ) -> None:
        """A live app with a 1/minute default rejects the second call."""
        monkeypatch.setattr(main, "limiter", build_limiter("1/minute", enabled=True))
        limited_app = main.create_app()
        limited_app.dependency_overrides[get_engine] = lambda: engine

        with TestClient(limited_app) as limited_client:
            first = limited_client.get("/api/v1/health")
            second = limited_client.get("/api/v1/health")

        assert first.status_code == 200
        assert second.status_code == 429
        assert second.json() == {
            "success": False,
            "message": "Rate limit exceeded",
            "error": "Rate limit exceeded",
        }
