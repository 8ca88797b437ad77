"""
Basic application tests.

Validates that the FastAPI app starts correctly, the service-level
endpoints respond as expected and security headers are applied.
"""

import logging

from fastapi.testclient import TestClient

from library_api.core.config import Settings
from library_api.main import create_app
from library_api.shared.logging import configure_logging


class TestRootEndpoint:
    """Tests for the root banner."""

    def test_root_returns_banner(self, client: TestClient) -> None:
        """Root must identify the service in plain text."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Library Management API"


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self, client: TestClient) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["version"] == "0.1.0"


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client: TestClient) -> None:
        """All security headers must be present on every response."""
        response = client.get("/books")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Referrer-Policy" in response.headers
        assert "Content-Security-Policy" in response.headers

    def test_headers_present_on_errors(self, client: TestClient) -> None:
        """Error responses carry the same headers."""
        response = client.get("/books/999")
        assert response.status_code == 404
        assert response.headers["X-Content-Type-Options"] == "nosniff"


class TestUnexpectedErrors:
    """Tests for the catch-all error handler."""

    def test_internal_details_are_hidden(self, test_settings: Settings) -> None:
        """Unclassified failures return a generic 500 body."""
        app = create_app(test_settings)

        @app.get("/boom")
        def boom() -> None:
            raise RuntimeError("connection string with secrets")

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "error": "internal_error",
            "message": "Internal server error",
        }


class TestLoggingConfiguration:
    """Tests for configure_logging."""

    def test_sql_logged_only_at_debug(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

        configure_logging("INFO")
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
