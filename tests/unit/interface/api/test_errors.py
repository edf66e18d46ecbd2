"""Unit tests for error translation and request timeouts."""

import asyncio

from fastapi import FastAPI
from fastapi.testclient import TestClient

from readproof.domain.error import (
    AuthorizationError,
    ConflictError,
    ErrorCode,
    InternalError,
    NotFoundError,
    ReplayError,
    ValidationError,
)
from readproof.interface.api.app import add_timeout_middleware
from readproof.interface.api.errors import (
    domain_error_response,
    register_error_handlers,
    status_for,
)


class TestStatusFor:
    """Tests for status code selection."""

    def test_each_family_has_one_status(self):
        assert status_for(ValidationError("bad")) == 400
        assert status_for(ReplayError("stale", ErrorCode.TIMESTAMP_STALE)) == 400
        assert status_for(AuthorizationError("comment", "1", "0xabc")) == 403
        assert status_for(NotFoundError("Comment", "1")) == 404
        assert status_for(ConflictError("dup")) == 409
        assert status_for(InternalError("boom")) == 500

    def test_body_shape(self):
        response = domain_error_response(
            ValidationError("bad", violations=[{"field": "x", "message": "y"}])
        )

        assert response.status_code == 400
        assert response.body == (
            b'{"error":{"kind":"validation_error","code":"validation_failed",'
            b'"message":"bad","violations":[{"field":"x","message":"y"}]}}'
        )


class TestTimeout:
    """Tests for the request timeout middleware."""

    def test_slow_request_times_out(self):
        # Arrange
        app = FastAPI()

        @app.get("/slow")
        async def slow():
            await asyncio.sleep(1)
            return {"ok": True}

        add_timeout_middleware(app, timeout_seconds=0.05)
        client = TestClient(app)

        # Act
        response = client.get("/slow")

        # Assert
        assert response.status_code == 504
        assert response.json()["error"]["code"] == "timeout"

    def test_fast_request_passes(self):
        app = FastAPI()

        @app.get("/fast")
        async def fast():
            return {"ok": True}

        add_timeout_middleware(app, timeout_seconds=1)

        assert TestClient(app).get("/fast").json() == {"ok": True}


class TestRegisterErrorHandlers:
    def test_domain_error_raised_in_route(self):
        app = FastAPI()
        register_error_handlers(app)

        @app.get("/missing")
        async def missing():
            raise NotFoundError("Comment", "42", ErrorCode.COMMENT_NOT_FOUND)

        response = TestClient(app).get("/missing")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Comment not found: 42"
