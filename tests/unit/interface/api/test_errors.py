"""Unit tests for application-wide exception handlers."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from roster.domain.error import StoreFailureError
from roster.interface.api.errors import register_exception_handlers


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/store-failure")
    async def store_failure():
        raise StoreFailureError("fetching users")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    return app


class TestExceptionHandlers:
    """Tests for register_exception_handlers."""

    def test_store_failure_is_500_with_operation(self):
        """Store failures should surface as 500 naming the operation."""
        client = TestClient(_app())

        response = client.get("/store-failure")

        assert response.status_code == 500
        assert response.json() == {"detail": "Error during fetching users"}

    def test_unhandled_exception_hides_details(self):
        client = TestClient(_app(), raise_server_exceptions=False)

        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}
        assert "secret" not in response.text
