"""Unit tests for Serving HTTP routes."""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from serving.domain.value_objects import StaticResponse


@pytest.fixture
def mock_service():
    """Mock StaticSiteService for testing."""
    service = Mock()
    service.serve = AsyncMock(return_value=StaticResponse.empty())
    return service


@pytest.fixture
def test_client(mock_service):
    """Create TestClient with mocked dependencies."""
    from fastapi import FastAPI

    from serving import dependencies
    from serving.presentation import routes

    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    app.dependency_overrides[dependencies.get_static_site_service] = (
        lambda: mock_service
    )

    app.include_router(routes.router)

    return TestClient(app)


class TestServeStaticRoute:
    """Tests for the catch-all route."""

    def test_passes_host_and_path_to_service(self, test_client, mock_service):
        """The raw Host header and URL path reach the service."""
        test_client.get("/docs/page.html?x=1", headers={"Host": "a.com:8080"})

        kwargs = mock_service.serve.await_args.kwargs
        assert kwargs["raw_host"] == b"a.com:8080"
        assert kwargs["request_path"] == "/docs/page.html"

    def test_trailing_slash_is_preserved(self, test_client, mock_service):
        """Directory-style URLs are not redirected or trimmed."""
        response = test_client.get("/blog/", follow_redirects=False)

        assert response.status_code == status.HTTP_200_OK
        assert mock_service.serve.await_args.kwargs["request_path"] == "/blog/"

    def test_request_id_is_assigned(self, test_client, mock_service):
        """Every request gets its own observation context."""
        test_client.get("/")
        test_client.get("/")

        first, second = (
            call.kwargs["context"] for call in mock_service.serve.await_args_list
        )
        assert first.request_id is not None
        assert first.request_id != second.request_id

    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE", "PATCH"])
    def test_method_is_ignored(self, test_client, mock_service, method):
        """Every method goes through the same pipeline."""
        response = test_client.request(method, "/index.html")

        assert response.status_code == status.HTTP_200_OK
        mock_service.serve.assert_awaited_once()

    @pytest.mark.parametrize("method", ["PROPFIND", "PURGE", "MKCOL"])
    def test_unlisted_method_is_served(self, test_client, mock_service, method):
        """Methods outside the advertised list are not answered with 405."""
        response = test_client.request(
            method, "/index.html", headers={"Host": "a.com"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert mock_service.serve.await_args.kwargs["raw_host"] == b"a.com"

    def test_file_response_is_forwarded(self, test_client, mock_service):
        """Status, headers and body come from the service result."""
        mock_service.serve.return_value = StaticResponse(
            status_code=200,
            headers=(("Content-Type", "text/css"),),
            body=b"body{}",
        )

        response = test_client.get("/site.css")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"] == "text/css"
        assert response.content == b"body{}"

    def test_empty_response_has_no_content_type(self, test_client, mock_service):
        """The empty 200 carries no Content-Type header."""
        response = test_client.get("/missing")

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""
        assert "content-type" not in response.headers

    def test_maintenance_response_is_forwarded(self, test_client, mock_service):
        """The 503 keeps its Retry-After header."""
        mock_service.serve.return_value = StaticResponse(
            status_code=503,
            headers=(("Content-Type", "text/html"), ("Retry-After", "300")),
            body=b"down",
        )

        response = test_client.get("/")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.headers["retry-after"] == "300"
        assert response.headers["content-type"] == "text/html"

    def test_docs_paths_belong_to_tenants(self, test_client, mock_service):
        """Framework documentation routes do not shadow tenant files."""
        test_client.get("/docs")
        test_client.get("/openapi.json")

        assert mock_service.serve.await_count == 2
