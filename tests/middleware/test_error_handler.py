# tests/middleware/test_error_handler.py
"""
Tests for pagination error handling in a FastAPI app.

Exercises the FastAPI dependencies and PaginationErrorMiddleware together.
"""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from fastapi_pagebuilder.builder import PaginationBuilder
from fastapi_pagebuilder.config import PaginationSettings, get_settings
from fastapi_pagebuilder.core.errors import (
    IncorrectPageNumberError,
    InvalidInputError,
    OutOfRangeError,
    PaginationError,
)
from fastapi_pagebuilder.dependencies import get_pagination_builder, get_request_reader
from fastapi_pagebuilder.links.factory import ReferenceType
from fastapi_pagebuilder.middleware import PaginationErrorMiddleware, error_response
from fastapi_pagebuilder.middleware.error_handler import error_document, error_object
from fastapi_pagebuilder.starlette import StarletteRequestReader


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(PaginationErrorMiddleware)
    app.dependency_overrides[get_settings] = lambda: PaginationSettings(
        max_navigate=5, parameter_name="page"
    )

    @app.get("/articles", name="article_list")
    def list_articles(
        reader: StarletteRequestReader = Depends(get_request_reader),
        builder: PaginationBuilder = Depends(get_pagination_builder),
    ) -> dict:
        config = builder.paginate_request(reader, total_pages=12)
        return {
            "current": config.current_page,
            "first": config.first_page_link,
            "pages": [page.link for page in config.view().pages],
        }

    @app.get("/authors/{author_id}/articles", name="author_articles")
    def list_author_articles(
        author_id: int,
        reader: StarletteRequestReader = Depends(get_request_reader),
        builder: PaginationBuilder = Depends(get_pagination_builder),
    ) -> dict:
        config = builder.paginate_request(
            reader, total_pages=20, reference_type=ReferenceType.ABSOLUTE_URL
        )
        return {"route": reader.route_name, "next": config.page_url(config.current_page + 1)}

    @app.get("/broken")
    def broken() -> dict:
        PaginationBuilder(max_navigate=0)
        return {}

    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


class TestFastAPIPagination:
    """Tests for request pagination through FastAPI dependencies."""

    def test_page_links(self, client):
        """Should generate router links that keep other query parameters."""
        response = client.get("/articles?sort=title&page=3")
        body = response.json()

        assert response.status_code == 200
        assert body["current"] == 3
        assert body["first"] == "/articles?page=1&sort=title"
        assert body["pages"] == [f"/articles?page={page}&sort=title" for page in range(1, 6)]

    def test_default_page(self, client):
        """Should serve page 1 when the parameter is absent."""
        assert client.get("/articles").json()["current"] == 1

    def test_absolute_links_with_path_params(self, client):
        """Should fill route parameters into absolute page links."""
        body = client.get("/authors/4/articles?page=2").json()

        assert body["route"] == "author_articles"
        assert body["next"] == "http://testserver/authors/4/articles?page=3"


class TestPaginationErrorMiddleware:
    """Tests for PaginationErrorMiddleware."""

    def test_incorrect_page_number(self, client):
        """Should respond 400 to a malformed page parameter."""
        response = client.get("/articles?page=foo")

        assert response.status_code == 400
        error = response.json()["errors"][0]
        assert error["status"] == "400"
        assert error["title"] == "Bad Request"
        assert error["source"] == {"parameter": "page"}

    def test_empty_page_number(self, client):
        """Should treat an empty page parameter as malformed."""
        assert client.get("/articles?page=").status_code == 400

    def test_out_of_range(self, client):
        """Should respond 404 to a page beyond the total."""
        response = client.get("/articles?page=13")

        assert response.status_code == 404
        error = response.json()["errors"][0]
        assert error["title"] == "Not Found"
        assert "13" in error["detail"]

    def test_page_zero(self, client):
        """Should respond 404 to page 0."""
        assert client.get("/articles?page=0").status_code == 404

    def test_invalid_input_propagates(self, client):
        """Should not convert programming errors into client errors."""
        with pytest.raises(InvalidInputError):
            client.get("/broken")


class TestErrorResponse:
    """Tests for error_response()."""

    def test_incorrect_page_number(self):
        """Should map IncorrectPageNumberError to 400."""
        assert error_response(IncorrectPageNumberError("x", "page")).status_code == 400

    def test_out_of_range_without_parameter(self):
        """Should map OutOfRangeError to 404 and omit the source."""
        response = error_response(OutOfRangeError(5, 2))

        assert response.status_code == 404
        assert b'"source"' not in response.body

    def test_other_errors(self):
        """Should return None for errors that are not user-facing."""
        assert error_response(InvalidInputError("bad")) is None
        assert error_response(PaginationError("bad")) is None


class TestErrorObject:
    """Tests for error_object() and error_document()."""

    def test_omits_missing_members(self):
        """Should only include the members that were supplied."""
        assert error_object(status="404", title="Not Found") == {
            "status": "404",
            "title": "Not Found",
        }

    def test_full_object(self):
        """Should include detail and source when given."""
        error = error_object(
            status="400", title="Bad Request", detail="Incorrect page number: 'x'",
            source={"parameter": "page"},
        )

        assert error_document([error]) == {"errors": [error]}
        assert error["source"] == {"parameter": "page"}
