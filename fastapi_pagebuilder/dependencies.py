"""FastAPI dependencies for request-scoped pagination.

Usage:
    @app.get("/articles", name="article_list")
    def list_articles(
        reader: StarletteRequestReader = Depends(get_request_reader),
        builder: PaginationBuilder = Depends(get_pagination_builder),
    ) -> dict:
        config = builder.paginate_request(reader, total_pages=12)
        return {"links": [page.link for page in config.view().pages]}
"""

from fastapi import Depends, Request

from fastapi_pagebuilder.builder import PaginationBuilder
from fastapi_pagebuilder.config import PaginationSettings, get_settings
from fastapi_pagebuilder.starlette.request import StarletteRequestReader
from fastapi_pagebuilder.starlette.url_generator import StarletteUrlGenerator


def get_request_reader(request: Request) -> StarletteRequestReader:
    """Wrap the current request for the builder."""
    return StarletteRequestReader(request)


def get_pagination_builder(
    request: Request,
    settings: PaginationSettings = Depends(get_settings),
) -> PaginationBuilder:
    """Return a builder whose page links are generated by the app router."""
    return PaginationBuilder.from_settings(
        settings,
        url_generator=StarletteUrlGenerator.from_request(request),
    )
