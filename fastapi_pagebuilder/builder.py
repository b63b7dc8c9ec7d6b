"""Pagination builder: assembles a PaginationConfig from raw inputs.

The builder is the only component that talks to collaborators: it counts
and slices query sources, reads the current page from the request and
hands URL generation to the configured generator. Every collaborator is
reached through the protocols in :mod:`fastapi_pagebuilder.protocols`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi_pagebuilder.core.errors import InvalidInputError
from fastapi_pagebuilder.core.math import (
    page_offset,
    total_pages as compute_total_pages,
    validate_current_page,
)
from fastapi_pagebuilder.links.factory import (
    LinkStyle,
    PageLinkValue,
    ReferenceType,
    build_page_link,
)
from fastapi_pagebuilder.schemas.config import PaginationConfig

if TYPE_CHECKING:
    from fastapi_pagebuilder.config import PaginationSettings
    from fastapi_pagebuilder.protocols import QuerySource, RequestReader, UrlGenerator

logger = logging.getLogger(__name__)


class PaginationBuilder:
    """Build pagination configurations for list views."""

    def __init__(
        self,
        url_generator: UrlGenerator | None = None,
        max_navigate: int = 5,
        parameter_name: str = "page",
    ) -> None:
        """Store the URL generator and navigation defaults."""
        if isinstance(max_navigate, bool) or not isinstance(max_navigate, int) or max_navigate < 1:
            raise InvalidInputError(
                f"max_navigate must be a positive integer, got {max_navigate!r}",
                field="max_navigate",
            )
        if not parameter_name:
            raise InvalidInputError("parameter_name must not be empty.", field="parameter_name")
        self.url_generator = url_generator
        self.max_navigate = max_navigate
        self.parameter_name = parameter_name

    @classmethod
    def from_settings(
        cls,
        settings: PaginationSettings,
        url_generator: UrlGenerator | None = None,
    ) -> "PaginationBuilder":
        """Create a builder from PaginationSettings."""
        return cls(
            url_generator,
            max_navigate=settings.max_navigate,
            parameter_name=settings.parameter_name,
        )

    def paginate(
        self,
        total_pages: int,
        current_page: Any = 1,
        parameter_name: str | None = None,
    ) -> PaginationConfig:
        """Paginate when the page count is already known."""
        parameter_name = parameter_name or self.parameter_name
        current_page = validate_current_page(current_page, total_pages, parameter_name)
        return self._build(total_pages, current_page, build_page_link(parameter_name))

    def paginate_query(
        self,
        source: QuerySource,
        per_page: int,
        current_page: Any = 1,
        parameter_name: str | None = None,
    ) -> PaginationConfig:
        """Count ``source``, validate the page, then slice ``source`` to it."""
        parameter_name = parameter_name or self.parameter_name
        total_pages, current_page = self._count_and_slice(
            source, per_page, current_page, parameter_name
        )
        return self._build(total_pages, current_page, build_page_link(parameter_name))

    def paginate_request(
        self,
        request: RequestReader,
        total_pages: int,
        parameter_name: str | None = None,
        reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
    ) -> PaginationConfig:
        """Paginate using the page parameter and route of ``request``."""
        parameter_name = parameter_name or self.parameter_name
        raw_page = request.get_param(parameter_name)
        current_page = validate_current_page(raw_page, total_pages, parameter_name)
        page_link = self._request_page_link(request, parameter_name, reference_type)
        return self._build(total_pages, current_page, page_link)

    def paginate_request_query(
        self,
        request: RequestReader,
        source: QuerySource,
        per_page: int,
        parameter_name: str | None = None,
        reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
    ) -> PaginationConfig:
        """Combine paginate_query and paginate_request.

        The source is counted before the page value is validated.
        """
        parameter_name = parameter_name or self.parameter_name
        raw_page = request.get_param(parameter_name)
        total_pages, current_page = self._count_and_slice(
            source, per_page, raw_page, parameter_name
        )
        page_link = self._request_page_link(request, parameter_name, reference_type)
        return self._build(total_pages, current_page, page_link)

    def _count_and_slice(
        self,
        source: QuerySource,
        per_page: int,
        current_page: Any,
        parameter_name: str,
    ) -> tuple[int, int]:
        total_items = source.count()
        total_pages = compute_total_pages(total_items, per_page)
        current_page = validate_current_page(current_page, total_pages, parameter_name)
        offset = page_offset(current_page, per_page)
        logger.debug("Slicing source at offset=%s limit=%s", offset, per_page)
        source.slice(offset, per_page)
        return total_pages, current_page

    def _request_page_link(
        self,
        request: RequestReader,
        parameter_name: str,
        reference_type: ReferenceType,
    ) -> PageLinkValue:
        base_params = {**request.query_params, **request.route_params}
        base_params.pop(parameter_name, None)
        return build_page_link(
            parameter_name,
            style=LinkStyle.CLOSURE,
            url_generator=self.url_generator,
            route=request.route_name,
            base_params=base_params,
            reference_type=reference_type,
        )

    def _build(self, total_pages: int, current_page: int, page_link: PageLinkValue) -> PaginationConfig:
        config = PaginationConfig(
            max_navigate=self.max_navigate,
            total_pages=total_pages,
            current_page=current_page,
            page_link=page_link,
        )
        logger.debug(
            "Built pagination: page %s of %s (max_navigate=%s)",
            current_page,
            total_pages,
            self.max_navigate,
        )
        return config
