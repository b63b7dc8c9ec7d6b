"""Immutable pagination result object."""

from __future__ import annotations

import re
from functools import cached_property
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from fastapi_pagebuilder.core.errors import InvalidInputError
from fastapi_pagebuilder.core.math import validate_current_page
from fastapi_pagebuilder.core.navigation import navigation_pages, navigation_window
from fastapi_pagebuilder.links.factory import resolve_page_link

from .view import PageNode, PaginationView

_DIRECTIVE_PATTERN = re.compile(r"%.")


def _check_link_template(template: str) -> None:
    directives = _DIRECTIVE_PATTERN.findall(template.replace("%%", ""))
    if directives != ["%d"]:
        raise InvalidInputError(
            f"Page link template must contain exactly one %d placeholder, got {template!r}",
            field="page_link",
        )


class PaginationConfig(BaseModel):
    """
    Pagination state for one list view.

    ``first_page_link`` is always derived from ``page_link`` at page 1,
    once the other fields are valid; a value passed in is ignored.

    Attributes:
        max_navigate: Max number of page links in a navigation widget
        total_pages: Number of pages available
        current_page: Validated current page (1-indexed)
        page_link: ``%d`` template or callable rendering a page URL
        first_page_link: URL of page 1
    """

    model_config = ConfigDict(frozen=True)

    max_navigate: int = Field(..., description="Max page links to expose")
    total_pages: int = Field(..., ge=0, description="Total number of pages")
    current_page: int = Field(default=1, description="Current page (1-indexed)")
    page_link: Union[str, Callable[[int], str]] = Field(
        ..., description="Link template or page link callable"
    )

    @model_validator(mode="after")
    def _check_state(self) -> "PaginationConfig":
        if self.max_navigate < 1:
            raise InvalidInputError(
                f"max_navigate must be a positive integer, got {self.max_navigate!r}",
                field="max_navigate",
            )
        if isinstance(self.page_link, str):
            _check_link_template(self.page_link)
        validate_current_page(self.current_page, self.total_pages)
        # Resolved only once the current page is known to be in range.
        self.first_page_link
        return self

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def first_page_link(self) -> str:
        """URL of the first page."""
        return resolve_page_link(self.page_link, 1)

    def page_url(self, page: int) -> str:
        """Return the URL of ``page``."""
        return resolve_page_link(self.page_link, page)

    def navigation_range(self) -> tuple[int, int]:
        """Return the (first, last) pages of the navigation window."""
        return navigation_window(self.total_pages, self.current_page, self.max_navigate)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def _node(self, page: int) -> PageNode:
        link = self.first_page_link if page == 1 else self.page_url(page)
        return PageNode(number=page, link=link, is_current=page == self.current_page)

    def view(self) -> PaginationView:
        """Build the navigation widget data for this configuration."""
        return PaginationView(
            first=self._node(1),
            prev=self._node(self.current_page - 1) if self.has_previous else None,
            current=self._node(self.current_page),
            next=self._node(self.current_page + 1) if self.has_next else None,
            last=self._node(self.total_pages) if self.total_pages > 0 else None,
            pages=[
                self._node(page)
                for page in navigation_pages(self.total_pages, self.current_page, self.max_navigate)
            ],
        )
