"""Render-ready navigation structures built from a PaginationConfig."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PageNode(BaseModel):
    """A single page entry in a navigation widget."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, description="Page number (1-indexed)")
    link: str = Field(..., description="URL of the page")
    is_current: bool = Field(default=False, description="Whether this is the current page")


class PaginationView(BaseModel):
    """
    Navigation widget data.

    Attributes:
        first: Link to page 1
        prev: Previous page, absent on page 1
        current: The current page
        next: Next page, absent on the last page
        last: Last page, absent when there are no pages
        pages: Pages inside the navigation window
    """

    model_config = ConfigDict(frozen=True)

    first: PageNode
    prev: Optional[PageNode] = None
    current: PageNode
    next: Optional[PageNode] = None
    last: Optional[PageNode] = None
    pages: List[PageNode] = Field(default_factory=list)
