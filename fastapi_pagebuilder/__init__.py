"""Pagination metadata and page links for FastAPI list views."""

from .builder import PaginationBuilder
from .core.errors import (
    IncorrectPageNumberError,
    InvalidInputError,
    OutOfRangeError,
    PaginationError,
)
from .links.factory import LinkStyle, PageLink, ReferenceType
from .schemas.config import PaginationConfig
from .schemas.view import PageNode, PaginationView

__all__ = [
    "IncorrectPageNumberError",
    "InvalidInputError",
    "LinkStyle",
    "OutOfRangeError",
    "PageLink",
    "PageNode",
    "PaginationBuilder",
    "PaginationConfig",
    "PaginationError",
    "PaginationView",
    "ReferenceType",
]
