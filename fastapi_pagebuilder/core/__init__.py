"""Core page arithmetic, navigation and errors."""

from .errors import (
    IncorrectPageNumberError,
    InvalidInputError,
    OutOfRangeError,
    PaginationError,
)
from .math import page_offset, parse_page_number, total_pages, validate_current_page
from .navigation import navigation_pages, navigation_window

__all__ = [
    "IncorrectPageNumberError",
    "InvalidInputError",
    "OutOfRangeError",
    "PaginationError",
    "navigation_pages",
    "navigation_window",
    "page_offset",
    "parse_page_number",
    "total_pages",
    "validate_current_page",
]
