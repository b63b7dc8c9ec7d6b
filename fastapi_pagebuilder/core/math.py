"""Page arithmetic: total page counts and current page validation."""

from __future__ import annotations

import logging
import re
from typing import Any

from .errors import IncorrectPageNumberError, InvalidInputError, OutOfRangeError

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def _require_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{field} must be an integer, got {value!r}", field=field)
    return value


def total_pages(total_items: int, per_page: int) -> int:
    """Return ceil(total_items / per_page).

    Raises:
        InvalidInputError: If per_page < 1 or total_items < 0
    """
    total_items = _require_int(total_items, "total_items")
    per_page = _require_int(per_page, "per_page")
    if per_page < 1:
        raise InvalidInputError(f"per_page must be at least 1, got {per_page}", field="per_page")
    if total_items < 0:
        raise InvalidInputError(
            f"total_items must not be negative, got {total_items}", field="total_items"
        )
    return (total_items + per_page - 1) // per_page  # Ceiling division


def parse_page_number(value: Any, parameter_name: str | None = None) -> int:
    """Parse a raw page value into an integer.

    ``None`` means no page was supplied and yields page 1. Present values
    must be whole numbers: ints, integral floats, or digit strings with an
    optional sign. Range is not checked here.

    Raises:
        IncorrectPageNumberError: If the value is present but malformed
    """
    if value is None:
        return 1
    if isinstance(value, bool):
        raise IncorrectPageNumberError(value, parameter_name)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise IncorrectPageNumberError(value, parameter_name)
    if isinstance(value, str):
        stripped = value.strip()
        if _INTEGER_PATTERN.match(stripped):
            try:
                return int(stripped)
            except ValueError:
                # Digit strings beyond the interpreter's conversion limit.
                raise IncorrectPageNumberError(value, parameter_name) from None
    raise IncorrectPageNumberError(value, parameter_name)


def validate_current_page(
    value: Any,
    total_pages: int,
    parameter_name: str | None = None,
) -> int:
    """Parse ``value`` and check it against ``total_pages``.

    An empty result set has exactly one valid page: page 1.

    Raises:
        IncorrectPageNumberError: If the value is present but malformed
        OutOfRangeError: If the page lies outside [1, total_pages]
        InvalidInputError: If total_pages is negative
    """
    total_pages = _require_int(total_pages, "total_pages")
    if total_pages < 0:
        raise InvalidInputError(
            f"total_pages must not be negative, got {total_pages}", field="total_pages"
        )

    page = parse_page_number(value, parameter_name)
    if page < 1 or (total_pages > 0 and page > total_pages) or (total_pages == 0 and page != 1):
        logger.debug("Rejected page %s of %s", page, total_pages)
        raise OutOfRangeError(page, total_pages, parameter_name)
    return page


def page_offset(current_page: int, per_page: int) -> int:
    """Return the zero-based item offset of ``current_page``."""
    return (current_page - 1) * per_page
