"""Navigation window computation."""

from __future__ import annotations

from .errors import InvalidInputError


def navigation_window(total_pages: int, current_page: int, max_navigate: int) -> tuple[int, int]:
    """Return the (first, last) page numbers to expose around ``current_page``.

    The window holds at most ``min(max_navigate, total_pages)`` pages and is
    centered on the current page, shifted inward near either end. For an
    even ``max_navigate`` the current page sits just right of center.

    An empty result set yields the empty window ``(1, 0)``.

    Example:
        >>> navigation_window(50, 7, 6)
        (4, 9)
        >>> navigation_window(50, 1, 6)
        (1, 6)
        >>> navigation_window(50, 49, 6)
        (45, 50)
    """
    if max_navigate < 1:
        raise InvalidInputError(
            f"max_navigate must be at least 1, got {max_navigate}", field="max_navigate"
        )
    if total_pages < 1:
        return 1, 0

    width = min(max_navigate, total_pages)
    start = current_page - max_navigate // 2
    end = start + max_navigate - 1

    if start < 1:
        start = 1
        end = width
    elif end > total_pages:
        end = total_pages
        start = max(end - width + 1, 1)
    return start, end


def navigation_pages(total_pages: int, current_page: int, max_navigate: int) -> range:
    """Return the page numbers inside the navigation window."""
    first, last = navigation_window(total_pages, current_page, max_navigate)
    return range(first, last + 1)
