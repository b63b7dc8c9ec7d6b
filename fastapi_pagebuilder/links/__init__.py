"""Page link factories."""

from .factory import (
    LinkStyle,
    PageLink,
    PageLinkValue,
    ReferenceType,
    build_page_link,
    format_page_link,
    resolve_page_link,
)

__all__ = [
    "LinkStyle",
    "PageLink",
    "PageLinkValue",
    "ReferenceType",
    "build_page_link",
    "format_page_link",
    "resolve_page_link",
]
