"""Page link factories.

A page link is either a format string with a single ``%d`` placeholder
(``"?page=%d"``) or a callable that renders the URL for a page number
through a URL generator. Both are resolved with :func:`resolve_page_link`.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping, Union
from urllib.parse import quote_plus

from fastapi_pagebuilder.core.errors import InvalidInputError

if TYPE_CHECKING:
    from fastapi_pagebuilder.protocols import UrlGenerator


class LinkStyle(str, Enum):
    """How the page link is delivered to the caller."""

    FORMAT = "format"
    CLOSURE = "closure"


class ReferenceType(str, Enum):
    """Kind of URL the generator should produce. Passed through unchanged."""

    ABSOLUTE_URL = "absolute_url"
    ABSOLUTE_PATH = "absolute_path"
    RELATIVE_PATH = "relative_path"
    NETWORK_PATH = "network_path"


class PageLink:
    """Render page URLs through a URL generator.

    Base parameters are copied once at construction; every call only adds
    the page parameter on top of them, so repeated calls never drift.
    """

    __slots__ = ("url_generator", "route", "base_params", "parameter_name", "reference_type")

    def __init__(
        self,
        url_generator: UrlGenerator,
        route: str,
        base_params: Mapping[str, Any],
        parameter_name: str,
        reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
    ) -> None:
        self.url_generator = url_generator
        self.route = route
        self.base_params = MappingProxyType(
            {key: value for key, value in base_params.items() if key != parameter_name}
        )
        self.parameter_name = parameter_name
        self.reference_type = reference_type

    def params_for(self, page: int) -> dict[str, Any]:
        """Return the full parameter map for ``page``."""
        return {**self.base_params, self.parameter_name: page}

    def render(self, page: int) -> str:
        """Return the URL of ``page``."""
        return self.url_generator.generate(self.route, self.params_for(page), self.reference_type)

    def __call__(self, page: int) -> str:
        return self.render(page)

    def __repr__(self) -> str:
        return (
            f"PageLink(route={self.route!r}, parameter_name={self.parameter_name!r}, "
            f"base_params={dict(self.base_params)!r})"
        )


PageLinkValue = Union[str, Callable[[int], str]]


def format_page_link(parameter_name: str) -> str:
    """Return a query-string link template, e.g. ``"?page=%d"``."""
    if not parameter_name:
        raise InvalidInputError("parameter_name must not be empty.", field="parameter_name")
    # Percent signs produced by quoting must not read as placeholders.
    return "?" + quote_plus(parameter_name).replace("%", "%%") + "=%d"


def build_page_link(
    parameter_name: str,
    *,
    style: LinkStyle = LinkStyle.FORMAT,
    url_generator: UrlGenerator | None = None,
    route: str | None = None,
    base_params: Mapping[str, Any] | None = None,
    reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
) -> PageLinkValue:
    """Build a page link in the requested style.

    Args:
        parameter_name: Query parameter carrying the page number
        style: FORMAT for a ``%d`` template, CLOSURE for a generator-backed callable
        url_generator: Required for CLOSURE
        route: Route name handed to the generator; required for CLOSURE
        base_params: Parameters every generated link carries
        reference_type: Passed to the generator unchanged

    Raises:
        InvalidInputError: If CLOSURE is requested without a generator or route
    """
    if style is LinkStyle.FORMAT:
        return format_page_link(parameter_name)

    if url_generator is None:
        raise InvalidInputError(
            "A URL generator is required for closure-style page links.", field="url_generator"
        )
    if not route:
        raise InvalidInputError(
            "A route name is required for closure-style page links.", field="route"
        )
    if not parameter_name:
        raise InvalidInputError("parameter_name must not be empty.", field="parameter_name")
    return PageLink(
        url_generator,
        route,
        base_params or {},
        parameter_name,
        reference_type,
    )


def resolve_page_link(page_link: PageLinkValue, page: int) -> str:
    """Return the URL of ``page`` for either link style."""
    if isinstance(page_link, str):
        return page_link % page
    return page_link(page)
