"""URL generation through a Starlette (or FastAPI) router."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence
from urllib.parse import urlencode

from starlette.datastructures import URL
from starlette.requests import Request
from starlette.routing import BaseRoute, Mount, Router

from fastapi_pagebuilder.core.errors import InvalidInputError
from fastapi_pagebuilder.links.factory import ReferenceType


def iter_named_routes(
    routes: Sequence[BaseRoute],
    prefix: str = "",
    parent_params: frozenset[str] = frozenset(),
) -> Iterator[tuple[str, BaseRoute, frozenset[str]]]:
    """Yield ``(name, route, path_param_names)`` for every leaf route.

    Routes inside a named ``Mount`` are reported as ``"mount:route"``, the
    form Starlette's ``url_path_for`` expects.
    """
    for route in routes:
        params = parent_params | frozenset(getattr(route, "param_convertors", {}) or {})
        if isinstance(route, Mount):
            # Mount fills its trailing {path} itself.
            params = params - {"path"}
            child_prefix = f"{prefix}{route.name}:" if route.name else prefix
            yield from iter_named_routes(route.routes or [], child_prefix, params)
            continue
        name = getattr(route, "name", None)
        if name:
            yield f"{prefix}{name}", route, params


class StarletteUrlGenerator:
    """Generate page URLs with ``router.url_path_for``."""

    def __init__(self, router: Router, base_url: str | URL | None = None) -> None:
        """Store the router and the base URL used for absolute URLs."""
        self.router = router
        self.base_url = base_url

    @classmethod
    def from_request(cls, request: Request) -> "StarletteUrlGenerator":
        """Bind the app router and the base URL of ``request``."""
        return cls(request.app.router, request.base_url)

    def path_param_names(self, route: str) -> frozenset[str]:
        """Return the path parameter names of the named route."""
        for name, _, params in iter_named_routes(self.router.routes):
            if name == route:
                return params
        raise InvalidInputError(f"Unknown route '{route}'.", field="route")

    def generate(
        self,
        route: str,
        params: Mapping[str, Any],
        reference_type: ReferenceType = ReferenceType.ABSOLUTE_PATH,
    ) -> str:
        """Return the URL of ``route`` with ``params``.

        Parameters matching the route's path convertors fill the path; the
        rest form the query string in sorted key order.
        """
        path_names = self.path_param_names(route)
        path_params = {key: value for key, value in params.items() if key in path_names}
        query_params = sorted(
            (key, value)
            for key, value in params.items()
            if key not in path_names and value is not None
        )
        url_path = self.router.url_path_for(route, **path_params)
        query = urlencode(query_params, doseq=True)
        suffix = f"?{query}" if query else ""

        if reference_type in (ReferenceType.ABSOLUTE_URL, ReferenceType.NETWORK_PATH):
            if self.base_url is None:
                raise InvalidInputError(
                    "A base URL is required for absolute page links.", field="base_url"
                )
            absolute = str(url_path.make_absolute_url(self.base_url))
            if reference_type is ReferenceType.NETWORK_PATH:
                absolute = absolute[absolute.index("//"):]
            return f"{absolute}{suffix}"
        if reference_type is ReferenceType.RELATIVE_PATH:
            return f"{str(url_path).lstrip('/')}{suffix}"
        return f"{url_path}{suffix}"
