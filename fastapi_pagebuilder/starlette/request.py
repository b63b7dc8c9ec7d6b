"""Request reader backed by a Starlette (or FastAPI) request."""

from __future__ import annotations

from typing import Any, Mapping

from starlette.requests import Request

from .url_generator import iter_named_routes


class StarletteRequestReader:
    """Expose the page parameter and matched route of a request."""

    def __init__(self, request: Request) -> None:
        self.request = request

    def get_param(self, name: str) -> Any | None:
        """Return the query parameter, or None when it is absent.

        A parameter given without a value (``?page=``) is returned as ``""``.
        """
        return self.request.query_params.get(name)

    @property
    def route_name(self) -> str | None:
        """Return the name of the matched route."""
        route = self.request.scope.get("route")
        if route is not None and getattr(route, "name", None):
            return route.name
        endpoint = self.request.scope.get("endpoint")
        if endpoint is None:
            return None
        router = getattr(self.request.app, "router", None)
        for name, candidate, _ in iter_named_routes(getattr(router, "routes", [])):
            if getattr(candidate, "endpoint", None) is endpoint:
                return name
        return None

    @property
    def route_params(self) -> Mapping[str, Any]:
        return dict(self.request.path_params)

    @property
    def query_params(self) -> Mapping[str, Any]:
        # Repeated keys keep their last value.
        return dict(self.request.query_params)
