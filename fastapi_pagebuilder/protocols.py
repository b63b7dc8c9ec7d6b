"""
Protocol interfaces for the pagination collaborators.

Using typing.Protocol enables structural subtyping:
- Framework adapters satisfy protocols without inheriting from them
- Test mocks work without explicit inheritance
- The builder never imports a web framework or an ORM
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from fastapi_pagebuilder.links.factory import ReferenceType


@runtime_checkable
class CountableSource(Protocol):
    """A result set that can report its total size."""

    def count(self) -> int:
        ...


@runtime_checkable
class SliceableSource(Protocol):
    """A result set that can restrict itself to an offset/limit window."""

    def slice(self, offset: int, limit: int) -> Any:
        ...


@runtime_checkable
class QuerySource(CountableSource, SliceableSource, Protocol):
    """Interface required by the query-backed builder operations."""


class RequestReader(Protocol):
    """Read-only view of the current request."""

    def get_param(self, name: str) -> Any | None:
        """Return the raw parameter value, or None when absent."""
        ...

    @property
    def route_name(self) -> str | None:
        ...

    @property
    def route_params(self) -> Mapping[str, Any]:
        ...

    @property
    def query_params(self) -> Mapping[str, Any]:
        ...


class UrlGenerator(Protocol):
    """Interface required by closure-style page links."""

    def generate(
        self,
        route: str,
        params: Mapping[str, Any],
        reference_type: ReferenceType,
    ) -> str:
        ...
