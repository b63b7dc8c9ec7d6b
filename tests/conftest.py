# tests/conftest.py
"""
Pytest configuration and fixtures.

This module provides shared fixtures for all tests:
- Collaborator mocks (URL generator, request reader, query source)
"""

from typing import Any, Mapping
from unittest.mock import Mock
from urllib.parse import urlencode

import pytest

from fastapi_pagebuilder.links.factory import ReferenceType


def query_string_url(route: str, params: Mapping[str, Any], reference_type: ReferenceType) -> str:
    """Render ``route?params`` in insertion order."""
    return f"{route}?{urlencode(list(params.items()))}"


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================

@pytest.fixture
def url_generator() -> Mock:
    """URL generator mock rendering ``route?query`` strings."""
    generator = Mock()
    generator.generate.side_effect = query_string_url
    return generator


@pytest.fixture
def make_request():
    """Factory for request reader mocks."""

    def _make(
        params: Mapping[str, Any] | None = None,
        route_name: str = "article_list",
        route_params: Mapping[str, Any] | None = None,
    ) -> Mock:
        query_params = dict(params or {})
        request = Mock()
        request.get_param.side_effect = query_params.get
        request.route_name = route_name
        request.route_params = dict(route_params or {})
        request.query_params = query_params
        return request

    return _make


@pytest.fixture
def make_source():
    """Factory for query source mocks returning a fixed count."""

    def _make(total: int) -> Mock:
        source = Mock()
        source.count.return_value = total
        source.slice.return_value = source
        return source

    return _make

