"""Pydantic schemas for pagination results."""

from .config import PaginationConfig
from .view import PageNode, PaginationView

__all__ = ["PageNode", "PaginationConfig", "PaginationView"]
