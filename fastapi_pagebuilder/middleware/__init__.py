"""Middleware for pagination-aware apps."""

from .error_handler import PaginationErrorMiddleware, error_response

__all__ = ["PaginationErrorMiddleware", "error_response"]
