"""SQLAlchemy helpers for pagination."""

from .source import SQLAlchemyQuerySource

__all__ = ["SQLAlchemyQuerySource"]
