"""Starlette/FastAPI adapters for the pagination builder."""

from .request import StarletteRequestReader
from .url_generator import StarletteUrlGenerator, iter_named_routes

__all__ = ["StarletteRequestReader", "StarletteUrlGenerator", "iter_named_routes"]
