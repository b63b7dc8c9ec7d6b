"""Pagination error handling middleware."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from fastapi_pagebuilder.core.errors import (
    IncorrectPageNumberError,
    OutOfRangeError,
    PaginationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[PaginationError], tuple[int, str]] = {
    IncorrectPageNumberError: (400, "Bad Request"),
    OutOfRangeError: (404, "Not Found"),
}


def error_object(
    *,
    status: str,
    title: str | None = None,
    detail: str | None = None,
    source: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return an error object for an ``{"errors": [...]}`` document."""
    error: dict[str, Any] = {"status": status}
    if title is not None:
        error["title"] = title
    if detail is not None:
        error["detail"] = detail
    if source is not None:
        error["source"] = source
    return error


def error_document(errors: list[dict[str, Any]]) -> dict[str, Any]:
    """Return a document with an errors array."""
    return {"errors": errors}


def error_response(exc: PaginationError) -> JSONResponse | None:
    """Return the HTTP response for a user-facing pagination error, if any."""
    for error_type, (status_code, title) in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            parameter_name = getattr(exc, "parameter_name", None)
            error = error_object(
                status=str(status_code),
                title=title,
                detail=exc.message,
                source={"parameter": parameter_name} if parameter_name else None,
            )
            return JSONResponse(error_document([error]), status_code=status_code)
    return None


class PaginationErrorMiddleware:
    """Convert page number errors into JSON error documents.

    IncorrectPageNumberError becomes 400 and OutOfRangeError becomes 404.
    InvalidInputError signals a programming mistake and is re-raised.
    """

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Run the downstream app and translate pagination errors."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except PaginationError as exc:
            response = error_response(exc)
            if response is None:
                raise
            logger.info("Pagination request rejected: %s", exc.message)
            await response(scope, receive, send)
