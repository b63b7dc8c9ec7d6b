"""Pagination errors.

Exception Hierarchy:
    PaginationError (base)
    ├── IncorrectPageNumberError  page value present but not an integer
    ├── OutOfRangeError           integer page outside [1, total_pages]
    └── InvalidInputError         bad arguments from the calling code

None of these derive from ValueError, so pydantic validators let them
propagate unchanged instead of wrapping them in a ValidationError.
"""

from typing import Any


class PaginationError(Exception):
    """Base exception for all pagination errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class IncorrectPageNumberError(PaginationError):
    """Raised when a supplied page value cannot be parsed as an integer.

    Attributes:
        value: The raw value as received
        parameter_name: Name of the request parameter, when known
    """

    def __init__(self, value: Any, parameter_name: str | None = None) -> None:
        self.value = value
        self.parameter_name = parameter_name
        super().__init__(f"Incorrect page number: {value!r}")


class OutOfRangeError(PaginationError):
    """Raised when a page number lies outside the available pages.

    Attributes:
        page: The requested page number
        total_pages: Number of pages available
        parameter_name: Name of the request parameter, when known
    """

    def __init__(
        self,
        page: int,
        total_pages: int,
        parameter_name: str | None = None,
    ) -> None:
        self.page = page
        self.total_pages = total_pages
        self.parameter_name = parameter_name
        if page < 1:
            message = f"Page number must be at least 1, got {page}"
        else:
            message = f"Page {page} is out of range (total pages: {total_pages})"
        super().__init__(message)


class InvalidInputError(PaginationError):
    """Raised when the calling code passes malformed configuration.

    Attributes:
        field: The argument that failed validation (optional)
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
