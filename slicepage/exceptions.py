from collections.abc import Generator
from contextlib import contextmanager
from typing import Any


class SlicePageError(Exception):
    """Base exception for all slicepage errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(SlicePageError, ValueError):
    """Raised when a pagination argument is invalid (e.g. take == 0)."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        value: Any | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.argument = argument
        self.value = value


class CursorKeyError(SlicePageError, KeyError):
    """Raised when a record does not expose the cursor-key field."""

    def __init__(self, cursor_key: str, original_error: Exception | None = None) -> None:
        super().__init__(f"Record has no cursor key field '{cursor_key}'", original_error)
        self.cursor_key = cursor_key


class CursorNotFoundError(SlicePageError, LookupError):
    """Raised in strict mode when the cursor matches no record."""

    def __init__(self, cursor_key: str, original_error: Exception | None = None) -> None:
        super().__init__(f"No record matches the cursor on field '{cursor_key}'", original_error)
        self.cursor_key = cursor_key


@contextmanager
def handle_field_errors(cursor_key: str) -> Generator[None, None, None]:
    """
    Context manager that catches KeyError/AttributeError raised while reading
    a record's cursor-key field and raises CursorKeyError instead.

    Args:
        cursor_key: Field name, used for the error message

    Usage:
        with handle_field_errors("id"):
            value = record["id"]
    """
    try:
        yield
    except SlicePageError:
        raise
    except (KeyError, AttributeError) as e:
        raise CursorKeyError(cursor_key, original_error=e) from e
