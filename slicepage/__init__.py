from .config import DEFAULT_TAKE, PaginatorOptions
from .exceptions import (
    CursorKeyError,
    CursorNotFoundError,
    InvalidArgumentError,
    SlicePageError,
)
from .fields import get_cursor_value
from .pagination import PageResult, paginate
from .paginator import Paginator
from .request import PageRequest

__all__ = [
    "paginate",
    "PageResult",
    "Paginator",
    "PageRequest",
    "PaginatorOptions",
    "DEFAULT_TAKE",
    "get_cursor_value",
    # Exceptions
    "SlicePageError",
    "InvalidArgumentError",
    "CursorKeyError",
    "CursorNotFoundError",
]
