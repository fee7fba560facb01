"""
Pagination support for slicepage.

This module holds the PageResult container and the paginate() function that
slices an ordered, in-memory sequence into offset or cursor pages, forward
(positive take) or backward (negative take).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ._logging import logger, redact_cursor
from .config import DEFAULT_TAKE, validate_take
from .exceptions import CursorNotFoundError
from .fields import find_cursor_index, get_cursor_value

T = TypeVar("T")


@dataclass
class PageResult(Generic[T]):
    """
    Represents a single page of records with its boundary cursors.

    Attributes:
        data: Records of this page, in collection order
        first: Cursor of the record just before the page (None at the start)
        last: Cursor of the record just after the page (None at the end)
        has_more: True if the page ends before the end of the collection
    """

    data: list[T]
    first: str | None
    last: str | None
    has_more: bool

    @property
    def count(self) -> int:
        """Number of records in this page."""
        return len(self.data)

    def to_dict(self) -> dict[str, Any]:
        """Returns the JSON-ready shape: data, first, last, hasMore."""
        return {
            "data": list(self.data),
            "first": self.first,
            "last": self.last,
            "hasMore": self.has_more,
        }


def _slice_bounds(length: int, take: int, cursor_index: int | None) -> tuple[int, int]:
    """
    Computes the half-open [start, end) range for a page, clipped to the collection.

    cursor_index is None when no cursor was given, -1 when the cursor is unknown.
    """
    magnitude = abs(take)

    if cursor_index is None:
        if take > 0:
            start, end = 0, take
        else:
            start, end = max(length - magnitude, 0), length
    elif take > 0:
        start, end = cursor_index + 1, cursor_index + 1 + magnitude
    else:
        start, end = max(cursor_index - magnitude, 0), cursor_index

    # Clamp both bounds into [0, length]; an inverted range becomes empty
    start = min(max(start, 0), length)
    end = min(max(end, start), length)
    return start, end


def paginate(
    collection: Sequence[T],
    cursor_key: str,
    cursor: str | None = None,
    take: int = DEFAULT_TAKE,
    *,
    strict_cursor: bool = False,
) -> PageResult[T]:
    """
    Slices a pre-sorted collection into a page.

    Args:
        collection: Ordered records; never mutated
        cursor_key: Field holding each record's unique, order-matching cursor value
        cursor: Cursor to page relative to. None (or "") means the start for
                forward paging and the end for backward paging.
        take: Page size and direction. Positive pages forward (records after
              the cursor), negative pages backward (records before it).
        strict_cursor: Raise CursorNotFoundError when the cursor matches no record.
                       By default an unknown cursor is treated as index -1.

    Returns:
        PageResult with the page data and the cursors of its neighbours.

    Raises:
        InvalidArgumentError: If take is 0 or not an integer
        CursorKeyError: If a record inspected lacks the cursor-key field

    Usage:
        # First three records
        page = paginate(users, "id", take=3)

        # Next three
        page = paginate(users, "id", cursor=page.data[-1]["id"], take=3)

        # Last two records
        page = paginate(users, "id", take=-2)
    """
    validate_take(take)

    cursor_index: int | None = None
    if cursor:
        cursor_index = find_cursor_index(collection, cursor_key, cursor)
        if cursor_index == -1:
            if strict_cursor:
                raise CursorNotFoundError(cursor_key)
            logger.warning(
                "Cursor not found, paging from index -1",
                extra={"cursor_key": cursor_key, "cursor_hash": redact_cursor(cursor)},
            )

    start, end = _slice_bounds(len(collection), take, cursor_index)
    return page_between(collection, cursor_key, start, end, take)


def page_between(
    collection: Sequence[T], cursor_key: str, start: int, end: int, take: int
) -> PageResult[T]:
    """
    Builds the PageResult for an already clipped [start, end) range.

    `take` is only used for logging.
    """
    length = len(collection)
    result = PageResult(
        data=list(collection[start:end]),
        first=get_cursor_value(collection[start - 1], cursor_key) if start > 0 else None,
        last=get_cursor_value(collection[end], cursor_key) if end < length else None,
        has_more=end < length,
    )

    logger.debug(
        "Page computed",
        extra={
            "cursor_key": cursor_key,
            "take": take,
            "start": start,
            "end": end,
            "count": result.count,
            "has_more": result.has_more,
        },
    )
    return result
