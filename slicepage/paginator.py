from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, TypeVar

from ._logging import logger
from .config import DEFAULT_TAKE, PaginatorOptions, validate_take
from .pagination import PageResult, page_between, paginate

if TYPE_CHECKING:
    from .request import PageRequest

T = TypeVar("T")


class Paginator:
    """
    Reusable pager bound to a cursor-key field and a default page size.

    Usage:
        paginator = Paginator("id", default_take=20)

        page = paginator.page(users)
        older = paginator.page(users, cursor=page.data[0]["id"], take=-20)

        for page in paginator.iter_pages(users):
            ...
    """

    def __init__(
        self,
        cursor_key: str,
        *,
        default_take: int = DEFAULT_TAKE,
        strict_cursor: bool = False,
    ) -> None:
        self.options = PaginatorOptions(
            cursor_key=cursor_key, default_take=default_take, strict_cursor=strict_cursor
        )
        self.options.validate()

    @classmethod
    def from_options(cls, options: PaginatorOptions) -> "Paginator":
        """Creates a Paginator from an existing PaginatorOptions."""
        return cls(
            options.cursor_key,
            default_take=options.default_take,
            strict_cursor=options.strict_cursor,
        )

    @property
    def cursor_key(self) -> str:
        return self.options.cursor_key

    def page(
        self, collection: Sequence[T], cursor: str | None = None, take: int | None = None
    ) -> PageResult[T]:
        """Returns one page; `take` falls back to the configured default_take."""
        return paginate(
            collection,
            self.options.cursor_key,
            cursor,
            self.options.default_take if take is None else take,
            strict_cursor=self.options.strict_cursor,
        )

    def page_for(self, collection: Sequence[T], request: "PageRequest") -> PageResult[T]:
        """Returns the page described by a validated PageRequest."""
        return self.page(collection, cursor=request.cursor, take=request.take)

    def iter_pages(
        self, collection: Sequence[T], take: int | None = None
    ) -> Iterator[PageResult[T]]:
        """
        Lazily walks the whole collection page by page.

        A positive take walks from the start towards the end, a negative take
        from the end towards the start. Each following page is anchored on the
        position where the previous one ended, so every record is yielded once
        whatever its cursor value.
        """
        take = validate_take(self.options.default_take if take is None else take)

        logger.debug(
            "Starting page iteration",
            extra={"cursor_key": self.cursor_key, "take": take, "total": len(collection)},
        )

        length = len(collection)
        magnitude = abs(take)
        pages = 0
        if take > 0:
            for start in range(0, length, magnitude):
                yield page_between(
                    collection, self.cursor_key, start, min(start + magnitude, length), take
                )
                pages += 1
        else:
            for end in range(length, 0, -magnitude):
                yield page_between(
                    collection, self.cursor_key, max(end - magnitude, 0), end, take
                )
                pages += 1

        logger.debug(
            "Page iteration finished", extra={"cursor_key": self.cursor_key, "pages": pages}
        )
