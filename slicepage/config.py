from dataclasses import dataclass

from .exceptions import InvalidArgumentError

# Page size used when the caller does not pass `take`.
DEFAULT_TAKE = 5


def validate_take(take: object, argument: str = "take") -> int:
    """
    Checks that a page size is a nonzero integer and returns it.

    Raises:
        InvalidArgumentError: If the value is zero or not an int (bools are rejected)
    """
    if isinstance(take, bool) or not isinstance(take, int):
        raise InvalidArgumentError(
            f"{argument} must be an integer, got {type(take).__name__}",
            argument=argument,
            value=take,
        )
    if take == 0:
        raise InvalidArgumentError(f"{argument} must not be 0", argument=argument, value=take)
    return take


@dataclass(frozen=True)
class PaginatorOptions:
    """
    Settings a Paginator is bound to.

    Attributes:
        cursor_key: Name of the record field holding cursor values
        default_take: Page size used when a call does not pass one
        strict_cursor: Raise CursorNotFoundError for unknown cursors instead of
            treating them as index -1
    """

    cursor_key: str
    default_take: int = DEFAULT_TAKE
    strict_cursor: bool = False

    def validate(self) -> None:
        """
        Validates the options.

        Raises:
            InvalidArgumentError: If cursor_key is empty or default_take is invalid
        """
        if not self.cursor_key:
            raise InvalidArgumentError(
                "cursor_key must not be empty", argument="cursor_key", value=self.cursor_key
            )
        validate_take(self.default_take, argument="default_take")
