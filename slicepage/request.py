from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import validate_take
from .exceptions import InvalidArgumentError


class PageRequest(BaseModel):
    """
    Caller-supplied paging parameters (e.g. from query strings).

    `take` is a strict integer: positive pages forward, negative pages backward,
    zero is rejected. Left unset (None), the paginator's default_take applies.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cursor: str | None = Field(default=None, description="Cursor to page relative to")
    take: int | None = Field(default=None, strict=True, description="Signed page size")

    @field_validator("take")
    @classmethod
    def _take_not_zero(cls, value: int | None) -> int | None:
        if value is None:
            return None
        return validate_take(value)

    @classmethod
    def parse(cls, **params: Any) -> "PageRequest":
        """
        Builds a PageRequest, translating pydantic errors into InvalidArgumentError.

        Usage:
            request = PageRequest.parse(cursor="42", take=-10)
        """
        try:
            return cls(**params)
        except ValidationError as e:
            first_error = e.errors()[0] if e.errors() else {}
            loc = first_error.get("loc") or ("request",)
            argument = str(loc[0])
            raise InvalidArgumentError(
                f"Invalid page request: {first_error.get('msg', str(e))}",
                argument=argument,
                value=params.get(argument),
                original_error=e,
            ) from e
