from collections.abc import Mapping, Sequence
from typing import Any

from .exceptions import handle_field_errors


def get_cursor_value(record: Any, cursor_key: str) -> Any:
    """
    Reads the cursor-key field from a record.

    Mappings are read by item, everything else (pydantic models, dataclasses,
    plain objects) by attribute.

    Raises:
        CursorKeyError: If the record has no such field
    """
    with handle_field_errors(cursor_key):
        if isinstance(record, Mapping):
            return record[cursor_key]
        return getattr(record, cursor_key)


def find_cursor_index(records: Sequence[Any], cursor_key: str, cursor: str) -> int:
    """Returns the index of the first record whose cursor key equals `cursor`, or -1."""
    for index, record in enumerate(records):
        if get_cursor_value(record, cursor_key) == cursor:
            return index
    return -1
