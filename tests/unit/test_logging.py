import logging

import pytest

from slicepage import Paginator, paginate
from slicepage._logging import logger, redact_cursor


@pytest.mark.unit
def test_library_logger_has_null_handler():
    """Verify the library logger is silent unless the application configures it."""
    assert logger.name == "slicepage"
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


@pytest.mark.unit
def test_page_logging(records, caplog):
    """Verify that each page is logged at DEBUG with structured context."""
    caplog.set_level(logging.DEBUG, logger="slicepage")

    paginate(records, "id", "2", 2)

    assert "Page computed" in caplog.text
    record = next(r for r in caplog.records if r.getMessage() == "Page computed")
    assert record.levelno == logging.DEBUG
    assert record.cursor_key == "id"
    assert record.take == 2
    assert (record.start, record.end) == (2, 4)
    assert record.count == 2
    assert record.has_more is True


@pytest.mark.unit
def test_unknown_cursor_warns_without_leaking_value(records, caplog):
    """Verify unknown cursors are logged as a warning with a hashed cursor."""
    caplog.set_level(logging.DEBUG, logger="slicepage")

    paginate(records, "id", "secret-cursor", 2)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].cursor_hash == redact_cursor("secret-cursor")
    assert "secret-cursor" not in caplog.text


@pytest.mark.unit
def test_iteration_logging(long_records, caplog):
    """Verify iter_pages logs its start and finish."""
    caplog.set_level(logging.DEBUG, logger="slicepage")

    list(Paginator("id").iter_pages(long_records, take=5))

    assert "Starting page iteration" in caplog.text
    finished = next(r for r in caplog.records if r.getMessage() == "Page iteration finished")
    assert finished.pages == 3


@pytest.mark.unit
def test_redact_cursor():
    """Verify redaction is deterministic, short and keeps None."""
    assert redact_cursor(None) is None
    assert redact_cursor("abc") == redact_cursor("abc")
    assert len(redact_cursor("abc")) == 8
    assert redact_cursor("abc") != "abc"
