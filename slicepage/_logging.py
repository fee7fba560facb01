import hashlib
import logging

# Create the library logger
logger = logging.getLogger("slicepage")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_cursor(cursor: str | None) -> str | None:
    """
    Redacts a cursor value for logging.
    Hashes the value to allow correlation across pages without revealing it.
    """
    if cursor is None:
        return None
    return hashlib.sha256(str(cursor).encode("utf-8")).hexdigest()[:8]
