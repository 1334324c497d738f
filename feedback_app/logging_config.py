"""Logging setup: one stream handler, request IDs on every record.

Usage:
    from feedback_app.logging_config import configure_logging
    configure_logging("INFO")
"""

import logging
import sys

from feedback_app.middleware import request_id_var

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"


class RequestIDFilter(logging.Filter):
    """Inject the current request ID (or ``-``) into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """Install the app's handler on the root logger.

    Safe to call more than once; an existing handler from a previous call is
    replaced rather than duplicated.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_feedback_app", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler._feedback_app = True  # type: ignore[attr-defined]
    handler.addFilter(RequestIDFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())
