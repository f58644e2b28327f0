"""Logging setup for polysolve.

Library modules only create loggers under the ``polysolve`` namespace; the CLI
attaches a handler through ``setup_logging``.
"""

import logging
import sys
from datetime import datetime

ROOT_LOGGER = "polysolve"


class StructuredFormatter(logging.Formatter):
    """``<iso timestamp> [LEVEL] polysolve.<module>: message``"""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{stamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Send polysolve records at ``level`` and above to stderr.

    Calling it again replaces the handler instead of stacking a second one.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
