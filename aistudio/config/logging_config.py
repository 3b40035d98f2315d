"""
Logging setup for processes that host the core.

Records carry a correlation id read from `correlation_id_var`; the hosting
app sets it per request/task so interleaved use-case logs can be told apart.
"""

import logging
import sys
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from aistudio.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"
PACKAGE_LOGGER = "aistudio"

correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the correlation id of the current context."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _install(root: logging.Logger, handler: logging.Handler, formatter) -> None:
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    handler._aistudio_handler = True
    root.addHandler(handler)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure root handlers once per call; handlers from an earlier call are
    replaced, not duplicated.

    Args:
        level: Level for the aistudio loggers (default Config.LOG_LEVEL)
        log_file: Optional path of a rotating log file (default Config.LOG_FILE)
    """
    level = level or Config.LOG_LEVEL
    log_file = log_file or Config.LOG_FILE or None

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_aistudio_handler", False):
            root.removeHandler(handler)
            handler.close()

    # Third-party libraries only surface warnings
    root.setLevel(logging.WARNING)
    formatter = SafeFormatter(Config.LOG_FORMAT)

    _install(root, logging.StreamHandler(sys.stdout), formatter)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _install(
            root,
            RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
            ),
            formatter,
        )

    logging.getLogger("prisma").setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger(PACKAGE_LOGGER).info("Logging is set up.")

    return root
