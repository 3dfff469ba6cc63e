"""Structured logging setup.

Events are emitted with structlog as key/value pairs and handed to the
standard library logger named after the emitting module, so the host's
logging configuration decides what is shown. Without any configuration
the stdlib defaults apply and debug events are dropped.
"""

import logging
import sys
from typing import Any

import structlog

from savepoint_restore.core.config import LoggingSettings


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog processors and stdlib level filtering.

    Installs a stdout handler on the root logger, replacing any existing
    root handlers.

    Args:
        settings: Logging settings; defaults to LoggingSettings()
    """
    settings = settings or LoggingSettings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.level),
        force=True,
    )

    renderer: Any
    if settings.json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger backed by logging.getLogger(name).

    Processors are resolved lazily, so loggers created at import time
    pick up a later configure_logging() call.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger
