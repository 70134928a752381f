"""Structured logging setup."""

import logging
import sys
from typing import Optional

import structlog

from hebrew_date_converter.config import LoggingConfig

_configured = False


def _configure_structlog(renderer: structlog.types.Processor, cache: bool) -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache,
    )


# Library default: events go through stdlib logging, so nothing below WARNING
# is emitted and nothing is written to stdout until setup_logging runs.
_configure_structlog(structlog.dev.ConsoleRenderer(colors=False), cache=False)


def setup_logging(config: Optional[LoggingConfig] = None, force: bool = False) -> None:
    """Configure structlog and the stdlib root handler once per process."""
    global _configured

    if _configured and not force:
        return

    config = config or LoggingConfig()
    level = getattr(logging, config.level.upper(), logging.INFO)

    if config.json_format:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    _configure_structlog(renderer, cache=True)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger for a module."""
    return structlog.get_logger(name)
