"""Logging configuration using structlog."""

import logging
import sys

import structlog
from structlog.typing import Processor

from app.config import settings

# Loggers that are too chatty at INFO for day-to-day shop operation
_QUIET_LOGGERS = {
    "asyncio": logging.INFO,
    "aiosqlite": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.engine.Engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "uvicorn.access": logging.INFO,
}


def _build_renderer(json_output: bool) -> Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(*, json_output: bool | None = None) -> None:
    """Configure structlog on top of the stdlib root logger.

    Console output is colored key-value lines; set ``LOG_JSON=1`` (or pass
    ``json_output=True``) to emit one JSON object per line instead.
    Logs from non-structlog loggers (uvicorn, SQLAlchemy) go through the
    same processor chain.
    """
    if json_output is None:
        json_output = settings.log_json

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso" if json_output else "%Y-%m-%d %H:%M:%S", utc=json_output),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _build_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


# Allow re-import without side effects
_configured = False


def setup_logging() -> None:
    """Setup logging once. Safe to call multiple times."""
    global _configured
    if not _configured:
        configure_logging()
        _configured = True
