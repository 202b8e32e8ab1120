from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog

from one_ring_futures.config import Settings

if TYPE_CHECKING:
    from structlog.typing import Processor


def configure_logging(settings: Settings | None = None) -> None:
    """Routes structlog through the standard library logging module.

    Args:
        settings: defaults to Settings.from_env()
    """
    if settings is None:
        settings = Settings.from_env()

    logging.basicConfig(format="%(message)s", level=settings.log_level)
    logging.getLogger("one_ring_futures").setLevel(settings.log_level)

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Gets a lazily bound structlog logger."""
    return structlog.get_logger(name)
