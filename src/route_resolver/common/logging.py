"""Centralized logging configuration using structlog.

Route resolution only ever logs advisory events: a saturated pattern cache,
conflicting render strategies on a declaration, a declaration toggling
between controlled and uncontrolled locations, or a swapped history
backend. None of them change matching behaviour.
"""

import logging
import sys

import structlog
from structlog.typing import Processor

from .config import LoggingConfig

_CONSOLE_FORMAT = "%(message)s"
_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_processors(json_format: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _attach_handler(
    root_logger: logging.Logger, handler: logging.Handler, level: int, fmt: str
) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    root_logger.addHandler(handler)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
    *,
    config: LoggingConfig | None = None,
) -> None:
    """Configure structured logging for route resolution diagnostics.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, output JSON formatted logs
        log_file: Optional file path to write logs to
        config: Validated settings; overrides the keyword arguments when given

    Raises:
        pydantic.ValidationError: If the level name is unknown
    """
    if config is None:
        config = LoggingConfig(level=level, json_format=json_format, log_file=log_file)

    log_level = getattr(logging, config.level)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(log_level)
    _attach_handler(root_logger, logging.StreamHandler(sys.stdout), log_level, _CONSOLE_FORMAT)

    structlog.configure(
        processors=_build_processors(config.json_format),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if config.log_file:
        _attach_handler(
            root_logger, logging.FileHandler(config.log_file), log_level, _FILE_FORMAT
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
