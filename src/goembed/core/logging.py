# src/goembed/core/logging.py
"""Structured logging configuration for goembed.

structlog events are rendered by a stdlib ProcessorFormatter, so records
from plain logging.getLogger() loggers (dynaconf, for instance) come out in
the same console or JSON format.

Everything goes to stderr; stdout is reserved for the command's own output.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import ProcessorFormatter

# Third-party loggers kept at WARNING or above even with --verbose
_QUIET_LOGGERS: tuple[str, ...] = ("dynaconf",)


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, json_output: bool = False, level: str = "INFO") -> None:
    """Route structlog and stdlib logging to a single stderr handler.

    Replaces any handlers already on the root logger, so calling it twice
    (once per CLI invocation under test, say) does not duplicate output.

    Args:
        json_output: Render one JSON object per line instead of console text.
        level: Root log level name (DEBUG, INFO, WARNING, ERROR).
    """
    log_level = logging.getLevelName(level.upper())

    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*pre_chain, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Tests reconfigure logging; cached loggers would go stale
        cache_logger_on_first_use=False,
    )

    formatter = ProcessorFormatter(
        processors=[ProcessorFormatter.remove_processors_meta, _renderer(json_output)],
        foreign_pre_chain=pre_chain,
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Bound structlog logger for a module (pass __name__)."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
