"""structlog configuration for dateranger.

Services log through plain ``logging.getLogger(__name__)``; this module only
decides how those records look and where they go. Output always goes to
stderr so stdout stays clean for ``--json`` and ``-q`` consumers.

Two output modes:
- Human (default): console renderer, colored when stderr is a terminal
- JSON (--log-json): one JSON object per line
"""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

import structlog

LOGGER_NAME: Final[str] = "dateranger"
_HANDLER_NAME: Final[str] = "dateranger-stderr"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route the ``dateranger`` logger tree through a structlog formatter.

    Calling this again replaces the previous handler instead of stacking
    a second one. Loggers outside the package are left alone.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Destination; defaults to the current ``sys.stderr``.

    Returns:
        The installed handler.
    """
    target = stream if stream is not None else sys.stderr
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(target)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, target),
            ],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
