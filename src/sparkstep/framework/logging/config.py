"""
structlog setup for sparkstep processes.

Call :func:`configure_logging` once from an entry point (the CLI does
this).  Level and renderer come from the arguments, else from
``SPARKSTEP_LOG_LEVEL`` (default ``INFO``) and ``SPARKSTEP_LOG_FORMAT``
(``console`` or ``json``).  Records are routed through stdlib logging to
stderr so that a step's stdout stays reserved for command output.
"""

import logging
import os
import sys
from typing import Literal

import structlog
from structlog.types import Processor

from sparkstep.framework.logging.context import add_context_processor

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]

_configured = False


def _processors(log_format: str) -> list[Processor]:
    chain: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_context_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        chain.append(structlog.processors.JSONRenderer())
    else:
        chain.append(structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback))
    return chain


def configure_logging(
    level: LogLevel | None = None,
    format: LogFormat | None = None,
    force: bool = False,
) -> None:
    """Install the structlog pipeline; later calls are no-ops unless ``force``."""
    global _configured
    if _configured and not force:
        return

    log_level = (level or os.environ.get("SPARKSTEP_LOG_LEVEL") or "INFO").upper()
    log_format = (format or os.environ.get("SPARKSTEP_LOG_FORMAT") or "console").lower()
    numeric_level = logging.getLevelName(log_level)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=_processors(log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level, force=True)
    logging.getLogger("sparkstep").setLevel(numeric_level)

    _configured = True
