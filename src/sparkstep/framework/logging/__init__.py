"""
Structured, execution-aware logging for sparkstep.

Usage:
    from sparkstep.framework.logging import get_logger, configure_logging, log_step, push_context

    configure_logging()
    log = get_logger(__name__)

    token = push_context(execution_id="abc-123", step="Spark Cubing")

    with log_step("spark_step.submit"):
        run_submission()
"""

from sparkstep.framework.logging.config import configure_logging
from sparkstep.framework.logging.context import (
    LogContext,
    clear_context,
    get_context,
    get_logger,
    push_context,
)
from sparkstep.framework.logging.timing import StepTimer, log_step

__all__ = [
    # Configuration
    "configure_logging",
    # Context
    "get_logger",
    "clear_context",
    "get_context",
    "push_context",
    "LogContext",
    # Timing
    "log_step",
    "StepTimer",
]
