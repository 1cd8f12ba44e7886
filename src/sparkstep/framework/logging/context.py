"""
Per-invocation log context.

``SparkStep.run`` pushes its ``execution_id`` and ``step`` name here and
every record logged underneath carries them, including lines from the
resolver and the process executor.  The context lives in a
``ContextVar``, so steps running in separate threads or tasks never see
each other's values.
"""

from contextvars import ContextVar, Token
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

import structlog


@dataclass(frozen=True)
class LogContext:
    """
    Fields attached to every log record.

    Attributes:
        execution_id: Step invocation id
        step: Step name, e.g. "Spark Cubing"
        backend: How the step runs ("spark-submit")
        span_id: Innermost ``log_step`` span
        parent_span_id: Enclosing span, if nested
    """

    execution_id: str | None = None
    step: str | None = None
    backend: str | None = None
    span_id: str | None = None
    parent_span_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def merge(self, **kwargs: Any) -> "LogContext":
        """Copy with the given non-None known fields replaced."""
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in kwargs.items() if k in known and v is not None})


_EMPTY = LogContext()
_current: ContextVar[LogContext] = ContextVar("sparkstep_log_context", default=_EMPTY)


def get_context() -> LogContext:
    return _current.get()


def clear_context() -> None:
    _current.set(_EMPTY)


class ContextToken:
    """Handle returned by :func:`push_context`."""

    def __init__(self, token: Token) -> None:
        self._token = token

    def restore(self) -> None:
        _current.reset(self._token)


def push_context(**kwargs: Any) -> ContextToken:
    """Merge values for a scoped block; call ``restore()`` when it ends.

    Usage:
        token = push_context(step="Spark Cubing")
        try:
            submit()
        finally:
            token.restore()
    """
    return ContextToken(_current.set(get_context().merge(**kwargs)))


def add_context_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: add context fields the call site did not set."""
    for key, value in get_context().to_dict().items():
        event_dict.setdefault(key, value)
    return event_dict


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)
