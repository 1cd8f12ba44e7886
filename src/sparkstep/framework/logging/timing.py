"""
Step timing for structured logs.

``log_step`` wraps a block, pushes a fresh ``span_id`` into the log
context for its duration, and emits ``<event>.start`` (DEBUG),
``<event>.end`` (with ``duration_ms`` and any metrics) or
``<event>.error``::

    with log_step("spark_step.submit") as timer:
        result = executor.execute(cmd, sink)
        timer.add_metric("state", result.state.value)
"""

import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from sparkstep.framework.logging.context import get_context, get_logger, push_context


def new_span_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass
class StepTimer:
    """Wall-clock span of one logged block."""

    event: str
    span_id: str = field(default_factory=new_span_id)
    parent_span_id: str | None = None
    metrics: dict[str, Any] = field(default_factory=dict)
    _start: float = field(default_factory=time.perf_counter, repr=False)
    _end: float | None = field(default=None, repr=False)

    def finish(self) -> "StepTimer":
        if self._end is None:
            self._end = time.perf_counter()
        return self

    @property
    def finished(self) -> bool:
        return self._end is not None

    @property
    def elapsed_ms(self) -> float:
        end = self._end if self._end is not None else time.perf_counter()
        return (end - self._start) * 1000

    def add_metric(self, key: str, value: Any) -> "StepTimer":
        self.metrics[key] = value
        return self

    def fields(self) -> dict[str, Any]:
        """Log fields: span ids, rounded duration, then metrics."""
        out: dict[str, Any] = {"span_id": self.span_id}
        if self.parent_span_id:
            out["parent_span_id"] = self.parent_span_id
        out["duration_ms"] = round(self.elapsed_ms, 2)
        out.update(self.metrics)
        return out


@contextmanager
def log_step(event: str, log_start: bool = True, level: str = "info", **metrics: Any) -> Iterator[StepTimer]:
    """Log the start and end of a block with its duration.

    Exceptions are logged as ``<event>.error`` and re-raised.
    """
    log = get_logger("sparkstep.timing")
    timer = StepTimer(event=event, parent_span_id=get_context().span_id, metrics=dict(metrics))
    token = push_context(span_id=timer.span_id, parent_span_id=timer.parent_span_id)
    try:
        if log_start:
            log.debug(f"{event}.start", span_id=timer.span_id, **metrics)
        yield timer
    except Exception as exc:
        timer.finish()
        log.error(
            f"{event}.error",
            error_type=type(exc).__name__,
            error_message=str(exc),
            **timer.fields(),
        )
        raise
    finally:
        timer.finish()
        token.restore()

    getattr(log, level)(f"{event}.end", **timer.fields())
