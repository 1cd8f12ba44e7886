"""Execute Result — outcome of one step invocation.

A step produces exactly one ``ExecuteResult``:

- ``ExecuteResult.succeeded(output)`` — process exited 0; ``output`` is the
  full captured text.
- ``ExecuteResult.failed(message)`` — anything went wrong while running;
  ``output`` is a short human-readable message, not the captured text.

Configuration errors are *not* represented here; they are raised before a
result could exist.

Example::

    result = step.run(context)
    if result.succeed:
        parse(result.output)
    else:
        alert(result.message)

Tags:
    sparkstep, execution, result, envelope

Doc-Types:
    api-reference
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ExecuteState(str, Enum):
    """Terminal state of a step invocation."""

    SUCCEED = "succeed"
    ERROR = "error"


@dataclass(frozen=True)
class ExecuteResult:
    """
    Tagged outcome of a step invocation.

    Attributes:
        state: SUCCEED or ERROR
        output: Captured output on success, failure message on error
    """

    state: ExecuteState
    output: str = ""

    @classmethod
    def succeeded(cls, output: str) -> ExecuteResult:
        return cls(state=ExecuteState.SUCCEED, output=output)

    @classmethod
    def failed(cls, message: str) -> ExecuteResult:
        if not message:
            message = "Step failed without error message"
        return cls(state=ExecuteState.ERROR, output=message)

    @property
    def succeed(self) -> bool:
        return self.state == ExecuteState.SUCCEED

    @property
    def message(self) -> str | None:
        """Failure message, or None on success."""
        return None if self.succeed else self.output

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging / the orchestrator."""
        key = "output" if self.succeed else "error"
        return {"state": self.state.value, key: self.output}

    def __repr__(self) -> str:
        if self.succeed:
            return f"ExecuteResult(SUCCEED, output_chars={len(self.output)})"
        return f"ExecuteResult(ERROR, {self.output!r})"
