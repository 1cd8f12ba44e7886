"""
Structured error types for sparkstep.

Provides a small hierarchy of typed errors with metadata for error
categorization, logging, and root cause analysis through error chaining.

Two families matter to callers:

- **Configuration errors** (``ConfigError`` and subclasses) are raised
  before any process is spawned.  They signal an unrecoverable step
  failure: a required setting or resource is missing.
- **Process errors** (``ProcessError`` and subclasses) happen while the
  submission command runs.  They never escape the executor; they are
  converted into a failed ``ExecuteResult``.

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                      SparkStepError                          │
        │              (category, context, cause)                      │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  ConfigError           ParameterError       ProcessError     │
        │  (CONFIG)              (PARAMETER)          (PROCESS)        │
        │     │                       │                    │           │
        │  MissingConfigError    FrozenParametersError  CommandFailed  │
        │  ResourceNotFoundError (RESOURCE)                            │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = MissingConfigError("spark_home")
    >>> error.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> error.with_context(step="Spark Cubing").context.step
    'Spark Cubing'

Guardrails:
    ❌ DON'T: Raise a bare Exception for a missing setting
    ✅ DO: Raise MissingConfigError(key) so the key is in the logs

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    sparkstep, error-handling, exception-hierarchy, error-context

Doc-Types:
    api-reference
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and reporting.

    Attributes:
        CONFIG: Missing or invalid settings
        RESOURCE: Required file not found on the resource search path
        PARAMETER: Misuse of step parameters
        PROCESS: Child process failed to start, exited non-zero, or broke
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    CONFIG = "CONFIG"
    RESOURCE = "RESOURCE"
    PARAMETER = "PARAMETER"
    PROCESS = "PROCESS"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Where an error happened, for logs and the orchestrator.

    Attributes:
        step: Step name
        execution_id: Step invocation id
        command: Rendered command line, once one exists
        resource: Resource being looked up (e.g. ``hbase-site.xml``)
        metadata: Anything else passed to ``with_context``
    """

    step: str | None = None
    execution_id: str | None = None
    command: str | None = None
    resource: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Set fields plus metadata, flattened."""
        known = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "metadata"}
        return {**{k: v for k, v in known.items() if v is not None}, **self.metadata}


class SparkStepError(Exception):
    """
    Root of the sparkstep error tree.

    Carries a category, an ``ErrorContext`` and optionally the exception
    that caused it.  Subclasses pick their category via
    ``default_category``.

    Examples:
        >>> SparkStepError("unexpected state").category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> try:
        ...     raise OSError("broken pipe")
        ... except OSError as e:
        ...     error = SparkStepError("Read failed", cause=e)
        >>> error.__cause__
        OSError('broken pipe')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context if context is not None else ErrorContext()
        self.cause = cause
        self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> SparkStepError:
        """
        Attach step details; unknown keys land in ``metadata``.

        Usage:
            raise MissingConfigError("spark_home").with_context(step="Spark Cubing")
        """
        known = {f.name for f in fields(self.context)} - {"metadata"}
        for key, value in kwargs.items():
            if key in known:
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Log-ready view: type, message, category, context and cause."""
        data: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if ctx := self.context.to_dict():
            data["context"] = ctx
        if self.cause is not None:
            data["cause"] = str(self.cause)
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS (fatal, raised before any process starts)
# =============================================================================


class ConfigError(SparkStepError):
    """
    Configuration error.

    Raised during resolution when the environment cannot support a
    submission. Nothing has been spawned when this is raised.
    """

    default_category = ErrorCategory.CONFIG


class MissingConfigError(ConfigError):
    """Required configuration key is absent."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Missing required configuration: {key}")


class ResourceNotFoundError(ConfigError):
    """Required resource could not be located on the search path."""

    default_category = ErrorCategory.RESOURCE

    def __init__(self, resource: str, message: str | None = None):
        self.resource = resource
        super().__init__(
            message or f"Couldn't find {resource} from the resource search path",
            context=ErrorContext(resource=resource),
        )


# =============================================================================
# PARAMETER ERRORS
# =============================================================================


class ParameterError(SparkStepError):
    """Step parameter misuse."""

    default_category = ErrorCategory.PARAMETER


class FrozenParametersError(ParameterError):
    """A parameter was set after submission began."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Parameters are frozen; cannot set '{name}' once submission has begun")


# =============================================================================
# PROCESS ERRORS (converted into a failed ExecuteResult by the executor)
# =============================================================================


class ProcessError(SparkStepError):
    """Child process could not be run to a successful exit."""

    default_category = ErrorCategory.PROCESS


class CommandFailedError(ProcessError):
    """Child process exited with a non-zero status."""

    def __init__(self, exit_code: int, command: str):
        self.exit_code = exit_code
        super().__init__(
            f"OS command error exit with {exit_code}",
            context=ErrorContext(command=command),
        )
