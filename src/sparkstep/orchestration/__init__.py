"""Orchestrator-facing API: the Spark step and its execution context."""

from sparkstep.orchestration.context import ExecutableContext
from sparkstep.orchestration.spark_step import SparkStep

__all__ = [
    "ExecutableContext",
    "SparkStep",
]
