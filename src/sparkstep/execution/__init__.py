"""
Execution pieces of a Spark step: parameters, resolution, rendering, running.

Control flow::

    ParameterStore ─┐
                    ├─► ConfigResolver ─► ClusterRuntimeConfig ─┐
    ClusterSettings ┘        ▲                                  ├─► CommandBuilder ─► cmd
                   ResourceLocator                ParameterStore┘
    cmd ─► ProcessExecutor ─► ExecuteResult
"""

from sparkstep.execution.command import CommandBuilder
from sparkstep.execution.params import CLASS_NAME, JARS, ParameterStore
from sparkstep.execution.process import LineSink, ProcessExecutor, default_shell
from sparkstep.execution.resolver import (
    DEFAULT_HADOOP_CONF_DIR,
    HBASE_SITE,
    HIVE_SITE,
    ClusterRuntimeConfig,
    ConfigResolver,
)
from sparkstep.execution.resources import MappingLocator, ResourceLocator, SearchPathLocator
from sparkstep.execution.result import ExecuteResult, ExecuteState

__all__ = [
    # Params
    "ParameterStore",
    "CLASS_NAME",
    "JARS",
    # Resources
    "ResourceLocator",
    "SearchPathLocator",
    "MappingLocator",
    # Resolution
    "ConfigResolver",
    "ClusterRuntimeConfig",
    "DEFAULT_HADOOP_CONF_DIR",
    "HIVE_SITE",
    "HBASE_SITE",
    # Rendering
    "CommandBuilder",
    # Running
    "ProcessExecutor",
    "LineSink",
    "default_shell",
    "ExecuteResult",
    "ExecuteState",
]
