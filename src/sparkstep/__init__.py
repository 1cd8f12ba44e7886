"""
sparkstep — run a Spark job as one step of an orchestrated job.

Resolves the cluster environment, renders a ``spark-submit`` command
line, runs it, and reports a structured result::

    from sparkstep import ExecutableContext, SparkStep, get_settings

    step = SparkStep()
    step.set_class_name("org.apache.kylin.engine.spark.SparkCubing")
    step.set_param("segmentId", "20240101000000_20240201000000")

    result = step.run(ExecutableContext(config=get_settings()))
"""

from sparkstep.core.config import ClusterSettings, get_settings
from sparkstep.execution import ExecuteResult, ExecuteState
from sparkstep.orchestration import ExecutableContext, SparkStep

__version__ = "0.1.0"

__all__ = [
    "ClusterSettings",
    "ExecutableContext",
    "ExecuteResult",
    "ExecuteState",
    "SparkStep",
    "get_settings",
    "__version__",
]
