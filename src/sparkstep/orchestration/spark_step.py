"""Spark step — submit one Spark job and report the outcome.

``SparkStep`` is the unit an orchestrator schedules.  The caller
configures it with setters, then calls :meth:`SparkStep.run` once::

    step = SparkStep(name="Build Cube")
    step.set_class_name("org.apache.kylin.engine.spark.SparkCubing")
    step.set_param("hiveTable", "default.kylin_intermediate_x")
    step.set_param("output", "hdfs:///kylin/cube/x")

    result = step.run(ExecutableContext(config=get_settings()))

ARCHITECTURE
────────────
::

    run(context)
      ├── freeze params
      ├── ConfigResolver.resolve()   ── ConfigError propagates, nothing spawned
      ├── CommandBuilder.build()     ── logged in full
      └── ProcessExecutor.execute()  ── each line logged + forwarded
            └── ExecuteResult        ── SUCCEED(output) | ERROR(message)

Configuration problems raise; runtime problems come back as a failed
result so the orchestrator always gets a structured outcome.

Tags:
    sparkstep, orchestration, step, spark-submit

Doc-Types:
    api-reference
"""

from __future__ import annotations

import uuid

from sparkstep.core.errors import ConfigError
from sparkstep.execution.command import CommandBuilder
from sparkstep.execution.params import CLASS_NAME, JARS, ParameterStore
from sparkstep.execution.process import ProcessExecutor
from sparkstep.execution.resolver import ClusterRuntimeConfig, ConfigResolver
from sparkstep.execution.result import ExecuteResult
from sparkstep.framework.logging import get_logger, log_step, push_context
from sparkstep.orchestration.context import ExecutableContext

logger = get_logger(__name__)


class SparkStep:
    """One spark-submit invocation within a larger job."""

    def __init__(
        self,
        name: str = "Spark Cubing",
        *,
        executor: ProcessExecutor | None = None,
        builder: CommandBuilder | None = None,
        step_id: str | None = None,
    ) -> None:
        self.id = step_id or str(uuid.uuid4())
        self.name = name
        self.params = ParameterStore()
        self._executor = executor or ProcessExecutor()
        self._builder = builder or CommandBuilder()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_class_name(self, class_name: str) -> None:
        self.params.set(CLASS_NAME, class_name)

    def set_jars(self, jars: str) -> None:
        """Comma-separated jars for ``spark-submit --jars``."""
        self.params.set(JARS, jars)

    def set_param(self, name: str, value: str) -> None:
        self.params.set(name, value)

    def get_param(self, name: str) -> str | None:
        return self.params.get(name)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def resolve(self, context: ExecutableContext) -> ClusterRuntimeConfig:
        resolver = ConfigResolver(context.config, context.resource_locator())
        return resolver.resolve(self.params)

    def render_command(self, context: ExecutableContext) -> str:
        """Resolve and render the submission command without running it."""
        return self._builder.build(self.params, self.resolve(context))

    def run(self, context: ExecutableContext) -> ExecuteResult:
        """Submit the job and block until ``spark-submit`` exits.

        Raises:
            ConfigError: Required settings or ``hbase-site.xml`` missing.
        """
        token = push_context(execution_id=self.id, step=self.name, backend="spark-submit")
        try:
            self.params.freeze()
            try:
                cmd = self.render_command(context)
            except ConfigError as exc:
                exc.with_context(step=self.name, execution_id=self.id)
                logger.error("spark_step.config_error", **exc.to_dict())
                raise

            logger.info("spark_step.command", cmd=cmd)

            def sink(line: str) -> None:
                logger.info("spark_step.output", line=line)
                if context.line_sink is not None:
                    context.line_sink(line)

            with log_step("spark_step.submit") as timer:
                result = self._executor.execute(cmd, sink)
                timer.add_metric("state", result.state.value)

            if not result.succeed:
                logger.error("spark_step.failed", error=result.message)
            return result
        finally:
            token.restore()

    def __repr__(self) -> str:
        return f"SparkStep(id={self.id!r}, name={self.name!r}, params={self.params.to_dict()!r})"
