"""Submission command rendering.

Turns step parameters plus a resolved :class:`ClusterRuntimeConfig` into
one shell command line::

    export HADOOP_CONF_DIR=<dir> && <spark_home>/bin/spark-submit
        --class <entry_class> [--conf k=v ...]
        --files <hbase-site.xml> --jars <jars> <job_jar> <application args>

Application arguments follow a fixed ordering rule:

- every parameter renders as ``-<name> <value>``;
- ``className`` goes first, whatever its insertion position, because
  the submitted application reads its first argument as the class to run;
- ``jars`` is dropped, since it configures ``spark-submit`` itself;
- everything else follows in insertion order.

Values are interpolated verbatim; the command is handed to a shell as-is.
"""

from __future__ import annotations

from sparkstep.execution.params import CLASS_NAME, JARS, ParameterStore
from sparkstep.execution.resolver import ClusterRuntimeConfig


class CommandBuilder:
    """Render spark-submit command lines."""

    def format_args(self, params: ParameterStore) -> str:
        """Application argument string for ``params``."""
        head: list[str] = []
        rest: list[str] = []
        for name, value in params.entries():
            if name == JARS:
                continue
            token = f"-{name} {value} "
            if name == CLASS_NAME:
                head.append(token)
            else:
                rest.append(token)
        return "".join(head + rest).rstrip()

    def build(self, params: ParameterStore, runtime: ClusterRuntimeConfig) -> str:
        """Full command line for ``params`` against ``runtime``."""
        parts = [
            f"export HADOOP_CONF_DIR={runtime.hadoop_conf_dir} &&",
            f"{runtime.spark_home}/bin/spark-submit",
            f"--class {runtime.entry_class}",
        ]
        parts.extend(f"--conf {key}={value}" for key, value in runtime.spark_conf.items())
        parts.append(f"--files {runtime.hbase_site}")
        parts.append(f"--jars {runtime.jars}")
        parts.append(runtime.job_jar)
        parts.append(self.format_args(params))
        return " ".join(parts).rstrip()
