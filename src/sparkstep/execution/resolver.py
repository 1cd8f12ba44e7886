"""Cluster runtime resolution — settings + search path → submission facts.

Resolution runs once per step invocation, before anything is spawned,
and follows a fixed order:

1. ``spark_home`` and ``job_jar_path`` must be set, else
   :class:`MissingConfigError`.
2. ``HADOOP_CONF_DIR``: an explicit non-empty ``hadoop_conf_dir`` wins.
   Otherwise start from ``/etc/hadoop/conf`` and, if ``hive-site.xml`` is
   located and exists on disk, use its parent directory instead.  A miss
   is not an error.
3. ``hbase-site.xml`` must be located and exist on disk, else
   :class:`ResourceNotFoundError`.  ``spark-submit`` ships it via
   ``--files``.
4. ``jars``: the step's ``jars`` parameter if non-empty, else the job jar.
5. ``spark_conf`` overrides are passed through in their given order.

Manifesto:
    Steps run on hosts where Hadoop and HBase configuration live in
    different places.  The fallback chain keeps explicit configuration to
    a minimum while still failing loudly when a file that the submission
    truly needs is missing.

Tags:
    sparkstep, execution, configuration, resolution, fallback

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from sparkstep.core.config import ClusterSettings
from sparkstep.core.errors import MissingConfigError, ResourceNotFoundError
from sparkstep.execution.params import JARS, ParameterStore
from sparkstep.execution.resources import ResourceLocator
from sparkstep.framework.logging import get_logger

logger = get_logger(__name__)

DEFAULT_HADOOP_CONF_DIR = "/etc/hadoop/conf"
HIVE_SITE = "hive-site.xml"
HBASE_SITE = "hbase-site.xml"


@dataclass(frozen=True)
class ClusterRuntimeConfig:
    """
    Read-only facts needed to render one submission command.

    Attributes:
        spark_home: Spark install directory
        entry_class: ``spark-submit --class`` entry point
        job_jar: Orchestrator job jar (positional application jar)
        hadoop_conf_dir: Value exported as ``HADOOP_CONF_DIR``
        hbase_site: Absolute path of ``hbase-site.xml`` (``--files``)
        jars: Value of ``--jars``
        spark_conf: Ordered ``--conf`` overrides (read-only view)
    """

    spark_home: str
    entry_class: str
    job_jar: str
    hadoop_conf_dir: str
    hbase_site: str
    jars: str
    spark_conf: Mapping[str, str]


class ConfigResolver:
    """Derive a :class:`ClusterRuntimeConfig` from settings and a locator."""

    def __init__(self, settings: ClusterSettings, locator: ResourceLocator) -> None:
        self._settings = settings
        self._locator = locator

    def resolve(self, params: ParameterStore) -> ClusterRuntimeConfig:
        """Run the resolution chain; raises ``ConfigError`` subclasses."""
        settings = self._settings

        if not settings.spark_home:
            raise MissingConfigError("spark_home")
        if not settings.job_jar_path:
            raise MissingConfigError("job_jar_path")

        hadoop_conf_dir = self.resolve_hadoop_conf_dir()
        logger.info("resolver.hadoop_conf_dir", hadoop_conf_dir=hadoop_conf_dir)

        hbase_site = self.resolve_hbase_site()
        logger.info("resolver.hbase_site", path=str(hbase_site))

        job_jar = settings.job_jar_path
        jars = params.get(JARS) or job_jar

        return ClusterRuntimeConfig(
            spark_home=settings.spark_home,
            entry_class=settings.spark_entry_class,
            job_jar=job_jar,
            hadoop_conf_dir=hadoop_conf_dir,
            hbase_site=str(hbase_site),
            jars=jars,
            spark_conf=MappingProxyType(dict(settings.spark_conf)),
        )

    def resolve_hadoop_conf_dir(self) -> str:
        """Explicit setting, else parent of ``hive-site.xml``, else the default."""
        if self._settings.hadoop_conf_dir:
            return self._settings.hadoop_conf_dir

        hadoop_conf_dir = DEFAULT_HADOOP_CONF_DIR
        hive_site = self._locator.locate(HIVE_SITE)
        if hive_site is not None and hive_site.exists():
            logger.info("resolver.hive_site_located", path=str(hive_site))
            hadoop_conf_dir = str(hive_site.parent)
        else:
            logger.debug("resolver.hive_site_missing", default=hadoop_conf_dir)
        return hadoop_conf_dir

    def resolve_hbase_site(self) -> Path:
        """Absolute path of ``hbase-site.xml``; raises if it cannot be found."""
        hbase_site = self._locator.locate(HBASE_SITE)
        if hbase_site is None or not hbase_site.exists():
            raise ResourceNotFoundError(HBASE_SITE)
        return hbase_site.absolute()
