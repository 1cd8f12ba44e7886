"""
Cluster settings for sparkstep.

Manifesto:
    The step needs a handful of process-wide facts: where Spark is
    installed, where the job jar lives, which Hadoop configuration to
    use, and which ``--conf`` overrides to pass.  ``ClusterSettings`` is
    the one validated object that carries them.  It is handed to the
    step explicitly through ``ExecutableContext``; resolution never reads
    ambient global state.

Presence of ``spark_home`` and ``job_jar_path`` is *not* checked at load
time.  The resolver enforces them when a submission is actually
attempted, so tooling such as ``sparkstep config show`` works on a
partially configured machine.

Tags:
    sparkstep, configuration, settings, pydantic, caching

Doc-Types:
    api-reference
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SPARK_ENTRY_CLASS = "org.apache.kylin.engine.spark.util.SparkEntry"


class ClusterSettings(BaseSettings):
    """Process-wide configuration consumed by the Spark step.

    All fields can be set via ``SPARKSTEP_*`` environment variables (e.g.
    ``SPARKSTEP_SPARK_HOME=/opt/spark``) or through ``.env`` files.
    ``SPARKSTEP_SPARK_CONF`` and ``SPARKSTEP_RESOURCE_PATH`` take JSON.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPARKSTEP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Cluster ──────────────────────────────────────────────────
    spark_home: str | None = Field(default=None, description="Spark install directory")
    job_jar_path: str | None = Field(default=None, description="Orchestrator job jar")
    hadoop_conf_dir: str = Field(default="", description="Explicit HADOOP_CONF_DIR; empty means search")
    spark_conf: dict[str, str] = Field(
        default_factory=dict,
        description="Ordered spark-submit --conf overrides",
    )
    spark_entry_class: str = Field(default=DEFAULT_SPARK_ENTRY_CLASS)

    # ── Resource search ──────────────────────────────────────────
    resource_path: list[str] = Field(
        default_factory=list,
        description="Directories searched for hive-site.xml / hbase-site.xml; empty means CLASSPATH",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    # Populated by get_settings() for inspection.
    _project_root: Path | None = PrivateAttr(default=None)
    _env_files_loaded: list[Path] = PrivateAttr(default_factory=list)


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, ClusterSettings] = {}


def get_settings(
    *,
    project_root: Path | None = None,
    tier: str | None = None,
    _force_reload: bool = False,
) -> ClusterSettings:
    """Load, validate, and cache a :class:`ClusterSettings` instance.

    Parameters
    ----------
    project_root:
        Override the auto-detected project root used for ``.env`` discovery.
    tier:
        Explicit tier.  Overrides ``SPARKSTEP_TIER``.
    _force_reload:
        Bypass cache and reload from disk.
    """
    from .loader import discover_env_files, find_project_root

    root = (project_root or find_project_root()).resolve()
    cache_key = f"{root}:{tier or ''}"

    if not _force_reload and cache_key in _settings_cache:
        return _settings_cache[cache_key]

    env_files = discover_env_files(root, tier)
    settings = ClusterSettings(
        _env_file=env_files or None,  # type: ignore[call-arg]
    )

    settings._project_root = root
    settings._env_files_loaded = env_files

    _settings_cache[cache_key] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()
