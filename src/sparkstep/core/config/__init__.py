"""Cluster configuration and env-file loading.

Quick start::

    from sparkstep.core.config import get_settings

    settings = get_settings()
    print(settings.spark_home)

Architecture::

    settings.py       ClusterSettings (Pydantic) + get_settings() cache
    loader.py         .env cascade discovery (parsed by pydantic-settings)
"""

from .loader import discover_env_files, env_file_names, find_project_root
from .settings import (
    DEFAULT_SPARK_ENTRY_CLASS,
    ClusterSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Settings
    "ClusterSettings",
    "DEFAULT_SPARK_ENTRY_CLASS",
    "get_settings",
    "clear_settings_cache",
    # Loader
    "find_project_root",
    "discover_env_files",
    "env_file_names",
]
