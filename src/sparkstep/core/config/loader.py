"""
Env-file discovery for cluster settings.

Hosts that run Spark steps usually keep their cluster wiring in a
checked-in ``.env.base`` with per-tier and per-machine overrides next to
it.  This module only decides *which* files apply and in what order;
parsing is left to pydantic-settings, which gives later files precedence
and lets real environment variables win over all of them::

    .env.base  →  .env.{tier}  →  .env.local  →  .env  →  SPARKSTEP_* env vars

Tags:
    sparkstep, configuration, env-files, cascading, loader

Doc-Types:
    api-reference
"""

from __future__ import annotations

import os
from pathlib import Path

ROOT_MARKERS = ("pyproject.toml", ".git")
TIER_ENV_VAR = "SPARKSTEP_TIER"


def find_project_root(start: Path | None = None) -> Path:
    """Nearest directory at or above *start* holding a root marker.

    Falls back to *start* (or cwd) when none is found.
    """
    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        if any((directory / marker).exists() for marker in ROOT_MARKERS):
            return directory
    return origin


def env_file_names(tier: str | None = None) -> list[str]:
    """Cascade file names, lowest precedence first."""
    tier = tier or os.environ.get(TIER_ENV_VAR)
    names = [".env.base"]
    if tier:
        names.append(f".env.{tier}")
    names += [".env.local", ".env"]
    return names


def discover_env_files(
    project_root: Path | None = None,
    tier: str | None = None,
) -> list[Path]:
    """Existing cascade files under *project_root*, in load order."""
    root = (project_root or find_project_root()).resolve()
    return [root / name for name in env_file_names(tier) if (root / name).is_file()]
