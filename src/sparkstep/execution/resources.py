"""Resource lookup by logical name.

The resolver needs to find ``hive-site.xml`` and ``hbase-site.xml`` "on
the runtime search path".  That capability is a small protocol so tests
and embedders can supply their own answer without touching the
filesystem layout.

Implementations:

- :class:`SearchPathLocator` — first directory (in order) that contains
  the name.  Built from ``ClusterSettings.resource_path`` or, when that is
  empty, from the directory entries of ``CLASSPATH``.
- :class:`MappingLocator` — fixed ``name -> path`` map.

A locator only answers *where*; whether the returned path exists on disk
is checked by the resolver.

Tags:
    sparkstep, execution, resources, classpath, protocol

Doc-Types:
    api-reference
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sparkstep.core.config import ClusterSettings


@runtime_checkable
class ResourceLocator(Protocol):
    """Locate a named resource, returning its path or None."""

    def locate(self, name: str) -> Path | None: ...


class SearchPathLocator:
    """Search an ordered list of directories for a resource name."""

    _ARCHIVE_SUFFIXES = (".jar", ".zip")

    def __init__(self, search_path: Iterable[str | Path]) -> None:
        self._search_path = [Path(entry) for entry in search_path if str(entry)]

    @property
    def search_path(self) -> list[Path]:
        return list(self._search_path)

    @classmethod
    def from_settings(
        cls,
        settings: ClusterSettings,
        environ: Mapping[str, str] | None = None,
    ) -> SearchPathLocator:
        """Use ``settings.resource_path``, else the directories on ``CLASSPATH``."""
        if settings.resource_path:
            return cls(settings.resource_path)
        env = os.environ if environ is None else environ
        classpath = env.get("CLASSPATH", "")
        return cls(entry for entry in classpath.split(os.pathsep) if entry)

    def locate(self, name: str) -> Path | None:
        for entry in self._search_path:
            # Archive members have no path on disk.
            if entry.suffix.lower() in self._ARCHIVE_SUFFIXES:
                continue
            candidate = entry / name
            if candidate.is_file():
                return candidate
        return None

    def __repr__(self) -> str:
        return f"SearchPathLocator({[str(p) for p in self._search_path]!r})"


class MappingLocator:
    """Answer lookups from a fixed mapping."""

    def __init__(self, mapping: Mapping[str, str | Path]) -> None:
        self._mapping = {name: Path(path) for name, path in mapping.items()}

    def locate(self, name: str) -> Path | None:
        return self._mapping.get(name)
