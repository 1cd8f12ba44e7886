"""
Shared pytest fixtures and configuration for sparkstep tests.

This module provides:
- Environment isolation (no SPARKSTEP_* / CLASSPATH leakage from the host)
- Settings factories that never read ``.env`` files
- On-disk Hadoop / HBase configuration directories
- A recording locator and a recording executor for step tests
"""

import logging
import os
import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog

# Ensure sparkstep package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sparkstep.core.config import ClusterSettings, clear_settings_cache
from sparkstep.execution import ExecuteResult, HBASE_SITE, HIVE_SITE
from sparkstep.framework.logging import clear_context
from sparkstep.framework.logging import config as logging_config


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark tests without explicit markers as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Strip host SPARKSTEP_* variables and CLASSPATH; reset caches."""
    for key in list(os.environ):
        if key.startswith("SPARKSTEP_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("CLASSPATH", raising=False)
    clear_settings_cache()
    clear_context()
    yield
    clear_settings_cache()
    clear_context()


# =============================================================================
# Settings & Resource Fixtures
# =============================================================================


@pytest.fixture
def make_settings() -> Callable[..., ClusterSettings]:
    """Factory for ClusterSettings that ignores ``.env`` files.

    Defaults to a fully configured cluster; override any field by keyword.
    """

    def _make(**overrides: Any) -> ClusterSettings:
        values: dict[str, Any] = {
            "spark_home": "/opt/spark",
            "job_jar_path": "/kylin/lib/kylin-job.jar",
        }
        values.update(overrides)
        return ClusterSettings(_env_file=None, **values)  # type: ignore[call-arg]

    return _make


@pytest.fixture
def hive_conf_dir(tmp_path: Path) -> Path:
    """Directory containing a hive-site.xml."""
    conf = tmp_path / "hive-conf"
    conf.mkdir()
    (conf / HIVE_SITE).write_text("<configuration/>\n")
    return conf


@pytest.fixture
def hbase_conf_dir(tmp_path: Path) -> Path:
    """Directory containing an hbase-site.xml."""
    conf = tmp_path / "hbase-conf"
    conf.mkdir()
    (conf / HBASE_SITE).write_text("<configuration/>\n")
    return conf


class RecordingLocator:
    """Locator answering from a mapping and recording every lookup."""

    def __init__(self, mapping: dict[str, Path] | None = None) -> None:
        self.mapping = dict(mapping or {})
        self.calls: list[str] = []

    def locate(self, name: str) -> Path | None:
        self.calls.append(name)
        return self.mapping.get(name)


@pytest.fixture
def make_locator() -> type[RecordingLocator]:
    return RecordingLocator


@pytest.fixture
def recording_locator(hbase_conf_dir: Path) -> RecordingLocator:
    """Locator that finds hbase-site.xml only."""
    return RecordingLocator({HBASE_SITE: hbase_conf_dir / HBASE_SITE})


# =============================================================================
# Executor Fixtures
# =============================================================================


class RecordingExecutor:
    """Stand-in for ProcessExecutor: records commands, replays output lines."""

    def __init__(self, lines: list[str] | None = None, result: ExecuteResult | None = None) -> None:
        self.lines = list(lines or [])
        self.result = result
        self.commands: list[str] = []

    def execute(self, command: str, line_sink=None) -> ExecuteResult:
        self.commands.append(command)
        for line in self.lines:
            if line_sink is not None:
                line_sink(line)
        if self.result is not None:
            return self.result
        return ExecuteResult.succeeded("\n".join(self.lines))


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    return RecordingExecutor(lines=["submitted application_1", "final status: SUCCEEDED"])


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Undo configure_logging() side effects (root handlers, structlog config)."""
    logging_config._configured = False
    yield
    logging_config._configured = False
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger("sparkstep").setLevel(logging.NOTSET)
