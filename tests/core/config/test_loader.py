"""Tests for sparkstep.core.config.loader — env file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from sparkstep.core.config.loader import discover_env_files, env_file_names, find_project_root


# ── find_project_root ────────────────────────────────────────────────────


class TestFindProjectRoot:
    def test_finds_pyproject_toml(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").touch()
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)
        assert find_project_root(sub) == tmp_path

    def test_finds_git_dir(self, tmp_path: Path):
        (tmp_path / ".git").mkdir()
        assert find_project_root(tmp_path) == tmp_path

    def test_nearest_marker_wins(self, tmp_path: Path):
        (tmp_path / ".git").mkdir()
        inner = tmp_path / "jobs"
        inner.mkdir()
        (inner / "pyproject.toml").touch()
        assert find_project_root(inner) == inner

    def test_fallback_to_start(self, tmp_path: Path):
        """No markers found → return start directory."""
        sub = tmp_path / "nomarkers"
        sub.mkdir()
        assert find_project_root(sub) == sub


# ── env_file_names ──────────────────────────────────────────────────────


class TestEnvFileNames:
    def test_without_tier(self):
        assert env_file_names() == [".env.base", ".env.local", ".env"]

    def test_with_tier(self):
        assert env_file_names("prod") == [".env.base", ".env.prod", ".env.local", ".env"]

    def test_tier_from_env_var(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPARKSTEP_TIER", "staging")
        assert ".env.staging" in env_file_names()

    def test_explicit_tier_beats_env_var(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPARKSTEP_TIER", "staging")
        names = env_file_names("prod")
        assert ".env.prod" in names
        assert ".env.staging" not in names


# ── discover_env_files ───────────────────────────────────────────────────


class TestDiscoverEnvFiles:
    def test_empty_directory(self, tmp_path: Path):
        assert discover_env_files(tmp_path) == []

    def test_full_cascade(self, tmp_path: Path):
        for name in [".env", ".env.local", ".env.prod", ".env.base"]:
            (tmp_path / name).write_text(f"FROM={name}")
        files = discover_env_files(tmp_path, tier="prod")
        assert [f.name for f in files] == [".env.base", ".env.prod", ".env.local", ".env"]

    def test_tier_file_ignored_without_tier(self, tmp_path: Path):
        (tmp_path / ".env.prod").write_text("X=1")
        assert discover_env_files(tmp_path) == []

    def test_directories_ignored(self, tmp_path: Path):
        (tmp_path / ".env").mkdir()
        assert discover_env_files(tmp_path) == []

    def test_paths_are_absolute(self, tmp_path: Path):
        (tmp_path / ".env.local").write_text("X=1")
        assert discover_env_files(tmp_path) == [tmp_path.resolve() / ".env.local"]
