"""Tests for sparkstep.core.config.settings — ClusterSettings and get_settings()."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sparkstep.core.config import (
    DEFAULT_SPARK_ENTRY_CLASS,
    ClusterSettings,
    clear_settings_cache,
    get_settings,
)


class TestClusterSettings:
    def test_defaults(self):
        settings = ClusterSettings(_env_file=None)
        assert settings.spark_home is None
        assert settings.job_jar_path is None
        assert settings.hadoop_conf_dir == ""
        assert settings.spark_conf == {}
        assert settings.spark_entry_class == DEFAULT_SPARK_ENTRY_CLASS
        assert settings.resource_path == []
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPARKSTEP_SPARK_HOME", "/opt/spark")
        monkeypatch.setenv("SPARKSTEP_JOB_JAR_PATH", "/kylin/lib/job.jar")
        monkeypatch.setenv("SPARKSTEP_HADOOP_CONF_DIR", "/etc/hadoop/custom")
        settings = ClusterSettings(_env_file=None)
        assert settings.spark_home == "/opt/spark"
        assert settings.job_jar_path == "/kylin/lib/job.jar"
        assert settings.hadoop_conf_dir == "/etc/hadoop/custom"

    def test_spark_conf_json_keeps_order(self, monkeypatch: pytest.MonkeyPatch):
        conf = {"spark.master": "yarn", "spark.executor.memory": "4G", "spark.driver.cores": "2"}
        monkeypatch.setenv("SPARKSTEP_SPARK_CONF", json.dumps(conf))
        settings = ClusterSettings(_env_file=None)
        assert list(settings.spark_conf.items()) == list(conf.items())

    def test_resource_path_json(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPARKSTEP_RESOURCE_PATH", '["/etc/hive/conf", "/etc/hbase/conf"]')
        settings = ClusterSettings(_env_file=None)
        assert settings.resource_path == ["/etc/hive/conf", "/etc/hbase/conf"]

    def test_unknown_env_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPARKSTEP_NOT_A_SETTING", "x")
        ClusterSettings(_env_file=None)


class TestGetSettings:
    def test_reads_env_file_from_project_root(self, tmp_path: Path):
        (tmp_path / ".env").write_text("SPARKSTEP_SPARK_HOME=/srv/spark\n")
        settings = get_settings(project_root=tmp_path)
        assert settings.spark_home == "/srv/spark"
        assert settings._env_files_loaded == [tmp_path.resolve() / ".env"]
        assert settings._project_root == tmp_path.resolve()

    def test_tier_file_overrides_base(self, tmp_path: Path):
        (tmp_path / ".env.base").write_text("SPARKSTEP_SPARK_HOME=/base\n")
        (tmp_path / ".env.prod").write_text("SPARKSTEP_SPARK_HOME=/prod\n")
        assert get_settings(project_root=tmp_path, tier="prod").spark_home == "/prod"

    def test_env_var_beats_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / ".env").write_text("SPARKSTEP_SPARK_HOME=/from/file\n")
        monkeypatch.setenv("SPARKSTEP_SPARK_HOME", "/from/env")
        assert get_settings(project_root=tmp_path).spark_home == "/from/env"

    def test_cached(self, tmp_path: Path):
        first = get_settings(project_root=tmp_path)
        assert get_settings(project_root=tmp_path) is first

    def test_force_reload(self, tmp_path: Path):
        first = get_settings(project_root=tmp_path)
        (tmp_path / ".env").write_text("SPARKSTEP_JOB_JAR_PATH=/new.jar\n")
        assert get_settings(project_root=tmp_path).job_jar_path is None
        reloaded = get_settings(project_root=tmp_path, _force_reload=True)
        assert reloaded is not first
        assert reloaded.job_jar_path == "/new.jar"

    def test_clear_cache(self, tmp_path: Path):
        first = get_settings(project_root=tmp_path)
        clear_settings_cache()
        assert get_settings(project_root=tmp_path) is not first

    def test_private_attrs_not_dumped(self, tmp_path: Path):
        (tmp_path / ".env").write_text("SPARKSTEP_SPARK_HOME=/srv/spark\n")
        dumped = get_settings(project_root=tmp_path).model_dump()
        assert "_env_files_loaded" not in dumped
        assert dumped["spark_home"] == "/srv/spark"
