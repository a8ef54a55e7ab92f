"""Unit tests for config (defaults, global and project overrides)."""

from __future__ import annotations

import json
from pathlib import Path

from dirdigest.config import (
    PROJECT_CONFIG_FILENAME,
    default_config,
    global_config_path,
    load_config,
    project_config_path,
)


def test_default_config() -> None:
    cfg = default_config()
    assert cfg["parallelism"] == 0
    assert cfg["algorithm"] == "md5"
    assert cfg["include_patterns"] == ["**"]
    assert cfg["exclude_patterns"] == []
    assert cfg["logging"]["level"] == "INFO"


def test_default_config_is_fresh_copy() -> None:
    a = default_config()
    a["exclude_patterns"].append("x")
    assert default_config()["exclude_patterns"] == []


def test_global_config_path_under_home(isolated_config: Path) -> None:
    assert global_config_path() == isolated_config / ".dirdigest" / "config.json"


def test_project_config_path(tmp_path: Path) -> None:
    assert project_config_path(tmp_path) == tmp_path / PROJECT_CONFIG_FILENAME


def test_load_config_missing_files_gives_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == default_config()
    assert load_config(None) == default_config()


def test_load_config_merges_global_then_project(isolated_config: Path, tmp_path: Path) -> None:
    gpath = global_config_path()
    gpath.parent.mkdir(parents=True)
    gpath.write_text(json.dumps({"parallelism": 4, "logging": {"level": "DEBUG"}}))
    project = tmp_path / "proj"
    project.mkdir()
    project_config_path(project).write_text(json.dumps({"parallelism": 2, "exclude_patterns": [".git/"]}))

    cfg = load_config(project)
    assert cfg["parallelism"] == 2
    assert cfg["exclude_patterns"] == [".git/"]
    # nested dicts are merged, not replaced
    assert cfg["logging"]["level"] == "DEBUG"
    assert "file" in cfg["logging"]
    assert load_config(None)["parallelism"] == 4


def test_load_config_ignores_invalid_json(tmp_path: Path) -> None:
    project_config_path(tmp_path).write_text("{not json")
    assert load_config(tmp_path) == default_config()
    project_config_path(tmp_path).write_text("[1, 2]")
    assert load_config(tmp_path) == default_config()
