"""Configuration: defaults, global config and project overrides."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "config.json"
PROJECT_CONFIG_FILENAME = ".dirdigest.json"


# Global config location
def _global_config_dir() -> Path:
    return Path.home() / ".dirdigest"


def global_config_path() -> Path:
    """Path to global config file (~/.dirdigest/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def project_config_path(project_dir: Path) -> Path:
    """Path to project-local config (<project>/.dirdigest.json)."""
    return project_dir / PROJECT_CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration. parallelism 0 means one hashing worker per file."""
    return {
        "parallelism": 0,
        "algorithm": "md5",
        "include_patterns": ["**"],
        "exclude_patterns": [],
        "ignore_files": [],
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load a JSON object from path; return None if the file is missing or invalid."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.dirdigest/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def load_config(project_dir: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.dirdigest/config.json) + project overrides.

    If project_dir is None, only global config (and defaults) are used.
    Project overrides apply when <project_dir>/.dirdigest.json exists.
    """
    merged = load_global_config()
    if project_dir is not None:
        project_data = _load_json(project_config_path(Path(project_dir).resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged
