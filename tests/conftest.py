"""Shared fixtures: a sample tree of files and isolation from the user's config."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


def _generate_files(directory: Path, extension: str = "") -> list[str]:
    files = []
    for i in range(10):
        path = directory / f"{i}{extension}"
        path.write_text("content")
        files.append(path.as_posix())
    return files


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and cwd at an empty directory so no real config is picked up."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", home.as_posix())
    monkeypatch.chdir(home)
    yield home
    logger = logging.getLogger("dirdigest")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_tree(tmp_path: Path) -> tuple[Path, list[str]]:
    """
    Root with files 0..9, foo/0.csv..9.csv, ts-files/0.ts..9.ts and strayTsFile.ts,
    all containing "content". Returns (root, sorted list of every file path).
    """
    root = tmp_path / "tree"
    root.mkdir()
    files = _generate_files(root)
    (root / "foo").mkdir()
    files += _generate_files(root / "foo", ".csv")
    # extension appears elsewhere in the path too
    (root / "ts-files").mkdir()
    files += _generate_files(root / "ts-files", ".ts")
    stray = root / "strayTsFile.ts"
    stray.write_text("content")
    files.append(stray.as_posix())
    return root, sorted(files)
