"""Ignore files (gitignore syntax) that contribute exclude patterns."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

logger = logging.getLogger(__name__)


def parse_ignore_file(path: Path) -> list[str]:
    """
    Read a gitignore-style file and return non-empty pattern lines (strip comments and blanks).
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("Ignore file not found: %s", path)
        return []
    lines = path.read_text(encoding="utf-8").splitlines()
    patterns: list[str] = []
    for line in lines:
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        if s.startswith("!"):
            logger.warning("%s: negated pattern %r is not supported; skipping", path, s)
            continue
        patterns.append(s)
    return patterns


def load_exclude_patterns(
    config: dict[str, Any],
    extra_patterns: Iterable[str] = (),
    ignore_files: Iterable[Path | str] = (),
) -> list[str]:
    """
    Combine exclude patterns in order: config exclude_patterns, extra patterns
    (e.g. -e flags), then patterns from config ignore_files and the given ignore files.
    Duplicates are dropped, keeping the first occurrence.
    """
    result: list[str] = []
    seen: set[str] = set()

    def add(pattern: str) -> None:
        if pattern not in seen:
            seen.add(pattern)
            result.append(pattern)

    for p in config.get("exclude_patterns") or []:
        add(p)
    for p in extra_patterns:
        add(p)
    files = list(config.get("ignore_files") or []) + list(ignore_files)
    for f in files:
        for p in parse_ignore_file(Path(f)):
            add(p)
    return result
