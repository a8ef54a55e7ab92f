"""File listing: per-root tree walk with include/exclude globs and directory pruning."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Sequence

from dirdigest.errors import (
    INVALID_GLOBS,
    PROBLEM_LISTING,
    AggregateError,
    PathAccessError,
)
from dirdigest.utils.globs import GlobPattern, compile_patterns, matches_any

logger = logging.getLogger(__name__)

_SEPARATORS = os.sep + (os.altsep or "")


def normalize_root(root: str | os.PathLike[str]) -> str:
    """
    Lexically clean a root so 'dir/', 'dir' and './dir' list identical paths.
    The filesystem root itself is kept as-is.
    """
    return os.path.normpath(os.fspath(root))


def _join(root: str, rel: str) -> str:
    if root == os.curdir:
        return rel
    if root.endswith(tuple(_SEPARATORS)):
        return root + rel
    return f"{root}/{rel}"


def walk(
    root: str | os.PathLike[str],
    includes: Sequence[GlobPattern],
    excludes: Sequence[GlobPattern],
) -> tuple[list[str], list[PathAccessError]]:
    """
    Walk one root depth-first and return (matched file paths sorted, access errors).

    Patterns are tested against the path relative to root. Symlinks are skipped
    entirely (neither followed nor listed). A directory matching an exclude is
    pruned with its whole subtree; other directories are always descended into.
    A regular file is listed iff it matches an include and no exclude.
    Access errors are collected and the walk continues with siblings.
    """
    root = normalize_root(root)
    matched: list[str] = []
    errors: list[PathAccessError] = []
    # (filesystem path, root-relative path); '' is the root itself
    stack: list[tuple[str, str]] = [(root, "")]

    while stack:
        directory, rel_dir = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            errors.append(PathAccessError(directory, e))
            continue

        subdirs: list[tuple[str, str]] = []
        for entry in entries:
            rel = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            path = _join(root, rel)
            try:
                if entry.is_symlink():
                    logger.debug("Skipping symlink %s", path)
                    continue
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as e:
                errors.append(PathAccessError(path, e))
                continue

            if is_dir:
                if matches_any(rel, excludes, is_dir=True):
                    logger.debug("Pruning excluded directory %s", path)
                    continue
                subdirs.append((path, rel))
            elif is_file:
                if matches_any(rel, includes) and not matches_any(rel, excludes):
                    matched.append(path)
            else:
                logger.debug("Skipping special file %s", path)

        # Reversed so the stack pops subdirectories in name order.
        stack.extend(reversed(subdirs))

    matched.sort()
    logger.debug("%s: %d file(s) matched, %d error(s)", root, len(matched), len(errors))
    return matched, errors


def _compile_selection(
    includes: Iterable[str], excludes: Iterable[str]
) -> tuple[list[GlobPattern], list[GlobPattern]]:
    """Compile both pattern lists, reporting every invalid glob from either in one error."""
    compiled: list[list[GlobPattern]] = []
    errors: list[BaseException] = []
    for patterns in (includes, excludes):
        try:
            compiled.append(compile_patterns(patterns))
        except AggregateError as e:
            errors.extend(e.errors)
            compiled.append([])
    if errors:
        raise AggregateError(INVALID_GLOBS, errors)
    return compiled[0], compiled[1]


def list_files(
    roots: Iterable[str | os.PathLike[str]],
    includes: Iterable[str],
    excludes: Iterable[str],
) -> list[str]:
    """
    List matching files under every root, sorted lexicographically.

    Raises AggregateError("invalid glob(s)") before any traversal if a pattern is
    malformed, and AggregateError("problem listing files") with every root's
    access errors if any root could not be fully walked. Duplicates across roots
    are kept.
    """
    include_globs, exclude_globs = _compile_selection(includes, excludes)

    paths: list[str] = []
    errors: list[PathAccessError] = []
    for root in roots:
        matched, root_errors = walk(root, include_globs, exclude_globs)
        if root_errors:
            logger.debug("%d error(s) walking %s", len(root_errors), os.fspath(root))
        errors.extend(root_errors)
        paths.extend(matched)

    if errors:
        raise AggregateError(PROBLEM_LISTING, errors)

    paths.sort()
    logger.info("Listed %d file(s)", len(paths))
    return paths
