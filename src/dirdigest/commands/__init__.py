"""Subcommands. Each module exposes run(args) taking an argparse-style namespace."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dirdigest.config import load_config
from dirdigest.digest import encode_summary
from dirdigest.utils.ignore import load_exclude_patterns


def write_stdout(text: str) -> None:
    """
    Write path-bearing text to stdout. Goes through the binary buffer when there is
    one, so filenames that are not valid UTF-8 print as their original bytes.
    """
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    buffer.write(encode_summary(text))
    buffer.flush()


@dataclass
class Selection:
    """Roots and patterns resolved from command-line flags and config."""

    roots: list[str]
    includes: list[str]
    excludes: list[str]
    parallelism: int
    algorithm: str


def resolve_selection(args: Any, config: dict[str, Any] | None = None) -> Selection:
    """
    Merge flags over config. Missing attributes on args fall back to config, so
    tests can pass minimal Args objects.
    """
    if config is None:
        config = load_config(Path.cwd())
    roots = [str(r) for r in (getattr(args, "roots", None) or ["."])]
    includes = getattr(args, "includes", None) or list(config.get("include_patterns") or ["**"])
    excludes = load_exclude_patterns(
        config,
        getattr(args, "excludes", None) or [],
        getattr(args, "ignore_files", None) or [],
    )
    parallelism = getattr(args, "parallelism", None)
    if parallelism is None:
        parallelism = int(config.get("parallelism") or 0)
    return Selection(
        roots=roots,
        includes=list(includes),
        excludes=excludes,
        parallelism=parallelism,
        algorithm=config.get("algorithm") or "md5",
    )
