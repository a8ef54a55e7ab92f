"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dirdigest import __version__
from dirdigest.config import load_config


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the dirdigest logger: level from --verbose/--quiet or config, console
    handler on stderr, optional file handler from config.
    """
    config = load_config(Path.cwd())
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger("dirdigest")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError as e:
                root.warning("Cannot open log file %s: %s", log_file, e)


def _add_selection_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("roots", nargs="*", metavar="ROOT", help="Directories to scan (default: .).")
    p.add_argument(
        "--include",
        "-i",
        dest="includes",
        action="append",
        metavar="PATTERN",
        help="Glob selecting files (repeatable; default from config, normally '**').",
    )
    p.add_argument(
        "--exclude",
        "-e",
        dest="excludes",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Glob excluding files; a matching directory is pruned entirely (repeatable).",
    )
    p.add_argument(
        "--ignore-file",
        dest="ignore_files",
        action="append",
        default=[],
        type=Path,
        metavar="FILE",
        help="gitignore-style file whose patterns are added to the excludes (repeatable).",
    )


def _add_parallelism_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--parallelism",
        "-j",
        type=int,
        default=None,
        metavar="N",
        help="Number of hashing workers; 0 or less means one per file (default from config).",
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="dirdigest",
        description="Compute a reproducible digest of the files selected by glob patterns under one or more directories.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "dirdigest digest . -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # digest
    p_digest = subparsers.add_parser("digest", help="Print the digest of the selected files.", parents=[global_flags])
    _add_selection_args(p_digest)
    _add_parallelism_arg(p_digest)
    out_grp = p_digest.add_mutually_exclusive_group()
    out_grp.add_argument("--summary-file", type=Path, metavar="FILE", help="Write the summary the digest was computed over to FILE.")
    out_grp.add_argument("--print-summary", action="store_true", help="Print the summary to stdout after the digest.")
    p_digest.set_defaults(run="digest")

    # list
    p_list = subparsers.add_parser("list", help="Print the selected file paths, one per line.", parents=[global_flags])
    _add_selection_args(p_list)
    p_list.set_defaults(run="list")

    # hashes
    p_hashes = subparsers.add_parser("hashes", help="Print '<path>: <hash>' for each selected file.", parents=[global_flags])
    _add_selection_args(p_hashes)
    _add_parallelism_arg(p_hashes)
    p_hashes.set_defaults(run="hashes")

    args = parser.parse_args()
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    run = getattr(args, "run", None)

    if run == "digest":
        from dirdigest.commands.digest_cmd import run as cmd_run
    elif run == "list":
        from dirdigest.commands.list_cmd import run as cmd_run
    elif run == "hashes":
        from dirdigest.commands.hashes_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)
