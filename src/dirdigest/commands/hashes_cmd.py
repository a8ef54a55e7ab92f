"""Print per-file hashes in summary format."""

from __future__ import annotations

import sys

from dirdigest.commands import resolve_selection, write_stdout
from dirdigest.digest import summarize
from dirdigest.errors import DirDigestError
from dirdigest.hash_pool import compute_hashes
from dirdigest.listing import list_files


def run(args) -> None:
    """Run the hashes command."""
    sel = resolve_selection(args)
    try:
        paths = list_files(sel.roots, sel.includes, sel.excludes)
        entries = compute_hashes(paths, sel.parallelism, sel.algorithm)
    except (DirDigestError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    write_stdout(summarize(entries))
