"""Print the digest of the selected files, optionally with the summary it was computed over."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from dirdigest.commands import resolve_selection, write_stdout
from dirdigest.digest import encode_summary, get_digest_result
from dirdigest.errors import DirDigestError

logger = logging.getLogger(__name__)


def run(args) -> None:
    """Run the digest command."""
    sel = resolve_selection(args)
    logger.debug("Roots %s, includes %s, excludes %s", sel.roots, sel.includes, sel.excludes)
    try:
        result = get_digest_result(sel.roots, sel.includes, sel.excludes, sel.parallelism, sel.algorithm)
    except (DirDigestError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(result.hexdigest)

    summary_file: Path | None = getattr(args, "summary_file", None)
    if summary_file is not None:
        try:
            Path(summary_file).write_bytes(encode_summary(result.summary))
        except OSError as e:
            print(f"Error: cannot write summary to {summary_file}: {e}", file=sys.stderr)
            sys.exit(1)
        logger.info("Wrote summary of %d file(s) to %s", len(result.entries), summary_file)
    elif getattr(args, "print_summary", False):
        write_stdout(result.summary)
