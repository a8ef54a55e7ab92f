"""Print the files a digest would cover."""

from __future__ import annotations

import sys

from dirdigest.commands import resolve_selection, write_stdout
from dirdigest.errors import DirDigestError
from dirdigest.listing import list_files


def run(args) -> None:
    """Run the list command."""
    sel = resolve_selection(args)
    try:
        paths = list_files(sel.roots, sel.includes, sel.excludes)
    except DirDigestError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    write_stdout("".join(f"{path}\n" for path in paths))
