"""Shared utilities: glob patterns, content hashing, ignore files."""

from dirdigest.utils.globs import GlobPattern, compile_pattern, compile_patterns, matches_any
from dirdigest.utils.hashing import DEFAULT_ALGORITHM, hash_bytes, hash_file, new_hasher
from dirdigest.utils.ignore import load_exclude_patterns, parse_ignore_file

__all__ = [
    "DEFAULT_ALGORITHM",
    "GlobPattern",
    "compile_pattern",
    "compile_patterns",
    "hash_bytes",
    "hash_file",
    "load_exclude_patterns",
    "matches_any",
    "new_hasher",
    "parse_ignore_file",
]
