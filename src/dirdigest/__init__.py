"""dirdigest: a reproducible digest over the files selected by glob patterns under one or more roots."""

from dirdigest.digest import digest, get_digest, get_digest_result, summarize
from dirdigest.errors import (
    AggregateError,
    DirDigestError,
    FileReadError,
    GlobCompileError,
    HashError,
    PathAccessError,
)
from dirdigest.hash_pool import compute_hashes
from dirdigest.listing import list_files, walk
from dirdigest.models import DigestResult, FileEntry

__version__ = "0.1.0"

__all__ = [
    "AggregateError",
    "DigestResult",
    "DirDigestError",
    "FileEntry",
    "FileReadError",
    "GlobCompileError",
    "HashError",
    "PathAccessError",
    "compute_hashes",
    "digest",
    "get_digest",
    "get_digest_result",
    "list_files",
    "summarize",
    "walk",
]
