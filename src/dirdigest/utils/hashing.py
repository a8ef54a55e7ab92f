"""Content hashing primitives shared by the hash pool and the digest aggregator (MD5 by default)."""

from __future__ import annotations

import hashlib
from pathlib import Path

DEFAULT_ALGORITHM = "md5"


def new_hasher(algorithm: str = DEFAULT_ALGORITHM):
    """Return a fresh hashlib object for algorithm. Raises ValueError for unknown names."""
    try:
        # Change detection only; not a security boundary.
        return hashlib.new(algorithm, usedforsecurity=False)
    except ValueError as e:
        raise ValueError(f"Unsupported hash algorithm: {algorithm!r}") from e


def hash_bytes(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Raw digest of data."""
    hasher = new_hasher(algorithm)
    hasher.update(data)
    return hasher.digest()


def hash_file(path: Path | str, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Read the whole file into memory and return the raw digest of its bytes.

    Only the content is hashed; the path is not. Raises OSError if the file
    cannot be opened or read (including when path is a directory).
    """
    with open(path, "rb") as f:
        data = f.read()
    return hash_bytes(data, algorithm)
