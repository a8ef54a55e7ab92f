"""Digest aggregation: render FileEntries into the summary text and hash it."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from dirdigest.hash_pool import compute_hashes
from dirdigest.listing import list_files
from dirdigest.models import DigestResult, FileEntry
from dirdigest.utils.hashing import DEFAULT_ALGORITHM, hash_bytes

logger = logging.getLogger(__name__)


def summarize(entries: Iterable[FileEntry]) -> str:
    """One '<path>: <lowercase-hex-hash>' line per entry, in the given order."""
    return "".join(f"{e.path}: {e.hexdigest}\n" for e in entries)


def encode_summary(summary: str) -> bytes:
    """
    UTF-8 bytes of the summary. Filenames that are not valid UTF-8 come back from
    os.scandir surrogate-escaped; their original bytes are restored here.
    """
    return summary.encode("utf-8", "surrogateescape")


def digest(summary: str, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Hash of the encoded summary, using the same function as file hashing."""
    return hash_bytes(encode_summary(summary), algorithm)


def get_digest_result(
    roots: Iterable[str | os.PathLike[str]],
    includes: Iterable[str],
    excludes: Iterable[str],
    parallelism: int = 0,
    algorithm: str = DEFAULT_ALGORITHM,
) -> DigestResult:
    """
    List, hash and summarize. The first phase to fail raises its AggregateError
    and later phases are not run.
    """
    paths = list_files(roots, includes, excludes)
    entries = compute_hashes(paths, parallelism, algorithm)
    summary = summarize(entries)
    result = DigestResult(digest=digest(summary, algorithm), summary=summary, entries=tuple(entries))
    logger.debug("Digest %s over %d file(s)", result.hexdigest, len(entries))
    return result


def get_digest(
    roots: Iterable[str | os.PathLike[str]],
    includes: Iterable[str],
    excludes: Iterable[str],
    parallelism: int = 0,
    algorithm: str = DEFAULT_ALGORITHM,
) -> tuple[bytes, str]:
    """Return (digest, summary) for the files selected under roots."""
    result = get_digest_result(roots, includes, excludes, parallelism, algorithm)
    return result.digest, result.summary
