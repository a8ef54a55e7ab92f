"""Concurrent per-file content hashing with a fixed pool of worker threads."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Iterable, Optional

from dirdigest.errors import (
    PROBLEM_HASHING,
    AggregateError,
    DirDigestError,
    FileReadError,
    HashError,
)
from dirdigest.models import FileEntry
from dirdigest.utils.hashing import DEFAULT_ALGORITHM, hash_file, new_hasher

logger = logging.getLogger(__name__)

# Stop marker; one is queued per worker after all work items.
_STOP = None


def pool_size(n_paths: int, parallelism: int) -> int:
    """Number of workers for n_paths items. parallelism <= 0 means one worker per path."""
    if n_paths <= 0:
        return 0
    if parallelism <= 0:
        return n_paths
    return min(parallelism, n_paths)


def compute_hashes(
    paths: Iterable[str],
    parallelism: int = 0,
    algorithm: str = DEFAULT_ALGORITHM,
) -> list[FileEntry]:
    """
    Hash every file and return one FileEntry per path, in input order.

    Workers consume (index, path) items from a shared queue and write each entry
    into its index slot of a pre-sized list, so completion order never affects
    output order. Every failure is collected; once all workers have finished, any
    failure raises AggregateError("problem computing hashes") listing each failing
    path, and no partial results are returned.

    There is no timeout: a read that never returns blocks the whole batch.
    """
    paths = list(paths)
    new_hasher(algorithm)  # reject unknown algorithms before starting threads
    n_workers = pool_size(len(paths), parallelism)
    if n_workers == 0:
        return []

    work: queue.Queue[Optional[tuple[int, str]]] = queue.Queue()
    for item in enumerate(paths):
        work.put(item)
    for _ in range(n_workers):
        work.put(_STOP)

    # Each index is written by exactly one work item; the list is never resized.
    results: list[Optional[FileEntry]] = [None] * len(paths)
    failures: list[tuple[int, DirDigestError]] = []
    failures_lock = threading.Lock()

    def worker() -> None:
        while True:
            item = work.get()
            if item is _STOP:
                return
            index, path = item
            try:
                results[index] = FileEntry(path=path, hash=hash_file(path, algorithm))
            except OSError as e:
                with failures_lock:
                    failures.append((index, FileReadError(path, e)))
            except Exception as e:
                with failures_lock:
                    failures.append((index, HashError(path, e)))

    logger.debug("Hashing %d file(s) with %d worker(s)", len(paths), n_workers)
    threads = [
        threading.Thread(target=worker, name=f"dirdigest-hash-{i}", daemon=True)
        for i in range(n_workers)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    if failures:
        failures.sort(key=lambda f: f[0])
        raise AggregateError(PROBLEM_HASHING, [err for _, err in failures])

    logger.info("Hashed %d file(s)", len(paths))
    return [entry for entry in results if entry is not None]
