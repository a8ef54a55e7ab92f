"""Data models passed between the listing, hashing and digest phases."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileEntry:
    """Content hash of one listed file."""

    path: str  # As produced by the lister (root prefix + root-relative path)
    hash: bytes  # Raw digest of the file's bytes; the path is not part of it

    @property
    def hexdigest(self) -> str:
        return self.hash.hex()


@dataclass(frozen=True)
class DigestResult:
    """Outcome of a full digest run: the digest, the summary it was computed over, and the entries."""

    digest: bytes
    summary: str
    entries: tuple[FileEntry, ...] = field(default_factory=tuple)

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()
