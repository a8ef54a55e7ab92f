"""Exception types. Every phase collects its failures and raises one AggregateError."""

from __future__ import annotations

from typing import Iterable

INVALID_GLOBS = "invalid glob(s)"
PROBLEM_LISTING = "problem listing files"
PROBLEM_HASHING = "problem computing hashes"


class DirDigestError(Exception):
    """Base class for all dirdigest errors."""


class GlobCompileError(DirDigestError, ValueError):
    """A pattern could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid glob {pattern!r}: {reason}")


class PathAccessError(DirDigestError, OSError):
    """An entry could not be accessed while walking a root."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot access {path}: {cause.strerror or cause}")


class FileReadError(DirDigestError, OSError):
    """A listed file could not be read for hashing."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot read {path}: {cause.strerror or cause}")


class HashError(DirDigestError):
    """Hashing a file failed for a reason other than reading it."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot hash {path}: {cause}")


class AggregateError(DirDigestError):
    """
    All failures of one phase, reported together.

    str() renders the category header followed by one bullet per failure, so the
    CLI can print it as-is.
    """

    def __init__(self, category: str, errors: Iterable[BaseException]) -> None:
        self.category = category
        self.errors = tuple(errors)
        super().__init__(self._render())

    def _render(self) -> str:
        lines = [f"Errors ({self.category}):"]
        for err in self.errors:
            lines.append(f"* {err}")
        return "\n".join(lines) + "\n"
