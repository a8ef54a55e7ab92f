"""
Glob patterns over root-relative, '/'-separated paths.

Ordinary patterns use wcmatch glob semantics: '*', '?' and '[...]' stay within
one path segment, '**' spans any number of segments and '{a,b}' alternates.
A pattern without '**' only matches at the depth its segments spell out.

A pattern ending in '/' is a directory pattern with gitignore semantics (via
pathspec): 'build/' matches a directory named build at any depth and everything
beneath it, but never a plain file named build.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from pathspec import PathSpec
from wcmatch import glob

from dirdigest.errors import INVALID_GLOBS, AggregateError, GlobCompileError

GLOB_FLAGS = glob.GLOBSTAR | glob.DOTGLOB | glob.BRACE | glob.FORCEUNIX


@dataclass(frozen=True)
class GlobPattern:
    """A compiled pattern. Patterns compiled from the same text compare equal."""

    text: str
    _regexes: tuple[re.Pattern[str], ...] = field(default=(), compare=False, repr=False)
    # For 'x/**': matches the directory x itself, so excluding x/** prunes x.
    _subtree_regexes: tuple[re.Pattern[str], ...] = field(default=(), compare=False, repr=False)
    _dir_spec: PathSpec | None = field(default=None, compare=False, repr=False)

    @property
    def is_directory_pattern(self) -> bool:
        return self._dir_spec is not None

    def match(self, path: str, is_dir: bool = False) -> bool:
        """Return True if the root-relative path matches. Pass is_dir for directories."""
        if self._dir_spec is not None:
            if is_dir and not path.endswith("/"):
                path = path + "/"
            return self._dir_spec.match_file(path)
        if any(r.fullmatch(path) for r in self._regexes):
            return True
        if is_dir:
            return any(r.fullmatch(path) for r in self._subtree_regexes)
        return False


def _check_balanced(pattern: str) -> None:
    """Reject unclosed character classes and unbalanced braces."""
    i = 0
    depth = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "\\":
            if i + 1 >= n:
                raise GlobCompileError(pattern, "trailing escape character")
            i += 2
            continue
        if c == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            # A ']' right after the opening bracket is a literal member.
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 2 if pattern[j] == "\\" else 1
            if j >= n:
                raise GlobCompileError(pattern, f"unclosed character class at position {i}")
            i = j + 1
            continue
        if c == "{":
            depth += 1
        elif c == "}":
            if depth == 0:
                raise GlobCompileError(pattern, f"unexpected '}}' at position {i}")
            depth -= 1
        i += 1
    if depth:
        raise GlobCompileError(pattern, "unclosed '{'")


def _translate(pattern: str) -> tuple[re.Pattern[str], ...]:
    try:
        positive, _ = glob.translate(pattern, flags=GLOB_FLAGS)
        return tuple(re.compile(p) for p in positive)
    except (ValueError, re.error) as e:
        raise GlobCompileError(pattern, str(e)) from e


def compile_pattern(pattern: str) -> GlobPattern:
    """Compile one pattern. Raises GlobCompileError if it is malformed."""
    if pattern == "":
        return GlobPattern(text=pattern, _regexes=(re.compile(""),))
    _check_balanced(pattern)
    if pattern.endswith("/"):
        try:
            spec = PathSpec.from_lines("gitignore", [pattern])
        except ValueError as e:
            raise GlobCompileError(pattern, str(e)) from e
        return GlobPattern(text=pattern, _dir_spec=spec)
    subtree: tuple[re.Pattern[str], ...] = ()
    if pattern.endswith("/**") and len(pattern) > 3:
        subtree = _translate(pattern[:-3])
    return GlobPattern(text=pattern, _regexes=_translate(pattern), _subtree_regexes=subtree)


def compile_patterns(patterns: Iterable[str]) -> list[GlobPattern]:
    """
    Compile every pattern, collecting all failures.

    Raises AggregateError("invalid glob(s)") listing each malformed pattern.
    """
    compiled: list[GlobPattern] = []
    errors: list[GlobCompileError] = []
    for pattern in patterns:
        try:
            compiled.append(compile_pattern(pattern))
        except GlobCompileError as e:
            errors.append(e)
    if errors:
        raise AggregateError(INVALID_GLOBS, errors)
    return compiled


def matches_any(path: str, patterns: Sequence[GlobPattern], is_dir: bool = False) -> bool:
    """True iff some pattern matches path. An empty pattern list matches nothing."""
    return any(p.match(path, is_dir) for p in patterns)
