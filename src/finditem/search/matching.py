"""Name matching and exclusion rules."""

from __future__ import annotations

import re
from typing import Iterable

from finditem.errors import FormatError
from finditem.models import CandidateEntry
from finditem.utils.files import has_wildcard


def wildcard_to_regex(glob: str, *, case_sensitive: bool = False) -> re.Pattern[str]:
    """Compile a ``*``/``?`` wildcard into a regex for whole-name matching.

    Every other character, brackets included, matches literally.
    """
    parts = []
    for char in glob:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE
    return re.compile("".join(parts), flags)


def compile_pattern(pattern: str, *, case_sensitive: bool = False) -> re.Pattern[str]:
    """Compile a user supplied regular expression, raising FormatError if invalid."""
    try:
        return re.compile(pattern, 0 if case_sensitive else re.IGNORECASE)
    except re.error as exc:
        raise FormatError(f"Invalid pattern {pattern!r}: {exc}") from exc


class NameMatcher:
    """Checks a base name against a name filter and a regex pattern.

    A name filter containing ``*`` or ``?`` uses wildcard matching; any other
    name filter must equal the base name exactly.
    """

    def __init__(
        self,
        name: str | None = None,
        pattern: str | None = None,
        *,
        case_sensitive: bool = False,
    ) -> None:
        self.name = name
        self.case_sensitive = case_sensitive
        self._wildcard = (
            wildcard_to_regex(name, case_sensitive=case_sensitive)
            if name is not None and has_wildcard(name)
            else None
        )
        self._pattern = (
            compile_pattern(pattern, case_sensitive=case_sensitive)
            if pattern is not None
            else None
        )

    def matches_name(self, base_name: str) -> bool:
        if self.name is None:
            return True
        if self._wildcard is not None:
            return self._wildcard.fullmatch(base_name) is not None
        if self.case_sensitive:
            return base_name == self.name
        return base_name.casefold() == self.name.casefold()

    def matches_pattern(self, base_name: str) -> bool:
        if self._pattern is None:
            return True
        return self._pattern.search(base_name) is not None


class ExclusionEvaluator:
    """Decides whether an entry is dropped by exclude globs or excluded directories."""

    def __init__(
        self,
        exclude: Iterable[str] = (),
        exclude_dirs: Iterable[str] = (),
        *,
        case_sensitive: bool = False,
    ) -> None:
        self.case_sensitive = case_sensitive
        self._globs = [
            wildcard_to_regex(glob, case_sensitive=case_sensitive) for glob in exclude
        ]
        self._dirs = {self._fold(name) for name in exclude_dirs}

    def _fold(self, text: str) -> str:
        return text if self.case_sensitive else text.casefold()

    def matches_exclude(self, entry: CandidateEntry) -> bool:
        return any(glob.fullmatch(entry.name) for glob in self._globs)

    def in_excluded_dir(self, entry: CandidateEntry) -> bool:
        """True when the entry is, or lies beneath, an excluded directory.

        Names are compared against whole path segments, so ``.git`` never
        excludes ``mygit`` or ``gitignore``.
        """
        if not self._dirs:
            return False
        if entry.is_dir and self._fold(entry.name) in self._dirs:
            return True
        return any(self._fold(segment) in self._dirs for segment in entry.path.parts)

    def is_excluded(self, entry: CandidateEntry) -> bool:
        return self.matches_exclude(entry) or self.in_excluded_dir(entry)
