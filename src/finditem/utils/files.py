"""Directory enumeration helpers backed by the local filesystem."""

from __future__ import annotations

import glob
import logging
import os
import stat
from datetime import datetime
from pathlib import Path
from typing import Iterator

from finditem.models import CandidateEntry

LOGGER = logging.getLogger(__name__)

FILE_ATTRIBUTE_READONLY = 0x1
FILE_ATTRIBUTE_HIDDEN = 0x2
FILE_ATTRIBUTE_SYSTEM = 0x4

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def has_wildcard(text: str) -> bool:
    return "*" in text or "?" in text


def expand_root(root: str) -> list[Path]:
    """Resolve a root argument to absolute paths, expanding wildcards."""
    expanded = os.path.expanduser(root)
    if has_wildcard(expanded):
        return [Path(os.path.abspath(match)) for match in sorted(glob.glob(expanded))]
    return [Path(os.path.abspath(expanded))]


def relative_depth(root: Path, path: Path) -> int:
    """Number of path segments between ``root`` and ``path``."""
    try:
        return len(path.relative_to(root).parts)
    except ValueError:
        return 0


def entry_from_stat(path: Path, info: os.stat_result, *, is_dir: bool) -> CandidateEntry:
    attributes = getattr(info, "st_file_attributes", 0)
    name = path.name or str(path)
    return CandidateEntry(
        name=name,
        path=path,
        is_dir=is_dir,
        size=0 if is_dir else info.st_size,
        modified=datetime.fromtimestamp(info.st_mtime),
        hidden=name.startswith(".") or bool(attributes & FILE_ATTRIBUTE_HIDDEN),
        system=bool(attributes & FILE_ATTRIBUTE_SYSTEM),
        read_only=bool(attributes & FILE_ATTRIBUTE_READONLY) or not info.st_mode & _WRITE_BITS,
    )


class LocalFileSystem:
    """Lists directory entries and inspects paths on the local disk.

    Listing and stat failures are logged at debug level and skipped so that a
    single unreadable subtree never aborts a search.
    """

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def read_entry(self, path: Path) -> CandidateEntry | None:
        try:
            info = path.stat()
        except OSError:
            # Dangling symbolic links are still reported, as files.
            try:
                info = path.lstat()
            except OSError as exc:
                LOGGER.debug("Cannot stat %s: %s", path, exc)
                return None
            return entry_from_stat(path, info, is_dir=False)
        return entry_from_stat(path, info, is_dir=stat.S_ISDIR(info.st_mode))

    def scan(self, directory: Path) -> list[tuple[CandidateEntry, bool]]:
        """Return the immediate children of ``directory`` in name order.

        Each child is paired with a flag telling whether it may be descended
        into (real directories only, never symbolic links).
        """
        children: list[tuple[CandidateEntry, bool]] = []
        try:
            with os.scandir(directory) as iterator:
                items = sorted(iterator, key=lambda item: item.name)
        except OSError as exc:
            LOGGER.debug("Skipping unreadable directory %s: %s", directory, exc)
            return children

        for item in items:
            try:
                is_dir = item.is_dir()
                descend = is_dir and not item.is_symlink()
                try:
                    info = item.stat()
                except OSError:
                    if not item.is_symlink():
                        raise
                    is_dir = descend = False
                    info = item.stat(follow_symlinks=False)
            except OSError as exc:
                LOGGER.debug("Skipping unreadable entry %s: %s", item.path, exc)
                continue
            children.append((entry_from_stat(Path(item.path), info, is_dir=is_dir), descend))
        return children

    def walk(self, root: Path, max_depth: int | None = None) -> Iterator[CandidateEntry]:
        """Yield descendants of ``root`` with their depth relative to it.

        ``max_depth`` bounds the relative depth (children of ``root`` are at
        depth 1). A root that is a file is yielded itself at depth 0.
        """
        if not root.is_dir():
            entry = self.read_entry(root)
            if entry is not None:
                yield entry
            return
        # Pending directories; the top is the next one to list.
        pending = [root]
        while pending:
            subdirectories = []
            for entry, descend in self.scan(pending.pop()):
                entry.depth = relative_depth(root, entry.path)
                yield entry
                if descend and (max_depth is None or entry.depth < max_depth):
                    subdirectories.append(entry.path)
            pending.extend(reversed(subdirectories))

    def is_empty(self, directory: Path) -> bool:
        """True when ``directory`` has no entries at all.

        A directory that cannot be listed is reported as not empty.
        """
        try:
            with os.scandir(directory) as iterator:
                return next(iterator, None) is None
        except OSError as exc:
            LOGGER.debug("Cannot list %s: %s", directory, exc)
            return False
