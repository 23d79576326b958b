"""Core finditem data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from finditem.utils.sizes import format_size
from finditem.utils.times import format_timestamp


class ItemType(str, Enum):
    """Which kind of entries a search returns."""

    FILE = "file"
    DIRECTORY = "directory"
    ALL = "all"


@dataclass(slots=True)
class CandidateEntry:
    """One filesystem object discovered during traversal."""

    name: str
    path: Path
    is_dir: bool
    size: int
    modified: datetime
    hidden: bool = False
    system: bool = False
    read_only: bool = False
    depth: int = 0


@dataclass(frozen=True, slots=True)
class ResultRecord:
    """Externally visible shape of an entry that passed every filter."""

    item_type: str
    size: str
    modified: str
    name: str
    path: Path

    @classmethod
    def from_entry(cls, entry: CandidateEntry) -> "ResultRecord":
        return cls(
            item_type="d" if entry.is_dir else "f",
            size="<DIR>" if entry.is_dir else format_size(entry.size),
            modified=format_timestamp(entry.modified),
            name=entry.name,
            path=entry.path,
        )
