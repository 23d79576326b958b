"""Search request configuration and defaults."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from finditem.errors import ConfigurationError
from finditem.models import ItemType
from finditem.search.matching import compile_pattern
from finditem.utils.sizes import parse_size
from finditem.utils.times import as_local, parse_time

# Version control metadata directories skipped unless overridden.
DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (".git", ".svn", ".hg")

TimeValue = str | datetime | timedelta


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Immutable, fully parsed configuration for one search."""

    roots: tuple[str, ...] = (".",)
    name: str | None = None
    pattern: str | None = None
    item_type: ItemType = ItemType.ALL
    min_depth: int | None = None
    max_depth: int | None = None
    min_size: float | None = None
    max_size: float | None = None
    newer_than: datetime | None = None
    older_than: datetime | None = None
    empty: bool = False
    include_hidden: bool = False
    include_system: bool = False
    read_only: bool = False
    exclude: tuple[str, ...] = ()
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    case_sensitive: bool = False
    no_recurse: bool = False
    simple: bool = False

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "item_type", ItemType(self.item_type))
        except ValueError as exc:
            raise ConfigurationError(f"Invalid item type: {self.item_type!r}") from exc
        for bound in ("newer_than", "older_than"):
            value = getattr(self, bound)
            if value is not None:
                object.__setattr__(self, bound, as_local(value))

    @classmethod
    def from_options(
        cls,
        roots: Sequence[str] | None = None,
        *,
        min_size: str | None = None,
        max_size: str | None = None,
        newer_than: TimeValue | None = None,
        older_than: TimeValue | None = None,
        exclude: Iterable[str] | None = None,
        exclude_dirs: Iterable[str] | None = None,
        item_type: ItemType | str = ItemType.ALL,
        **options: object,
    ) -> "SearchRequest":
        """Build a request from raw option values.

        Size and time literals are parsed here, once, and the regex pattern is
        validated, so that every ConfigurationError surfaces before traversal.
        Relative time literals resolve against the current time at this call.
        """
        pattern = options.get("pattern")
        if pattern is not None:
            compile_pattern(str(pattern), case_sensitive=bool(options.get("case_sensitive")))

        now = datetime.now()
        return cls(
            roots=tuple(roots) if roots else (".",),
            item_type=item_type,
            min_size=parse_size(min_size) if min_size is not None else None,
            max_size=parse_size(max_size) if max_size is not None else None,
            newer_than=parse_time(newer_than, now=now) if newer_than is not None else None,
            older_than=parse_time(older_than, now=now) if older_than is not None else None,
            exclude=tuple(exclude or ()),
            exclude_dirs=(
                DEFAULT_EXCLUDED_DIRS if exclude_dirs is None else tuple(exclude_dirs)
            ),
            **options,
        )

    @property
    def enumeration_depth(self) -> int | None:
        """Deepest relative depth the traversal descends to.

        ``max_depth`` counts from the root's children (0 = children only),
        while relative depth counts them as 1.
        """
        limits = []
        if self.max_depth is not None:
            limits.append(self.max_depth + 1)
        if self.no_recurse:
            limits.append(1)
        return min(limits) if limits else None
