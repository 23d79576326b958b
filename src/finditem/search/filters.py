"""Ordered filter stages applied to each candidate entry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from finditem.config import SearchRequest
from finditem.models import CandidateEntry, ItemType
from finditem.search.matching import ExclusionEvaluator, NameMatcher
from finditem.utils.files import LocalFileSystem

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class FilterContext:
    """What every stage may consult besides the entry itself."""

    request: SearchRequest
    names: NameMatcher
    exclusions: ExclusionEvaluator
    filesystem: LocalFileSystem


class EntryFilter(Protocol):
    """A single accept/reject predicate."""

    name: str

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        ...


class TypeFilter:
    name = "type"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        item_type = context.request.item_type
        if item_type == ItemType.FILE:
            return not entry.is_dir
        if item_type == ItemType.DIRECTORY:
            return entry.is_dir
        return True


class MinDepthFilter:
    name = "min-depth"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        min_depth = context.request.min_depth
        return min_depth is None or entry.depth >= min_depth


class NameFilter:
    name = "name"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        return context.names.matches_name(entry.name)


class PatternFilter:
    name = "pattern"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        return context.names.matches_pattern(entry.name)


class ExcludeFilter:
    name = "exclude"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        return not context.exclusions.matches_exclude(entry)


class ExcludeDirFilter:
    name = "exclude-dir"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        return not context.exclusions.in_excluded_dir(entry)


class HiddenFilter:
    name = "hidden"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        return context.request.include_hidden or not entry.hidden


class SystemFilter:
    name = "system"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        return context.request.include_system or not entry.system


class ReadOnlyFilter:
    name = "read-only"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        return not context.request.read_only or entry.read_only


class SizeFilter:
    """Bounds file length; directories always pass."""

    name = "size"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        if entry.is_dir:
            return True
        request = context.request
        if request.min_size is not None and entry.size < request.min_size:
            return False
        if request.max_size is not None and entry.size > request.max_size:
            return False
        return True


class EmptyFilter:
    """Directories with no raw contents, or zero-length files."""

    name = "empty"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        if not context.request.empty:
            return True
        if entry.is_dir:
            return context.filesystem.is_empty(entry.path)
        return entry.size == 0


class TimeFilter:
    name = "time"

    def evaluate(self, entry: CandidateEntry, context: FilterContext) -> bool:
        request = context.request
        if request.newer_than is not None and entry.modified < request.newer_than:
            return False
        if request.older_than is not None and entry.modified > request.older_than:
            return False
        return True


DEFAULT_STAGES: tuple[EntryFilter, ...] = (
    TypeFilter(),
    MinDepthFilter(),
    NameFilter(),
    PatternFilter(),
    ExcludeFilter(),
    ExcludeDirFilter(),
    HiddenFilter(),
    SystemFilter(),
    ReadOnlyFilter(),
    SizeFilter(),
    EmptyFilter(),
    TimeFilter(),
)


class FilterPipeline:
    """Short-circuiting conjunction of filter stages, evaluated in order."""

    def __init__(
        self,
        request: SearchRequest,
        *,
        filesystem: LocalFileSystem | None = None,
        stages: Sequence[EntryFilter] = DEFAULT_STAGES,
    ) -> None:
        self.stages = tuple(stages)
        self.context = FilterContext(
            request=request,
            names=NameMatcher(
                request.name, request.pattern, case_sensitive=request.case_sensitive
            ),
            exclusions=ExclusionEvaluator(
                request.exclude, request.exclude_dirs, case_sensitive=request.case_sensitive
            ),
            filesystem=filesystem or LocalFileSystem(),
        )

    def accepts(self, entry: CandidateEntry) -> bool:
        for stage in self.stages:
            if not stage.evaluate(entry, self.context):
                LOGGER.debug("Rejected by %s filter: %s", stage.name, entry.path)
                return False
        return True
