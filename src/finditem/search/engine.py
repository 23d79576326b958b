"""Traversal engine driving enumeration through the filter pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from finditem.config import SearchRequest
from finditem.models import ResultRecord
from finditem.search.filters import FilterPipeline
from finditem.utils.files import LocalFileSystem, expand_root

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RootWarning:
    root: str
    message: str


@dataclass(slots=True)
class SearchOutcome:
    """Results of one search plus the roots that had to be skipped."""

    results: List[ResultRecord] = field(default_factory=list)
    warnings: List[RootWarning] = field(default_factory=list)
    searched_roots: List[Path] = field(default_factory=list)

    @property
    def status(self) -> str:
        if not self.searched_roots:
            return "fatal"
        if self.warnings:
            return "warning"
        return "success"


class TraversalEngine:
    """Walks each root in order and collects entries accepted by the filters."""

    def __init__(self, filesystem: LocalFileSystem | None = None) -> None:
        self.filesystem = filesystem or LocalFileSystem()

    def run(self, request: SearchRequest) -> SearchOutcome:
        pipeline = FilterPipeline(request, filesystem=self.filesystem)
        outcome = SearchOutcome()
        max_depth = request.enumeration_depth

        for root in request.roots:
            resolved = [path for path in expand_root(root) if self.filesystem.exists(path)]
            if not resolved:
                LOGGER.debug("Skipping missing root %s", root)
                outcome.warnings.append(RootWarning(root, f"Path not found: {root}"))
                continue

            for path in resolved:
                outcome.searched_roots.append(path)
                LOGGER.debug("Searching %s (max depth %s)", path, max_depth)
                for entry in self.filesystem.walk(path, max_depth):
                    if pipeline.accepts(entry):
                        outcome.results.append(ResultRecord.from_entry(entry))

        return outcome
