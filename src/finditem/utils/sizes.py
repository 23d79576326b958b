"""Size literal parsing and human readable size formatting."""

from __future__ import annotations

import re

from finditem.errors import FormatError

SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(B|KB|MB|GB|TB)$", re.IGNORECASE)

UNITS = {
    "B": 1,
    "KB": 1024,
    "MB": 1024**2,
    "GB": 1024**3,
    "TB": 1024**4,
}


def parse_size(literal: str) -> float:
    """Parse a size literal such as ``10MB`` or ``1.5KB`` into bytes.

    Units are binary multiples. The unit suffix is matched case-insensitively.
    """
    match = SIZE_PATTERN.match(literal.strip()) if isinstance(literal, str) else None
    if match is None:
        raise FormatError(f"Invalid size format: {literal!r}")
    number, unit = match.groups()
    return float(number) * UNITS[unit.upper()]


def format_size(size_bytes: int) -> str:
    """Format bytes as ``512 B`` or scaled to the largest unit, e.g. ``2.00 KB``."""
    if size_bytes < 1024:
        return f"{int(size_bytes)} B"
    for unit in ("TB", "GB", "MB", "KB"):
        if size_bytes >= UNITS[unit]:
            return f"{size_bytes / UNITS[unit]:.2f} {unit}"
    return f"{int(size_bytes)} B"  # pragma: no cover - unreachable
