"""Time literal parsing and timestamp formatting."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from finditem.errors import FormatError

RELATIVE_PATTERN = re.compile(r"^(\d+)(d|h|m)$")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Culture-invariant fallbacks tried after ISO 8601.
_FALLBACK_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
)

_UNIT_KEYWORDS = {"d": "days", "h": "hours", "m": "minutes"}


def as_local(value: datetime) -> datetime:
    # Entry timestamps are naive local time; align aware inputs with them.
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def parse_time(value: object, *, now: datetime | None = None) -> datetime:
    """Resolve ``value`` into an instant.

    Accepts a ``datetime`` (aware values are converted to naive local time),
    a ``timedelta`` or a relative literal such as ``7d``/``12h``/``30m``
    (resolved as ``now`` minus the offset), or an absolute timestamp string.
    ``now`` is read once per call.
    """
    if isinstance(value, datetime):
        return as_local(value)
    if isinstance(value, timedelta):
        return (now or datetime.now()) - value
    if not isinstance(value, str):
        raise FormatError(f"Unsupported time value of type {type(value).__name__}")

    text = value.strip()
    match = RELATIVE_PATTERN.match(text)
    if match:
        amount, unit = match.groups()
        offset = timedelta(**{_UNIT_KEYWORDS[unit]: int(amount)})
        return (now or datetime.now()) - offset

    try:
        return as_local(datetime.fromisoformat(text))
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise FormatError(f"Invalid time format: {value!r}")


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)
