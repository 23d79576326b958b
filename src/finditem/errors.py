"""Error types raised while building a search request."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Fatal problem with the search configuration, raised before traversal."""


class FormatError(ConfigurationError):
    """A size, time or pattern literal could not be parsed."""
