"""Error hierarchy for graph description values."""

from __future__ import annotations

from typing import Any


class DotGraphError(Exception):
    """Base error for all dotgraph errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class MalformedAttributeError(DotGraphError, ValueError):
    """An attribute entry is not a (str, str) pair."""

    def __init__(self, message: str, *, pair: Any = None, cause: Exception | None = None):
        super().__init__(message, cause=cause)
        self.pair = pair


class MalformedItemError(DotGraphError, TypeError):
    """A graph was extended with something that is not a Node or Edge."""

    def __init__(
        self,
        message: str,
        *,
        item: Any = None,
        expected: type | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.item = item
        self.expected = expected


class ConfigurationError(DotGraphError):
    """Invalid settings value."""
