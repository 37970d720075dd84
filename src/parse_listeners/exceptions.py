"""Exception hierarchy for parse-listeners."""

from __future__ import annotations


class ParseListenersError(Exception):
    """Base exception for all parse-listeners errors."""


class ConfigurationError(ParseListenersError):
    """Listener wiring is invalid (no delegates, bad manifest, bad template)."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
