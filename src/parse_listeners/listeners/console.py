"""Console listener that prints syntax errors."""

from __future__ import annotations

import sys
from typing import Any, Literal, TextIO

from parse_listeners.exceptions import ConfigurationError
from parse_listeners.listeners.null import NullListener

StreamName = Literal["stderr", "stdout"]


def format_syntax_error(line: int, column: int, message: str) -> str:
    """Render a syntax error as ``line L:C message``."""
    return f"line {line}:{column} {message}"


class ConsoleListener(NullListener):
    """Writes each syntax error as one line to a stream.

    Prediction reports are ignored. ``stream`` is either an open text stream
    or the name of a ``sys`` stream (default ``"stderr"``); names are looked
    up at write time so redirection after construction is honored.
    """

    def __init__(self, stream: TextIO | StreamName = "stderr") -> None:
        if isinstance(stream, str) and stream not in ("stderr", "stdout"):
            raise ConfigurationError(f"Unknown stream name: {stream}")
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        if isinstance(self._stream, str):
            return getattr(sys, self._stream)
        return self._stream

    def on_syntax_error(
        self,
        recognizer: Any,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        print(format_syntax_error(line, column, message), file=self.stream)


CONSOLE_LISTENER = ConsoleListener()
