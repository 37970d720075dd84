"""Listener that records every event it receives."""

from __future__ import annotations

from typing import AbstractSet, Any

from parse_listeners.listeners.events import (
    AmbiguityEvent,
    ContextSensitivityEvent,
    DiagnosticEvent,
    FullContextAttemptEvent,
    SyntaxErrorEvent,
    dispatch,
)
from parse_listeners.listeners.protocol import ErrorListener


class CollectingListener:
    """Keeps events in arrival order for inspection after a parse.

    Not synchronized; give each parser thread its own instance.
    """

    def __init__(self) -> None:
        self._events: list[DiagnosticEvent] = []

    @property
    def events(self) -> tuple[DiagnosticEvent, ...]:
        return tuple(self._events)

    @property
    def syntax_errors(self) -> tuple[SyntaxErrorEvent, ...]:
        return tuple(e for e in self._events if isinstance(e, SyntaxErrorEvent))

    def has_errors(self) -> bool:
        return any(isinstance(e, SyntaxErrorEvent) for e in self._events)

    def clear(self) -> None:
        self._events.clear()

    def replay(self, listener: ErrorListener) -> None:
        """Send every recorded event, in order, to another listener."""
        for event in tuple(self._events):
            dispatch(listener, event)

    def on_syntax_error(
        self,
        recognizer: Any,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        self._events.append(
            SyntaxErrorEvent(recognizer, offending_symbol, line, column, message, cause)
        )

    def on_report_ambiguity(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        exact: bool,
        ambig_alts: AbstractSet[int] | None,
        configs: Any,
    ) -> None:
        self._events.append(
            AmbiguityEvent(
                recognizer, dfa, start_index, stop_index, exact, ambig_alts, configs
            )
        )

    def on_report_attempting_full_context(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        conflicting_alts: AbstractSet[int] | None,
        configs: Any,
    ) -> None:
        self._events.append(
            FullContextAttemptEvent(
                recognizer, dfa, start_index, stop_index, conflicting_alts, configs
            )
        )

    def on_report_context_sensitivity(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: Any,
    ) -> None:
        self._events.append(
            ContextSensitivityEvent(
                recognizer, dfa, start_index, stop_index, prediction, configs
            )
        )
