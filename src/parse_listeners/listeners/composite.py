"""Composite listener for fan-out to multiple listeners."""

from __future__ import annotations

import logging
from typing import AbstractSet, Any, Callable, Iterable

from parse_listeners.exceptions import ConfigurationError
from parse_listeners.listeners.protocol import ErrorListener

logger = logging.getLogger(__name__)


class CompositeListener:
    """Fan-out listener that forwards every event to its delegates.

    Delegates are fixed at construction and called in registration order,
    each exactly once per event, with the arguments the composite received.
    The same instance registered twice is called twice.

    If a delegate raises, the remaining delegates do not see that event and
    the exception propagates unchanged to the caller.
    """

    def __init__(self, delegates: Iterable[ErrorListener] | None) -> None:
        if delegates is None:
            raise ConfigurationError("delegates is not provided")
        self._delegates: tuple[ErrorListener, ...] = tuple(delegates)
        if not self._delegates:
            raise ConfigurationError("delegates must contain at least one listener")

    @classmethod
    def build(cls, delegates: Iterable[ErrorListener] | None) -> CompositeListener:
        """Build a composite, raising ConfigurationError on an empty sequence."""
        return cls(delegates)

    def __len__(self) -> int:
        return len(self._delegates)

    def __repr__(self) -> str:
        names = ", ".join(type(d).__name__ for d in self._delegates)
        return f"{type(self).__name__}([{names}])"

    def _forward(
        self, operation: str, call: Callable[[ErrorListener], None]
    ) -> None:
        for delegate in self._delegates:
            try:
                call(delegate)
            except Exception as exc:
                logger.debug(
                    "Listener %s.%s raised %s: %s",
                    type(delegate).__name__,
                    operation,
                    type(exc).__name__,
                    exc,
                )
                raise

    def on_syntax_error(
        self,
        recognizer: Any,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        self._forward(
            "on_syntax_error",
            lambda d: d.on_syntax_error(
                recognizer, offending_symbol, line, column, message, cause
            ),
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
        self._forward(
            "on_report_ambiguity",
            lambda d: d.on_report_ambiguity(
                recognizer, dfa, start_index, stop_index, exact, ambig_alts, configs
            ),
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
        self._forward(
            "on_report_attempting_full_context",
            lambda d: d.on_report_attempting_full_context(
                recognizer, dfa, start_index, stop_index, conflicting_alts, configs
            ),
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
        self._forward(
            "on_report_context_sensitivity",
            lambda d: d.on_report_context_sensitivity(
                recognizer, dfa, start_index, stop_index, prediction, configs
            ),
        )
