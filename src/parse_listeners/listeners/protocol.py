"""Error listener protocol definition."""

from __future__ import annotations

from typing import AbstractSet, Any, Protocol


class ErrorListener(Protocol):
    """Protocol for receiving diagnostics from a parsing/prediction engine.

    All methods are synchronous and run on the engine's thread at the moment
    the condition is detected. Implementations should be fast; any latency
    they incur is paid by the parse.
    """

    def on_syntax_error(
        self,
        recognizer: Any,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        """Called when the engine fails to match the input."""
        ...

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
        """Called when several alternatives match ``[start_index, stop_index]``."""
        ...

    def on_report_attempting_full_context(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        conflicting_alts: AbstractSet[int] | None,
        configs: Any,
    ) -> None:
        """Called when SLL prediction conflicts and full context is tried."""
        ...

    def on_report_context_sensitivity(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: Any,
    ) -> None:
        """Called when full-context prediction picks a unique alternative."""
        ...
