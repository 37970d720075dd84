"""Null listener implementation (no-op)."""

from __future__ import annotations

from typing import AbstractSet, Any


class NullListener:
    """Listener that does nothing. Used as default and as a base class.

    Subclasses override only the operations they care about.
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
        pass

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
        pass

    def on_report_attempting_full_context(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        conflicting_alts: AbstractSet[int] | None,
        configs: Any,
    ) -> None:
        pass

    def on_report_context_sensitivity(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: Any,
    ) -> None:
        pass
