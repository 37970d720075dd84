"""Protocols for the parts of the engine that listeners may read.

Most listeners treat recognizers, decision tables and configuration sets as
opaque. These protocols describe the few attributes the ambiguity reporter
needs.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class Recognizer(Protocol):
    """The parser or lexer raising diagnostics."""

    @property
    def rule_names(self) -> Sequence[str]:
        """Grammar rule names, indexed by rule index."""
        ...

    def get_input_text(self, start_index: int, stop_index: int) -> str:
        """Text of the input between two token indexes, inclusive."""
        ...

    def notify_error_listeners(self, message: str) -> None:
        """Report a message as a syntax error at the current token."""
        ...


class DecisionTable(Protocol):
    """A cached prediction DFA for one decision point."""

    @property
    def decision(self) -> int: ...

    @property
    def rule_index(self) -> int:
        """Index of the rule containing the decision, or -1 if unknown."""
        ...


class PredictionConfig(Protocol):
    """One entry of a configuration set."""

    @property
    def alt(self) -> int: ...
