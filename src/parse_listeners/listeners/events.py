"""Typed event dataclasses for the diagnostic listener system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, AbstractSet, Any, Union

if TYPE_CHECKING:
    from parse_listeners.listeners.protocol import ErrorListener


@dataclass(frozen=True, slots=True)
class SyntaxErrorEvent:
    """The engine failed to match the input."""

    recognizer: Any
    offending_symbol: Any
    line: int
    column: int
    message: str
    cause: BaseException | None = None


@dataclass(frozen=True, slots=True)
class AmbiguityEvent:
    """More than one alternative matched the same input at a decision."""

    recognizer: Any
    dfa: Any
    start_index: int
    stop_index: int
    exact: bool
    ambig_alts: AbstractSet[int] | None
    configs: Any


@dataclass(frozen=True, slots=True)
class FullContextAttemptEvent:
    """SLL prediction conflicted and the engine is retrying with full context."""

    recognizer: Any
    dfa: Any
    start_index: int
    stop_index: int
    conflicting_alts: AbstractSet[int] | None
    configs: Any


@dataclass(frozen=True, slots=True)
class ContextSensitivityEvent:
    """Full-context prediction resolved a conflict SLL could not."""

    recognizer: Any
    dfa: Any
    start_index: int
    stop_index: int
    prediction: int
    configs: Any


DiagnosticEvent = Union[
    SyntaxErrorEvent,
    AmbiguityEvent,
    FullContextAttemptEvent,
    ContextSensitivityEvent,
]


def dispatch(listener: ErrorListener, event: DiagnosticEvent) -> None:
    """Deliver a materialized event to the matching listener operation.

    Args:
        listener: Any ErrorListener implementation.
        event: One of the four event variants.

    Raises:
        TypeError: If ``event`` is not a DiagnosticEvent variant.
    """
    if isinstance(event, SyntaxErrorEvent):
        listener.on_syntax_error(
            event.recognizer,
            event.offending_symbol,
            event.line,
            event.column,
            event.message,
            event.cause,
        )
    elif isinstance(event, AmbiguityEvent):
        listener.on_report_ambiguity(
            event.recognizer,
            event.dfa,
            event.start_index,
            event.stop_index,
            event.exact,
            event.ambig_alts,
            event.configs,
        )
    elif isinstance(event, FullContextAttemptEvent):
        listener.on_report_attempting_full_context(
            event.recognizer,
            event.dfa,
            event.start_index,
            event.stop_index,
            event.conflicting_alts,
            event.configs,
        )
    elif isinstance(event, ContextSensitivityEvent):
        listener.on_report_context_sensitivity(
            event.recognizer,
            event.dfa,
            event.start_index,
            event.stop_index,
            event.prediction,
            event.configs,
        )
    else:
        raise TypeError(f"Not a diagnostic event: {type(event).__name__}")
